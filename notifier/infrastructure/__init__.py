"""Infrastructure adapters: persistence, delivery channels."""
