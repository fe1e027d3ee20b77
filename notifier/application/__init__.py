"""Application layer orchestrating the notification pipeline."""
