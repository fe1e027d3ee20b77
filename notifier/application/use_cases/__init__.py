"""Use cases implementing the notification pipeline."""
