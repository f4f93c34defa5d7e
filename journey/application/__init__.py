"""Application layer: use cases and UI state transitions."""
