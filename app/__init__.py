"""Application layer: use cases and command-line startup."""
