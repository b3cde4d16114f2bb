"""Domain layer — models, ports and errors with no infrastructure imports."""
