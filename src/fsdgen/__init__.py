"""fsdgen — feature-sliced design scaffolding generator."""

__version__ = "0.1.0"
