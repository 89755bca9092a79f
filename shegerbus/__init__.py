"""Console bus ticket reservation system: validation, models, storage, reports and CLI."""

__version__ = "0.1.0"
__all__ = ["validation", "models", "storage", "reports", "cli"]