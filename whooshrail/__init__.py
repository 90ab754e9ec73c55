"""Console ticket booking for a high-speed rail service."""

__version__ = "0.1.0"
__all__ = ["models", "booking_tree", "system", "storage", "render", "cli"]