"""CSV line splitting and anchor-based layout helpers for resizable dialogs."""

__version__ = "1.0.0"
__all__ = ["csvparse", "geometry", "layout", "minmax"]