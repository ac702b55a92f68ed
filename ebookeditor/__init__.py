"""E-book model of chapters and pages, the .ebk file format, text search and editing sessions."""

__version__ = "0.1.0"
__all__ = ["__version__"]