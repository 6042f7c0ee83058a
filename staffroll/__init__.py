"""Interactive staff roster of employees, managers and bosses, kept in a plain text file."""

__version__ = "0.1.0"
__all__ = ["__version__"]