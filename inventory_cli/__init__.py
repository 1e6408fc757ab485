"""Terminal CRUD tool for a single `product` inventory table."""

__version__ = "0.1.0"
