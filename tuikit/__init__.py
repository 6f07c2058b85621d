"""Terminal user interface primitives: styles, text, cell buffers, constraint layouts and widgets."""

__version__ = "0.1.0"