"""Feed a file through a chain of commands into another file, with small text, byte and I/O helpers."""

__version__ = "0.1.0"