"""Small Unix tools, an in-memory block file system and a minimal interactive shell."""

__version__ = "0.1.0"