"""hookify: find class components that can be migrated to function components."""

__version__ = "0.1.0"
