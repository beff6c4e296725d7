"""A virtual file system scheme, andsec-yun://, backed by one real directory."""

__version__ = "0.1.0"
__all__ = ["paths", "root", "file", "vfs", "cli"]