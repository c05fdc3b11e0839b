"""DiveSeeks multi-tenant retail and restaurant backend."""

__version__ = "1.0.0"
