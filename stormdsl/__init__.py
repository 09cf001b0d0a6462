"""Parse storm schema files, build their representation, validate it and report column types."""

__version__ = "0.1.0"