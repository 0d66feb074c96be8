"""Reader and parser for .cub scene files, with small string and character helpers."""

__version__ = "0.1.0"