"""Static study-guide site built from a folder of markdown documents."""

__version__ = "0.1.0"
