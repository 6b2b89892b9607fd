"""rafall — static-site generator core: front matter and ordered posts."""

__version__ = "0.1.0"
