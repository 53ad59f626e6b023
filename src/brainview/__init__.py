"""brainview: read-only browser for a markdown second brain."""

__version__ = "0.1.0"
