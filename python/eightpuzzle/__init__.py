"""8-puzzle search engine with a terminal frontend."""

__version__ = "0.1.0"
