"""FlatWiki: a personal wiki over flat text files."""

__version__ = "0.1.0"
