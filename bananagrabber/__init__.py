"""bananagrabber - resolve Reddit post links to direct media URLs."""

__version__ = "0.1.0"
