"""Browser Selector: choose which installed browser opens a URL."""

__version__ = "1.0.0"
