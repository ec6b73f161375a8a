"""pr-lens - typed accessors over a pull request under review."""

__version__ = "0.1.0"
