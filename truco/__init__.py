"""Four-player Truco played on the console."""

__version__ = "0.1.0"
