"""Desktop and command-line viewer for an owner's remote posts."""

__version__ = "0.1.0"
