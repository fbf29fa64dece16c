"""psplay — action descriptor construction for Photoshop commands."""

__version__ = "0.1.0"
