"""R Labs learning platform: lab cards with clipboard copy and completion markers."""

__version__ = "1.0.0"
