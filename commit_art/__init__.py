"""Paint text or a 7-pixel-high image onto a contribution calendar."""

__version__ = "0.1.0"
