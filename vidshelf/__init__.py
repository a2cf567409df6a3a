"""VidShelf: client-side style video gallery loader and renderer."""

__version__ = "0.1.0"
