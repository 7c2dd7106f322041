"""A console music player with a song library, playlists and user accounts."""

__version__ = "0.1.0"
__all__ = ["__version__"]