"""Keep the metadata of a local library of followed channels, playlists and videos."""

__version__ = "0.1.0"