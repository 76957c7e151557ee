"""Era energy analysis of a band's discography from Spotify audio features."""

__version__ = "1.0.0"
