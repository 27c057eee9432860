"""Last.fm API progress report generator"""

__version__ = "1.0.0"
