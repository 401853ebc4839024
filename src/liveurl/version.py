"""src/liveurl/version.py"""

__version__ = "0.3.0"
