"""oslicense - fetch open-source license text from the OSI license API."""

__version__ = "0.1.0"
