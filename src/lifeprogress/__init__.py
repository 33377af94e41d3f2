"""Life Progress: your life as a calendar of weeks."""

__version__ = "0.1.0"
