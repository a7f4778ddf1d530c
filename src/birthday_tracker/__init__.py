"""Birthday Tracker: a multi-user birthday and interests web application."""

__version__ = "0.1.0"
