"""Storage and validation services."""

from birthday_tracker.services.storage import BirthdayStorage, Storage, get_storage

__all__ = [
    "BirthdayStorage",
    "Storage",
    "get_storage",
]
