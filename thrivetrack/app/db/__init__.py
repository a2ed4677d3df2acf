"""Database models for ThriveTrack."""

from .models import Base, MoodEntry, SettingEntry

__all__ = [
    "Base",
    "MoodEntry",
    "SettingEntry",
]
