"""Centralized type definitions for safe-backup."""

from typing import TypedDict


class ActivityConfig(TypedDict):
    """Activity log configuration."""

    log_file: str


class Settings(TypedDict):
    """Global application settings loaded from settings.conf."""

    log_level: str
    console_log_level: str
    activity: ActivityConfig


class ActivityRecord(TypedDict):
    """One line of the activity log."""

    ts: int
    user: str
    action: str
    file: str
    result: str
