"""Configuration package."""

from frighet.config.settings import (
    EmailSettings,
    MailjetSettings,
    Settings,
    settings,
)

__all__ = [
    "EmailSettings",
    "MailjetSettings",
    "Settings",
    "settings",
]
