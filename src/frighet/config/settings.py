"""
Application configuration.

Centralizes environment variables and settings using frozen
dataclasses. Values are read once, when the module is imported.
"""

import os
from dataclasses import dataclass, field


@dataclass(frozen=True)
class MailjetSettings:
    """Mailjet transactional email API settings."""

    api_key: str = field(
        default_factory=lambda: os.environ.get("MJ_API_KEY", "")
    )
    api_secret: str = field(
        default_factory=lambda: os.environ.get("MJ_API_SECRET", "")
    )
    send_url: str = field(
        default_factory=lambda: os.environ.get(
            "MAILJET_API_URL", "https://api.mailjet.com/v3.1/send"
        )
    )
    timeout_seconds: int = 15

    @property
    def is_configured(self) -> bool:
        """Check if Mailjet credentials are set."""
        return bool(self.api_key and self.api_secret)


@dataclass(frozen=True)
class EmailSettings:
    """Sender and recipient of contact emails."""

    from_address: str = field(
        default_factory=lambda: os.environ.get("EMAIL_FROM", "")
    )
    to_address: str = field(
        default_factory=lambda: os.environ.get("EMAIL_TO", "")
    )
    sender_name: str = field(
        default_factory=lambda: os.environ.get("EMAIL_SENDER_NAME", "frighet.ro Contact")
    )

    @property
    def is_configured(self) -> bool:
        """Check if both addresses are set."""
        return bool(self.from_address and self.to_address)


@dataclass(frozen=True)
class Settings:
    """Main application settings."""

    mailjet: MailjetSettings = field(default_factory=MailjetSettings)
    email: EmailSettings = field(default_factory=EmailSettings)
    environment: str = field(default_factory=lambda: os.environ.get("ENVIRONMENT", "development"))
    port: int = field(default_factory=lambda: int(os.environ.get("PORT", 8080)))
    debug: bool = field(default_factory=lambda: os.environ.get("DEBUG", "false").lower() == "true")


# Singleton settings instance
settings = Settings()
