"""
Test Configuration and Fixtures.

Provides shared fixtures for all tests.
"""

import json
from typing import Generator
from unittest.mock import MagicMock, patch

import pytest
from flask import Flask
from flask.testing import FlaskClient

from frighet.app import create_app
from frighet.config import EmailSettings, MailjetSettings, Settings
from frighet.infrastructure.http import SendAck


@pytest.fixture
def app() -> Flask:
    """Create test Flask application."""
    test_config = {
        "TESTING": True,
    }
    return create_app(test_config)


@pytest.fixture
def client(app: Flask) -> FlaskClient:
    """Create test client."""
    return app.test_client()


@pytest.fixture
def configured_settings() -> Settings:
    """Settings with Mailjet credentials and both addresses."""
    return Settings(
        mailjet=MailjetSettings(
            api_key="test-key",
            api_secret="test-secret",
            send_url="https://api.mailjet.test/v3.1/send",
        ),
        email=EmailSettings(
            from_address="contact@frighet.ro",
            to_address="office@frighet.ro",
            sender_name="frighet.ro Contact",
        ),
    )


@pytest.fixture
def unconfigured_settings() -> Settings:
    """Settings without any credentials or addresses."""
    return Settings(
        mailjet=MailjetSettings(api_key="", api_secret=""),
        email=EmailSettings(from_address="", to_address=""),
    )


@pytest.fixture
def mock_sender() -> MagicMock:
    """Notification sender that accepts every email."""
    sender = MagicMock()
    sender.send.return_value = SendAck(statuses=("success",), message_ids=("1001",))
    return sender


@pytest.fixture
def patched_service_dependencies(
    configured_settings: Settings,
    mock_sender: MagicMock,
) -> Generator[MagicMock, None, None]:
    """Route the contact endpoint to configured settings and the mock sender."""
    with patch("frighet.services.submission.settings", configured_settings), \
            patch("frighet.services.submission.MailjetClient") as client_class:
        client_class.from_settings.return_value.__enter__.return_value = mock_sender
        yield mock_sender


@pytest.fixture
def valid_payload() -> dict:
    """A complete contact form body."""
    return {
        "name": "Ana Popescu",
        "email": "ana@example.com",
        "productType": "Prepared Meals",
        "weight": "5",
        "message": "Ready meals for hiking.\nAbout 20 portions.",
        "estimatedPrice": 195.0,
        "estimatedTime": 11.28,
    }


@pytest.fixture
def valid_body(valid_payload: dict) -> bytes:
    """The complete contact form body, encoded."""
    return json.dumps(valid_payload).encode("utf-8")
