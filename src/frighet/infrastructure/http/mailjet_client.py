"""
Mailjet Send API Client.

Delivers contact emails through Mailjet's v3.1 send endpoint.
One attempt per email: failures are reported, never retried.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

import requests
from requests.adapters import HTTPAdapter

from frighet.config import MailjetSettings, settings
from frighet.core.exceptions import DispatchError
from frighet.infrastructure.logging import get_logger, log_duration
from frighet.infrastructure.metrics import get_metrics


logger = get_logger(__name__)


@dataclass(frozen=True)
class OutboundEmail:
    """An email ready to hand over to the notification sender."""
    from_address: str
    from_name: str
    to_addresses: Tuple[str, ...]
    subject: str
    text_body: str
    html_body: str

    def to_payload(self) -> Dict[str, Any]:
        """Convert to a Mailjet v3.1 send request payload."""
        return {
            "Messages": [
                {
                    "From": {
                        "Email": self.from_address,
                        "Name": self.from_name,
                    },
                    "To": [{"Email": address} for address in self.to_addresses],
                    "Subject": self.subject,
                    "TextPart": self.text_body,
                    "HTMLPart": self.html_body,
                }
            ]
        }


def _as_list(value: Any) -> List[Any]:
    if value is None:
        return []
    if isinstance(value, list):
        return value
    return [value]


@dataclass(frozen=True)
class SendAck:
    """Acknowledgment returned by Mailjet for a delivered request."""
    statuses: Tuple[str, ...] = ()
    message_ids: Tuple[str, ...] = ()
    raw: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_api_response(cls, data: Dict[str, Any]) -> "SendAck":
        """Create from API response."""
        messages = _as_list(data.get("Messages"))
        # Entries that are not objects keep an empty status and count as failures
        statuses = tuple(
            str(m.get("Status", "")) if isinstance(m, dict) else ""
            for m in messages
        )
        message_ids = tuple(
            str(recipient["MessageID"])
            for m in messages if isinstance(m, dict)
            for recipient in _as_list(m.get("To"))
            if isinstance(recipient, dict) and recipient.get("MessageID") is not None
        )
        return cls(statuses=statuses, message_ids=message_ids, raw=data)

    @property
    def success(self) -> bool:
        """Check if every message was accepted."""
        return all(status == "success" for status in self.statuses)


def _error_message(data: Any) -> Optional[str]:
    """Extract the first Mailjet error message from a response body."""
    if not isinstance(data, dict):
        return None
    if data.get("ErrorMessage"):
        return str(data["ErrorMessage"])
    for message in _as_list(data.get("Messages")):
        if not isinstance(message, dict):
            continue
        for error in _as_list(message.get("Errors")):
            if isinstance(error, dict) and error.get("ErrorMessage"):
                return str(error["ErrorMessage"])
    return None


class MailjetClient:
    """
    Client for the Mailjet Send API.

    Implements the notification sender used by the submission service.
    """

    SERVICE = "mailjet"

    def __init__(
        self,
        api_key: Optional[str] = None,
        api_secret: Optional[str] = None,
        send_url: Optional[str] = None,
        timeout: Optional[int] = None,
    ) -> None:
        """
        Initialize Mailjet client.

        Args:
            api_key: Mailjet public API key.
            api_secret: Mailjet private API key.
            send_url: Send endpoint URL.
            timeout: Request timeout in seconds.
        """
        self._auth = (
            api_key or settings.mailjet.api_key,
            api_secret or settings.mailjet.api_secret,
        )
        self._send_url = send_url or settings.mailjet.send_url
        self._timeout = timeout or settings.mailjet.timeout_seconds
        self._session: Optional[requests.Session] = None

    @classmethod
    def from_settings(cls, mailjet_settings: MailjetSettings) -> "MailjetClient":
        """Create a client from Mailjet settings."""
        return cls(
            api_key=mailjet_settings.api_key,
            api_secret=mailjet_settings.api_secret,
            send_url=mailjet_settings.send_url,
            timeout=mailjet_settings.timeout_seconds,
        )

    @property
    def session(self) -> requests.Session:
        """Get or create the HTTP session."""
        if self._session is None:
            self._session = requests.Session()

            adapter = HTTPAdapter(
                max_retries=0,
                pool_connections=5,
                pool_maxsize=5,
            )
            self._session.mount("http://", adapter)
            self._session.mount("https://", adapter)

            self._session.auth = self._auth
            self._session.headers.update({
                "Content-Type": "application/json",
                "Accept": "application/json",
            })

        return self._session

    @log_duration("mailjet_send")
    def send(self, email: OutboundEmail) -> SendAck:
        """
        Send an email.

        Args:
            email: The rendered email.

        Returns:
            SendAck with Mailjet's per-message status.

        Raises:
            DispatchError: If Mailjet rejects the email or cannot be reached.
        """
        metrics = get_metrics()

        logger.info(
            "Sending email via Mailjet",
            extra={"extra_fields": {
                "subject": email.subject,
                "recipients": len(email.to_addresses),
            }}
        )

        try:
            response = self.session.post(
                self._send_url,
                json=email.to_payload(),
                timeout=self._timeout,
            )
            response.raise_for_status()

        except requests.exceptions.Timeout as e:
            metrics.external_requests_total.inc(service=self.SERVICE, status="timeout")
            raise DispatchError(f"Mailjet timeout after {self._timeout}s") from e

        except requests.exceptions.HTTPError as e:
            metrics.external_requests_total.inc(service=self.SERVICE, status="http_error")
            status_code = e.response.status_code
            detail = _error_message(self._json_or_none(e.response))
            logger.error(
                f"Mailjet HTTP error: {status_code}",
                extra={"extra_fields": {
                    "status_code": status_code,
                    "response_body": e.response.text[:500] if e.response.text else None,
                }}
            )
            raise DispatchError(
                detail or f"Mailjet returned HTTP {status_code}",
                status_code=status_code,
            ) from e

        except requests.exceptions.RequestException as e:
            metrics.external_requests_total.inc(service=self.SERVICE, status="error")
            raise DispatchError(f"Mailjet request failed: {e}") from e

        data = self._json_or_none(response) or {}
        ack = SendAck.from_api_response(data)

        if not ack.success:
            metrics.external_requests_total.inc(service=self.SERVICE, status="rejected")
            raise DispatchError(
                _error_message(data) or "Mailjet rejected the message"
            )

        metrics.external_requests_total.inc(service=self.SERVICE, status="success")
        logger.info(
            "Email accepted by Mailjet",
            extra={"extra_fields": {"message_ids": list(ack.message_ids)}}
        )
        return ack

    @staticmethod
    def _json_or_none(response: requests.Response) -> Optional[Dict[str, Any]]:
        try:
            data = response.json()
        except ValueError:
            return None
        return data if isinstance(data, dict) else None

    def close(self) -> None:
        """Close the HTTP session."""
        if self._session is not None:
            self._session.close()
            self._session = None

    def __enter__(self) -> "MailjetClient":
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

