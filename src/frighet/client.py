"""
Contact Form Client.

Caller side of the contact endpoint: posts a form draft and turns the
response into the status line shown under the form. A failed send is
never retried automatically; the user decides.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional

import requests

from frighet.core.draft import SubmissionDraft
from frighet.infrastructure.logging import get_logger


logger = get_logger(__name__)


SUCCESS_MESSAGE = "Thank you! Your request has been sent. We will get back to you shortly."
ERROR_MESSAGE = (
    "Something went wrong while sending your request. "
    "Please try again or write to us directly."
)


class FormStatus(str, Enum):
    """Inline status of the contact form."""
    SUCCESS = "success"
    ERROR = "error"


@dataclass(frozen=True)
class SubmitResult:
    """
    Outcome of a form submission.

    Attributes:
        status: Form status to display.
        message: Inline message for the user.
        draft: Form contents after the submission (cleared on success).
        status_code: HTTP status of the response, None on network failure.
    """
    status: FormStatus
    message: str
    draft: SubmissionDraft
    status_code: Optional[int] = None

    @property
    def success(self) -> bool:
        return self.status is FormStatus.SUCCESS


class ContactFormClient:
    """Posts contact form drafts to the contact endpoint."""

    def __init__(
        self,
        base_url: str,
        timeout: int = 30,
        session: Optional[requests.Session] = None,
    ) -> None:
        self._contact_url = f"{base_url.rstrip('/')}/api/contact"
        self._timeout = timeout
        self._session = session or requests.Session()

    def submit(self, draft: SubmissionDraft) -> SubmitResult:
        """
        Submit a draft once.

        Args:
            draft: Current form contents, estimate included.

        Returns:
            SubmitResult; on success the returned draft is empty.
        """
        try:
            response = self._session.post(
                self._contact_url,
                json=draft.to_payload(),
                timeout=self._timeout,
            )
        except requests.exceptions.RequestException as e:
            logger.warning(
                f"Contact form submission failed: {e}",
                extra={"extra_fields": {"error_type": type(e).__name__}}
            )
            return SubmitResult(FormStatus.ERROR, ERROR_MESSAGE, draft)

        if not response.ok:
            logger.warning(
                f"Contact endpoint returned {response.status_code}",
                extra={"extra_fields": {
                    "status_code": response.status_code,
                    "server_message": self._server_message(response),
                }}
            )
            return SubmitResult(
                FormStatus.ERROR, ERROR_MESSAGE, draft, response.status_code
            )

        return SubmitResult(
            FormStatus.SUCCESS,
            SUCCESS_MESSAGE,
            SubmissionDraft.empty(),
            response.status_code,
        )

    @staticmethod
    def _server_message(response: requests.Response) -> Any:
        try:
            return response.json().get("message")
        except (ValueError, AttributeError):
            return None

    def close(self) -> None:
        """Close the HTTP session."""
        self._session.close()

    def __enter__(self) -> "ContactFormClient":
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()
