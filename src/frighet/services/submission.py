"""
Submission Service.

Handles a contact form submission end to end: configuration check,
parsing, validation, rendering, dispatch and outcome mapping.
Each submission gets exactly one dispatch attempt.
"""

import json
from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Protocol, Union

from pydantic import ValidationError as PydanticValidationError

from frighet.api.validation import SubmissionRequest
from frighet.config import Settings, settings
from frighet.core.exceptions import (
    ConfigurationError,
    DispatchError,
    MalformedRequestError,
    ValidationError,
)
from frighet.infrastructure.http.mailjet_client import (
    MailjetClient,
    OutboundEmail,
    SendAck,
)
from frighet.infrastructure.logging import get_logger
from frighet.infrastructure.metrics import get_metrics
from frighet.services.rendering import Submission, render_submission_email


logger = get_logger(__name__)


MSG_CONFIGURATION_ERROR = "Server configuration error."
MSG_INVALID_BODY = "Invalid request body."
MSG_MISSING_FIELDS = "Missing required fields."
MSG_SUCCESS = "Success! Form submitted."
MSG_DISPATCH_FAILED = "Failed to send email."
MSG_DISPATCH_FALLBACK = "Failed to send email via Mailjet."


class NotificationSender(Protocol):
    """Delivers a rendered email, raising DispatchError on failure."""

    def send(self, email: OutboundEmail) -> SendAck:
        ...


@dataclass(frozen=True)
class SubmissionOutcome:
    """Terminal state of a submission: HTTP status and JSON body."""
    status_code: int
    body: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def success(cls, message: str) -> "SubmissionOutcome":
        return cls(200, {"success": True, "message": message})

    @classmethod
    def failure(
        cls,
        status_code: int,
        message: str,
        error: Optional[str] = None,
    ) -> "SubmissionOutcome":
        body: Dict[str, Any] = {"success": False, "message": message}
        if error is not None:
            body["error"] = error
        return cls(status_code, body)

    def to_response(self):
        """Convert to a Flask (body, status) response tuple."""
        return self.body, self.status_code


def dispatch_status_code(error: DispatchError) -> int:
    """HTTP status for a failed dispatch: the sender's error code, else 500."""
    code = error.status_code
    if isinstance(code, int) and 400 <= code <= 599:
        return code
    return 500


class SubmissionService:
    """
    Service handling contact form submissions.

    Responsible for:
    - Refusing to work without sender credentials and addresses
    - Decoding and validating the submission
    - Rendering and dispatching the contact email
    - Mapping every terminal state to a response
    """

    def __init__(
        self,
        app_settings: Optional[Settings] = None,
        sender: Optional[NotificationSender] = None,
    ) -> None:
        self._settings = app_settings or settings
        self._sender = sender

    def handle(self, raw_body: Union[bytes, str, None]) -> SubmissionOutcome:
        """
        Handle a raw contact request body.

        Args:
            raw_body: The undecoded request body.

        Returns:
            SubmissionOutcome carrying the response status and body.
        """
        outcome = self._handle(raw_body)
        get_metrics().submissions_total.inc(status_code=str(outcome.status_code))
        return outcome

    def _handle(self, raw_body: Union[bytes, str, None]) -> SubmissionOutcome:
        try:
            self.check_configuration()
        except ConfigurationError as e:
            logger.error(
                f"Submission refused: {e}",
                extra={"extra_fields": {"config_name": e.config_name}}
            )
            return SubmissionOutcome.failure(500, MSG_CONFIGURATION_ERROR)

        try:
            submission = self.parse(raw_body)
        except MalformedRequestError as e:
            logger.warning(
                f"Invalid submission body: {e.reason}",
                extra={"extra_fields": {"error_type": type(e).__name__}}
            )
            return SubmissionOutcome.failure(400, MSG_INVALID_BODY)
        except ValidationError as e:
            logger.warning(
                "Submission with missing required fields",
                extra={"extra_fields": {"missing_fields": list(e.missing_fields)}}
            )
            return SubmissionOutcome.failure(400, MSG_MISSING_FIELDS)

        try:
            ack = self.dispatch(submission)
        except DispatchError as e:
            logger.error(
                f"Submission dispatch failed: {e}",
                extra={"extra_fields": {
                    "error_type": type(e).__name__,
                    "status_code": e.status_code,
                }}
            )
            return SubmissionOutcome.failure(
                dispatch_status_code(e),
                MSG_DISPATCH_FAILED,
                e.reason or MSG_DISPATCH_FALLBACK,
            )

        logger.info(
            "Submission forwarded",
            extra={"extra_fields": {
                "product_type": submission.product_type,
                "has_estimate": submission.estimated_price is not None,
                "message_ids": list(ack.message_ids),
            }}
        )
        return SubmissionOutcome.success(MSG_SUCCESS)

    def check_configuration(self) -> None:
        """
        Ensure the sender can operate.

        Raises:
            ConfigurationError: If credentials or addresses are missing.
        """
        if not self._settings.mailjet.is_configured:
            raise ConfigurationError(
                "MJ_API_KEY/MJ_API_SECRET",
                "Mailjet API key or secret is not configured",
            )
        if not self._settings.email.is_configured:
            raise ConfigurationError(
                "EMAIL_FROM/EMAIL_TO",
                "Email TO or FROM address is not configured",
            )

    def parse(self, raw_body: Union[bytes, str, None]) -> Submission:
        """
        Decode and validate a raw request body.

        Raises:
            MalformedRequestError: If the body is not a valid submission record.
            ValidationError: If a required field is missing.
        """
        if not raw_body:
            raise MalformedRequestError("empty body")

        try:
            data = json.loads(raw_body)
        except (TypeError, ValueError) as e:
            raise MalformedRequestError(f"invalid JSON: {e}") from e

        if not isinstance(data, dict):
            raise MalformedRequestError("expected a JSON object")

        try:
            request_data = SubmissionRequest.model_validate(data)
        except PydanticValidationError as e:
            raise MalformedRequestError(str(e.errors()[0]["msg"])) from e

        missing = request_data.missing_fields()
        if missing:
            raise ValidationError(missing)

        return Submission(
            name=request_data.name,
            email=request_data.email,
            product_type=request_data.product_type,
            weight=request_data.weight,
            message=request_data.message,
            estimated_price=request_data.estimated_price,
            estimated_time=request_data.estimated_time,
        )

    def dispatch(self, submission: Submission) -> SendAck:
        """
        Render a submission and hand it to the notification sender.

        Raises:
            DispatchError: If the sender fails.
        """
        rendered = render_submission_email(submission)
        email_settings = self._settings.email

        outbound = OutboundEmail(
            from_address=email_settings.from_address,
            from_name=email_settings.sender_name,
            to_addresses=(email_settings.to_address,),
            subject=rendered.subject,
            text_body=rendered.text_body,
            html_body=rendered.html_body,
        )

        if self._sender is not None:
            return self._sender.send(outbound)

        with MailjetClient.from_settings(self._settings.mailjet) as sender:
            return sender.send(outbound)
