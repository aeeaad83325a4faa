"""
Contact Email Rendering.

Builds the subject, plain-text and HTML bodies of the email sent
for each contact form submission.
"""

from dataclasses import dataclass
from typing import Optional

from markupsafe import Markup, escape

from frighet.core.estimator import format_hours, format_price


NO_MESSAGE = "No message."
SEPARATOR = "-" * 36


@dataclass(frozen=True)
class Submission:
    """A decoded and validated contact form submission."""
    name: str
    email: str
    product_type: str
    weight: str
    message: Optional[str] = None
    estimated_price: Optional[float] = None
    estimated_time: Optional[float] = None


@dataclass(frozen=True)
class RenderedEmail:
    """Subject and both alternative bodies of a contact email."""
    subject: str
    text_body: str
    html_body: str


def render_subject(submission: Submission) -> str:
    return f"Freeze-Drying Request - {submission.name}"


def render_text(submission: Submission) -> str:
    lines = [
        "New frighet.ro request",
        SEPARATOR,
        f"Name: {submission.name}",
        f"Email: {submission.email}",
        SEPARATOR,
        f"Product type: {submission.product_type}",
        f"Estimated weight: {submission.weight} kg",
        f"Preliminary price estimate: {format_price(submission.estimated_price)}",
        f"Preliminary time estimate: {format_hours(submission.estimated_time)}",
        SEPARATOR,
        "Message / details:",
        submission.message or NO_MESSAGE,
    ]
    return "\n".join(lines) + "\n"


def render_html(submission: Submission) -> str:
    # Every interpolated value goes through escape(); newlines become <br>.
    if submission.message:
        message = escape(submission.message).replace("\n", Markup("<br>"))
    else:
        message = escape(NO_MESSAGE)

    return Markup(
        "<h1>New frighet.ro request</h1>\n"
        "<p><strong>Name:</strong> {name}</p>\n"
        "<p><strong>Email:</strong> {email}</p>\n"
        "<hr>\n"
        "<p><strong>Product type:</strong> {product_type}</p>\n"
        "<p><strong>Estimated weight:</strong> {weight} kg</p>\n"
        "<p><strong>Preliminary price estimate:</strong> {price}</p>\n"
        "<p><strong>Preliminary time estimate:</strong> {time}</p>\n"
        "<hr>\n"
        "<p><strong>Message / details:</strong></p>\n"
        "<p>{message}</p>\n"
    ).format(
        name=submission.name,
        email=submission.email,
        product_type=submission.product_type,
        weight=submission.weight,
        price=format_price(submission.estimated_price),
        time=format_hours(submission.estimated_time),
        message=message,
    )


def render_submission_email(submission: Submission) -> RenderedEmail:
    """
    Render the contact email for a submission.

    Args:
        submission: Validated submission.

    Returns:
        RenderedEmail with subject, text and HTML bodies.
    """
    return RenderedEmail(
        subject=render_subject(submission),
        text_body=render_text(submission),
        html_body=str(render_html(submission)),
    )
