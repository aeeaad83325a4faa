"""
Services Layer.

Business logic orchestration:
- Contact email rendering
- Contact form submission handling
"""

from frighet.services.rendering import (
    RenderedEmail,
    Submission,
    render_submission_email,
)
from frighet.services.submission import (
    NotificationSender,
    SubmissionOutcome,
    SubmissionService,
)


__all__ = [
    "NotificationSender",
    "RenderedEmail",
    "Submission",
    "SubmissionOutcome",
    "SubmissionService",
    "render_submission_email",
]
