"""
HTTP Client Package.

External service clients:
- Mailjet Send API
"""

from frighet.infrastructure.http.mailjet_client import (
    MailjetClient,
    OutboundEmail,
    SendAck,
)


__all__ = [
    "MailjetClient",
    "OutboundEmail",
    "SendAck",
]
