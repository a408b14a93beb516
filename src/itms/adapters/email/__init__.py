"""Email adapter - SMTP delivery of notifications using btx_lib_mail.

Contents:
    * :func:`.transport.send_notification` - Deliver a rendered notification
"""

from __future__ import annotations

from .transport import send_notification

__all__ = ["send_notification"]
