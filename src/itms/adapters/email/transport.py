"""SMTP delivery of rendered notifications via btx_lib_mail.

Sessions are unauthenticated and plain unless the outcome sets
``starttls``. The connection is opened and closed by ``btx_lib_mail.send``
for each message.

btx_lib_mail writes the RFC 5322 headers itself (``From``, ``To`` per
recipient, ``Subject``, ``Date``) and has no ``Cc`` header. The rendered
header block therefore travels at the top of the body, which is how
recipients see the ``to`` and ``cc`` lists. The ``bcc`` line is left out.
"""

from __future__ import annotations

import logging

from btx_lib_mail.lib_mail import send as btx_send

from itms.domain.errors import DeliveryError
from itms.domain.notification import NotificationMessage

logger = logging.getLogger(__name__)

#: Socket timeout in seconds for one SMTP session.
SMTP_TIMEOUT = 30.0


def send_notification(message: NotificationMessage) -> bool:
    """Deliver ``message`` over SMTP.

    ``cc`` and ``bcc`` addresses are delivered as additional envelope
    recipients. The body is :meth:`NotificationMessage.as_text` without the
    ``bcc`` line.

    Args:
        message: Rendered notification.

    Returns:
        True when delivery succeeds; False if the transport reports a
        failure without raising.

    Raises:
        DeliveryError: The SMTP host refused the connection or the message.

    Side Effects:
        Sends email via SMTP. Logs the attempt at INFO and failures at ERROR.
    """
    recipients = list(message.envelope_recipients)
    logger.info(
        "Sending notification",
        extra={
            "sender": message.sender,
            "recipients": recipients,
            "subject": message.subject,
            "smtp_host": message.smtp_host,
            "starttls": message.starttls,
        },
    )
    rendered = message.as_text(include_bcc=False)
    logger.debug("Rendered notification:\n%s", rendered)

    try:
        result = btx_send(
            mail_from=message.sender,
            mail_recipients=recipients,
            mail_subject=message.subject,
            mail_body=rendered,
            smtphosts=[message.smtp_host],
            credentials=None,
            use_starttls=message.starttls,
            timeout=SMTP_TIMEOUT,
        )
    except (RuntimeError, OSError) as exc:
        logger.error("SMTP delivery failed", extra={"smtp_host": message.smtp_host, "error": str(exc)})
        raise DeliveryError(f"{message.smtp_host}: {exc}") from exc

    if result:
        logger.info("Notification sent", extra={"recipients": recipients})
    else:
        logger.warning("Notification send returned failure", extra={"recipients": recipients})
    return result


__all__ = [
    "SMTP_TIMEOUT",
    "send_notification",
]
