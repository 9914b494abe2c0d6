"""
Outgoing email
"""
import smtplib
import ssl
from email.message import EmailMessage
import structlog

from resumeforge.core.config import settings
from resumeforge.core.exceptions import EmailDeliveryError

logger = structlog.get_logger()


def _smtp_password() -> str:
    # Gmail app passwords are often copied with spaces every 4 chars.
    return (settings.SMTP_PASSWORD or "").replace(" ", "")


def _sender_address() -> str:
    sender = settings.SMTP_FROM_EMAIL or settings.SMTP_USER
    if not sender:
        raise EmailDeliveryError(
            "Email sender is not configured",
            details={"reason": "set SMTP_FROM_EMAIL or SMTP_USER"},
        )
    return sender


def _build_message(to: str, subject: str, body: str) -> EmailMessage:
    msg = EmailMessage()
    msg["Subject"] = subject
    msg["From"] = f"{settings.SMTP_FROM_NAME} <{_sender_address()}>"
    msg["To"] = to
    msg.set_content(body)
    return msg


def _send_via_smtp(msg: EmailMessage) -> None:
    context = ssl.create_default_context()
    if settings.SMTP_USE_TLS:
        with smtplib.SMTP(settings.SMTP_HOST, settings.SMTP_PORT, timeout=settings.SMTP_TIMEOUT) as server:
            server.starttls(context=context)
            if settings.SMTP_USER:
                server.login(settings.SMTP_USER, _smtp_password())
            server.send_message(msg)
        return

    with smtplib.SMTP_SSL(settings.SMTP_HOST, settings.SMTP_PORT, context=context, timeout=settings.SMTP_TIMEOUT) as server:
        if settings.SMTP_USER:
            server.login(settings.SMTP_USER, _smtp_password())
        server.send_message(msg)


def send_email(to: str, subject: str, body: str) -> None:
    """Send a plain-text email, raising EmailDeliveryError on any failure"""
    if settings.EMAIL_BACKEND == "console":
        logger.info("email_console_delivery", to=to, subject=subject, body=body)
        return

    msg = _build_message(to, subject, body)
    try:
        _send_via_smtp(msg)
    except (smtplib.SMTPException, OSError) as e:
        logger.error("email_delivery_failed", to=to, subject=subject, error=str(e))
        raise EmailDeliveryError(details={"reason": str(e)}) from e

    logger.info("email_sent", to=to, subject=subject)
