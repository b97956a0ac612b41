import asyncio
import logging
import mimetypes
import smtplib
import ssl
from email.message import EmailMessage
from pathlib import Path
from typing import List, Optional, Union

from pydantic import BaseModel, SecretStr

from credential_service.app.services.notifier import DeliveryError, INotifier

logger = logging.getLogger(__name__)


class SmtpSettings(BaseModel):
    enabled: bool = False
    host: str = ""
    port: int = 587
    username: Optional[str] = None
    password: Optional[SecretStr] = None
    from_address: str = ""
    from_name: str = ""
    # Implicit TLS (port 465) when use_ssl and not starttls
    use_ssl: bool = True
    starttls: bool = True
    timeout: float = 30.0


class SmtpNotifier(INotifier):
    """Notifier that sends HTML mail through an SMTP server"""

    def __init__(self, settings: SmtpSettings):
        self._settings = settings

    async def send(
        self,
        addresses: Union[str, List[str]],
        subject: str,
        html_body: str,
        attachments: Optional[List[str]] = None,
    ) -> bool:
        recipients = [addresses] if isinstance(addresses, str) else list(addresses)

        if not self._settings.enabled:
            logger.warning(f"SMTP disabled, '{subject}' not sent to {len(recipients)} recipient(s)")
            return True

        if not self._settings.host:
            logger.error("SMTP host not configured")
            return False

        await asyncio.to_thread(self._deliver, recipients, subject, html_body, attachments)
        logger.info(f"Email '{subject}' sent to {len(recipients)} recipient(s)")
        return True

    def _deliver(
        self,
        recipients: List[str],
        subject: str,
        html_body: str,
        attachments: Optional[List[str]],
    ) -> None:
        """Build and send the message; runs in a worker thread"""
        try:
            message = self._create_message(recipients, subject, html_body, attachments)
        except OSError as e:
            logger.error(f"Failed to attach files to email '{subject}': {e}")
            raise DeliveryError(str(e)) from e

        self._send_message(message)

    def _create_message(
        self,
        recipients: List[str],
        subject: str,
        html_body: str,
        attachments: Optional[List[str]],
    ) -> EmailMessage:
        message = EmailMessage()
        message["Subject"] = subject
        message["From"] = f"{self._settings.from_name} <{self._settings.from_address}>"
        message["To"] = ", ".join(recipients)
        message.set_content(html_body, subtype="html")

        for attachment in attachments or []:
            if not attachment or not attachment.strip():
                continue
            path = Path(attachment)
            content_type, _ = mimetypes.guess_type(path.name)
            maintype, subtype = (content_type or "application/octet-stream").split("/", 1)
            message.add_attachment(
                path.read_bytes(), maintype=maintype, subtype=subtype, filename=path.name
            )

        return message

    def _send_message(self, message: EmailMessage) -> None:
        settings = self._settings
        password = settings.password.get_secret_value() if settings.password else ""

        try:
            if settings.use_ssl and not settings.starttls:
                context = ssl.create_default_context()
                with smtplib.SMTP_SSL(
                    settings.host, settings.port, context=context, timeout=settings.timeout
                ) as server:
                    if settings.username:
                        server.login(settings.username, password)
                    server.send_message(message)
            else:
                with smtplib.SMTP(settings.host, settings.port, timeout=settings.timeout) as server:
                    if settings.starttls:
                        server.starttls(context=ssl.create_default_context())
                    if settings.username:
                        server.login(settings.username, password)
                    server.send_message(message)
        except (smtplib.SMTPException, OSError) as e:
            logger.error(f"Failed to send email '{message['Subject']}': {e}")
            raise DeliveryError(str(e)) from e
