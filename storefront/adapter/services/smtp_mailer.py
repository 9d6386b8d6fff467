"""SMTP implementation of the Mailer collaborator."""

import asyncio
import logging
import smtplib
from email.message import EmailMessage

from storefront.app.services.mailer import MailDeliveryError, Mailer

logger = logging.getLogger(__name__)


class SmtpMailer(Mailer):
    """Sends HTML mail through an SMTP relay; the blocking client runs in a worker thread"""

    def __init__(
        self,
        host: str,
        port: int,
        username: str = "",
        password: str = "",
        use_tls: bool = True,
        from_name: str = "",
        from_email: str = "",
        timeout: float = 30.0,
    ):
        self.host = host
        self.port = port
        self.username = username
        self.password = password
        self.use_tls = use_tls
        self.sender = f"{from_name} <{from_email}>" if from_name else from_email
        self.timeout = timeout

    def _build_message(self, recipient: str, subject: str, body: str) -> EmailMessage:
        message = EmailMessage()
        message["From"] = self.sender
        message["To"] = recipient
        message["Subject"] = subject
        message.set_content("Please view this message in an HTML capable mail client.")
        message.add_alternative(body, subtype="html")
        return message

    def _send_blocking(self, message: EmailMessage) -> None:
        with smtplib.SMTP(self.host, self.port, timeout=self.timeout) as client:
            if self.use_tls:
                client.starttls()
            if self.username:
                client.login(self.username, self.password)
            client.send_message(message)

    async def send(self, recipient: str, subject: str, body: str) -> None:
        message = self._build_message(recipient, subject, body)
        try:
            await asyncio.to_thread(self._send_blocking, message)
        except (smtplib.SMTPException, OSError) as e:
            raise MailDeliveryError(str(e)) from e
        logger.info(f"Email '{subject}' sent")
