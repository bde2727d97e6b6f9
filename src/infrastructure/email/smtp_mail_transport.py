"""
SMTP mail transport implementation.

Sends messages through an SMTP relay. Well-known providers can be selected
by service name (EMAIL_SERVICE=gmail) the way the storefront was configured;
any other relay is reached with explicit SMTP_HOST/SMTP_PORT.

For local development, use Mailhog (EMAIL_SERVICE=mailhog):
- SMTP server on port 1025
- Web UI at http://localhost:8025
"""

import logging
from dataclasses import dataclass
from email.mime.multipart import MIMEMultipart
from email.mime.text import MIMEText
from email.utils import make_msgid, parseaddr

import aiosmtplib

from src.application.mail_transport import (
    DeliveryReceipt,
    MailMessage,
    MailTransport,
    MailTransportError,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SmtpServicePreset:
    """Connection settings for a well-known mail provider."""

    host: str
    port: int
    use_tls: bool
    requires_auth: bool = True


SERVICE_PRESETS: dict[str, SmtpServicePreset] = {
    "gmail": SmtpServicePreset("smtp.gmail.com", 465, use_tls=True),
    "outlook": SmtpServicePreset("smtp-mail.outlook.com", 587, use_tls=False),
    "hotmail": SmtpServicePreset("smtp-mail.outlook.com", 587, use_tls=False),
    "yahoo": SmtpServicePreset("smtp.mail.yahoo.com", 465, use_tls=True),
    "zoho": SmtpServicePreset("smtp.zoho.com", 465, use_tls=True),
    "sendgrid": SmtpServicePreset("smtp.sendgrid.net", 587, use_tls=False),
    "mailgun": SmtpServicePreset("smtp.mailgun.org", 465, use_tls=True),
    "mailhog": SmtpServicePreset("localhost", 1025, use_tls=False, requires_auth=False),
}


class SmtpMailTransport(MailTransport):
    """
    Mail transport that delivers messages via SMTP.

    One connection is opened per message. The transport only holds
    configuration, so a single instance is safely shared by all requests.

    Decision: Servers on port 465 get implicit TLS, everything else is left
    to aiosmtplib's opportunistic STARTTLS.
    """

    def __init__(
        self,
        service: str | None = "gmail",
        username: str | None = None,
        password: str | None = None,
        host: str | None = None,
        port: int | None = None,
        use_tls: bool | None = None,
        timeout: float = 10.0,
    ):
        """
        Initialize the SMTP mail transport.

        Args:
            service: Well-known provider name (gmail, outlook, mailhog, ...)
            username: SMTP authentication username
            password: SMTP authentication password
            host: Relay hostname, overrides the service preset
            port: Relay port, overrides the service preset
            use_tls: Force implicit TLS on or off
            timeout: Connection and command timeout in seconds

        Decision: Bad configuration is not raised here. Startup must succeed
        without credentials; the problem surfaces on verify() and on each send.
        """
        self.service = (service or "").strip().lower()
        self.username = username
        self.password = password
        self.timeout = timeout

        preset = SERVICE_PRESETS.get(self.service)
        self.host = host or (preset.host if preset else None)
        self.port = port or (preset.port if preset else 587)
        if use_tls is not None:
            self.use_tls = use_tls
        elif preset is not None and port is None:
            self.use_tls = preset.use_tls
        else:
            self.use_tls = self.port == 465
        self.requires_auth = preset.requires_auth if preset else False

        logger.info(
            f"SMTP Mail Transport initialized: {self.host}:{self.port} "
            f"(service: {self.service or 'custom'}, tls: {self.use_tls}, "
            f"auth: {'yes' if username else 'no'})"
        )

    @property
    def has_credentials(self) -> bool:
        return bool(self.username and self.password)

    def _check_configuration(self) -> None:
        if not self.host:
            raise MailTransportError(
                f"Unknown email service '{self.service}' and no SMTP host configured"
            )
        if self.requires_auth and not self.has_credentials:
            raise MailTransportError(
                f"Missing credentials for email service '{self.service}'"
            )

    def _client(self) -> aiosmtplib.SMTP:
        return aiosmtplib.SMTP(
            hostname=self.host,
            port=self.port,
            use_tls=self.use_tls,
            timeout=self.timeout,
        )

    def build_mime(self, message: MailMessage) -> MIMEMultipart:
        """
        Build the MIME message.

        The plain text part comes first so clients that render HTML pick the
        last (richest) alternative.
        """
        mime = MIMEMultipart("alternative")
        mime["Subject"] = message.subject
        mime["From"] = message.sender
        mime["To"] = message.recipient

        _, sender_address = parseaddr(message.sender)
        domain = sender_address.rpartition("@")[2] or None
        mime["Message-ID"] = make_msgid(domain=domain)

        if message.text:
            mime.attach(MIMEText(message.text, "plain", _charset="utf-8"))
        mime.attach(MIMEText(message.html, "html", _charset="utf-8"))
        return mime

    async def verify(self) -> None:
        """
        Connect and authenticate without sending anything.

        Raises:
            MailTransportError: If the relay is unreachable or rejects the login
        """
        self._check_configuration()

        try:
            async with self._client() as smtp:
                if self.has_credentials:
                    await smtp.login(self.username, self.password)
        except Exception as e:
            raise MailTransportError(f"SMTP verification failed: {e}") from e

    async def send(self, message: MailMessage) -> DeliveryReceipt:
        """
        Send a message via SMTP.

        Args:
            message: The message to deliver

        Returns:
            DeliveryReceipt with the generated Message-ID

        Raises:
            MailTransportError: On configuration, connection, authentication
                or recipient errors
        """
        self._check_configuration()
        mime = self.build_mime(message)

        try:
            logger.info(f"Sending '{message.subject}' to {message.recipient} via SMTP")

            async with self._client() as smtp:
                if self.has_credentials:
                    await smtp.login(self.username, self.password)

                errors, response = await smtp.send_message(mime)

        except Exception as e:
            logger.error(f"Failed to send email to {message.recipient}: {e}")
            raise MailTransportError(str(e)) from e

        if errors:
            rejected = ", ".join(errors)
            logger.error(f"Relay rejected recipients: {rejected}")
            raise MailTransportError(f"Recipients rejected: {rejected}")

        return DeliveryReceipt(message_id=mime["Message-ID"], response=response)
