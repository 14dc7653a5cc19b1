"""
SMTP transport for outbound email
Submits a single plain-text message per call and reports the outcome as a result value
"""

import asyncio
import smtplib
import ssl
from dataclasses import dataclass, field
from email.mime.text import MIMEText
from email.utils import formataddr, parseaddr
from typing import Mapping, Optional, Protocol, Union

from .config import MailSettings
from .logger import logger

PRIORITY_HEADERS = {
    "X-Priority": "1",
    "X-MSMail-Priority": "High",
    "Importance": "high",
}


@dataclass(frozen=True)
class OutboundMessage:
    """
    One plain-text email. `headers` may carry extra headers; the priority
    headers are always merged on top and cannot be overridden or removed.
    """

    to: str
    subject: str
    body: str
    headers: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self):
        object.__setattr__(self, "headers", {**self.headers, **PRIORITY_HEADERS})


@dataclass(frozen=True)
class Accepted:
    accepted: tuple[str, ...]


@dataclass(frozen=True)
class Failed:
    error: Exception


DispatchResult = Union[Accepted, Failed]


class EmailTransport(Protocol):
    """Anything that can submit an OutboundMessage"""

    async def submit(self, message: OutboundMessage, sender: str) -> DispatchResult: ...


class SMTPTransport:
    """Sends mail through the configured SMTP server, one connection per message"""

    def __init__(self, settings: MailSettings, verify_on_start: bool = True):
        self.settings = settings
        self.sender = formataddr((settings.from_name, settings.from_address))

        if verify_on_start and not settings.is_test:
            self.verify()

    def _connect(self) -> smtplib.SMTP:
        host = self.settings.host
        port = self.settings.port
        timeout = self.settings.timeout

        implicit_tls = self.settings.secure or port == 465
        if implicit_tls:
            context = ssl.create_default_context()
            server = smtplib.SMTP_SSL(host, port, context=context, timeout=timeout)
        else:
            server = smtplib.SMTP(host, port, timeout=timeout)

        try:
            if not implicit_tls:
                server.ehlo()
                if server.has_extn("starttls"):
                    server.starttls(context=ssl.create_default_context())
                    server.ehlo()

            if self.settings.username:
                server.login(self.settings.username, self.settings.password or "")
        except BaseException:
            server.close()
            raise
        return server

    def verify(self) -> bool:
        """
        Check that the SMTP server is reachable and accepts our credentials.
        Only logs the outcome; never raises.
        """
        try:
            server = self._connect()
            self._quit(server)
        except Exception as e:
            logger.warning(
                "⚠️ Unable to connect to email server. "
                f"Make sure you have configured the SMTP options in .env ({e})"
            )
            return False

        logger.info(f"📧 Connected to email server {self.settings.host}:{self.settings.port}")
        return True

    @staticmethod
    def _quit(server: smtplib.SMTP) -> None:
        # A failed QUIT does not undo a delivered message
        try:
            server.quit()
        except (smtplib.SMTPException, OSError):
            server.close()

    def _build_mime(self, message: OutboundMessage, sender: str) -> MIMEText:
        msg = MIMEText(message.body, "plain", "utf-8")
        msg["From"] = sender
        msg["To"] = message.to
        msg["Subject"] = message.subject
        for name, value in {**message.headers, **PRIORITY_HEADERS}.items():
            msg[name] = value
        return msg

    def _send(self, message: OutboundMessage, sender: str) -> tuple[str, ...]:
        msg = self._build_mime(message, sender)
        envelope_from = parseaddr(sender)[1] or self.settings.from_address

        server = self._connect()
        try:
            refused = server.sendmail(envelope_from, [message.to], msg.as_string())
        finally:
            self._quit(server)

        return tuple(addr for addr in [message.to] if addr not in refused)

    async def submit(self, message: OutboundMessage, sender: Optional[str] = None) -> DispatchResult:
        try:
            accepted = await asyncio.to_thread(self._send, message, sender or self.sender)
        except Exception as e:
            return Failed(error=e)
        return Accepted(accepted=accepted)
