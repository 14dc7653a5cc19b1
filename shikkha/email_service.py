"""
Transactional Email Service
Composes account/system notifications and hands them to the configured transport.
Delivery failures are logged on the error channel and never raised to the caller.
"""

from datetime import datetime
from email.utils import formataddr
from typing import Optional

from .config import MailSettings
from .email_templates import (
    ComposedEmail,
    admin_creation_email_template,
    ban_notification_email_template,
    login_verification_email_template,
    report_confirmation_email_template,
    reset_password_email_template,
    support_message_email_template,
    verification_email_template,
    warning_email_template,
    welcome_email_template,
)
from .email_transport import Accepted, DispatchResult, EmailTransport, Failed, OutboundMessage
from .logger import error_logger, logger


class EmailService:
    """Notification API backed by an injected EmailTransport"""

    def __init__(self, transport: EmailTransport, settings: MailSettings):
        self.transport = transport
        self.settings = settings
        self.sender = formataddr((settings.from_name, settings.from_address))
        # Message text is branded with the same name the mail is sent from
        self.brand = settings.from_name

    async def dispatch(self, message: OutboundMessage) -> DispatchResult:
        """Submit one message and log the outcome. Returns the result for inspection."""
        try:
            result = await self.transport.submit(message, self.sender)
        except Exception as e:
            result = Failed(error=e)

        if isinstance(result, Accepted):
            logger.info(f"📧 Mail sent successfully: {list(result.accepted)}")
        else:
            error_logger.error(
                f"❌ Email to {message.to} failed ({message.subject}): {result.error}",
                exc_info=result.error,
            )
        return result

    async def send_email(self, message: OutboundMessage) -> None:
        await self.dispatch(message)

    async def _send(self, to: str, composed: ComposedEmail) -> None:
        await self.send_email(OutboundMessage(to=to, subject=composed.subject, body=composed.body))

    async def send_verification_email(self, to: str, otp: str) -> None:
        await self._send(to, verification_email_template(otp, brand=self.brand))

    async def send_reset_password_email(self, to: str, otp: str) -> None:
        await self._send(to, reset_password_email_template(otp, brand=self.brand))

    async def send_login_verification_email(self, to: str, otp: str) -> None:
        await self._send(to, login_verification_email_template(otp, brand=self.brand))

    async def send_welcome_email(self, to: str, password: str) -> None:
        await self._send(to, welcome_email_template(password, brand=self.brand))

    async def send_admin_creation_email(
        self,
        email: str,
        role: str,
        password: str,
        message: Optional[str] = None,
    ) -> None:
        """Tell a new admin/super admin about their role and credentials"""
        await self._send(
            email,
            admin_creation_email_template(email, role, password, message, brand=self.brand),
        )

    async def send_support_message_email(self, user_email: str, user_name: str, message: str) -> None:
        """Forward a user's support request to the operator inbox (never to user_email)"""
        await self._send(
            self.settings.support_email,
            support_message_email_template(user_email, user_name, message),
        )

    async def send_warning_email(self, to: str, user_name: str, warning_message: str) -> None:
        await self._send(to, warning_email_template(user_name, warning_message, brand=self.brand))

    async def send_ban_notification_email(
        self,
        to: str,
        user_name: str,
        ban_message: str,
        ban_until: Optional[datetime],
    ) -> None:
        """ban_until=None means the ban is permanent"""
        await self._send(to, ban_notification_email_template(user_name, ban_message, ban_until))

    async def send_report_confirmation(self, to: str, user_name: str) -> None:
        await self._send(to, report_confirmation_email_template(user_name, brand=self.brand))
