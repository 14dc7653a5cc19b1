"""
Plain-text Email Templates
Each template returns the subject line and body for one kind of account/system notification
"""

from datetime import datetime, timezone
from email.utils import format_datetime
from typing import NamedTuple, Optional

from .config import APP_NAME

OTP_EXPIRY_MINUTES = 30


class ComposedEmail(NamedTuple):
    subject: str
    body: str


def format_http_date(value: datetime) -> str:
    """Format a datetime as an HTTP-date, e.g. 'Tue, 15 Nov 1994 08:12:31 GMT'. Naive values are UTC."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return format_datetime(value.astimezone(timezone.utc), usegmt=True)


def _otp_notice(action: str) -> str:
    return (
        f"{action} The code expires in {OTP_EXPIRY_MINUTES} minutes and can only be used once.\n"
        "\n"
        "This code is unique to you. Please don't share it with anyone."
    )


def verification_email_template(otp: str, brand: str = APP_NAME) -> ComposedEmail:
    subject = f"{brand} - Verify Your Email Address"
    body = f"""{subject}

Here's your verification code: {otp}

{_otp_notice("To verify your account, just enter this code in your app.")}"""
    return ComposedEmail(subject, body)


def reset_password_email_template(otp: str, brand: str = APP_NAME) -> ComposedEmail:
    subject = f"{brand} - Reset Your Password"
    body = f"""{subject}

Here's your reset password code: {otp}

{_otp_notice("To verify your email, just enter this code in your app.")}"""
    return ComposedEmail(subject, body)


def login_verification_email_template(otp: str, brand: str = APP_NAME) -> ComposedEmail:
    subject = f"{brand} - Verify Your Login"
    body = f"""{subject}

Your login verification code: {otp}

{_otp_notice("To complete your login, please enter this code in the app.")}"""
    return ComposedEmail(subject, body)


def welcome_email_template(password: str, brand: str = APP_NAME) -> ComposedEmail:
    subject = f"{brand} - Welcome to the Platform!"
    body = f"""{subject}

Welcome to {brand}!

Your password is: {password}"""
    return ComposedEmail(subject, body)


def admin_creation_email_template(
    email: str,
    role: str,
    password: str,
    message: Optional[str] = None,
    brand: str = APP_NAME,
) -> ComposedEmail:
    """
    Role-grant email for new admins/super admins.
    The Note line is always present; it is left blank when no message is given.
    """
    note = message if message is not None else ""
    subject = f"{brand} - Congratulations! You are now an {role}"
    body = f"""{subject}

Welcome to {brand}!

Congratulations! You've been granted the role of {role} in our system.

To get started, please use the following credentials:
Email: {email}
Password: {password}

Note: {note}

Feel free to reach out if you have any questions or need assistance. We're excited to have you on board!

Best regards,
The {brand} Team"""
    return ComposedEmail(subject, body)


def support_message_email_template(user_email: str, user_name: str, message: str) -> ComposedEmail:
    subject = f"Support Request from {user_name}"
    body = f"""{subject}

New Support Message

From: {user_name} ({user_email})

Message:
{message}"""
    return ComposedEmail(subject, body)


def warning_email_template(user_name: str, warning_message: str, brand: str = APP_NAME) -> ComposedEmail:
    subject = f"{brand} - Important Warning Notification"
    body = f"""{subject}

Dear User {user_name},

We have reviewed your recent activity on the {brand} platform and found that it violates our community guidelines. Please review the details below:

⚠️ Warning: {warning_message}

If you continue to violate our guidelines, further actions such as account suspension may be taken. Please ensure you follow our terms of service."""
    return ComposedEmail(subject, body)


def ban_notification_email_template(
    user_name: str,
    ban_message: str,
    ban_until: Optional[datetime],
) -> ComposedEmail:
    subject = "Important: Your Account Has Been Banned"
    expiry = format_http_date(ban_until) if ban_until else "Permanently"
    body = f"""{subject}

Dear {user_name},

{ban_message}

Ban Expiry: {expiry}"""
    return ComposedEmail(subject, body)


def report_confirmation_email_template(user_name: str, brand: str = APP_NAME) -> ComposedEmail:
    subject = "Thank You for Your Report!"
    body = f"""{subject}

Hello {user_name},

We appreciate you taking the time to submit a report. Your feedback is valuable to us, and we'll review it as soon as possible. Rest assured, we'll take the necessary action and keep you updated.

If you have any more information to share or need assistance, feel free to reach out.

Thank you for helping us improve!

Best regards,
The {brand} Team"""
    return ComposedEmail(subject, body)
