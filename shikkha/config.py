import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

# Load .env from project root
env_path = Path(__file__).resolve().parent.parent / ".env"
load_dotenv(dotenv_path=env_path)

# "development", "production" or "test" - test skips the SMTP self-check
ENVIRONMENT = os.getenv("ENVIRONMENT", "development")
APP_NAME = os.getenv("APP_NAME", "Shikkha Pro")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./shikkha.db")

# SMTP Configuration
SMTP_HOST = os.getenv("SMTP_HOST", "localhost")
SMTP_PORT = int(os.getenv("SMTP_PORT", "587"))
SMTP_USERNAME = os.getenv("SMTP_USERNAME")
SMTP_PASSWORD = os.getenv("SMTP_PASSWORD")
# Implicit TLS on connect; STARTTLS is still negotiated when the server offers it
SMTP_SECURE = os.getenv("SMTP_SECURE", "false").lower() == "true"
SMTP_TIMEOUT = float(os.getenv("SMTP_TIMEOUT", "30"))

EMAIL_FROM = os.getenv("EMAIL_FROM", "noreply@shikkhapro.com")
# Operator inbox for support requests; falls back to the sender address
SUPPORT_EMAIL = os.getenv("SUPPORT_EMAIL") or EMAIL_FROM


@dataclass(frozen=True)
class MailSettings:
    """SMTP and sender configuration, fixed at startup"""

    host: str = SMTP_HOST
    port: int = SMTP_PORT
    username: Optional[str] = SMTP_USERNAME
    password: Optional[str] = SMTP_PASSWORD
    secure: bool = SMTP_SECURE
    timeout: float = SMTP_TIMEOUT
    from_address: str = EMAIL_FROM
    from_name: str = APP_NAME
    support_email: str = SUPPORT_EMAIL
    environment: str = ENVIRONMENT

    @classmethod
    def from_env(cls) -> "MailSettings":
        return cls()

    @property
    def is_test(self) -> bool:
        return self.environment == "test"
