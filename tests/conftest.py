"""Pytest configuration for the Shikkha backend tests."""

import os

# Must be set before the shikkha package is imported
os.environ["ENVIRONMENT"] = "test"
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["EMAIL_FROM"] = "noreply@shikkhapro.test"
os.environ["SUPPORT_EMAIL"] = "support@shikkhapro.test"
os.environ["APP_NAME"] = "Shikkha Pro"

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy import create_engine  # noqa: E402
from sqlalchemy.orm import sessionmaker  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

from shikkha.config import MailSettings  # noqa: E402
from shikkha.database import Base, get_db  # noqa: E402
from shikkha.email_service import EmailService  # noqa: E402
from shikkha.main import create_app  # noqa: E402
from tests.fakes.fake_transport import RecordingTransport  # noqa: E402


@pytest.fixture
def mail_settings() -> MailSettings:
    return MailSettings(
        host="smtp.test",
        port=587,
        username="mailer",
        password="secret",
        secure=False,
        timeout=5,
        from_address="noreply@shikkhapro.test",
        from_name="Shikkha Pro",
        support_email="support@shikkhapro.test",
        environment="test",
    )


@pytest.fixture
def transport() -> RecordingTransport:
    return RecordingTransport()


@pytest.fixture
def email_service(transport: RecordingTransport, mail_settings: MailSettings) -> EmailService:
    return EmailService(transport, mail_settings)


@pytest.fixture
def db_session_factory():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    factory = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    yield factory
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def client(transport, mail_settings, db_session_factory):
    app = create_app(settings=mail_settings, transport=transport)

    def _override_get_db():
        db = db_session_factory()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = _override_get_db
    return TestClient(app)
