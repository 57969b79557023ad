"""Shared fixtures: in-memory Mongo, recorded emails and an API client."""
import mongomock
import pytest
from fastapi.testclient import TestClient

from neighbourly_api.app.core import db
from neighbourly_api.app.main import app
from neighbourly_api.app.services.mail_service import MailService


@pytest.fixture(autouse=True)
def mongo():
    """Fresh in-memory MongoDB for each test."""
    client = mongomock.MongoClient()
    db.set_client(client)
    yield client
    db.set_client(None)


@pytest.fixture
def database(mongo):
    return db.get_database()


@pytest.fixture
def sent_emails(monkeypatch):
    """Capture emails instead of talking to an SMTP relay."""
    sent = []

    async def fake_send_email(address, subject, html):
        sent.append({"to": address, "subject": subject, "html": html})
        return True

    monkeypatch.setattr(MailService, "send_email", fake_send_email)
    return sent


@pytest.fixture
def client(mongo, sent_emails):
    with TestClient(app) as client:
        yield client


@pytest.fixture
def login(client):
    """Return a helper that obtains a token cookie for an email."""

    def _login(email):
        response = client.post("/jwt", json={"email": email})
        assert response.status_code == 200
        return response

    return _login


@pytest.fixture
def add_user(database):
    def _add_user(email, role="resident", **fields):
        doc = {"email": email, "name": email.split("@")[0], "role": role, **fields}
        database["users"].insert_one(doc)
        return doc

    return _add_user


@pytest.fixture
def as_admin(client, add_user, login):
    add_user("admin@example.com", role="admin")
    login("admin@example.com")
    return client


@pytest.fixture
def as_worker(client, add_user, login):
    add_user("worker@example.com", role="worker")
    login("worker@example.com")
    return client


@pytest.fixture
def as_resident(client, add_user, login):
    add_user("resident@example.com", role="resident")
    login("resident@example.com")
    return client
