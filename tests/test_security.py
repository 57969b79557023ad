"""Unit tests for token signing and document helpers."""
import pytest
from bson import ObjectId

from neighbourly_api.app.core import security
from neighbourly_api.app.core.db import parse_object_id, serialize_document


class TestAccessToken:
    def test_round_trip_keeps_claims(self):
        token = security.create_access_token({"email": "a@example.com", "name": "A"})

        claims = security.decode_access_token(token)

        assert claims["email"] == "a@example.com"
        assert claims["name"] == "A"
        assert "exp" in claims

    def test_default_lifetime_is_a_year(self, monkeypatch):
        monkeypatch.setattr(security.time, "time", lambda: 1_000_000)

        claims = security.decode_access_token(security.create_access_token({"email": "a@example.com"}))

        assert claims["exp"] == 1_000_000 + 365 * 24 * 60 * 60

    def test_tampered_payload_is_rejected(self):
        token = security.create_access_token({"email": "a@example.com"})
        forged = security.create_access_token({"email": "admin@example.com"})
        header, _, signature = token.split(".")
        payload = forged.split(".")[1]

        assert security.decode_access_token(f"{header}.{payload}.{signature}") is None

    def test_other_secret_is_rejected(self, monkeypatch):
        token = security.create_access_token({"email": "a@example.com"})
        monkeypatch.setattr(security.settings, "secret_key", "another-secret")

        assert security.decode_access_token(token) is None

    @pytest.mark.parametrize("token", ["", "a.b", "a.b.c.d", "%%%.%%%.%%%"])
    def test_malformed_tokens_are_rejected(self, token):
        assert security.decode_access_token(token) is None


class TestObjectIds:
    def test_parses_hex_id(self):
        oid = ObjectId()

        assert parse_object_id(str(oid)) == oid

    def test_rejects_malformed_id(self):
        with pytest.raises(ValueError, match="Invalid id: xyz"):
            parse_object_id("xyz")

    def test_serializes_nested_ids(self):
        oid, other = ObjectId(), ObjectId()

        result = serialize_document({"_id": oid, "refs": [other, {"id": oid}], "n": 1})

        assert result == {"_id": str(oid), "refs": [str(other), {"id": str(oid)}], "n": 1}
