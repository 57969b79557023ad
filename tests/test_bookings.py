"""Tests for the booking endpoints and booking notifications."""
from bson import ObjectId

from neighbourly_api.app.services import mail_service
from neighbourly_api.app.services.mail_service import MailService


# The real classmethod, before conftest swaps in the recorder
REAL_SEND_EMAIL = MailService.__dict__["send_email"]


def _booking(resident_email="resident@example.com", worker_email="worker@example.com"):
    return {
        "resident": {"name": "Rita", "email": resident_email},
        "worker": {"name": "Walt", "email": worker_email},
        "service": {"title": "Fix sink", "worker": {"name": "Walt", "email": worker_email}},
        "date": "2024-05-01",
    }


class TestCreateBooking:
    def test_stores_booking_and_notifies_both_sides(self, client, database, sent_emails):
        response = client.post("/booking", json=_booking())

        assert response.status_code == 200
        booking_id = response.json()["insertedId"]
        stored = database["bookings"].find_one({"_id": ObjectId(booking_id)})
        assert stored["date"] == "2024-05-01"
        assert stored["resident"]["email"] == "resident@example.com"

        assert [(m["to"], m["subject"]) for m in sent_emails] == [
            ("resident@example.com", "Booking Successfull"),
            ("worker@example.com", "Yay! You are booked!"),
        ]
        assert "Rita's address" in sent_emails[1]["html"]

    def test_missing_worker_email_skips_worker_notification(self, client, sent_emails):
        payload = _booking()
        del payload["worker"]

        response = client.post("/booking", json=payload)

        assert response.status_code == 200
        assert [m["to"] for m in sent_emails] == ["resident@example.com"]

    def test_bad_resident_address_still_notifies_worker(self, client, monkeypatch):
        delivered = []

        async def fake_send(message, **kwargs):
            delivered.append(message["To"])
            return {}, "OK"

        monkeypatch.setattr(MailService, "send_email", REAL_SEND_EMAIL)
        monkeypatch.setattr(mail_service.settings, "transporter_email", "noreply@neighbourly.test")
        monkeypatch.setattr(mail_service.aiosmtplib, "send", fake_send)

        response = client.post(
            "/booking",
            json=_booking(resident_email="rita@example.com\nBcc: x@y.z", worker_email="walt@example.com"),
        )

        assert response.status_code == 200
        assert delivered == ["walt@example.com"]


class TestMyBookings:
    def test_lists_residents_bookings(self, as_resident, database):
        database["bookings"].insert_many([_booking(), _booking(resident_email="other@example.com")])

        response = as_resident.get("/my-bookings/resident@example.com")

        assert response.status_code == 200
        assert [b["resident"]["email"] for b in response.json()] == ["resident@example.com"]


class TestManageBookings:
    def test_lists_bookings_for_workers_services(self, as_worker, database):
        database["bookings"].insert_many([_booking(), _booking(worker_email="other@example.com")])

        response = as_worker.get("/manage-bookings/worker@example.com")

        assert response.status_code == 200
        bookings = response.json()
        assert len(bookings) == 1
        assert bookings[0]["service"]["worker"]["email"] == "worker@example.com"

    def test_resident_is_rejected(self, as_resident):
        assert as_resident.get("/manage-bookings/worker@example.com").status_code == 401


class TestDeleteBooking:
    def test_deletes_booking(self, as_resident, database):
        inserted = database["bookings"].insert_one(_booking()).inserted_id

        response = as_resident.delete(f"/booking/{inserted}")

        assert response.status_code == 200
        assert response.json()["deletedCount"] == 1
        assert database["bookings"].count_documents({}) == 0

    def test_unknown_id_deletes_nothing(self, as_resident):
        response = as_resident.delete(f"/booking/{ObjectId()}")

        assert response.json()["deletedCount"] == 0

    def test_requires_token(self, client, database):
        inserted = database["bookings"].insert_one(_booking()).inserted_id

        assert client.delete(f"/booking/{inserted}").status_code == 401
