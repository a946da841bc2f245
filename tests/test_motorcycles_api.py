from __future__ import annotations

from app.models.booking import Booking, BookingStatus
from app.models.motorcycle import MotorcycleStatus

from .factories import JUNE_10, JUNE_12, make_booking, make_motorcycle, motorcycle_payload

URL = "/api/v1/motorcycles"


class TestCatalog:
    def test_list_is_public(self, public_client, db):
        make_motorcycle(db)
        make_motorcycle(db, name="NMAX", brand="Yamaha", type="Maxi Scooter")
        resp = public_client.get(URL)
        assert resp.status_code == 200
        assert resp.json()["meta"]["total"] == 2

    def test_search_matches_brand_case_insensitive(self, public_client, db):
        make_motorcycle(db)
        make_motorcycle(db, name="NMAX", brand="Yamaha", type="Maxi Scooter")
        resp = public_client.get(URL, params={"search": "yamaha"})
        data = resp.json()["data"]
        assert [m["name"] for m in data] == ["NMAX"]

    def test_status_filter(self, public_client, db):
        make_motorcycle(db)
        make_motorcycle(db, name="Beat", status=MotorcycleStatus.UNAVAILABLE)
        resp = public_client.get(URL, params={"status": "unavailable"})
        assert [m["name"] for m in resp.json()["data"]] == ["Beat"]

    def test_unknown_status_filter(self, public_client):
        resp = public_client.get(URL, params={"status": "broken"})
        assert resp.status_code == 422
        assert resp.json()["error"]["code"] == "INVALID_STATUS"

    def test_detail(self, public_client, db):
        m = make_motorcycle(db)
        resp = public_client.get(f"{URL}/{m.id}")
        assert resp.status_code == 200
        assert resp.json()["data"]["pricePerDay"] == 100000.0

    def test_detail_missing(self, public_client):
        assert public_client.get(f"{URL}/404").status_code == 404

    def test_booked_dates(self, public_client, db):
        m = make_motorcycle(db)
        make_booking(db, m, JUNE_10, JUNE_12, BookingStatus.APPROVED)
        resp = public_client.get(f"{URL}/{m.id}/booked-dates")
        assert resp.status_code == 200
        assert resp.json()["data"] == [{"startDate": "2025-06-10", "endDate": "2025-06-12"}]


class TestAdminCrud:
    def test_create_requires_token(self, public_client):
        assert public_client.post(URL, json=motorcycle_payload()).status_code == 401

    def test_create(self, admin_client):
        resp = admin_client.post(URL, json=motorcycle_payload())
        assert resp.status_code == 201
        data = resp.json()["data"]
        assert data["name"] == "NMAX 155"
        assert data["pricePerDay"] == 150000.0
        assert data["status"] == "available"

    def test_negative_price_rejected(self, admin_client):
        resp = admin_client.post(URL, json=motorcycle_payload(pricePerDay=-1))
        assert resp.status_code == 422
        assert resp.json()["message"] == "Price per day cannot be negative"

    def test_blank_name_rejected(self, admin_client):
        resp = admin_client.post(URL, json=motorcycle_payload(name=" "))
        assert resp.status_code == 422
        assert resp.json()["error"]["field"] == "name"

    def test_partial_update(self, admin_client, db):
        m = make_motorcycle(db)
        resp = admin_client.put(f"{URL}/{m.id}", json={"status": "unavailable", "pricePerDay": 90000})
        assert resp.status_code == 200
        data = resp.json()["data"]
        assert data["status"] == "unavailable"
        assert data["pricePerDay"] == 90000.0
        assert data["name"] == "Vario 160"

    def test_update_missing(self, admin_client):
        assert admin_client.put(f"{URL}/9", json={"name": "X"}).status_code == 404

    def test_delete_cascades_to_bookings(self, admin_client, db):
        m = make_motorcycle(db)
        make_booking(db, m)
        resp = admin_client.delete(f"{URL}/{m.id}")
        assert resp.status_code == 200
        db.expire_all()
        assert db.query(Booking).count() == 0
