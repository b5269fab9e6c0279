"""Tests for room listing, filtering and lookup."""

from tests.conftest import ROOMS, read_collection


def ids(response):
    return [room["id"] for room in response.json()]


class TestListRooms:
    def test_lists_all_rooms_in_stored_order(self, client):
        response = client.get("/api/rooms")

        assert response.status_code == 200
        assert ids(response) == [1, 2, 3, 4, 5]

    def test_room_fields_pass_through(self, client):
        room = client.get("/api/rooms").json()[0]

        assert room == ROOMS[0]

    def test_guests_filter_with_descending_price_keeps_ties_stable(self, client):
        response = client.get("/api/rooms", params={"guests": 4, "sort": "desc"})

        assert ids(response) == [3, 4, 5]
        assert all(room["maxGuests"] >= 4 for room in response.json())

    def test_ascending_price(self, client):
        response = client.get("/api/rooms", params={"sort": "asc"})

        assert ids(response) == [1, 2, 4, 5, 3]

    def test_unknown_sort_keeps_stored_order(self, client):
        response = client.get("/api/rooms", params={"sort": "price"})

        assert ids(response) == [1, 2, 3, 4, 5]

    def test_check_in_date_requires_exact_match(self, client):
        response = client.get("/api/rooms", params={"checkInDate": "2024-06-01"})

        assert ids(response) == [1, 3, 5]

    def test_filters_combine(self, client):
        response = client.get("/api/rooms", params={"checkInDate": "2024-06-01", "guests": 2, "sort": "asc"})

        assert ids(response) == [5, 3]

    def test_listing_does_not_modify_the_store(self, client, data_dir):
        client.get("/api/rooms", params={"guests": 4, "sort": "desc"})

        assert read_collection(data_dir, "rooms") == ROOMS

    def test_non_numeric_guests_is_400(self, client):
        response = client.get("/api/rooms", params={"guests": "many"})

        assert response.status_code == 400
        assert "guests" in response.json()["message"]


class TestGetRoom:
    def test_returns_room(self, client):
        response = client.get("/api/rooms/3")

        assert response.status_code == 200
        assert response.json()["pricePerNight"] == 180

    def test_unknown_room_is_404(self, client):
        response = client.get("/api/rooms/99")

        assert response.status_code == 404
        assert response.json() == {"message": "Room not found"}

    def test_non_numeric_id_is_400_naming_the_segment(self, client):
        response = client.get("/api/rooms/abc")

        assert response.status_code == 400
        message = response.json()["message"]
        assert "abc" in message
        assert "room_id" not in message


def test_corrupt_rooms_collection_is_500(client, data_dir):
    (data_dir / "rooms.json").write_text("oops", encoding="utf-8")

    response = client.get("/api/rooms")

    assert response.status_code == 500
    assert "unavailable" in response.json()["message"]
