"""Tests for the requests based API client."""

from unittest.mock import Mock

import pytest
import requests

from room_booking_api.client import RoomBookingAPI


def make_response(status_code=200, payload=None, text=""):
    response = Mock()
    response.status_code = status_code
    response.content = b"{}" if payload is not None else b""
    response.json.return_value = payload
    response.text = text
    if status_code >= 400:
        response.raise_for_status.side_effect = requests.HTTPError(response=response)
    else:
        response.raise_for_status.return_value = None
    return response


@pytest.fixture
def session():
    return Mock(spec=requests.Session)


@pytest.fixture
def api(session):
    return RoomBookingAPI(base_url="http://localhost:3000/", session=session)


def test_login_stores_token_for_protected_calls(api, session):
    session.request.side_effect = [
        make_response(payload={"token": "abc", "user": {"id": 1, "name": "Jane", "email": "j@x.io"}}),
        make_response(payload={"id": 1, "name": "Jane", "email": "j@x.io"}),
    ]

    api.login("j@x.io", "secret")
    me, error = api.me()

    assert error is None
    assert me["id"] == 1
    last_call = session.request.call_args
    assert last_call.kwargs["url"] == "http://localhost:3000/api/me"
    assert last_call.kwargs["headers"] == {"Authorization": "Bearer abc"}


def test_list_rooms_drops_unset_filters(api, session):
    session.request.return_value = make_response(payload=[{"id": 3}])

    rooms, error = api.list_rooms(guests=4, sort="desc")

    assert rooms == [{"id": 3}]
    assert error is None
    assert session.request.call_args.kwargs["params"] == {"guests": 4, "sort": "desc"}


def test_api_error_is_returned_not_raised(api, session):
    session.request.return_value = make_response(400, payload={"message": "Invalid credentials"})

    data, error = api.login("j@x.io", "wrong")

    assert data is None
    assert error == {"status_code": 400, "message": "Invalid credentials"}
    assert api.token is None


def test_transport_error_is_returned(api, session):
    session.request.side_effect = requests.ConnectionError("refused")

    bookings, error = api.list_bookings()

    assert bookings == []
    assert error["status_code"] is None
    assert "refused" in error["message"]


def test_set_booking_contact_sends_patch(api, session):
    session.request.return_value = make_response(payload={"message": "Booking updated", "booking": {"id": 5}})

    data, error = api.set_booking_contact(5, 9)

    assert error is None
    kwargs = session.request.call_args.kwargs
    assert kwargs["method"] == "PATCH"
    assert kwargs["url"] == "http://localhost:3000/api/bookings/5"
    assert kwargs["json"] == {"contactId": 9}


def test_cancel_booking_reports_success(api, session):
    session.request.return_value = make_response(payload={"message": "Booking cancelled"})

    success, error = api.cancel_booking(5)

    assert success is True
    assert error is None
    assert session.request.call_args.kwargs["method"] == "DELETE"
