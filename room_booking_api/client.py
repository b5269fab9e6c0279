"""Room booking API client.

A thin wrapper around the HTTP API built on ``requests``.  Every
method returns a tuple ``(data, error)``: on success ``data`` holds
the parsed JSON response and ``error`` is ``None``; on failure
``data`` is empty and ``error`` is a dictionary with the keys
``status_code`` and ``message``.  Expected API errors never raise.

Calling :meth:`RoomBookingAPI.login` stores the returned token, after
which protected endpoints (``/me`` and bookings) are authenticated
automatically::

    api = RoomBookingAPI(base_url="http://localhost:3000")
    api.register("Jane", "jane@example.com", "secret")
    api.login("jane@example.com", "secret")
    rooms, error = api.list_rooms(guests=2, sort="asc")
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple

import requests


logger = logging.getLogger(__name__)

Error = Dict[str, Any]


class RoomBookingAPI:
    """Client for the room booking REST API."""

    def __init__(
        self,
        *,
        base_url: str,
        token: Optional[str] = None,
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL of the server, e.g. ``http://localhost:3000``.
                The ``/api`` prefix is added by the client.
            token: Optional bearer token for protected endpoints.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Request timeout in seconds.
        """
        self.base_url = base_url.rstrip("/")
        self.token = token
        self.session = session or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Low level HTTP helpers
    # ------------------------------------------------------------------
    def _request(
        self, method: str, path: str, *, params: Dict[str, Any] | None = None,
        json_body: Any | None = None
    ) -> Tuple[Optional[Any], Optional[Error]]:
        """Perform an HTTP request to the API.

        Args:
            method: HTTP method (``GET``, ``POST``, ``PATCH``, ``DELETE``).
            path: Path below ``/api`` (e.g. ``/rooms``).
            params: Query parameters; ``None`` values are dropped.
            json_body: JSON body to send with the request.
        Returns:
            A tuple ``(data, error)``.
        """
        url = f"{self.base_url}/api{path}"
        headers: Dict[str, str] = {}
        if self.token:
            headers["Authorization"] = f"Bearer {self.token}"
        if params:
            params = {k: v for k, v in params.items() if v is not None}
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
                params=params or None,
                json=json_body,
                headers=headers,
                timeout=self.timeout,
            )
            response.raise_for_status()
            if response.content:
                return response.json(), None
            return None, None
        except requests.HTTPError as exc:
            status = exc.response.status_code if exc.response is not None else None
            message = ""
            if exc.response is not None:
                try:
                    message = exc.response.json().get("message", "")
                except ValueError:
                    message = exc.response.text
            if not message:
                message = str(exc)
            logger.error("API request failed (%s): %s", status, message)
            return None, {"status_code": status, "message": message}
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

    # ------------------------------------------------------------------
    # Users
    # ------------------------------------------------------------------
    def register(self, name: str, email: str, password: str) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("POST", "/register", json_body={"name": name, "email": email, "password": password})

    def login(self, email: str, password: str) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Log in and remember the returned token for later requests."""
        data, error = self._request("POST", "/login", json_body={"email": email, "password": password})
        if data and data.get("token"):
            self.token = data["token"]
        return data, error

    def me(self) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("GET", "/me")

    # ------------------------------------------------------------------
    # Rooms
    # ------------------------------------------------------------------
    def list_rooms(
        self,
        guests: Optional[int] = None,
        check_in_date: Optional[str] = None,
        sort: Optional[str] = None,
    ) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        """Retrieve rooms, optionally filtered and sorted by price."""
        data, error = self._request(
            "GET", "/rooms", params={"guests": guests, "checkInDate": check_in_date, "sort": sort}
        )
        return (data if isinstance(data, list) else []), error

    def get_room(self, room_id: Any) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("GET", f"/rooms/{room_id}")

    # ------------------------------------------------------------------
    # Bookings
    # ------------------------------------------------------------------
    def list_bookings(self) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        data, error = self._request("GET", "/bookings")
        return (data if isinstance(data, list) else []), error

    def create_booking(self, room_id: Any, checkin: str, checkout: str) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request(
            "POST", "/bookings", json_body={"roomId": room_id, "checkin": checkin, "checkout": checkout}
        )

    def set_booking_contact(self, booking_id: Any, contact_id: Any) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("PATCH", f"/bookings/{booking_id}", json_body={"contactId": contact_id})

    def cancel_booking(self, booking_id: Any) -> Tuple[bool, Optional[Error]]:
        """Cancel a booking.

        Returns:
            A tuple ``(success, error)``.  ``success`` only means the
            server accepted the request; it does not confirm that a
            booking was removed.
        """
        _, error = self._request("DELETE", f"/bookings/{booking_id}")
        return error is None, error

    # ------------------------------------------------------------------
    # Contacts
    # ------------------------------------------------------------------
    def list_contacts(self) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        data, error = self._request("GET", "/contacts")
        return (data if isinstance(data, list) else []), error

    def get_contact(self, contact_id: Any) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("GET", f"/contacts/{contact_id}")

    def create_contact(
        self, title: str, name: str, email: str, user_id: Any = None
    ) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request(
            "POST",
            "/contacts",
            json_body={"title": title, "name": name, "email": email, "userId": user_id},
        )
