"""
Endpoint modules.

Each module in this package defines an APIRouter for one resource
(users, rooms, bookings, contacts).  They are aggregated in
``api/router.py``.
"""
