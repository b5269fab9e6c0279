"""
HTTP routes of the API.

``router`` aggregates the per‑resource routers defined in
``endpoints``; the application mounts it under ``/api``.
"""
