"""
Application package initializer.

The code is split by concern: ``core`` holds configuration, logging,
errors, security and the JSON document store; ``schemas`` defines the
request and response bodies; ``services`` implements the behaviour of
each resource; ``api`` exposes the HTTP routes.
"""

from .main import app  # noqa: F401
