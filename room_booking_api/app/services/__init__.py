"""
Service layer abstraction.

Each service encapsulates the behaviour of one resource on top of the
JSON document store so that API handlers stay thin.
"""
