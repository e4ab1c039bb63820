"""
Domain exceptions.

HTTP-facing validation errors are raised as ``HTTPException`` directly from
services; the classes here cover failures that need a different response
shape than FastAPI's ``{"detail": ...}``.
"""


class TrackerError(Exception):
    """Base class for application errors."""


class SnapshotError(TrackerError):
    """The monthly snapshot could not be completed.

    The message is returned to the caller verbatim in the ``error`` field.
    """
