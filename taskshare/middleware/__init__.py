"""ASGI middleware."""

from taskshare.middleware.request_id import RequestIDMiddleware

__all__ = ["RequestIDMiddleware"]
