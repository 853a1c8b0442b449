"""Security adapters: JWT verification for the caller identity."""

from taskshare.infrastructure.security.jwt import create_access_token, verify_token

__all__ = ["create_access_token", "verify_token"]
