"""Shared utilities: datetime, id generation, logging.

Used by domain, application, and infrastructure. No business logic.
"""

from taskshare.shared.utils import ensure_utc, generate_cuid, utc_now

__all__ = [
    "ensure_utc",
    "generate_cuid",
    "utc_now",
]
