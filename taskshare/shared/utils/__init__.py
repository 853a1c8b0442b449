"""Shared utilities: datetime and generators."""

from taskshare.shared.utils.datetime import ensure_utc, utc_now
from taskshare.shared.utils.generators import generate_cuid

__all__ = [
    "generate_cuid",
    "utc_now",
    "ensure_utc",
]
