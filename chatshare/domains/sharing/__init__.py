"""
Sharing Domain - Owner-controlled chat sharing with live quotas.

This domain handles:
- Share key parsing and ownership checks
- Quota computation from store listings
- Create / read / delete over an external object store
"""

from .contracts import ObjectStore
from .gateway import ShareGateway, parse_share_key
from .models import ObjectInfo, QuotaState, ShareKey, ShareResult, StoredObject
from .quota import compute_quota, enforce_quota

__all__ = [
    # Contracts
    "ObjectStore",
    # Models
    "ShareKey",
    "ObjectInfo",
    "StoredObject",
    "QuotaState",
    "ShareResult",
    # Implementations
    "ShareGateway",
    "parse_share_key",
    "compute_quota",
    "enforce_quota",
]
