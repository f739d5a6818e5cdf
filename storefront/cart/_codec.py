"""
Cart serialization — `{productId: qty}` as a JSON object.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping

from storefront._types import ProductId

logger = logging.getLogger(__name__)


def encode(entries: Mapping[ProductId, int]) -> str:
    return json.dumps(dict(entries), separators=(",", ":"))


def decode(raw: str | None) -> dict[ProductId, int]:
    """
    Parse a persisted cart.

    Absent or unparseable content yields an empty cart. Entries whose
    quantity is not a positive integer are dropped one by one.
    """
    if raw is None:
        return {}

    try:
        data = json.loads(raw)
    except ValueError:
        logger.warning("Discarding malformed cart record")
        return {}

    if not isinstance(data, dict):
        logger.warning("Discarding cart record of type %s", type(data).__name__)
        return {}

    entries: dict[ProductId, int] = {}
    for product_id, qty in data.items():
        if isinstance(qty, bool) or not isinstance(qty, int) or qty <= 0:
            logger.warning("Dropping cart entry %r with quantity %r", product_id, qty)
            continue
        entries[product_id] = qty
    return entries


__all__ = ("encode", "decode")
