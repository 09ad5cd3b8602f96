"""Catalog snapshots cached by a content fingerprint of the recipe collection."""
from __future__ import annotations
import hashlib
import json
import logging
from dataclasses import dataclass
from typing import Dict, List, Optional

from cooknote.domain.Ingredient import Ingredient
from cooknote.domain.Recipe import Recipe
from .aggregator import build_catalog, frequencies, rank_catalog

logger = logging.getLogger(__name__)


def fingerprint(recipes: List[Recipe]) -> str:
    """SHA-256 over the serialized collection; equal content gives an equal key."""
    payload = json.dumps([r.to_dict() for r in recipes], ensure_ascii=False, sort_keys=True)
    return hashlib.sha256(payload.encode("utf-8")).hexdigest()


@dataclass(frozen=True)
class CatalogSnapshot:
    key: str
    catalog: List[Ingredient]
    frequencies: Dict[str, int]
    ranked: List[Ingredient]


class CatalogCache:
    def __init__(self):
        self._snapshot: Optional[CatalogSnapshot] = None
        self.builds = 0

    def get(self, recipes: List[Recipe]) -> CatalogSnapshot:
        key = fingerprint(recipes)
        if self._snapshot is not None and self._snapshot.key == key:
            return self._snapshot
        catalog = build_catalog(recipes)
        freq = frequencies(recipes)
        self._snapshot = CatalogSnapshot(key, catalog, freq, rank_catalog(catalog, freq))
        self.builds += 1
        logger.debug("Rebuilt ingredient catalog: %d entries", len(catalog))
        return self._snapshot

    def invalidate(self, *_args) -> None:
        """Drop the snapshot; usable directly as an event-bus subscriber."""
        self._snapshot = None
