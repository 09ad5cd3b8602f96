"""Ingredient catalog: seed list merged with every ingredient named in a recipe.

Names are the identity key. Frequencies count ingredient occurrences across the
whole, unfiltered recipe collection.
"""
from __future__ import annotations
from collections import Counter
from typing import Dict, Iterable, List, Optional, Tuple

from cooknote.domain.Ingredient import Ingredient, IngredientCategory, CATEGORY_DISPLAY_ORDER
from cooknote.domain.Recipe import Recipe
from cooknote.infra.seed_data import default_ingredients
from cooknote.utilities.constants import QUICK_PICK_LIMIT

__all__ = ["frequencies", "build_catalog", "rank_catalog", "search_catalog", "categorize", "quick_picks"]


def frequencies(recipes: Iterable[Recipe]) -> Dict[str, int]:
    """Number of ingredient entries per name, across all recipes."""
    counts: Counter = Counter()
    for recipe in recipes:
        for ing in recipe.ingredients:
            counts[ing.name] += 1
    return dict(counts)


def build_catalog(recipes: Iterable[Recipe], seed: Optional[List[Ingredient]] = None) -> List[Ingredient]:
    """Seed entries first, then each recipe ingredient whose name is new, in encounter order."""
    seed = default_ingredients() if seed is None else seed
    seen = set()
    catalog: List[Ingredient] = []
    for ing in seed:
        if ing.name not in seen:
            seen.add(ing.name)
            catalog.append(ing)
    for recipe in recipes:
        for ing in recipe.ingredients:
            if ing.name in seen:
                continue
            seen.add(ing.name)
            catalog.append(ing)
    return catalog


def rank_catalog(catalog: List[Ingredient], freq: Dict[str, int]) -> List[Ingredient]:
    """Order by category priority, then by descending frequency. Ties keep catalog order."""
    return sorted(catalog, key=lambda ing: (ing.category.priority, -freq.get(ing.name, 0)))


def search_catalog(catalog: List[Ingredient], query: str) -> List[Ingredient]:
    """Case-insensitive substring search on names; prefix matches come first."""
    q = (query or "").strip().lower()
    if not q:
        return list(catalog)
    matches = [ing for ing in catalog if q in ing.name.lower()]
    return sorted(matches, key=lambda ing: 0 if ing.name.lower().startswith(q) else 1)


def categorize(catalog: List[Ingredient]) -> List[Tuple[IngredientCategory, List[Ingredient]]]:
    """Group entries by category in browser order, skipping empty categories."""
    buckets: Dict[IngredientCategory, List[Ingredient]] = {}
    for ing in catalog:
        buckets.setdefault(ing.category, []).append(ing)
    return [(cat, buckets[cat]) for cat in CATEGORY_DISPLAY_ORDER if cat in buckets]


def quick_picks(ranked: List[Ingredient], limit: int = QUICK_PICK_LIMIT) -> List[Ingredient]:
    return ranked[:limit]
