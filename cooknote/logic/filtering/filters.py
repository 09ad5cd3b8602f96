"""Recipe filter predicates: name search, exact ingredient, member preference."""
from __future__ import annotations
from dataclasses import dataclass
from typing import Iterable, List, Optional

from cooknote.domain.Recipe import Recipe

__all__ = ["RecipeFilter", "filter_recipes", "matches"]


@dataclass(frozen=True)
class RecipeFilter:
    search_text: Optional[str] = None
    ingredient_name: Optional[str] = None
    member_id: Optional[str] = None

    @property
    def is_active(self) -> bool:
        return bool(self.search_text or self.ingredient_name or self.member_id)


def matches(recipe: Recipe, criteria: RecipeFilter) -> bool:
    # Search looks at the recipe name only, not at ingredient names
    query = (criteria.search_text or "").lower()
    if query and query not in recipe.name.lower():
        return False
    if criteria.ingredient_name and not recipe.has_ingredient(criteria.ingredient_name):
        return False
    if criteria.member_id and not recipe.is_liked_by(criteria.member_id):
        return False
    return True


def filter_recipes(recipes: Iterable[Recipe], criteria: Optional[RecipeFilter] = None) -> List[Recipe]:
    """Recipes passing every active predicate, in input order."""
    criteria = criteria or RecipeFilter()
    return [r for r in recipes if matches(r, criteria)]
