"""Recipe domain entity: name, photos, ingredients, steps, creation time, favorite flag, cost, likes."""
import random
import string
import time
from typing import List, Optional

from cooknote.domain.Ingredient import Ingredient, sanitize_cost_value
from cooknote.domain.errors import ValidationError
from cooknote.utilities.constants import AI_RECIPE_PREFIX

_ID_ALPHABET = string.digits + string.ascii_lowercase


def now_ms() -> int:
    """Current time as an epoch-millisecond timestamp."""
    return int(time.time() * 1000)


def new_recipe_id() -> str:
    """Random 9-character base-36 token for manually entered recipes."""
    return "".join(random.choices(_ID_ALPHABET, k=9))


def new_ai_recipe_id() -> str:
    return AI_RECIPE_PREFIX + new_recipe_id()


class Recipe:
    def __init__(self, id: str = "", name: str = "", image_uris: Optional[List[str]] = None,
                 ingredients: Optional[List[Ingredient]] = None, steps: Optional[List[str]] = None,
                 created_at: Optional[int] = None, is_favorite: bool = False,
                 cost: Optional[float] = None, liked_by: Optional[List[str]] = None):
        self.id = id
        self.name = name
        self.image_uris = image_uris[:] if image_uris else []
        self.ingredients = ingredients[:] if ingredients else []
        self.steps = steps[:] if steps else None
        self.created_at = created_at
        self.is_favorite = bool(is_favorite)
        self.cost = cost
        # likedBy has set semantics; insertion order is kept for display
        self.liked_by = list(dict.fromkeys(liked_by)) if liked_by else []

    def __str__(self) -> str:
        fav = " ★" if self.is_favorite else ""
        return f"{self.name}{fav} [{self.id}] - {len(self.ingredients)} ingredients - {len(self.image_uris)} photos"

    __repr__ = __str__

    def __eq__(self, other) -> bool:
        if not isinstance(other, Recipe):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    @property
    def cover_image(self) -> Optional[str]:
        return self.image_uris[0] if self.image_uris else None

    def has_ingredient(self, name: str) -> bool:
        return any(ing.name == name for ing in self.ingredients)

    def is_liked_by(self, member_id: str) -> bool:
        return member_id in self.liked_by

    def copy(self, **changes) -> "Recipe":
        data = dict(
            id=self.id, name=self.name, image_uris=self.image_uris,
            ingredients=[ing.copy() for ing in self.ingredients], steps=self.steps,
            created_at=self.created_at, is_favorite=self.is_favorite,
            cost=self.cost, liked_by=self.liked_by,
        )
        data.update(changes)
        return Recipe(**data)

    def validate(self) -> None:
        """Raise ValidationError unless the recipe has a name and at least one image."""
        if not isinstance(self.name, str) or not self.name.strip():
            raise ValidationError("Recipe name is required")
        if not self.image_uris:
            raise ValidationError("At least one image is required")

    @staticmethod
    def from_dict(data):
        '''Build a Recipe from its stored JSON form, tolerating legacy and missing fields.'''
        d = dict(data) if isinstance(data, dict) else {}
        created_at = d.get("createdAt")
        if isinstance(created_at, bool) or not isinstance(created_at, (int, float)):
            created_at = None
        steps = d.get("steps")
        return Recipe(
            id=str(d.get("id", "")),
            name=str(d.get("name", "")),
            image_uris=[str(u) for u in d.get("imageUris") or []],
            ingredients=[Ingredient.from_dict(ing) for ing in d.get("ingredients") or []],
            steps=[str(s) for s in steps] if isinstance(steps, list) else None,
            created_at=int(created_at) if created_at is not None else None,
            is_favorite=bool(d.get("isFavorite", False)),
            cost=sanitize_cost_value(d.get("cost")),
            liked_by=[str(m) for m in d.get("likedBy") or []],
        )

    def to_dict(self):
        d = {
            "id": self.id,
            "name": self.name,
            "imageUris": list(self.image_uris),
            "ingredients": [ing.to_dict() for ing in self.ingredients],
            "isFavorite": self.is_favorite,
            "likedBy": list(self.liked_by),
        }
        if self.steps:
            d["steps"] = list(self.steps)
        if self.created_at is not None:
            d["createdAt"] = self.created_at
        if self.cost is not None:
            d["cost"] = self.cost
        return d
