"""Ingredient domain entity: name, category, amount in grams, cost."""
import math
import re
from enum import Enum
from typing import Optional

_DIGITS = re.compile(r'\d')


class IngredientCategory(str, Enum):
    POULTRY_MEAT = "肉禽类"
    VEGETABLE = "蔬菜类"
    CONDIMENT = "调料类"
    SEAFOOD = "海鲜类"
    STAPLE = "主食类"
    OTHER = "其他"

    @classmethod
    def parse(cls, value) -> "IngredientCategory":
        '''Map a stored or received value onto the enumeration, falling back to OTHER.'''
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            v = value.strip()
            for member in cls:
                if v == member.value or v.upper() == member.name:
                    return member
        return cls.OTHER

    @property
    def priority(self) -> int:
        return CATEGORY_PRIORITY[self]


# Ranking order of the ingredient catalog
CATEGORY_PRIORITY = {
    IngredientCategory.POULTRY_MEAT: 0,
    IngredientCategory.SEAFOOD: 1,
    IngredientCategory.VEGETABLE: 2,
    IngredientCategory.STAPLE: 3,
    IngredientCategory.CONDIMENT: 4,
    IngredientCategory.OTHER: 5,
}

# Section order of the ingredient browser
CATEGORY_DISPLAY_ORDER = (
    IngredientCategory.POULTRY_MEAT,
    IngredientCategory.VEGETABLE,
    IngredientCategory.CONDIMENT,
    IngredientCategory.SEAFOOD,
    IngredientCategory.STAPLE,
    IngredientCategory.OTHER,
)


def sanitize_amount_value(value) -> Optional[int]:
    '''Coerce a stored amount (int, float or legacy "200g" string) to whole grams.'''
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        if not math.isfinite(value):
            return None
        return max(int(value), 0)
    if isinstance(value, str):
        digits = "".join(_DIGITS.findall(value))
        return int(digits) if digits else None
    return None


def sanitize_cost_value(value) -> Optional[float]:
    '''Coerce a stored cost to a non-negative float, None when unusable.'''
    if value is None or isinstance(value, bool):
        return None
    try:
        cost = float(value)
    except (TypeError, ValueError):
        return None
    if not math.isfinite(cost) or cost < 0:
        return None
    return cost


class Ingredient:
    def __init__(self, id: str = "", name: str = "", category=IngredientCategory.OTHER,
                 amount: Optional[int] = None, cost: Optional[float] = None):
        self.id = id
        self.name = name
        self.category = IngredientCategory.parse(category)
        self.amount = amount
        self.cost = cost

    def __str__(self) -> str:
        parts = [f"{self.name} ({self.category.value})"]
        if self.amount is not None:
            parts.append(f"{self.amount}g")
        if self.cost is not None:
            parts.append(f"¥{self.cost:.2f}")
        return " - ".join(parts)

    __repr__ = __str__

    def __eq__(self, other) -> bool:
        if not isinstance(other, Ingredient):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def copy(self, **changes) -> "Ingredient":
        data = dict(id=self.id, name=self.name, category=self.category,
                    amount=self.amount, cost=self.cost)
        data.update(changes)
        return Ingredient(**data)

    @staticmethod
    def from_dict(data):
        '''Creates an Ingredient from a stored dictionary, sanitizing legacy fields. Ignores unknown keys.'''
        d = dict(data) if isinstance(data, dict) else {}
        return Ingredient(
            id=str(d.get("id", "")),
            name=str(d.get("name", "")),
            category=d.get("category"),
            amount=sanitize_amount_value(d.get("amount")),
            cost=sanitize_cost_value(d.get("cost")),
        )

    def to_dict(self):
        '''Converts the Ingredient to its JSON form; absent optional fields are omitted.'''
        d = {"id": self.id, "name": self.name, "category": self.category.value}
        if self.amount is not None:
            d["amount"] = self.amount
        if self.cost is not None:
            d["cost"] = self.cost
        return d
