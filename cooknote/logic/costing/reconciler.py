"""Recipe cost: automatic sum of ingredient costs versus a manual override.

The override is kept as text exactly as typed. An empty override means the
displayed cost is the automatic one.
"""
from __future__ import annotations
import re
from dataclasses import dataclass
from typing import List, Optional

from cooknote.domain.Ingredient import Ingredient, sanitize_amount_value
from cooknote.domain.Recipe import Recipe
from cooknote.utilities.constants import COST_TOLERANCE

__all__ = [
    "auto_cost", "format_cost", "display_cost", "final_cost", "initial_override",
    "sanitize_amount", "sanitize_cost", "parse_float", "DecimalInput", "CostEditor",
]

_NON_DIGITS = re.compile(r"[^0-9]")
_NON_DECIMAL = re.compile(r"[^0-9.]")
_LEADING_FLOAT = re.compile(r"^\s*[+-]?(\d+\.?\d*(?:[eE][+-]?\d+)?|\.\d+(?:[eE][+-]?\d+)?)")


def auto_cost(ingredients: List[Ingredient]) -> float:
    return round(sum(ing.cost or 0 for ing in ingredients), 2)


def format_cost(value: float) -> str:
    return f"{value:.2f}"


def display_cost(ingredients: List[Ingredient], manual_override: Optional[str] = None) -> str:
    if manual_override:
        return manual_override
    return format_cost(auto_cost(ingredients))


def parse_float(text: Optional[str]) -> Optional[float]:
    """Leading-number parse: "12.5abc" -> 12.5, "abc" -> None."""
    m = _LEADING_FLOAT.match(text or "")
    return float(m.group(0)) if m else None


def final_cost(display: str) -> float:
    """Cost stored on save; unparsable or zero text stores 0."""
    return parse_float(display) or 0.0


def _number_text(value: float) -> str:
    return str(int(value)) if float(value).is_integer() else str(value)


def initial_override(recipe: Recipe) -> str:
    """Override text to pre-fill when a stored recipe is opened for editing.

    A stored cost that is zero, or that no longer matches the ingredient sum,
    was typed by hand and is kept as the override.
    """
    ingredients = [ing.copy(amount=sanitize_amount_value(ing.amount)) for ing in recipe.ingredients]
    if recipe.cost is None:
        return ""
    computed = auto_cost(ingredients)
    if recipe.cost == 0 or abs(recipe.cost - computed) > COST_TOLERANCE:
        return _number_text(recipe.cost)
    return ""


def sanitize_amount(text: str) -> str:
    return _NON_DIGITS.sub("", text or "")


def sanitize_cost(text: str) -> str:
    """Digits plus the first decimal point."""
    cleaned = _NON_DECIMAL.sub("", text or "")
    head, dot, tail = cleaned.partition(".")
    return head + dot + tail.replace(".", "")


@dataclass(frozen=True)
class DecimalInput:
    """In-progress numeric text field: raw text, parsed value, validity.

    The raw text is never rebuilt from the value, so "3." stays "3." while typing.
    """
    raw: str = ""
    value: Optional[float] = None
    valid: bool = True

    @classmethod
    def typed(cls, text: str, integer: bool = False) -> "DecimalInput":
        raw = sanitize_amount(text) if integer else sanitize_cost(text)
        if not raw:
            return cls("", None, True)
        value = parse_float(raw)
        if value is None:
            # a lone "." is still being typed
            return cls(raw, None, False)
        return cls(raw, int(value) if integer else value, True)

    @classmethod
    def from_value(cls, value: Optional[float], integer: bool = False) -> "DecimalInput":
        if value is None:
            return cls()
        return cls(_number_text(value), int(value) if integer else float(value), True)


class CostEditor:
    """Edit session for one recipe's ingredient amounts, costs and manual override."""

    def __init__(self, ingredients: Optional[List[Ingredient]] = None, manual_override: str = ""):
        self.ingredients = [ing.copy() for ing in ingredients or []]
        self.manual_override = manual_override
        self.amount_inputs = {ing.id: DecimalInput.from_value(ing.amount, integer=True) for ing in self.ingredients}
        self.cost_inputs = {ing.id: DecimalInput.from_value(ing.cost) for ing in self.ingredients}

    @classmethod
    def open(cls, recipe: Recipe) -> "CostEditor":
        ingredients = [ing.copy(amount=sanitize_amount_value(ing.amount)) for ing in recipe.ingredients]
        return cls(ingredients, initial_override(recipe))

    def _ingredient(self, ingredient_id: str) -> Ingredient:
        for ing in self.ingredients:
            if ing.id == ingredient_id:
                return ing
        raise KeyError(ingredient_id)

    def set_ingredient_cost(self, ingredient_id: str, text: str) -> DecimalInput:
        ing = self._ingredient(ingredient_id)
        state = DecimalInput.typed(text)
        self.cost_inputs[ingredient_id] = state
        if state.valid:
            ing.cost = state.value
        return state

    def set_ingredient_amount(self, ingredient_id: str, text: str) -> DecimalInput:
        ing = self._ingredient(ingredient_id)
        state = DecimalInput.typed(text, integer=True)
        self.amount_inputs[ingredient_id] = state
        ing.amount = state.value
        return state

    def set_override(self, text: str) -> None:
        self.manual_override = sanitize_cost(text)

    def clear_override(self) -> None:
        self.manual_override = ""

    @property
    def auto_cost(self) -> float:
        return auto_cost(self.ingredients)

    @property
    def display_cost(self) -> str:
        return display_cost(self.ingredients, self.manual_override)

    def apply(self, recipe: Recipe) -> Recipe:
        """Copy of the recipe carrying the edited ingredients and the reconciled cost."""
        return recipe.copy(ingredients=[ing.copy() for ing in self.ingredients],
                           cost=final_cost(self.display_cost))
