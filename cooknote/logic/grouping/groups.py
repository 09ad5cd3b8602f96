"""Recipe feed sections: a favorites group followed by one group per calendar day.

Favorites are not removed from their day group, so a recipe can be listed twice.
"""
from __future__ import annotations
from dataclasses import dataclass, field
from datetime import datetime, timedelta
from typing import Dict, List, Optional

from cooknote.domain.Recipe import Recipe, now_ms
from cooknote.utilities.constants import FAVORITES_TITLE, TODAY_TITLE, YESTERDAY_TITLE, DAY_TITLE_FORMAT

__all__ = ["RecipeGroup", "group_recipes", "day_title"]


@dataclass
class RecipeGroup:
    title: str
    items: List[Recipe] = field(default_factory=list)
    is_special: bool = False


def day_title(timestamp_ms: int, now_ms_value: int) -> str:
    """Bucket label for a timestamp in local time: today, yesterday or month/day."""
    day = datetime.fromtimestamp(timestamp_ms / 1000).date()
    today = datetime.fromtimestamp(now_ms_value / 1000).date()
    if day == today:
        return TODAY_TITLE
    if day == today - timedelta(days=1):
        return YESTERDAY_TITLE
    return DAY_TITLE_FORMAT.format(month=day.month, day=day.day)


def group_recipes(recipes: List[Recipe], now: Optional[int] = None) -> List[RecipeGroup]:
    now = now_ms() if now is None else now

    def created(r: Recipe) -> int:
        return r.created_at if r.created_at is not None else now

    groups: List[RecipeGroup] = []
    favorites = sorted((r for r in recipes if r.is_favorite), key=created, reverse=True)
    if favorites:
        groups.append(RecipeGroup(FAVORITES_TITLE, favorites, is_special=True))

    by_day: Dict[str, RecipeGroup] = {}
    for recipe in sorted(recipes, key=created, reverse=True):
        title = day_title(created(recipe), now)
        if title not in by_day:
            by_day[title] = RecipeGroup(title)
            groups.append(by_day[title])
        by_day[title].items.append(recipe)
    return groups
