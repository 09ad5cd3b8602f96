"""Process-wide data-layer objects handed to routes through FastAPI dependencies.

Tests replace them with app.dependency_overrides.
"""
from functools import lru_cache

from cooknote.events.Event_Bus import GLOBAL_EVENT_BUS, RECIPES_CHANGED
from cooknote.events.observers import EventLog
from cooknote.infra.ai_client import AnalysisClient
from cooknote.infra.Family_Repository import FamilyRegistry
from cooknote.infra.Recipe_Repository import RecipeRepository
from cooknote.infra.storage import JsonFileStore
from cooknote.logic.catalog.cache import CatalogCache


@lru_cache
def get_store() -> JsonFileStore:
    return JsonFileStore()


@lru_cache
def get_recipe_repository() -> RecipeRepository:
    return RecipeRepository(get_store(), bus=GLOBAL_EVENT_BUS)


@lru_cache
def get_family_registry() -> FamilyRegistry:
    return FamilyRegistry(get_store(), bus=GLOBAL_EVENT_BUS)


@lru_cache
def get_catalog_cache() -> CatalogCache:
    cache = CatalogCache()
    GLOBAL_EVENT_BUS.subscribe(RECIPES_CHANGED, cache.invalidate)
    return cache


@lru_cache
def get_event_log() -> EventLog:
    return EventLog(GLOBAL_EVENT_BUS)


@lru_cache
def get_analysis_client() -> AnalysisClient:
    return AnalysisClient()
