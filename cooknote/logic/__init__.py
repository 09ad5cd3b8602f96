"""Core business logic layer.

Subpackages:
- catalog: ingredient catalog aggregation, ranking and browsing
- filtering: recipe filter predicates
- grouping: favorites and day buckets for the recipe feed
- costing: cost reconciliation and edit-time input handling
"""
__all__ = ["catalog", "filtering", "grouping", "costing"]
