"""Core business logic layer.

Modules:
- ownership: derived index of owned item names
- transfers: moves between pantry, shopping list and recipes
- categories: keyword category inference
- sorting: sorted projections of a collection
- markdown: rendering of recipe instructions
"""
__all__ = ["ownership", "transfers", "categories", "sorting", "markdown"]
