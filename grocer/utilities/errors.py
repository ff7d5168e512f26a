"""Error taxonomy shared by the domain, the AI client and the HTTP layer."""
from __future__ import annotations


class GrocerError(RuntimeError):
    """Base class for application errors."""


class ValidationFailure(GrocerError):
    """User input rejected before any network call; no state was changed."""


class RecipeGenerationError(GrocerError):
    """The AI service failed or returned a payload that does not match the contract."""


class RequestInProgress(GrocerError):
    """A request from the same control is still outstanding."""


class MissingConfiguration(GrocerError):
    """A required setting (e.g. the AI credential) is absent; fatal at startup."""
