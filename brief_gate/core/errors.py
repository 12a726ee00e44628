from __future__ import annotations


class NoExtractableContent(ValueError):
    """Input text is empty or holds nothing usable after normalization."""


class DocumentReadError(ValueError):
    """The uploaded document could not be turned into text."""


class MalformedDateToken(ValueError):
    """A date-looking token that fails calendar validation (e.g. 31/13/2025)."""


class MalformedBudgetToken(ValueError):
    """A budget-looking token whose amounts are not a valid range."""
