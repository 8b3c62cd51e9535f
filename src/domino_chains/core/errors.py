"""Exceptions raised by the chain composer."""

from __future__ import annotations


class InvalidInputError(ValueError):
    """Input to the composer or label parser is malformed.

    Raised before any search begins, so no partial results are ever
    produced for bad input.
    """
