"""Product domain exceptions.

Raised by the command handlers when a business rule is violated.
The views catch these and translate them into HTTP responses.
"""

from __future__ import annotations


class ProductNotFound(Exception):
    """The requested product does not exist."""
