"""Storefront gateway failures."""
from typing import Any, Optional


class StorefrontError(Exception):
    """
    Single normalized failure for every Storefront API call.

    kind:
        transport  - non-2xx status or network failure
        graphql    - non-empty top-level `errors` list
        user_error - non-empty `userErrors` list in a mutation payload
        not_found  - lookup returned null
    """

    def __init__(self, message: str, kind: str = "transport",
                 status_code: Optional[int] = None, payload: Any = None):
        super().__init__(message)
        self.message = message
        self.kind = kind
        self.status_code = status_code
        self.payload = payload

    def __str__(self) -> str:
        return self.message
