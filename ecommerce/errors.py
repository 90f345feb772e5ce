"""
Common Error Constants

Centralized error messages shared by the service layer and routers.
"""

# User errors
ERROR_USER_NOT_FOUND = "User not found"

# Item errors
ERROR_ITEM_NOT_FOUND = "Item not found"

# Generic errors
ERROR_INTERNAL = "Internal server error"
ERROR_NOT_FOUND = "Not found"


class NotFoundError(Exception):
    """A user or item referenced by a request does not exist."""

    def __init__(self, entity: str, message: str = ERROR_NOT_FOUND) -> None:
        super().__init__(message)
        self.entity = entity
        self.message = message

    @classmethod
    def user(cls) -> "NotFoundError":
        return cls("user", ERROR_USER_NOT_FOUND)

    @classmethod
    def item(cls) -> "NotFoundError":
        return cls("item", ERROR_ITEM_NOT_FOUND)
