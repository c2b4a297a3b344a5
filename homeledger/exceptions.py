"""Error types raised by the resolvers.

Messages are plain strings; they are reported verbatim in the GraphQL
``errors`` list.
"""

from typing import Optional


class HomeLedgerError(Exception):
    """Base class for errors raised deliberately by HomeLedger."""

    message = "HomeLedger error"

    def __init__(self, message: Optional[str] = None):
        super().__init__(message or self.message)


class InvalidCredentialsError(HomeLedgerError):
    """Unknown username or wrong password; the two are not distinguished."""

    message = "Invalid credentials"


class UsernameTakenError(HomeLedgerError):
    """Sign-up collided with an existing username."""

    message = "Username already taken"


class PropertyLookupError(HomeLedgerError):
    """The store failed while listing a user's properties."""

    message = "Error fetching user properties"
