"""Domain enumerations for list queries.

String-valued so they compare equal to plain strings and can be passed
straight through from query parameters.
"""

from enum import Enum


class OrderDirection(str, Enum):
    ASCENDING = "ascending"
    DESCENDING = "descending"


class SoftDeleteMode(str, Enum):
    """Which rows of a soft-delete table a query is allowed to see."""

    EXCLUDE_DELETED = "exclude_deleted"
    ONLY_DELETED = "only_deleted"
    INCLUDE_DELETED = "include_deleted"

    def admits(self, deleted: bool) -> bool:
        """True if a row with the given deleted flag is visible in this mode."""
        if self is SoftDeleteMode.INCLUDE_DELETED:
            return True
        if self is SoftDeleteMode.ONLY_DELETED:
            return deleted
        return not deleted
