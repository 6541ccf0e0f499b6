"""Domain model package.

Plain enums, protocols and Pydantic models with no ORM dependencies.
"""

from .entity import Entity, SoftDeleteEntity
from .enums import OrderDirection, SoftDeleteMode
from .pagination import ListWrapper, PageMetadata

__all__ = [
    "Entity",
    "SoftDeleteEntity",
    "OrderDirection",
    "SoftDeleteMode",
    "ListWrapper",
    "PageMetadata",
]
