"""Domain repository interfaces.

All abstractions are defined here with abc.ABC and @abstractmethod.
Concrete implementations live in entity_repository/infrastructure/persistence/.
"""

from .base import (
    BaseEntityRepository,
    EntityRepository,
    SoftDeleteEntityRepository,
    UnitOfWork,
)

__all__ = [
    "BaseEntityRepository",
    "EntityRepository",
    "SoftDeleteEntityRepository",
    "UnitOfWork",
]
