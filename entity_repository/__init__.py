"""Generic async repository layer for SQLAlchemy entities.

Import the public surface from here rather than from individual modules:

    from entity_repository import EntityMixin, SqlEntityRepository
"""

from entity_repository.domain.exceptions import (
    InvalidArgumentError,
    NullArgumentError,
    RepositoryError,
)
from entity_repository.domain.models import (
    ListWrapper,
    OrderDirection,
    PageMetadata,
    SoftDeleteMode,
)
from entity_repository.infrastructure.database import Base, Settings
from entity_repository.infrastructure.persistence.models import (
    EntityMixin,
    SoftDeleteEntityMixin,
    read_only_fields,
)
from entity_repository.infrastructure.persistence.repositories import (
    SqlEntityRepository,
    SqlSoftDeleteEntityRepository,
    SqlUnitOfWork,
)

__all__ = [
    "Base",
    "Settings",
    "EntityMixin",
    "SoftDeleteEntityMixin",
    "read_only_fields",
    "SqlEntityRepository",
    "SqlSoftDeleteEntityRepository",
    "SqlUnitOfWork",
    "ListWrapper",
    "PageMetadata",
    "OrderDirection",
    "SoftDeleteMode",
    "RepositoryError",
    "InvalidArgumentError",
    "NullArgumentError",
]
