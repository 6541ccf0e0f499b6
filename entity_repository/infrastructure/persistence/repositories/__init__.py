"""Concrete SQLAlchemy repository implementations.

Subclass SqlEntityRepository or SqlSoftDeleteEntityRepository, set model,
and bind instances to the AsyncSession of the current unit of work.
"""

from __future__ import annotations

from .entity import SqlEntityRepository
from .soft_delete import SqlSoftDeleteEntityRepository
from .unit_of_work import SqlUnitOfWork

__all__ = [
    "SqlEntityRepository",
    "SqlSoftDeleteEntityRepository",
    "SqlUnitOfWork",
]
