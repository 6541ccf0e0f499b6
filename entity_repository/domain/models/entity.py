"""Capability protocols every repository-managed entity satisfies.

Repositories are typed against these shapes rather than a concrete base
class, so any mapped class with the right attributes qualifies.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class Entity(Protocol):
    id: Any
    created: datetime | None
    updated: datetime | None


@runtime_checkable
class SoftDeleteEntity(Entity, Protocol):
    deleted: bool | None
    deleted_at: datetime | None
