"""Query composition: filters, ordering, soft-delete visibility and pagination.

Every helper takes a Select and returns a new one; nothing here executes a
statement. Repositories decide when to run the result and whether to slice
it into pages.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from sqlalchemy import Select, func, select

from entity_repository.domain.exceptions import InvalidArgumentError
from entity_repository.domain.models.enums import OrderDirection, SoftDeleteMode


def coerce_mode(mode: Any) -> SoftDeleteMode:
    try:
        return SoftDeleteMode(mode)
    except ValueError as exc:
        raise InvalidArgumentError("mode", f"unknown soft-delete mode {mode!r}") from exc


def coerce_direction(direction: Any) -> OrderDirection:
    try:
        return OrderDirection(direction)
    except ValueError as exc:
        raise InvalidArgumentError("direction", f"unknown order direction {direction!r}") from exc


def validate_page(page: int, page_size: int) -> None:
    if page < 1:
        raise InvalidArgumentError("page", f"was below 1. Received: {page}")
    if page_size < 1:
        raise InvalidArgumentError("page_size", f"was below 1. Received: {page_size}")


def apply_visibility(stmt: Select, model: type, mode: Any) -> Select:
    """Restrict stmt to the rows of a soft-delete model visible in mode."""
    mode = coerce_mode(mode)
    if mode is SoftDeleteMode.EXCLUDE_DELETED:
        return stmt.where(model.deleted.is_(False))
    if mode is SoftDeleteMode.ONLY_DELETED:
        return stmt.where(model.deleted.is_(True))
    return stmt


def compose(
    stmt: Select,
    filters: Sequence[Any] | Any = None,
    order_by: Any = None,
    direction: Any = OrderDirection.ASCENDING,
) -> Select:
    """AND the filters onto stmt and order it by order_by in the given direction.

    filters may be a single expression or a sequence of them.
    """
    direction = coerce_direction(direction)
    if filters is not None and not isinstance(filters, Sequence):
        filters = [filters]
    if filters:
        stmt = stmt.where(*filters)
    if order_by is not None:
        key = order_by.asc() if direction is OrderDirection.ASCENDING else order_by.desc()
        stmt = stmt.order_by(key)
    return stmt


def project(stmt: Select, columns: Any) -> tuple[Select, bool]:
    """Replace the selected entity with columns.

    Returns the statement and whether callers should read scalars: true for
    a single column expression, false for a sequence (rows, even of one).
    """
    if isinstance(columns, Sequence) and not isinstance(columns, str):
        return stmt.with_only_columns(*columns), False
    return stmt.with_only_columns(columns), True


def paginate(stmt: Select, page: int, page_size: int) -> Select:
    validate_page(page, page_size)
    # page 1 never skips
    if page > 1:
        stmt = stmt.offset((page - 1) * page_size)
    return stmt.limit(page_size)


def count_statement(stmt: Select) -> Select:
    """Count the rows stmt would return, ignoring its ordering."""
    return select(func.count()).select_from(stmt.order_by(None).subquery())
