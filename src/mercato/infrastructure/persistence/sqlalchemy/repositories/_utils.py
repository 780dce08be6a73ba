"""Shared utilities for SQLAlchemy repositories."""

import logging
from collections.abc import Iterator
from contextlib import contextmanager

from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from mercato.domain.shared.exceptions import StorageError

logger = logging.getLogger(__name__)


def is_unique_violation(error: IntegrityError) -> bool:
    text = str(error.orig if error.orig is not None else error).lower()
    return "unique" in text or "duplicate key" in text


def escape_like(term: str) -> str:
    """Escape LIKE wildcards so the term matches literally (escape char ``\\``)."""
    return term.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


@contextmanager
def storage_errors(operation: str) -> Iterator[None]:
    """
    Translate unexpected SQLAlchemy failures into StorageError.

    Domain exceptions raised inside the block pass through unchanged.
    """
    try:
        yield
    except SQLAlchemyError as e:
        logger.exception("Database error during %s", operation)
        raise StorageError(details={"operation": operation}) from e
