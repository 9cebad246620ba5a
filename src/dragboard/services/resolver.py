"""Classification of drag subjects into typed drag metadata."""

from __future__ import annotations

import logging
from collections.abc import Mapping

from pydantic import TypeAdapter, ValidationError

from ..models import ColumnDragData, DraggableData, DragSubject, TaskDragData

logger = logging.getLogger(__name__)

_DRAGGABLE_ADAPTER: TypeAdapter[DraggableData] = TypeAdapter(DraggableData)


def resolve_drag_data(subject: DragSubject | None) -> DraggableData | None:
    """
    Resolve the typed metadata attached to a drag subject.

    Accepts metadata that is already a ColumnDragData/TaskDragData, or a
    mapping of the same shape (e.g. {"type": "Task", "task": {...}}).

    Returns:
        The typed payload, or None when the subject is not draggable.
        Absence is a normal outcome and never raises.
    """
    if subject is None or subject.data is None:
        return None

    data = subject.data
    if isinstance(data, ColumnDragData | TaskDragData):
        return data

    if not isinstance(data, Mapping):
        logger.debug("Subject %s has untyped metadata: %r", subject.id, type(data).__name__)
        return None

    try:
        return _DRAGGABLE_ADAPTER.validate_python(dict(data))
    except ValidationError as e:
        logger.debug("Subject %s metadata not draggable: %d error(s)", subject.id, e.error_count())
        return None


def has_draggable_data(subject: DragSubject | None) -> bool:
    """Check whether a subject carries column or task metadata."""
    return resolve_drag_data(subject) is not None
