"""Offset/limit pagination over an ORM query."""
import logging
from typing import Any, Optional, TypedDict

from sqlalchemy.orm import Query

logger = logging.getLogger(__name__)


class PaginationResult(TypedDict):
    total: int
    data: list[Any]


def paginate(query: Query, limit: Optional[int] = None, offset: Optional[int] = None) -> PaginationResult:
    """Return one page of ``query`` plus the size of the whole matching set.

    ``query`` must already carry its filters and ordering. ``total`` is counted
    without the window; ``data`` skips ``offset`` rows then takes at most
    ``limit``. ``limit=None`` means no cap, ``offset=None`` starts at row 0.
    """
    total = query.order_by(None).count()

    page = query
    if offset:
        page = page.offset(offset)
    if limit is not None:
        page = page.limit(limit)

    data = page.all()
    logger.debug("Paginated %d of %d rows (limit=%s, offset=%s)", len(data), total, limit, offset)
    return {"total": total, "data": data}
