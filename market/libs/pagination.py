from typing import Any, Dict, List, Optional, TypeVar

from sqlalchemy import and_, or_
from sqlalchemy.orm import Query
from flask_smorest import abort

T = TypeVar("T")  # Model type


class Paginator:
    """Limit/offset pagination with an optional keyset cursor for time-ordered sorts"""

    # Sorts that walk (created_at, id) and can therefore resume from a cursor
    CURSOR_SORTS = ("newest", "oldest")

    def __init__(
        self, query: Query, model: Any, limit: int = 20, offset: int = 0
    ) -> None:
        """
        Args:
            query: SQLAlchemy query object
            model: mapped class with ``created_at`` and ``id`` columns
            limit: Items per page (default: 20)
            offset: Items to skip when no cursor is given
        """
        self.query: Query = query
        self.model = model
        self.limit: int = limit
        self.offset: int = offset
        self.max_limit: int = 100  # Safety limit

    def _orderings(self) -> Dict[str, List[Any]]:
        model = self.model
        return {
            "newest": [model.created_at.desc(), model.id.desc()],
            "oldest": [model.created_at.asc(), model.id.asc()],
            "price_asc": [model.price.asc(), model.created_at.desc(), model.id.desc()],
            "price_desc": [model.price.desc(), model.created_at.desc(), model.id.desc()],
        }

    def paginate(self, sort: Optional[str] = None, cursor: Optional[str] = None) -> Dict[str, Any]:
        """
        Apply sorting and pagination to the query

        Returns:
            Dictionary containing:
            - items: List of paginated items
            - total: Total number of items matching the query
            - has_more: Whether another page exists
            - next_cursor: id of the last item, for newest/oldest sorts
            - next_offset: offset of the next page
        """
        self._validate_pagination_params()

        sort = sort or "newest"
        orderings = self._orderings()
        if sort not in orderings:
            abort(400, message=f"Invalid sort '{sort}'")

        total: int = self.query.order_by(None).count()

        page_query = self.query
        offset = self.offset
        if cursor:
            if sort not in self.CURSOR_SORTS:
                abort(400, message="Cursor pagination requires newest or oldest sort")
            page_query = self._apply_cursor(page_query, cursor, sort)
            offset = 0

        # One extra row tells whether another page exists
        rows: List[T] = (
            page_query.order_by(*orderings[sort])
            .offset(offset)
            .limit(self.limit + 1)
            .all()
        )
        has_more = len(rows) > self.limit
        items = rows[: self.limit]

        next_cursor = None
        if has_more and sort in self.CURSOR_SORTS and items:
            next_cursor = items[-1].id

        return {
            "items": items,
            "total": total,
            "has_more": has_more,
            "next_cursor": next_cursor,
            "next_offset": offset + len(items) if has_more else None,
        }

    def _apply_cursor(self, query: Query, cursor: str, sort: str) -> Query:
        model = self.model
        anchor = query.session.get(model, cursor)
        if anchor is None:
            abort(400, message="Invalid cursor")

        if sort == "newest":
            condition = or_(
                model.created_at < anchor.created_at,
                and_(model.created_at == anchor.created_at, model.id < anchor.id),
            )
        else:
            condition = or_(
                model.created_at > anchor.created_at,
                and_(model.created_at == anchor.created_at, model.id > anchor.id),
            )
        return query.filter(condition)

    def _validate_pagination_params(self) -> None:
        """Validate pagination parameters"""
        if self.offset < 0:
            abort(400, message="Offset must not be negative")

        if self.limit < 1 or self.limit > self.max_limit:
            abort(400, message=f"limit must be between 1 and {self.max_limit}")
