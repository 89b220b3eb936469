"""Offset pagination over a SQLAlchemy query."""
import math

from sqlalchemy.orm import Query

from todolist.schemas.pagination import Pagination


def paginate(query: Query, page: int, limit: int) -> tuple[list, Pagination]:
    total = query.order_by(None).count()
    rows = query.offset((page - 1) * limit).limit(limit).all()
    return rows, Pagination(
        current=page,
        limit=limit,
        records=total,
        pages=math.ceil(total / limit) if limit else 0,
    )
