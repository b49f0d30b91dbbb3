# backend/crud/base.py
"""Shared write path for every entity.

Each helper commits on success. A statement rejected by the database rolls
the session back and surfaces as one of the ``utils.errors`` classes, so a
failed write never leaves partial state in the session or the store.
"""
import logging
from typing import Any, Dict, Mapping, Optional, Type

from pydantic import BaseModel
from sqlalchemy import func
from sqlalchemy.exc import IntegrityError, StatementError
from sqlalchemy.orm import Query, Session

from database import Base
from utils.errors import translate_integrity_error

logger = logging.getLogger(__name__)


def _commit(db: Session, action: str, resource: str) -> None:
    try:
        db.commit()
    except IntegrityError as e:
        db.rollback()
        err = translate_integrity_error(e)
        logger.warning("%s on %s rejected: %s", action, resource, err)
        raise err from e
    except StatementError as e:
        db.rollback()
        # Enum columns reject out-of-domain values before the INSERT is sent
        if isinstance(e.orig, LookupError):
            err = translate_integrity_error(e)
            logger.warning("%s on %s rejected: %s", action, resource, err)
            raise err from e
        raise


def create(db: Session, model: Type[Base], payload: BaseModel) -> Base:
    resource = model.__tablename__
    # Unset optional fields fall back to column/server defaults
    obj = model(**payload.model_dump(exclude_none=True))
    db.add(obj)
    _commit(db, "CREATE", resource)
    db.refresh(obj)
    logger.info("CREATE %s %s", resource, _identity(obj))
    return obj


def update(db: Session, obj: Base, payload: BaseModel) -> Base:
    resource = obj.__tablename__
    changes = payload.model_dump(exclude_unset=True)
    for key, value in changes.items():
        setattr(obj, key, value)

    # Product and Material carry a refresh timestamp; stamp it even when the
    # new values equal the old ones and the ORM would skip the UPDATE.
    if changes and hasattr(type(obj), "last_updated"):
        obj.last_updated = func.now()

    _commit(db, "UPDATE", resource)
    db.refresh(obj)
    logger.info("UPDATE %s %s fields=%s", resource, _identity(obj), sorted(changes))
    return obj


def delete(db: Session, obj: Base) -> None:
    resource = obj.__tablename__
    ident = _identity(obj)
    db.delete(obj)
    _commit(db, "DELETE", resource)
    logger.info("DELETE %s %s", resource, ident)


def paginate(query: Query, page: int = 1, page_size: int = 20) -> Dict[str, Any]:
    if page < 1:
        raise ValueError("page must be >= 1")
    if page_size < 1:
        raise ValueError("page_size must be >= 1")

    total = query.count()
    items = query.offset((page - 1) * page_size).limit(page_size).all()
    return {"items": items, "total": total, "page": page, "page_size": page_size}


def apply_sort(query: Query, allowed: Mapping[str, Any], sort_by: Optional[str], order: str, default):
    if order not in ("asc", "desc"):
        raise ValueError("order must be 'asc' or 'desc'")
    col = allowed.get((sort_by or "").lower(), default)
    return query.order_by(col.asc() if order == "asc" else col.desc())


def _identity(obj: Base) -> str:
    ident = obj.__mapper__.primary_key_from_instance(obj)
    return "id=" + ",".join(str(v) for v in ident)
