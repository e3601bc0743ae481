"""
CRUD operations for database models.

Exports base CRUD class and model-specific CRUD implementations
with pre-instantiated singletons for direct use.

Usage:
    from chatstore.boundary.db.CRUD import session_crud, message_crud

    session = await session_crud.get_by_id(db, session_id)
"""

from chatstore.boundary.db.CRUD.base_crud import BaseCRUD
from chatstore.boundary.db.CRUD.message_crud import MessageCRUD, message_crud
from chatstore.boundary.db.CRUD.session_crud import SessionCRUD, session_crud

__all__ = [
    "BaseCRUD",
    "MessageCRUD",
    "SessionCRUD",
    "message_crud",
    "session_crud",
]
