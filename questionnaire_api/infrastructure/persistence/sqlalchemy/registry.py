"""
Shared SQLAlchemy metadata.

Every ORM model is declared on ``metadata`` and decorated with
``register_model`` so schema creation can report which tables it manages.
"""

import logging
from typing import Any

from sqlalchemy import MetaData

logger = logging.getLogger(__name__)

metadata = MetaData()

_registered_tables: set[str] = set()


def register_model(model_class: type[Any]) -> type[Any]:
    """Record the model's table name; usable as a class decorator."""
    table_name = getattr(model_class, "__tablename__", None)
    if table_name in _registered_tables:
        logger.warning(f"Table {table_name} registered multiple times!")
    elif table_name:
        _registered_tables.add(table_name)
        logger.debug(f"Registered model {model_class.__name__} ({table_name})")
    return model_class


def get_registered_tables() -> list[str]:
    return sorted(_registered_tables)
