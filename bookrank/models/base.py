"""
Declarative base with shared model helpers
"""

from datetime import date, datetime
from typing import Any

from sqlalchemy import inspect
from sqlalchemy.orm import declarative_base

# Create the base class
Base = declarative_base()


class ModelMixin:
    """
    Helpers shared by all database models
    """

    def to_dict(self) -> dict[str, Any]:
        """
        Convert model instance to a dictionary keyed by stored column name
        """
        result = {}
        for attr in inspect(type(self)).column_attrs:
            value = getattr(self, attr.key)
            if isinstance(value, (date, datetime)):
                value = value.isoformat()
            result[attr.columns[0].name] = value
        return result

    def __repr__(self) -> str:
        identity = inspect(self).identity
        return f"<{self.__class__.__name__}({identity})>"
