"""
Book model: one catalog entry per ISBN-13
"""

from sqlalchemy import Column, String, Text

from bookrank.models.base import Base, ModelMixin


class Book(ModelMixin, Base):
    """
    Catalog Store row. Stored column names follow the catalog file header.
    """
    __tablename__ = "books"

    isbn13 = Column(
        String(32),
        primary_key=True,
        comment="ISBN-13 identifier, immutable once set"
    )

    title = Column(
        "titulo",
        Text,
        nullable=True,
        comment="Book title"
    )

    author = Column(
        "autor",
        Text,
        nullable=True,
        index=True,
        comment="Author name"
    )

    publisher = Column(
        "editorial",
        Text,
        nullable=True,
        index=True,
        comment="Publisher name"
    )

    featured_subject = Column(
        "texto_bic_materia_destacada",
        Text,
        nullable=True,
        index=True,
        comment="Featured BIC subject label (free text)"
    )
