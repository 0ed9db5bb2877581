"""
Sale model: append-only ledger of dated sales quantities
"""

from sqlalchemy import Column, Date, ForeignKey, Integer, String

from bookrank.models.base import Base, ModelMixin


class Sale(ModelMixin, Base):
    """
    Sales Ledger row. The book reference is declared but a sale may be
    recorded before its book is in the catalog (SQLite leaves foreign
    keys unenforced unless asked to).
    """
    __tablename__ = "sales"

    id = Column(Integer, primary_key=True, autoincrement=True)

    isbn13 = Column(
        String(32),
        ForeignKey("books.isbn13"),
        nullable=True,
        index=True,
        comment="Reference to the book sold"
    )

    sale_date = Column(
        "fecha",
        Date,
        nullable=False,
        index=True,
        comment="Calendar date of the sale (YYYY-MM-DD)"
    )

    quantity = Column(
        "ventas",
        Integer,
        nullable=False,
        comment="Units sold, non-negative"
    )
