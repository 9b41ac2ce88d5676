"""SQLAlchemy Core table definitions for the case statistics store.

Table and column names are shared with existing deployments, including
the ``decovering_case`` spelling.
"""
from sqlalchemy import (
    BigInteger,
    Column,
    DateTime,
    ForeignKey,
    Index,
    MetaData,
    String,
    Table,
    Text,
)

metadata = MetaData()


def _counter_columns():
    return [
        Column("total", BigInteger, nullable=False, default=0, server_default="0"),
        Column("new_case", BigInteger, nullable=False, default=0, server_default="0"),
        Column("treated", BigInteger, nullable=False, default=0, server_default="0"),
        Column("decovering_case", BigInteger, nullable=False, default=0, server_default="0"),
        Column("test_case", BigInteger, nullable=False, default=0, server_default="0"),
        Column("dead", BigInteger, nullable=False, default=0, server_default="0"),
        Column("negative_case", BigInteger, nullable=False, default=0, server_default="0"),
    ]


country = Table(
    "country",
    metadata,
    Column("id", String(36), primary_key=True),
    Column("name", Text, nullable=False),
    *_counter_columns(),
    Column("updated_at", DateTime(timezone=True)),
)

provinces = Table(
    "provinces",
    metadata,
    Column("id", String(36), primary_key=True),
    Column("name", Text, nullable=False),
    *_counter_columns(),
    Column("country_id", String(36), ForeignKey("country.id"), nullable=False),
    Column("updated_at", DateTime(timezone=True)),
)

Index("ix_provinces_country_id", provinces.c.country_id)
