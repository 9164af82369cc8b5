# customer_hub/db/schema.py

from sqlalchemy import JSON, Column, Integer, MetaData, String, Table

metadata = MetaData()

customers = Table(
    "customers",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("name", String, nullable=False, index=True),
    Column("email", String, nullable=False, unique=True),
    Column("phone", String, nullable=True),
    # original payload from the import source; never projected to views
    Column("raw", JSON, nullable=True),
)
