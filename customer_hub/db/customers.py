# customer_hub/db/customers.py

from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.engine import Connection

from customer_hub.db.schema import customers
from customer_hub.models.customers import CustomerOut

# Everything except the raw import payload.
_PUBLIC_COLUMNS = (
    customers.c.id,
    customers.c.name,
    customers.c.email,
    customers.c.phone,
)


def _row_to_customer(row) -> CustomerOut:
    return CustomerOut(
        id=row["id"],
        name=row["name"],
        email=row["email"],
        phone=row["phone"],
    )


def fetch_customers(conn: Connection) -> List[CustomerOut]:
    """
    All customers ordered by name (the database's default collation).
    """
    stmt = select(*_PUBLIC_COLUMNS).order_by(customers.c.name.asc())
    rows = conn.execute(stmt).mappings().all()
    return [_row_to_customer(row) for row in rows]


def fetch_customer(conn: Connection, customer_id: int) -> Optional[CustomerOut]:
    stmt = select(*_PUBLIC_COLUMNS).where(customers.c.id == customer_id)
    row = conn.execute(stmt).mappings().first()
    if row is None:
        return None
    return _row_to_customer(row)
