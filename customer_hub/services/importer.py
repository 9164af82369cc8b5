# customer_hub/services/importer.py

import logging
from typing import Any, Dict, Iterable, Optional

from pydantic import BaseModel, EmailStr, ValidationError
from sqlalchemy.dialects.postgresql import insert as postgresql_insert
from sqlalchemy.dialects.sqlite import insert as sqlite_insert
from sqlalchemy.engine import Connection

from customer_hub.db.schema import customers
from customer_hub.models.customers import ImportResult

logger = logging.getLogger(__name__)

_INSERTS = {
    "sqlite": sqlite_insert,
    "postgresql": postgresql_insert,
}


class CustomerIn(BaseModel):
    name: str
    email: EmailStr
    phone: Optional[str] = None


def _clean(value: Any) -> Any:
    if isinstance(value, str):
        return value.strip() or None
    return value


def to_customer_row(payload: Dict[str, Any]) -> Dict[str, Any]:
    """
    Map one sample-source object to a customers row.

    Raises pydantic.ValidationError when name or email is missing or invalid.
    """
    customer = CustomerIn(
        name=_clean(payload.get("name")) or "",
        email=_clean(payload.get("email")) or "",
        phone=_clean(payload.get("phone")),
    )
    if not customer.name:
        raise ValueError("customer name is empty")

    return {
        "name": customer.name,
        "email": str(customer.email),
        "phone": customer.phone,
        "raw": payload,
    }


def insert_customer(conn: Connection, row: Dict[str, Any]) -> bool:
    """
    Insert a customer unless one with the same email already exists.

    Returns True when a row was actually written.
    """
    try:
        insert = _INSERTS[conn.dialect.name]
    except KeyError:
        raise NotImplementedError(f"Unsupported database dialect: {conn.dialect.name}")

    stmt = (
        insert(customers)
        .values(**row)
        .on_conflict_do_nothing(index_elements=[customers.c.email])
    )
    result = conn.execute(stmt)
    return result.rowcount == 1


def import_customers(conn: Connection, payloads: Iterable[Dict[str, Any]]) -> ImportResult:
    imported = 0
    skipped = 0

    for n, payload in enumerate(payloads, start=1):
        try:
            row = to_customer_row(payload)
        except (ValidationError, ValueError) as e:
            skipped += 1
            logger.warning("Skipping sample record %s: %s", n, e)
            continue

        if insert_customer(conn, row):
            imported += 1
        else:
            skipped += 1

    logger.info("Customer import finished: imported=%s skipped=%s", imported, skipped)
    return ImportResult(imported=imported, skipped=skipped)
