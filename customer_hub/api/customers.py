# customer_hub/api/customers.py

from typing import List

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.engine import Engine

from customer_hub.db.customers import fetch_customer, fetch_customers
from customer_hub.db.engine import get_engine
from customer_hub.models.customers import CustomerOut

router = APIRouter(prefix="/customers", tags=["customers"])


@router.get("/", response_model=List[CustomerOut])
def list_customers(engine: Engine = Depends(get_engine)) -> List[CustomerOut]:
    """
    Return all customers ordered by name. The raw import payload is never included.
    """
    with engine.connect() as conn:
        return fetch_customers(conn)


@router.get("/{customer_id}", response_model=CustomerOut)
def get_customer(customer_id: int, engine: Engine = Depends(get_engine)) -> CustomerOut:
    """
    Return a single customer by ID.
    """
    with engine.connect() as conn:
        customer = fetch_customer(conn, customer_id)

    if customer is None:
        raise HTTPException(status_code=404, detail="Customer not found")

    return customer
