# customer_hub/web/pages.py

from pathlib import Path

from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates
from sqlalchemy.engine import Engine

from customer_hub.db.customers import fetch_customers
from customer_hub.db.engine import get_engine

templates = Jinja2Templates(directory=str(Path(__file__).parent / "templates"))

router = APIRouter(tags=["pages"])


@router.get("/", response_class=HTMLResponse)
def customer_list_page(request: Request, engine: Engine = Depends(get_engine)):
    """
    Server-rendered customer list. Queries the database on every request.
    """
    with engine.connect() as conn:
        customers = fetch_customers(conn)

    return templates.TemplateResponse(
        request,
        "customers.html",
        {"customers": customers},
    )
