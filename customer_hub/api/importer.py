# customer_hub/api/importer.py

import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError

from customer_hub.api.deps import get_sample_source
from customer_hub.db.engine import get_engine
from customer_hub.models.customers import ImportResult
from customer_hub.services.importer import import_customers
from customer_hub.services.sample_source import SampleCustomerSource, SampleSourceError

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["import"])


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


@router.post(
    "/import",
    response_model=ImportResult,
    responses={500: {"description": "Database error"}, 502: {"description": "Sample source error"}},
)
def run_import(
    engine: Engine = Depends(get_engine),
    source: SampleCustomerSource = Depends(get_sample_source),
):
    """
    Fetch the sample customers and store the ones not seen before (matched by email).
    Returns {"imported": n, "skipped": m}; failures come back as {"error": "..."}.
    """
    try:
        payloads = source.fetch()
    except SampleSourceError as e:
        logger.error("Sample customer fetch failed: %s", e)
        return _error(502, str(e))

    logger.info("Fetched %s sample customers from %s", len(payloads), source.url)

    try:
        with engine.begin() as conn:
            return import_customers(conn, payloads)
    except SQLAlchemyError as e:
        logger.exception("Customer import failed")
        return _error(500, f"Database error: {e.__class__.__name__}")
