# scripts/ingest.py

import logging

from customer_hub.config import load_settings
from customer_hub.db.engine import engine_for
from customer_hub.db.schema import metadata
from customer_hub.logging_setup import configure_logging
from customer_hub.models.customers import ImportResult
from customer_hub.services.importer import import_customers
from customer_hub.services.sample_source import SampleCustomerSource

logger = logging.getLogger(__name__)


def run_import() -> ImportResult:
    """
    Same work as POST /api/import, without the web server.
    Creates the customers table if it does not exist yet.
    """
    settings = load_settings()
    source = SampleCustomerSource(
        url=settings.sample_customers_url,
        timeout_seconds=settings.sample_customers_timeout,
    )
    engine = engine_for(settings.database_url)
    metadata.create_all(engine)

    payloads = source.fetch()
    with engine.begin() as conn:
        return import_customers(conn, payloads)


def main():
    configure_logging(load_settings().log_level)
    result = run_import()

    logger.info("Customers imported:    %s", result.imported)
    logger.info("Customers skipped:     %s", result.skipped)


if __name__ == "__main__":
    main()
