# customer_hub/api/deps.py

from fastapi import Depends

from customer_hub.config import Settings, load_settings
from customer_hub.services.sample_source import SampleCustomerSource


def get_settings() -> Settings:
    return load_settings()


def get_sample_source(settings: Settings = Depends(get_settings)) -> SampleCustomerSource:
    return SampleCustomerSource(
        url=settings.sample_customers_url,
        timeout_seconds=settings.sample_customers_timeout,
    )
