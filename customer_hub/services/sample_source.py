# customer_hub/services/sample_source.py

from dataclasses import dataclass
from typing import Any, Dict, List, Optional

import httpx

from customer_hub.config import DEFAULT_SAMPLE_CUSTOMERS_URL


class SampleSourceError(RuntimeError):
    pass


@dataclass(frozen=True)
class SampleCustomerSource:
    """
    Remote endpoint serving a JSON array of sample customer objects.
    """

    url: str = DEFAULT_SAMPLE_CUSTOMERS_URL
    timeout_seconds: float = 10.0
    transport: Optional[httpx.BaseTransport] = None

    def fetch(self) -> List[Dict[str, Any]]:
        try:
            with httpx.Client(timeout=self.timeout_seconds, transport=self.transport) as client:
                resp = client.get(self.url, headers={"Accept": "application/json"})
        except httpx.HTTPError as e:
            raise SampleSourceError(f"Could not reach sample source: {e}") from e

        if resp.is_error:
            raise SampleSourceError(
                f"HTTP {resp.status_code} from sample source: {resp.text[:300]}"
            )

        try:
            data = resp.json()
        except ValueError as e:
            raise SampleSourceError("Invalid JSON from sample source") from e

        if not isinstance(data, list) or not all(isinstance(item, dict) for item in data):
            raise SampleSourceError("Sample source did not return a list of objects")

        return data
