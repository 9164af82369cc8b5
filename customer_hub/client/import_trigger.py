# customer_hub/client/import_trigger.py
"""
Client-side controller for the "Import Customers" action.

Mirrors the button on the customer list page: one POST to the import
endpoint per activation, a loading flag that blocks re-entry, and a status
message describing the outcome. Instead of reloading a page, a successful
import calls an explicit refresh that re-fetches the customer list.

Usage:
    with httpx.Client(base_url="http://localhost:8000") as http:
        trigger = ImportTrigger(http)
        status = trigger.trigger_import()
        print(status.kind, status.message)
"""

import logging
from dataclasses import dataclass
from typing import Any, Callable, List, Optional

import httpx

from customer_hub.models.customers import CustomerOut

logger = logging.getLogger(__name__)

ALREADY_SYNCED_MESSAGE = "Already synced. No new customers to import."
GENERIC_FAILURE_MESSAGE = "Import failed. Please try again."
UNEXPECTED_RESPONSE_MESSAGE = "Unexpected response from server."


@dataclass(frozen=True)
class ImportStatus:
    kind: str  # "success" | "info" | "error"
    message: str


def imported_message(count: int) -> str:
    noun = "customer" if count == 1 else "customers"
    return f"{count} {noun} imported!"


def error_reason(response: httpx.Response) -> str:
    """
    The server's reason for a failed import: the JSON "error" field or a bare
    JSON string, else the plain-text body, else a generic message.
    """
    try:
        body = response.json()
    except ValueError:
        body = None

    if isinstance(body, str):
        return body.strip() or GENERIC_FAILURE_MESSAGE

    if isinstance(body, dict):
        reason = body.get("error")
        if isinstance(reason, str) and reason.strip():
            return reason.strip()
        return GENERIC_FAILURE_MESSAGE

    return response.text.strip() or GENERIC_FAILURE_MESSAGE


class ImportTrigger:
    """Stateful import control.

    Attributes:
        loading: True while an import request is in flight
        status: Outcome of the last import, cleared on the next activation
        customers: Customer list returned by the most recent default refresh
    """

    def __init__(
        self,
        client: httpx.Client,
        refresh: Optional[Callable[[], Any]] = None,
        endpoint: str = "/api/import",
        customers_endpoint: str = "/customers/",
    ):
        self.client = client
        self.endpoint = endpoint
        self.customers_endpoint = customers_endpoint
        self.refresh = refresh if refresh is not None else self.fetch_customers
        self.loading = False
        self.status: Optional[ImportStatus] = None
        self.customers: List[CustomerOut] = []

    @property
    def disabled(self) -> bool:
        return self.loading

    def dismiss(self) -> None:
        self.status = None

    def fetch_customers(self) -> List[CustomerOut]:
        response = self.client.get(self.customers_endpoint)
        response.raise_for_status()
        self.customers = [CustomerOut(**item) for item in response.json()]
        return self.customers

    def trigger_import(self) -> Optional[ImportStatus]:
        """Run one import.

        Returns:
            The resulting status, or None if an import is already in flight
        """
        if self.loading:
            return None

        self.loading = True
        self.status = None
        try:
            self.status = self._run()
            return self.status
        finally:
            self.loading = False

    def _run(self) -> ImportStatus:
        try:
            response = self.client.post(self.endpoint)
        except httpx.RequestError as e:
            logger.warning("Import request failed: %s", e)
            return ImportStatus("error", f"Request error: {e}")

        if response.is_error:
            return ImportStatus("error", error_reason(response))

        try:
            body = response.json()
        except ValueError:
            return ImportStatus("error", UNEXPECTED_RESPONSE_MESSAGE)

        imported = body.get("imported") if isinstance(body, dict) else None
        # bool is an int subclass
        if not isinstance(imported, int) or isinstance(imported, bool) or imported < 0:
            return ImportStatus("error", UNEXPECTED_RESPONSE_MESSAGE)

        if imported == 0:
            return ImportStatus("info", ALREADY_SYNCED_MESSAGE)

        status = ImportStatus("success", imported_message(imported))
        # status is visible while the list refreshes
        self.status = status
        try:
            self.refresh()
        except httpx.HTTPError as e:
            logger.warning("Customer list refresh failed: %s", e)
            return ImportStatus("error", f"Request error: {e}")
        return status
