"""
Service factory for the invoice dashboard.

get_invoice_service() returns the InvoiceService implementation selected
by configuration.

Available Implementations:
- demo: Randomly generated invoices (INVOICE_DASHBOARD_SEED for a fixed dataset)
- json: Invoices read from the file named by INVOICE_DASHBOARD_DATA

The service is cached per kind, so the same instance is reused across
requests. Configure via the INVOICE_DASHBOARD_SERVICE environment variable.
"""

import os
from functools import cache
from typing import Callable, Dict

from invoice_dashboard.lib import logs
from invoice_dashboard.services.invoice_service import InvoiceService
from invoice_dashboard.services.invoice_service_demo import DemoInvoiceService
from invoice_dashboard.services.invoice_service_json import JsonInvoiceService

LOG = logs.logger(__file__)


def _seed() -> int | None:
    value = os.getenv("INVOICE_DASHBOARD_SEED", "").strip()
    if not value:
        return None
    try:
        return int(value)
    except ValueError as exc:
        raise ValueError(f"INVOICE_DASHBOARD_SEED must be an integer: {value}") from exc


def _json_service() -> JsonInvoiceService:
    path = os.getenv("INVOICE_DASHBOARD_DATA")
    if not path:
        raise ValueError("INVOICE_DASHBOARD_DATA is not set")
    return JsonInvoiceService(path)


_SERVICE_REGISTRY: Dict[str, Callable[[], InvoiceService]] = {
    "demo": lambda: DemoInvoiceService(seed=_seed()),
    "json": _json_service,
}


@cache
def get_invoice_service(kind: str | None = None) -> InvoiceService:
    """Return the configured invoice service implementation."""
    resolved_kind = (kind or os.getenv("INVOICE_DASHBOARD_SERVICE", "demo")).lower()
    LOG.info("get_invoice_service - kind:%s resolved_kind:%s", kind, resolved_kind)
    try:
        factory = _SERVICE_REGISTRY[resolved_kind]
    except KeyError as exc:
        msg = f"Unknown invoice service kind: {resolved_kind}"
        raise ValueError(msg) from exc
    return factory()


__all__ = [
    "DemoInvoiceService",
    "InvoiceService",
    "JsonInvoiceService",
    "get_invoice_service",
]
