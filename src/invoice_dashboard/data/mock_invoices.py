"""
Mock invoice dataset for the demo dashboard.

Generates a year of invoices ending at the reference date: 5 to 12
invoices per month, issued on day 1-28, due one month later, with
amounts between $25k and $225k and a random client, service and status.
"""

import random
from datetime import date, datetime

from invoice_dashboard.lib import dates
from invoice_dashboard.models.invoice import INVOICE_STATUSES, Invoice

CLIENTS: tuple[str, ...] = (
    "Acme Corporation",
    "Tech Solutions Ltd",
    "Digital Marketing Co",
    "StartupXYZ",
    "E-commerce Plus",
    "Creative Agency",
    "FinTech Innovations",
    "Healthcare Systems",
    "Education Platform",
    "Real Estate Pro",
    "Manufacturing Inc",
    "Retail Chain",
    "Consulting Group",
    "Media Company",
    "Software House",
    "Design Studio",
)

SERVICES: tuple[str, ...] = (
    "Web Development Services",
    "Mobile App Development",
    "SEO Optimization",
    "Full Stack Development",
    "E-commerce Platform",
    "Brand Identity Design",
    "Financial Dashboard",
    "Patient Management System",
    "Learning Management System",
    "Property Management App",
    "Inventory System",
    "CRM Development",
    "Marketing Campaign",
    "UI/UX Design",
    "Database Design",
    "API Development",
)

MONTHS_OF_DATA = 12
MIN_PER_MONTH = 5
MAX_PER_MONTH = 12
MIN_AMOUNT = 25_000
MAX_AMOUNT = 224_999


def generate_mock_invoices(
    now: date | datetime,
    rng: random.Random | None = None,
) -> list[Invoice]:
    """
    Generate the demo dataset.

    Args:
        now: Reference date; the newest month generated is now's month.
        rng: Random source, seed it for a repeatable dataset.

    Returns:
        Invoices sorted newest first, with ids of the form "{month}-{i}"
        where month counts back from now.
    """
    source = rng or random.Random()
    today = dates.as_date(now)
    invoices: list[Invoice] = []

    for month_offset in range(MONTHS_OF_DATA):
        year, month = dates.shift_month(today.year, today.month, -month_offset)
        for i in range(source.randint(MIN_PER_MONTH, MAX_PER_MONTH)):
            issued = date(year, month, source.randint(1, 28))
            invoices.append(
                Invoice(
                    id=f"{month_offset}-{i}",
                    client_name=source.choice(CLIENTS),
                    amount=source.randint(MIN_AMOUNT, MAX_AMOUNT),
                    date=issued,
                    due_date=dates.add_months(issued, 1),
                    status=source.choice(INVOICE_STATUSES),
                    description=source.choice(SERVICES),
                )
            )

    return sorted(invoices, key=lambda invoice: invoice.date, reverse=True)
