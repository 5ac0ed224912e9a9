"""
Local support modules for the invoice dashboard.

Modules:
    logs: Logger factory with the shared format
    dates: Calendar month arithmetic used by the aggregation engine
"""

from invoice_dashboard.lib import dates, logs

__all__ = ["dates", "logs"]
