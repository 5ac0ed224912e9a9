"""
Reporting period selection.

The dashboard offers three preset windows and a custom range. A custom
range without both bounds behaves like the three month preset; the
resolver handles that fallback, the selector only records what the user
picked.
"""

from dataclasses import dataclass
from datetime import date

from invoice_dashboard.utils import format_display_date, parse_date

ONE_MONTH = "1Month"
THREE_MONTHS = "3Months"
ONE_YEAR = "1Year"
CUSTOM = "Custom"

PERIOD_KINDS: tuple[str, ...] = (ONE_MONTH, THREE_MONTHS, ONE_YEAR, CUSTOM)

PERIOD_LABELS: dict[str, str] = {
    ONE_MONTH: "Last Month",
    THREE_MONTHS: "Last 3 Months",
    ONE_YEAR: "Last Year",
    CUSTOM: "Custom Range",
}


@dataclass(frozen=True, slots=True)
class PeriodSelector:
    """
    The user's choice of reporting window.

    Attributes:
        kind: One of PERIOD_KINDS. Other values are accepted and treated
            as the three month window.
        start: First day of a custom range.
        end: Last day of a custom range.
    """

    kind: str = THREE_MONTHS
    start: date | None = None
    end: date | None = None

    @classmethod
    def one_month(cls) -> "PeriodSelector":
        return cls(ONE_MONTH)

    @classmethod
    def three_months(cls) -> "PeriodSelector":
        return cls(THREE_MONTHS)

    @classmethod
    def one_year(cls) -> "PeriodSelector":
        return cls(ONE_YEAR)

    @classmethod
    def custom(cls, start: date | None, end: date | None) -> "PeriodSelector":
        return cls(CUSTOM, start, end)

    @classmethod
    def from_value(
        cls, kind: str | None, start: str | None = None, end: str | None = None
    ) -> "PeriodSelector":
        """Build a selector from raw UI values (kind string and date inputs)."""
        resolved_kind = kind or THREE_MONTHS
        if resolved_kind != CUSTOM:
            return cls(resolved_kind)
        return cls(CUSTOM, parse_date(start), parse_date(end))

    @property
    def has_custom_bounds(self) -> bool:
        """True for a custom selector carrying both bounds."""
        return self.kind == CUSTOM and self.start is not None and self.end is not None

    @property
    def label(self) -> str:
        return PERIOD_LABELS.get(self.kind, PERIOD_LABELS[THREE_MONTHS])


@dataclass(frozen=True, slots=True)
class DateRange:
    """A resolved, inclusive reporting interval."""

    start: date
    end: date

    def contains(self, value: date) -> bool:
        """Inclusive on both ends; an inverted range contains nothing."""
        return self.start <= value <= self.end

    def formatted(self) -> tuple[str, str]:
        """Return (start, end) as display strings."""
        return format_display_date(self.start), format_display_date(self.end)
