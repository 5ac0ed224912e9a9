"""
Scaling for the income bars and growth line of the trend chart.

Bar heights are fractions of the tallest month. The growth line maps
[-max_growth, max_growth] onto the chart height, with x spread evenly
across the width. Charts without data collapse to flat bars and a
centred line.
"""

from dataclasses import dataclass
from typing import Sequence

from invoice_dashboard.models.dashboard import MonthBucket


@dataclass(frozen=True, slots=True)
class ChartScale:
    """
    Derived geometry for rendering a bucket series.

    Attributes:
        max_income: Largest bucket income.
        max_growth: Largest absolute growth value.
        income_ticks: Left axis values, top to bottom.
        growth_ticks: Right axis values, top to bottom.
        bar_heights: Per-bucket bar height as a fraction of the chart, 0-1.
        growth_points: Per-bucket (x, y) positions in percent of the chart box.
    """

    max_income: int
    max_growth: int
    income_ticks: tuple[float, ...]
    growth_ticks: tuple[float, ...]
    bar_heights: tuple[float, ...]
    growth_points: tuple[tuple[float, float], ...]

    def svg_path(self) -> str:
        """Return the growth line as SVG path data in a 0-100 viewBox."""
        return " ".join(
            f"{'M' if index == 0 else 'L'}{x:g},{y:g}"
            for index, (x, y) in enumerate(self.growth_points)
        )


def _x_position(index: int, count: int) -> float:
    if count <= 1:
        return 50.0
    return index / (count - 1) * 100


def chart_scale(buckets: Sequence[MonthBucket]) -> ChartScale:
    """Compute the chart geometry for a bucket series."""
    max_income = max((bucket.income for bucket in buckets), default=0)
    max_growth = max((abs(bucket.growth_percent) for bucket in buckets), default=0)

    bar_heights = tuple(
        bucket.income / max_income if max_income > 0 else 0.0 for bucket in buckets
    )
    growth_points = tuple(
        (
            _x_position(index, len(buckets)),
            100 - (bucket.growth_percent + max_growth) / (2 * max_growth) * 100
            if max_growth > 0
            else 50.0,
        )
        for index, bucket in enumerate(buckets)
    )
    return ChartScale(
        max_income=max_income,
        max_growth=max_growth,
        income_ticks=tuple(max_income * step for step in (1, 0.75, 0.5, 0.25, 0)),
        growth_ticks=tuple(max_growth * step for step in (1, 0.5, 0, -0.5, -1)),
        bar_heights=bar_heights,
        growth_points=growth_points,
    )
