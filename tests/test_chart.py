"""Unit tests for trend chart scaling"""

from invoice_dashboard.engine.chart import chart_scale
from invoice_dashboard.models.dashboard import MonthBucket


def test_scale_from_buckets():
    buckets = [
        MonthBucket("Jan", 1, 2024, income=50, growth_percent=0),
        MonthBucket("Feb", 2, 2024, income=100, growth_percent=100),
    ]

    scale = chart_scale(buckets)

    assert scale.max_income == 100
    assert scale.max_growth == 100
    assert scale.bar_heights == (0.5, 1.0)
    assert scale.income_ticks == (100, 75, 50, 25, 0)
    assert scale.growth_ticks == (100, 50, 0, -50, -100)
    assert scale.growth_points == ((0.0, 50.0), (100.0, 0.0))
    assert scale.svg_path() == "M0,50 L100,0"


def test_negative_growth_sits_below_centre():
    buckets = [
        MonthBucket("Jan", 1, 2024, income=10, growth_percent=20),
        MonthBucket("Feb", 2, 2024, income=5, growth_percent=-20),
    ]
    scale = chart_scale(buckets)
    assert [y for _, y in scale.growth_points] == [0.0, 100.0]


def test_zero_data_does_not_divide_by_zero():
    buckets = [MonthBucket("Jan", 1, 2024), MonthBucket("Feb", 2, 2024), MonthBucket("Mar", 3, 2024)]

    scale = chart_scale(buckets)

    assert scale.bar_heights == (0.0, 0.0, 0.0)
    assert [y for _, y in scale.growth_points] == [50.0, 50.0, 50.0]
    assert [x for x, _ in scale.growth_points] == [0.0, 50.0, 100.0]


def test_single_and_empty_series():
    assert chart_scale([]).growth_points == ()
    single = chart_scale([MonthBucket("Jan", 1, 2024, income=3, growth_percent=5)])
    assert single.growth_points == ((50.0, 0.0),)
