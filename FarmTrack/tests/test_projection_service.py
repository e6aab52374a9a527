from datetime import date, timedelta

import pytest

from enums.enums import AdgMethodEnum, PerformanceStatusEnum, UnavailableReasonEnum
from schemas.projection import (
    BatchSnapshot,
    FeedAggregate,
    FinancialProjection,
    GrowthPoint,
    HarvestProjection,
    Projection,
    ProjectionInputs,
    ProjectionUnavailable,
    WeightSampleIn,
)
from services.growth_standard_lookup import InMemoryGrowthStandardLookup
from services.projection_service import build_projection
from utils.errors import InputValidationError

ACQ = date(2025, 1, 1)
TODAY = ACQ + timedelta(days=20)

CURVE = [
    GrowthPoint(age_days=0, expected_weight_g=40),
    GrowthPoint(age_days=10, expected_weight_g=300),
    GrowthPoint(age_days=20, expected_weight_g=700),
    GrowthPoint(age_days=30, expected_weight_g=1200),
]


def make_inputs(samples=((10, 300), (20, 650)), curve=CURVE, **batch_fields):
    batch = dict(
        batch_id=1,
        species="Broiler",
        acquisition_date=ACQ,
        initial_quantity=1000,
        current_quantity=1000,
        total_cost=400_000,
        target_weight_g=2500,
        target_price_per_unit=4000,
    )
    batch.update(batch_fields)
    return ProjectionInputs(
        batch=BatchSnapshot(**batch),
        samples=[
            WeightSampleIn(date=ACQ + timedelta(days=day), average_weight_g=weight, sample_size=20)
            for day, weight in samples
        ],
        growth_standard=curve,
        feed=FeedAggregate(total_kg=1000, total_cost=900_000, fcr=1.7),
    )


def test_full_projection():
    result = build_projection(make_inputs(), today=TODAY)
    assert isinstance(result, Projection)
    assert result.age_days == 20
    assert result.current_weight_g == 650
    assert result.expected_weight_g == 700
    assert result.performance_index == pytest.approx(650 / 700 * 100)
    assert result.current_status == PerformanceStatusEnum.behind
    assert result.adg_method == AdgMethodEnum.two_samples
    assert result.adg_grams_per_day == pytest.approx(35)

    assert isinstance(result.harvest, HarvestProjection)
    assert result.harvest.days_remaining == 53  # ceil(1850 / 35)

    assert isinstance(result.financials, FinancialProjection)
    assert result.financials.feed_cost_per_kg == pytest.approx(900)
    assert result.financials.projected_revenue == pytest.approx(4_000_000)


def test_same_inputs_same_result():
    inputs = make_inputs()
    assert build_projection(inputs, today=TODAY) == build_projection(inputs, today=TODAY)


def test_today_from_inputs_when_not_passed():
    inputs = make_inputs().model_copy(update={"today": TODAY})
    assert build_projection(inputs).as_of == TODAY


def test_no_target_weight_keeps_growth_fields():
    result = build_projection(make_inputs(target_weight_g=None), today=TODAY)
    assert isinstance(result, Projection)
    assert result.performance_index is not None
    assert result.harvest.reason == UnavailableReasonEnum.no_target_weight
    assert result.financials.reason == UnavailableReasonEnum.no_target_weight


def test_no_curve_and_no_lookup():
    result = build_projection(make_inputs(curve=[]), today=TODAY)
    assert isinstance(result, ProjectionUnavailable)
    assert result.reason == UnavailableReasonEnum.no_growth_standard


def test_no_curve_and_no_samples():
    result = build_projection(make_inputs(samples=(), curve=[]), today=TODAY)
    assert result.reason == UnavailableReasonEnum.insufficient_samples


def test_lookup_resolves_breed_curve_by_name():
    lookup = InMemoryGrowthStandardLookup.from_reference_curves()
    inputs = make_inputs(curve=[], breed_name="ross_308")
    result = build_projection(inputs, lookup=lookup, today=TODAY)
    assert isinstance(result, Projection)


def test_no_samples_uses_curve_as_current_weight():
    result = build_projection(make_inputs(samples=()), today=TODAY)
    assert result.adg_method == AdgMethodEnum.curve_estimate
    assert result.performance_index == pytest.approx(100.0)
    assert result.current_status == PerformanceStatusEnum.on_track


def test_zero_expected_weight_is_unavailable():
    flat = [GrowthPoint(age_days=0, expected_weight_g=0)]
    result = build_projection(make_inputs(curve=flat), today=TODAY)
    assert result.reason == UnavailableReasonEnum.invalid_expected_weight


def test_inactive_batch():
    result = build_projection(make_inputs(status="sold"), today=TODAY)
    assert result.reason == UnavailableReasonEnum.batch_inactive


def test_out_of_order_samples_raise():
    with pytest.raises(InputValidationError):
        build_projection(make_inputs(samples=((20, 650), (10, 300))), today=TODAY)


def test_missing_fcr_only_affects_financials():
    inputs = make_inputs()
    inputs = inputs.model_copy(update={"feed": FeedAggregate()})
    result = build_projection(inputs, today=TODAY)
    assert isinstance(result.harvest, HarvestProjection)
    assert result.financials.reason == UnavailableReasonEnum.no_fcr


def test_overdue_target_date_flag():
    result = build_projection(make_inputs(target_harvest_date=TODAY - timedelta(days=3)), today=TODAY)
    assert result.target_harvest_overdue
    assert result.days_overdue == 3


def test_negative_sample_weight_raises_input_validation_error():
    inputs = make_inputs(samples=((10, 300), (20, -5)))
    with pytest.raises(InputValidationError) as exc:
        build_projection(inputs, today=TODAY)
    assert exc.value.errors[0]["loc"] == ["samples", 1, "average_weight_g"]
