"""Tests for domain models and derived link metrics."""

import pytest

from routewise.domain.errors import LinkValidationError, RouteWiseError
from routewise.domain.metrics import cost_of, emissions_of, time_of
from routewise.domain.models import (
    Link,
    Location,
    NewLink,
    PathResult,
    TransportMode,
    WeightSelector,
)

METRICS = [time_of, cost_of, emissions_of]


@pytest.mark.parametrize(
    "mode, minutes",
    [("CAR", 60.0), ("BUS", 90.0), ("METRO", 67.5), ("WALK", 1080.0)],
)
def test_time_of_uses_mode_speed(mode, minutes):
    assert time_of(90.0, mode) == pytest.approx(minutes)


@pytest.mark.parametrize(
    "mode, cost, co2",
    [
        ("CAR", 50.0, 17.1),
        ("BUS", 15.0, 8.9),
        ("METRO", 20.0, 4.1),
        ("WALK", 0.0, 0.0),
    ],
)
def test_cost_and_emissions_per_mode(mode, cost, co2):
    assert cost_of(100.0, mode) == pytest.approx(cost)
    assert emissions_of(100.0, mode) == pytest.approx(co2)


@pytest.mark.parametrize("metric", METRICS)
def test_unknown_mode_falls_back_to_car(metric):
    assert metric(42.0, "TRAIN") == pytest.approx(metric(42.0, "CAR"))


@pytest.mark.parametrize("metric", METRICS)
def test_metrics_accept_enum_and_lowercase(metric):
    assert metric(10.0, TransportMode.BUS) == metric(10.0, "BUS")
    assert metric(10.0, "bus") == metric(10.0, "BUS")


@pytest.mark.parametrize("mode", [m.value for m in TransportMode] + ["TRAIN"])
@pytest.mark.parametrize("metric", METRICS)
def test_metrics_are_zero_non_negative_and_monotonic(metric, mode):
    assert metric(0.0, mode) == 0
    values = [metric(d, mode) for d in (0.0, 1.0, 12.5, 300.0)]
    assert all(v >= 0 for v in values)
    assert values == sorted(values)
    if mode != "WALK" or metric is time_of:
        assert values[1] < values[2] < values[3]


def test_link_derived_properties():
    link = Link(1, 1, 2, 60.0, "BUS")

    assert link.time_minutes == pytest.approx(60.0)
    assert link.cost == pytest.approx(9.0)
    assert link.emissions_kg == pytest.approx(5.34)
    assert link.weight(WeightSelector.DISTANCE) == 60.0
    assert link.weight(WeightSelector.TIME) == link.time_minutes
    assert link.weight(WeightSelector.COST) == link.cost
    assert link.weight(WeightSelector.EMISSIONS) == link.emissions_kg


def test_link_other_end():
    link = Link(1, 3, 8, 5.0)

    assert link.other_end(3) == 8
    assert link.other_end(8) == 3
    with pytest.raises(ValueError):
        link.other_end(4)


def test_link_rejects_negative_distance():
    with pytest.raises(ValueError):
        Link(1, 1, 2, -1.0, "CAR")


def test_new_link_normalizes_mode():
    request = NewLink("Dubai", "Sharjah", 30.0, "metro")

    assert request.mode is TransportMode.METRO


@pytest.mark.parametrize("distance", [0.0, -5.0, float("nan")])
def test_new_link_requires_positive_distance(distance):
    with pytest.raises(LinkValidationError) as excinfo:
        NewLink("Dubai", "Sharjah", distance, "CAR")

    assert excinfo.value.field_name == "distance_km"


def test_new_link_rejects_unknown_mode():
    with pytest.raises(LinkValidationError) as excinfo:
        NewLink("Dubai", "Sharjah", 30.0, "BIKE")

    assert excinfo.value.field_name == "mode"
    assert isinstance(excinfo.value, RouteWiseError)
    assert "BIKE" in str(excinfo.value)


def test_path_result_sums_link_metrics():
    a, b, c = Location(1, "A"), Location(2, "B"), Location(3, "C")
    links = [Link(1, 1, 2, 30.0, "CAR"), Link(2, 2, 3, 160.0, "BUS")]

    result = PathResult.from_path([a, b, c], links, WeightSelector.COST)

    assert result.names == ("A", "B", "C")
    assert result.num_stops == 3
    assert result.num_hops == 2
    assert result.total_distance_km == 190.0
    assert result.total_time_minutes == pytest.approx(180.0)
    assert result.total_cost == pytest.approx(39.0)
    assert result.total_emissions_kg == pytest.approx(30 * 0.171 + 160 * 0.089)
    assert result.total_weight(WeightSelector.COST) == pytest.approx(result.total_cost)
