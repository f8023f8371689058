import math
from itertools import count

import pytest

from routewise.domain.errors import GraphError, InvalidLocationError, MalformedLinkError
from routewise.domain.models import Link, Location, WeightSelector
from routewise.graph.builder import build_graph
from routewise.graph.dijkstra import resolve

DUBAI = Location(1, "Dubai")
ABU_DHABI = Location(2, "Abu Dhabi")
SHARJAH = Location(3, "Sharjah")


def uae_graph():
    links = [
        Link(1, DUBAI.id, ABU_DHABI.id, 140.0, "CAR"),
        Link(2, DUBAI.id, SHARJAH.id, 30.0, "CAR"),
        Link(3, SHARJAH.id, ABU_DHABI.id, 160.0, "BUS"),
    ]
    return build_graph([DUBAI, ABU_DHABI, SHARJAH], links)


def make_graph(names, edges):
    """Build a graph from names and (from, to, km, mode) tuples."""
    locations = [Location(i, name) for i, name in enumerate(names, 1)]
    ids = {loc.name: loc.id for loc in locations}
    ids_gen = count(1)
    links = [
        Link(next(ids_gen), ids[a], ids[b], km, mode) for a, b, km, mode in edges
    ]
    by_name = {loc.name: loc for loc in locations}
    return build_graph(locations, links), by_name


def simple_path_weights(graph, start, end, selector):
    """Weights of every simple path between two ids, by exhaustive search."""
    weights = []

    def walk(node, seen, total):
        if node == end:
            weights.append(total)
            return
        for neighbor, link in graph.neighbors(node):
            if neighbor not in seen:
                walk(neighbor, seen | {neighbor}, total + link.weight(selector))

    walk(start, {start}, 0.0)
    return weights


def test_build_graph_contains_all_locations():
    isolated = Location(4, "Fujairah")
    graph = build_graph([DUBAI, ABU_DHABI, SHARJAH, isolated], [])

    assert list(graph) == [1, 2, 3, 4]
    assert graph.neighbors(isolated.id) == []
    assert graph.num_links == 0


def test_build_graph_indexes_each_link_under_both_endpoints():
    graph = uae_graph()

    for link_id in (1, 2, 3):
        holders = [
            (location_id, neighbor)
            for location_id in graph
            for neighbor, link in graph.neighbors(location_id)
            if link.id == link_id
        ]
        assert len(holders) == 2
        (a, to_b), (b, to_a) = holders
        assert to_b == b and to_a == a

    assert graph.num_links == 3


def test_build_graph_rejects_link_to_unknown_location():
    links = [Link(7, DUBAI.id, 99, 10.0, "CAR")]

    with pytest.raises(MalformedLinkError) as excinfo:
        build_graph([DUBAI, ABU_DHABI], links)

    assert excinfo.value.link_id == 7
    assert excinfo.value.missing_location_id == 99


def test_resolve_prefers_direct_link_by_distance():
    result = resolve(uae_graph(), DUBAI, ABU_DHABI, WeightSelector.DISTANCE)

    assert result.names == ("Dubai", "Abu Dhabi")
    assert [link.id for link in result.links] == [1]
    assert result.total_distance_km == 140.0
    assert result.total_time_minutes == pytest.approx(140 / 90 * 60)
    assert result.total_cost == pytest.approx(70.0)
    assert result.total_emissions_kg == pytest.approx(140 * 0.171)


def test_resolve_by_time_keeps_direct_car_link():
    result = resolve(uae_graph(), DUBAI, ABU_DHABI, WeightSelector.TIME)

    assert result.names == ("Dubai", "Abu Dhabi")
    assert result.total_time_minutes == pytest.approx(93.333, rel=1e-3)


@pytest.mark.parametrize("selector", [WeightSelector.COST, WeightSelector.EMISSIONS])
def test_resolve_by_cost_and_emissions_goes_through_sharjah(selector):
    result = resolve(uae_graph(), DUBAI, ABU_DHABI, selector)

    assert result.names == ("Dubai", "Sharjah", "Abu Dhabi")
    assert result.criterion is selector
    # Non-optimized metrics are plain sums along the chosen path.
    assert result.total_distance_km == 190.0
    assert result.total_time_minutes == pytest.approx(20.0 + 160.0)
    assert result.total_cost == pytest.approx(30 * 0.5 + 160 * 0.15)
    assert result.total_emissions_kg == pytest.approx(30 * 0.171 + 160 * 0.089)


def test_resolve_chooses_cheaper_multi_hop_path():
    graph, loc = make_graph(
        ["A", "B", "C"],
        [("A", "B", 3.0, "CAR"), ("A", "C", 10.0, "CAR"), ("B", "C", 4.0, "CAR")],
    )

    result = resolve(graph, loc["A"], loc["C"])

    assert result.names == ("A", "B", "C")
    assert result.total_distance_km == 7.0
    assert result.num_hops == 2


def test_resolve_traverses_links_against_stored_orientation():
    graph, loc = make_graph(["A", "B"], [("B", "A", 5.0, "BUS")])

    result = resolve(graph, loc["A"], loc["B"])

    assert result.names == ("A", "B")
    assert result.total_distance_km == 5.0


def test_resolve_same_endpoint_returns_zero_hop_path():
    for selector in WeightSelector:
        result = resolve(uae_graph(), SHARJAH, SHARJAH, selector)

        assert result.locations == (SHARJAH,)
        assert result.links == ()
        assert result.total_distance_km == 0
        assert result.total_time_minutes == 0
        assert result.total_cost == 0
        assert result.total_emissions_kg == 0


def test_resolve_returns_none_when_disconnected():
    graph, loc = make_graph(
        ["A", "B", "C", "D"],
        [("A", "B", 1.0, "CAR"), ("C", "D", 1.0, "CAR")],
    )

    for selector in WeightSelector:
        assert resolve(graph, loc["A"], loc["D"], selector) is None


def test_resolve_returns_none_after_removing_destination_links():
    locations = [DUBAI, ABU_DHABI, SHARJAH]
    links = [
        Link(1, DUBAI.id, ABU_DHABI.id, 140.0, "CAR"),
        Link(2, DUBAI.id, SHARJAH.id, 30.0, "CAR"),
        Link(3, SHARJAH.id, ABU_DHABI.id, 160.0, "BUS"),
    ]
    kept = [l for l in links if ABU_DHABI.id not in (l.from_id, l.to_id)]
    graph = build_graph(locations, kept)

    assert resolve(graph, DUBAI, ABU_DHABI) is None
    assert resolve(graph, SHARJAH, ABU_DHABI) is None


def test_resolve_rejects_location_outside_graph():
    with pytest.raises(InvalidLocationError) as excinfo:
        resolve(uae_graph(), DUBAI, Location(42, "Muscat"))

    assert excinfo.value.location_name == "Muscat"


def test_resolve_is_idempotent():
    graph = uae_graph()

    first = resolve(graph, DUBAI, ABU_DHABI, WeightSelector.COST)
    second = resolve(graph, DUBAI, ABU_DHABI, WeightSelector.COST)

    assert first == second


@pytest.mark.parametrize("selector", list(WeightSelector))
def test_resolve_total_weight_is_symmetric(selector):
    graph, loc = make_graph(
        ["A", "B", "C", "D", "E"],
        [
            ("A", "B", 12.0, "CAR"),
            ("B", "C", 4.0, "WALK"),
            ("A", "C", 30.0, "METRO"),
            ("C", "D", 8.0, "BUS"),
            ("B", "D", 25.0, "CAR"),
            ("D", "E", 3.0, "WALK"),
        ],
    )

    forward = resolve(graph, loc["A"], loc["E"], selector)
    backward = resolve(graph, loc["E"], loc["A"], selector)

    assert forward.total_weight(selector) == pytest.approx(
        backward.total_weight(selector)
    )


@pytest.mark.parametrize("selector", list(WeightSelector))
def test_resolve_beats_every_simple_path(selector):
    graph, loc = make_graph(
        ["A", "B", "C", "D", "E", "F"],
        [
            ("A", "B", 7.0, "CAR"),
            ("A", "C", 9.0, "BUS"),
            ("A", "F", 14.0, "METRO"),
            ("B", "C", 10.0, "WALK"),
            ("B", "D", 15.0, "CAR"),
            ("C", "D", 11.0, "BUS"),
            ("C", "F", 2.0, "WALK"),
            ("D", "E", 6.0, "METRO"),
            ("E", "F", 9.0, "CAR"),
        ],
    )

    result = resolve(graph, loc["A"], loc["E"], selector)
    candidates = simple_path_weights(graph, loc["A"].id, loc["E"].id, selector)

    assert result.total_weight(selector) <= min(candidates) + 1e-9


def test_ties_break_by_location_input_order():
    edges = [
        ("A", "B", 1.0, "CAR"),
        ("A", "C", 1.0, "CAR"),
        ("B", "D", 1.0, "CAR"),
        ("C", "D", 1.0, "CAR"),
    ]
    graph, loc = make_graph(["A", "B", "C", "D"], edges)
    assert resolve(graph, loc["A"], loc["D"]).names == ("A", "B", "D")

    graph, loc = make_graph(["A", "C", "B", "D"], edges)
    assert resolve(graph, loc["A"], loc["D"]).names == ("A", "C", "D")


def test_parallel_links_pick_best_mode_per_criterion():
    graph, loc = make_graph(
        ["A", "B"],
        [("A", "B", 5.0, "CAR"), ("A", "B", 5.0, "BUS")],
    )

    by_distance = resolve(graph, loc["A"], loc["B"], WeightSelector.DISTANCE)
    by_time = resolve(graph, loc["A"], loc["B"], WeightSelector.TIME)
    by_cost = resolve(graph, loc["A"], loc["B"], WeightSelector.COST)

    # Equal distance: the first link in input order wins.
    assert by_distance.links[0].mode == "CAR"
    assert by_time.links[0].mode == "CAR"
    assert by_cost.links[0].mode == "BUS"


def test_zero_weight_walk_links_still_form_a_path():
    graph, loc = make_graph(
        ["A", "B", "C"],
        [("A", "B", 2.0, "WALK"), ("B", "C", 3.0, "WALK")],
    )

    result = resolve(graph, loc["A"], loc["C"], WeightSelector.COST)

    assert result is not None
    assert result.names[0] == "A" and result.names[-1] == "C"
    assert result.total_cost == 0
    assert not math.isinf(result.total_distance_km)


def test_build_graph_rejects_repeated_location_id():
    with pytest.raises(GraphError) as excinfo:
        build_graph([DUBAI, Location(DUBAI.id, "Ajman")], [])

    assert "Dubai" in str(excinfo.value)
    assert "Ajman" in str(excinfo.value)


def test_resolve_accepts_custom_weight_function():
    graph, loc = make_graph(
        ["A", "B", "C"],
        [("A", "C", 10.0, "CAR"), ("A", "B", 4.0, "CAR"), ("B", "C", 4.0, "CAR")],
    )

    # Penalize every hop: the direct link wins despite being longer.
    result = resolve(graph, loc["A"], loc["C"], lambda link: link.distance_km + 100)

    assert result.names == ("A", "C")
    assert result.criterion is None
    assert result.total_distance_km == 10.0
    assert result.total_cost == pytest.approx(5.0)


def test_custom_weight_matching_a_selector_gives_same_path():
    graph = uae_graph()

    custom = resolve(graph, DUBAI, ABU_DHABI, lambda link: link.cost)
    builtin = resolve(graph, DUBAI, ABU_DHABI, WeightSelector.COST)

    assert custom.locations == builtin.locations
    assert custom.links == builtin.links
