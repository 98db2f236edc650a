"""
Kit comparison tests.
"""

import pytest

from backend.catalog.builder import KitBuilder
from backend.catalog.kits import ESSENTIAL, IMPACT, PREDEFINED_KITS, PREMIUM
from backend.comparator import compare_kits
from backend.pricing_engine import DEFAULT_CONFIG, ProjectInput, compute_quote


def test_ranked_cheapest_first():
    comparison = compare_kits(PREDEFINED_KITS, ProjectInput(area_m2=50), DEFAULT_CONFIG)
    pars = [e.result.totals.par for e in comparison.entries]
    assert pars == sorted(pars)
    assert comparison.best is comparison.entries[0]
    assert comparison.price_difference(comparison.best) == 0


def test_entries_match_individual_quotes():
    project = ProjectInput(area_m2=60)
    comparison = compare_kits([PREMIUM, ESSENTIAL], project, DEFAULT_CONFIG)
    by_id = {e.kit_id: e for e in comparison.entries}
    assert by_id["essential"].extra_area == 40
    assert by_id["premium"].extra_area == 0
    assert by_id["essential"].result.totals == compute_quote(ESSENTIAL, project, DEFAULT_CONFIG).totals


def test_rank_by_cost_per_m2():
    comparison = compare_kits(PREDEFINED_KITS, ProjectInput(area_m2=50), DEFAULT_CONFIG, rank_by="cost_per_m2")
    values = [e.result.totals.cost_per_m2 for e in comparison.entries]
    assert values == sorted(values)


def test_ties_keep_input_order():
    twin_a = KitBuilder().set_details(kit_id="a").add_component("Panel", 10, 1).build()
    twin_b = KitBuilder().set_details(kit_id="b").add_component("Panel", 10, 1).build()
    comparison = compare_kits([twin_b, twin_a], ProjectInput(area_m2=10), DEFAULT_CONFIG)
    assert [e.kit_id for e in comparison.entries] == ["b", "a"]


def test_price_difference_is_positive_for_dearer_kits():
    comparison = compare_kits([IMPACT, ESSENTIAL], ProjectInput(area_m2=20), DEFAULT_CONFIG)
    assert comparison.best.kit_id == "essential"
    assert comparison.price_difference(comparison.entries[1]) > 0


def test_empty_comparison_has_no_best():
    comparison = compare_kits([], ProjectInput(area_m2=20), DEFAULT_CONFIG)
    assert comparison.entries == []
    assert comparison.best is None


def test_unknown_rank_key():
    with pytest.raises(ValueError, match="rank_by"):
        compare_kits(PREDEFINED_KITS, ProjectInput(area_m2=20), DEFAULT_CONFIG, rank_by="ctp")
