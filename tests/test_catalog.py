"""
Kit catalog tests — registry lookups, templates, custom kit builder.
"""

import dataclasses

import pytest

from backend.catalog.builder import KitBuilder
from backend.catalog.kits import ESSENTIAL, PREDEFINED_KITS
from backend.catalog.registry import (
    get_kit,
    get_template,
    has_kit,
    list_kits,
    list_templates,
)
from backend.catalog.templates import KIT_TEMPLATES, TEMPLATE_CATEGORIES, template_estimate
from backend.pricing_engine import AdditionalCostCategory, Component, ProjectInput, compute_quote


# --- Registry ---

def test_predefined_kits_in_display_order():
    assert [k.id for k in list_kits()] == ["essential", "impact", "premium"]
    assert [k.base_area_m2 for k in list_kits()] == [20, 50, 100]


def test_get_kit_returns_predefined_and_template_kits():
    assert get_kit("essential") is ESSENTIAL
    assert get_kit("startup_essential").base_area_m2 == 15
    assert has_kit("corporate_premium")
    assert not has_kit("deluxe")


def test_get_kit_unknown_raises_with_available_ids():
    with pytest.raises(ValueError, match="essential"):
        get_kit("deluxe")


def test_every_kit_has_components_and_platform():
    kits = list(PREDEFINED_KITS) + [t.kit for t in KIT_TEMPLATES]
    for kit in kits:
        assert kit.components, kit.id
        assert kit.additional_costs.platform is not None, kit.id
        for comp in kit.components:
            assert comp.unit_cost > 0 and comp.quantity > 0, f"{kit.id}: {comp.name}"


def test_templates_filter_by_category():
    assert len(list_templates()) == 4
    for category in TEMPLATE_CATEGORIES:
        templates = list_templates(category)
        assert len(templates) == 1
        assert templates[0].category == category


def test_templates_unknown_category_raises():
    with pytest.raises(ValueError):
        list_templates("luxury")


def test_get_template_details():
    template = get_template("institutional_formal")
    assert template.kit.base_area_m2 == 60
    assert len(template.features) == 5
    with pytest.raises(ValueError):
        get_template("missing")


# --- Template estimate ---

def test_template_estimate_at_base_area():
    # 4255 purchase + 2100 services
    assert template_estimate(ESSENTIAL, 20) == pytest.approx(6355)


def test_template_estimate_matches_engine_inputs():
    """The quick estimate is purchase cost plus services, as priced by the engine."""
    kit = get_kit("commercial_impact")
    totals = compute_quote(kit, ProjectInput(area_m2=70)).totals
    assert template_estimate(kit, 70) == pytest.approx(
        totals.total_purchase_cost + totals.additional_costs_total
    )


# --- Builder ---

def test_blank_builder_matches_empty_custom_package():
    kit = KitBuilder.blank().build()
    assert kit.id == "custom"
    assert kit.base_area_m2 == 0
    assert kit.components == (Component("Component 1", 0.0, 0),)
    assert kit.additional_costs.platform == AdditionalCostCategory(0.0)


def test_builder_edits_produce_immutable_kit():
    kit = (
        KitBuilder()
        .set_details(kit_id="mine", name="My Stand", description="Corner stand")
        .set_base_area(12)
        .add_component("Profiles", 40, 10, 1.5)
        .add_component("Panels", 100, 6)
        .add_component("Spare", 1, 1)
        .update_component(1, quantity=8)
        .remove_component(2)
        .set_additional_cost("graphics", 500, 20)
        .set_additional_cost("installation", 300)
        .build()
    )
    assert kit.name == "My Stand"
    assert [c.name for c in kit.components] == ["Profiles", "Panels"]
    assert kit.components[1].quantity == 8
    assert kit.additional_costs.graphics == AdditionalCostCategory(500, 20)
    assert kit.additional_costs.platform is None
    with pytest.raises(dataclasses.FrozenInstanceError):
        kit.name = "changed"


def test_builder_from_kit_leaves_source_untouched():
    builder = KitBuilder.from_kit(ESSENTIAL).set_details(kit_id="essential_plus")
    builder.update_component(0, unit_cost=50).remove_platform()
    edited = builder.build()
    assert edited.components[0].unit_cost == 50
    assert edited.additional_costs.platform is None
    assert ESSENTIAL.components[0].unit_cost == 45
    assert ESSENTIAL.additional_costs.platform is not None


def test_builder_rejects_unknown_cost_category():
    with pytest.raises(ValueError, match="catering"):
        KitBuilder().set_additional_cost("catering", 100)
