"""
HTTP API tests — catalog, quoting, history, downloads, comparison, configurations.
"""

import pytest


PROJECT = {"area_m2": 20, "client_name": "Acme Fairs", "project_name": "Spring Expo"}


def _save(client, **overrides):
    payload = {"kit_id": "essential", "project": PROJECT}
    payload.update(overrides)
    resp = client.post("/api/quotes/", json=payload)
    assert resp.status_code == 200, resp.text
    return resp.json()


def test_health(client):
    resp = client.get("/health")
    assert resp.status_code == 200
    assert resp.json()["status"] == "ok"


# --- Catalog ---

def test_list_kits(client):
    kits = client.get("/api/kits/").json()
    assert [k["id"] for k in kits] == ["essential", "impact", "premium"]
    assert kits[0]["additional_costs"]["platform"]["base_cost"] == 400


def test_get_kit_and_unknown(client):
    assert client.get("/api/kits/premium").json()["base_area_m2"] == 100
    assert client.get("/api/kits/deluxe").status_code == 404


def test_templates(client):
    templates = client.get("/api/kits/templates").json()
    assert len(templates) == 4
    assert all(t["estimate_area_m2"] == 50 for t in templates)

    startup = client.get("/api/kits/templates?category=startup").json()
    assert [t["id"] for t in startup] == ["startup_essential"]

    assert client.get("/api/kits/templates?category=luxury").status_code == 400
    assert client.get("/api/kits/templates/missing").status_code == 404

    detail = client.get("/api/kits/templates/corporate_premium?area_m2=80").json()
    assert detail["kit"]["base_area_m2"] == 80
    assert detail["estimated_cost"] > 0


# --- Calculation ---

def test_calculate_catalog_kit(client):
    resp = client.post("/api/quotes/calculate", json={"kit_id": "essential", "project": PROJECT})
    assert resp.status_code == 200
    data = resp.json()
    assert data["validation"]["can_calculate"] is True
    totals = data["result"]["totals"]
    assert totals["ctp"] == pytest.approx(2422.332)
    assert totals["par"] == pytest.approx(3726.6646, abs=1e-4)
    assert totals["par_with_vat"] == pytest.approx(4509.2642, abs=1e-4)
    assert len(data["result"]["breakdown"]["components"]) == 5


def test_calculate_with_custom_config(client):
    config = {
        "lifespan_years": 10, "annual_usage_frequency": 5, "breakage_rate": 0.02,
        "overhead_rate": 0.10, "margin_rate": 0.35, "vat_rate": 0,
    }
    data = client.post(
        "/api/quotes/calculate",
        json={"kit_id": "essential", "project": PROJECT, "config": config},
    ).json()
    totals = data["result"]["totals"]
    assert totals["par_with_vat"] == totals["par"]


def test_calculate_inline_kit(client):
    kit = {
        "name": "Pop-up",
        "base_area_m2": 10,
        "components": [{"name": "Panel", "unit_cost": 100, "quantity": 10, "cost_per_extra_m2": 5}],
        "additional_costs": {"graphics": {"base_cost": 200, "cost_per_extra_m2": 10}},
    }
    data = client.post(
        "/api/quotes/calculate",
        json={"kit": kit, "kit_id": "essential", "project": {"area_m2": 14}},
    ).json()
    result = data["result"]
    assert result["kit"]["id"] == "custom"
    assert result["totals"]["extra_area"] == 4
    assert result["totals"]["total_purchase_cost"] == pytest.approx(1020)
    assert result["breakdown"]["additional_costs"]["platform"] is None
    assert result["breakdown"]["additional_costs"]["graphics"] == pytest.approx(240)


def test_calculate_blocked_by_validation(client):
    resp = client.post("/api/quotes/calculate", json={"kit_id": "essential", "project": {"area_m2": 0}})
    assert resp.status_code == 422
    detail = resp.json()["detail"]
    assert detail["can_calculate"] is False
    assert "area_m2" in {i["field"] for i in detail["issues"] if i["level"] == "error"}


def test_calculate_kit_resolution_errors(client):
    assert client.post("/api/quotes/calculate", json={"project": PROJECT}).status_code == 400
    assert client.post(
        "/api/quotes/calculate", json={"kit_id": "deluxe", "project": PROJECT}
    ).status_code == 404


# --- History ---

def test_save_and_get_quote(client):
    saved = _save(client)
    assert saved["title"] == "Quote Essential - Acme Fairs"
    assert saved["par"] == pytest.approx(3726.6646, abs=1e-4)

    fetched = client.get(f"/api/quotes/{saved['id']}").json()
    assert fetched["result"]["totals"]["ctp"] == pytest.approx(2422.332)


def test_history_newest_first_without_results(client):
    first = _save(client, title="first")
    second = _save(client, kit_id="impact", title="second")

    history = client.get("/api/quotes/").json()
    assert [q["id"] for q in history] == [second["id"], first["id"]]
    assert "result" not in history[0]
    assert history[0]["kit_id"] == "impact"


def test_delete_quote(client):
    saved = _save(client)
    assert client.delete(f"/api/quotes/{saved['id']}").json() == {"ok": True}
    assert client.get(f"/api/quotes/{saved['id']}").status_code == 404
    assert client.delete(f"/api/quotes/{saved['id']}").status_code == 404


def test_save_blocked_by_validation_stores_nothing(client):
    config = {
        "lifespan_years": 0, "annual_usage_frequency": 5, "breakage_rate": 0.02,
        "overhead_rate": 0.10, "margin_rate": 0.35, "vat_rate": 0.21,
    }
    resp = client.post("/api/quotes/", json={"kit_id": "essential", "project": PROJECT, "config": config})
    assert resp.status_code == 422
    assert client.get("/api/quotes/").json() == []


# --- Downloads ---

def test_download_pdf(client):
    saved = _save(client)
    resp = client.get(f"/api/quotes/{saved['id']}/pdf")
    assert resp.status_code == 200
    assert resp.headers["content-type"] == "application/pdf"
    assert f"quote_essential_{saved['id']}.pdf" in resp.headers["content-disposition"]
    assert resp.content.startswith(b"%PDF")


def test_download_xlsx(client):
    saved = _save(client)
    resp = client.get(f"/api/quotes/{saved['id']}/xlsx")
    assert resp.status_code == 200
    assert resp.headers["content-type"].startswith("application/vnd.openxmlformats")
    assert resp.content.startswith(b"PK")


def test_download_missing_quote(client):
    assert client.get("/api/quotes/999/pdf").status_code == 404
    assert client.get("/api/quotes/999/xlsx").status_code == 404


# --- Comparison ---

def test_compare_all_predefined(client):
    data = client.post("/api/compare/", json={"project": {"area_m2": 50}}).json()
    entries = data["entries"]
    assert len(entries) == 3
    assert [e["rank"] for e in entries] == [1, 2, 3]
    assert data["best_kit_id"] == entries[0]["kit_id"]
    assert entries[0]["difference_to_best"] == 0
    assert [e["par"] for e in entries] == sorted(e["par"] for e in entries)


def test_compare_selected_by_cost_per_m2(client):
    data = client.post(
        "/api/compare/",
        json={"kit_ids": ["premium", "essential"], "project": {"area_m2": 30}, "rank_by": "cost_per_m2"},
    ).json()
    assert data["rank_by"] == "cost_per_m2"
    assert {e["kit_id"] for e in data["entries"]} == {"premium", "essential"}


def test_compare_errors(client):
    assert client.post(
        "/api/compare/", json={"kit_ids": ["deluxe"], "project": {"area_m2": 30}}
    ).status_code == 404
    assert client.post(
        "/api/compare/", json={"project": {"area_m2": 30}, "rank_by": "ctp"}
    ).status_code == 400

    resp = client.post("/api/compare/", json={"kit_ids": ["essential"], "project": {"area_m2": 0}})
    assert resp.status_code == 422
    assert "essential" in resp.json()["detail"]


# --- Configurations ---

CONFIG = {
    "lifespan_years": 8, "annual_usage_frequency": 6, "breakage_rate": 0.03,
    "overhead_rate": 0.12, "margin_rate": 0.4, "vat_rate": 0.21,
}


def test_default_configuration(client):
    assert client.get("/api/configurations/default").json() == {
        "lifespan_years": 10, "annual_usage_frequency": 5, "breakage_rate": 0.02,
        "overhead_rate": 0.10, "margin_rate": 0.35, "vat_rate": 0.21,
    }


def test_configuration_crud(client):
    created = client.post("/api/configurations/", json={"name": "Trade fair", "config": CONFIG}).json()
    assert created["config"] == CONFIG

    duplicate = client.post("/api/configurations/", json={"name": "Trade fair", "config": CONFIG})
    assert duplicate.status_code == 400

    assert client.get(f"/api/configurations/{created['id']}").json()["name"] == "Trade fair"
    assert [c["name"] for c in client.get("/api/configurations/").json()] == ["Trade fair"]

    assert client.delete(f"/api/configurations/{created['id']}").json() == {"ok": True}
    assert client.get(f"/api/configurations/{created['id']}").status_code == 404


def test_configuration_export_import(client):
    client.post("/api/configurations/", json={"name": "Trade fair", "config": CONFIG})
    exported = client.get("/api/configurations/export").json()
    assert len(exported) == 1

    records = exported + [{"name": "Summer", "config": dict(CONFIG, margin_rate=0.3)}, {"name": "Bad"}]
    resp = client.post("/api/configurations/import", json=records)
    assert resp.json() == {"ok": True, "imported": 1}
    assert len(client.get("/api/configurations/").json()) == 2


# --- Non-finite and overflowing input ---

NAN_CONFIG_BODY = (
    '{"kit_id": "essential", "project": {"area_m2": 20}, "config": {'
    '"lifespan_years": 10, "annual_usage_frequency": 5, "breakage_rate": 0.02, '
    '"overhead_rate": 0.10, "margin_rate": NaN, "vat_rate": 0.21}}'
)


@pytest.mark.parametrize("path", ["/api/quotes/calculate", "/api/quotes/"])
def test_nan_config_answers_422(client, path):
    resp = client.post(path, content=NAN_CONFIG_BODY, headers={"Content-Type": "application/json"})
    assert resp.status_code == 422
    detail = resp.json()["detail"]
    assert detail["can_calculate"] is False
    assert [i["field"] for i in detail["issues"] if i["level"] == "error"] == ["margin_rate"]
    assert client.get("/api/quotes/").json() == []


def test_infinite_area_answers_422(client):
    body = '{"kit_id": "essential", "project": {"area_m2": Infinity}}'
    resp = client.post("/api/quotes/calculate", content=body, headers={"Content-Type": "application/json"})
    assert resp.status_code == 422
    assert resp.json()["detail"]["issues"][0]["field"] == "area_m2"


def test_overflowing_area_answers_422(client):
    resp = client.post("/api/quotes/calculate", json={"kit_id": "essential", "project": {"area_m2": 1e308}})
    assert resp.status_code == 422
    assert "totals" in {i["field"] for i in resp.json()["detail"]["issues"]}

    resp = client.post("/api/compare/", json={"kit_ids": ["essential"], "project": {"area_m2": 1e308}})
    assert resp.status_code == 422


# --- History search, ordering and clearing ---

def _save_history(client):
    _save(client, project=dict(PROJECT, client_name="Zeta Events", project_name="Autumn Fair"), title="Zeta stand")
    _save(client, kit_id="premium", project={"area_m2": 100, "client_name": "alpha Group", "project_name": "Motor Show"})
    _save(client, kit_id="impact", project={"area_m2": 50, "project_name": "Book Fair"})


def test_history_search(client):
    _save_history(client)
    assert [q["client_name"] for q in client.get("/api/quotes/?q=zeta").json()] == ["Zeta Events"]
    assert [q["kit_id"] for q in client.get("/api/quotes/?q=PREMIUM").json()] == ["premium"]
    assert len(client.get("/api/quotes/?q=fair").json()) == 2
    assert client.get("/api/quotes/?q=nothing-like-this").json() == []


def test_history_order_by(client):
    _save_history(client)
    by_date = client.get("/api/quotes/").json()
    assert [q["kit_id"] for q in by_date] == ["impact", "premium", "essential"]

    by_price = client.get("/api/quotes/?order_by=price").json()
    assert [q["kit_id"] for q in by_price] == ["premium", "impact", "essential"]
    assert by_price[0]["par"] > by_price[1]["par"] > by_price[2]["par"]

    by_client = client.get("/api/quotes/?order_by=client").json()
    assert [q["client_name"] for q in by_client] == [None, "alpha Group", "Zeta Events"]

    assert client.get("/api/quotes/?order_by=kit").status_code == 400


def test_clear_history(client):
    _save_history(client)
    assert client.delete("/api/quotes/").json() == {"ok": True, "deleted": 3}
    assert client.get("/api/quotes/").json() == []
    assert client.delete("/api/quotes/").json() == {"ok": True, "deleted": 0}
