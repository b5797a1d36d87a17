from __future__ import annotations

from math import inf, isclose, isnan

from flask.testing import FlaskClient


def scenario_payload(**overrides) -> dict:
    payload = {
        "principal": 1000.0,
        "annual_rate": 0.05,
        "compounds_per_year": 1,
        "years": 10,
    }
    payload.update(overrides)
    return payload


def test_ping_returns_pong(client: FlaskClient):
    response = client.get("/api/ping")

    assert response.status_code == 200
    assert response.json == {"message": "pong"}


def test_growth_endpoint(client: FlaskClient):
    resp = client.post("/api/calc/growth", json=scenario_payload())

    assert resp.status_code == 200
    body = resp.get_json()
    assert isclose(body["final_amount"], 1628.89, abs_tol=0.01)
    assert body["display"]["final_amount"] == "$1628.89"
    assert body["display"]["effective_annual_rate"] == "5.00%"
    assert body["display"]["growth_factor"] == "1.63x"


def test_growth_with_contributions_includes_comparison(client: FlaskClient):
    resp = client.post(
        "/api/calc/growth-with-contributions",
        json=scenario_payload(compounds_per_year=12, monthly_contribution=100),
    )

    assert resp.status_code == 200
    body = resp.get_json()
    assert body["total_contributions"] == 12000.0
    assert body["final_amount"] > body["without_contributions"]["final_amount"]
    assert isclose(
        body["difference"],
        body["final_amount"] - body["without_contributions"]["final_amount"],
    )


def test_time_to_target_reachable(client: FlaskClient):
    resp = client.post(
        "/api/calc/time-to-target",
        json={"principal": 1000, "target_amount": 2000, "annual_rate": 0.05, "compounds_per_year": 1},
    )

    body = resp.get_json()
    assert resp.status_code == 200
    assert body["reachable"] is True
    assert isclose(body["years"], 14.2, abs_tol=0.5)
    assert isclose(body["months"], body["years"] * 12)


def test_time_to_target_unreachable(client: FlaskClient):
    resp = client.post(
        "/api/calc/time-to-target",
        json={"principal": 1000, "target_amount": 500, "annual_rate": 0.05, "compounds_per_year": 1},
    )

    assert resp.status_code == 200
    assert resp.get_json() == {"reachable": False, "years": None, "months": None}


def test_principal_for_target(client: FlaskClient):
    ok = client.post(
        "/api/calc/principal-for-target",
        json={"target_amount": 2000, "annual_rate": 0.05, "compounds_per_year": 1, "years": 10},
    )
    infeasible = client.post(
        "/api/calc/principal-for-target",
        json={"target_amount": 2000, "annual_rate": 0.0, "compounds_per_year": 1, "years": 10},
    )

    assert ok.status_code == 200
    assert ok.get_json()["feasible"] is True
    assert ok.get_json()["display"] == "$1227.83"
    assert infeasible.get_json() == {"feasible": False, "principal": None, "display": None}


def test_breakdown_rows_are_ordered_by_year(client: FlaskClient):
    resp = client.post("/api/calc/breakdown", json=scenario_payload(years=5.5))

    assert resp.status_code == 200
    rows = resp.get_json()["rows"]
    assert [row["year"] for row in rows] == [1, 2, 3, 4, 5]
    assert isclose(rows[-1]["final_amount"], 1000 * 1.05 ** 5)


def test_weekly_tax_endpoint(client: FlaskClient):
    resp = client.post(
        "/api/calc/weekly-tax",
        json={
            "principal": 13500,
            "weekly_rate": 0.02,
            "weeks": 157,
            "weekly_contribution": 100,
            "capital_gains_tax": 0.37,
        },
    )

    assert resp.status_code == 200
    body = resp.get_json()
    assert [segment["periods"] for segment in body["segments"]] == [52, 52, 52, 1]
    assert body["total_tax_paid"] > 0
    assert body["final_after_tax"] < body["final_without_tax"]
    assert isclose(body["years"], 157 / 52)
    assert body["display"]["capital_gains_tax"] == "37.00%"


def test_frequency_comparison_defaults(client: FlaskClient):
    resp = client.post("/api/calc/frequencies", json={"principal": 10000, "annual_rate": 0.05, "years": 10})

    rows = resp.get_json()["rows"]
    assert [row["label"] for row in rows] == ["Annually", "Semi-annually", "Quarterly", "Monthly", "Daily"]
    finals = [row["final_amount"] for row in rows]
    assert finals == sorted(finals)


def test_frequency_comparison_custom(client: FlaskClient):
    resp = client.post(
        "/api/calc/frequencies",
        json={"principal": 100, "annual_rate": 0.1, "years": 1, "frequencies": {"Weekly": 52}},
    )

    rows = resp.get_json()["rows"]
    assert len(rows) == 1
    assert rows[0]["compounds_per_year"] == 52


def test_invalid_payload_returns_422(client: FlaskClient):
    resp = client.post("/api/calc/growth", json=scenario_payload(compounds_per_year=0))

    assert resp.status_code == 422
    body = resp.get_json()
    assert body["detail"][0]["loc"] == ["compounds_per_year"]


def test_unknown_field_is_rejected(client: FlaskClient):
    resp = client.post("/api/calc/growth", json=scenario_payload(rate=0.05))
    assert resp.status_code == 422


def test_tax_rate_above_one_is_rejected(client: FlaskClient):
    resp = client.post(
        "/api/calc/weekly-tax",
        json={"principal": 1, "weekly_rate": 0.01, "weeks": 10, "capital_gains_tax": 1.5},
    )
    assert resp.status_code == 422


def test_malformed_json_returns_400(client: FlaskClient):
    resp = client.post("/api/calc/growth", data="{not json", content_type="application/json")
    assert resp.status_code == 400


def test_long_horizon_growth_is_not_a_server_error(client: FlaskClient):
    resp = client.post("/api/calc/growth", json=scenario_payload(compounds_per_year=365, years=20000))

    assert resp.status_code == 200
    assert resp.get_json()["final_amount"] == inf


def test_long_horizon_principal_for_target(client: FlaskClient):
    resp = client.post(
        "/api/calc/principal-for-target",
        json={"target_amount": 2000, "annual_rate": 0.05, "compounds_per_year": 365, "years": 20000},
    )

    assert resp.status_code == 200
    body = resp.get_json()
    assert body["feasible"] is True
    assert body["principal"] == 0.0


def test_negative_compounding_base_returns_nan(client: FlaskClient):
    resp = client.post("/api/calc/growth", json=scenario_payload(annual_rate=-2.0, years=0.5))

    assert resp.status_code == 200
    assert isnan(resp.get_json()["final_amount"])
