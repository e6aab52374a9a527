from datetime import timedelta

import pytest


def test_health(client):
    r = client.get("/health")
    assert r.status_code == 200
    assert r.json() == {"status": "ok"}


# ==================== /batches ====================

def test_batch_projection(client, seeded_db, make_batch):
    batch = make_batch(
        age_days=30,
        samples=[(20, 850), (30, 1400)],
        feed=[(10, 2000, 1_800_000)],
        target_weight_g=2800,
        target_price_per_unit=5000,
    )

    r = client.get(f"/batches/{batch.batch_id}/projection")
    assert r.status_code == 200, r.text
    data = r.json()
    assert data["kind"] == "projection"
    assert data["age_days"] == 30
    assert data["adg_method"] == "two_samples"
    assert data["adg_grams_per_day"] == pytest.approx(55)
    assert data["current_status"] == "behind"

    assert data["harvest"]["kind"] == "harvest"
    assert data["harvest"]["days_remaining"] == 26  # ceil(1400 / 55)
    assert data["financials"]["kind"] == "financials"
    assert data["financials"]["feed_cost_per_kg"] == pytest.approx(900)


def test_batch_projection_without_target_weight(client, seeded_db, make_batch):
    batch = make_batch(age_days=30, samples=[(30, 1600)])

    data = client.get(f"/batches/{batch.batch_id}/projection").json()
    assert data["kind"] == "projection"
    assert data["harvest"] == {
        "kind": "unavailable",
        "reason": "no_target_weight",
        "detail": "Datos insuficientes: el lote no tiene peso objetivo",
    }
    assert data["financials"]["reason"] == "no_target_weight"


def test_batch_projection_inactive(client, seeded_db, make_batch):
    batch = make_batch(status="sold", samples=[(30, 1600)])
    data = client.get(f"/batches/{batch.batch_id}/projection").json()
    assert data["kind"] == "unavailable"
    assert data["reason"] == "batch_inactive"


def test_batch_projection_without_growth_standard(client, make_batch):
    batch = make_batch(species="Duck", samples=[(30, 1600)])
    data = client.get(f"/batches/{batch.batch_id}/projection").json()
    assert data["reason"] == "no_growth_standard"


def test_batch_projection_with_stored_negative_sample(client, seeded_db, make_batch):
    batch = make_batch(age_days=20, samples=[(10, 300), (20, -5)])

    r = client.get(f"/batches/{batch.batch_id}/projection")
    assert r.status_code == 422
    body = r.json()
    assert body["error"] == "validation_error"
    assert body["detail"][0]["loc"] == ["samples", 1, "average_weight_g"]


def test_batch_projection_with_zero_target_weight(client, seeded_db, make_batch):
    batch = make_batch(age_days=30, samples=[(30, 1600)], target_weight_g=0)

    r = client.get(f"/batches/{batch.batch_id}/projection")
    assert r.status_code == 200, r.text
    data = r.json()
    assert data["kind"] == "projection"
    assert data["harvest"]["reason"] == "no_target_weight"
    assert data["financials"]["reason"] == "no_target_weight"


def test_batch_projection_lowercase_species(client, seeded_db, make_batch):
    batch = make_batch(age_days=30, species="broiler", samples=[(30, 1600)])

    data = client.get(f"/batches/{batch.batch_id}/projection").json()
    assert data["kind"] == "projection"


def test_batch_projection_not_found(client):
    r = client.get("/batches/999/projection")
    assert r.status_code == 404
    assert r.json()["detail"] == "Lote no encontrado"


def test_growth_chart(client, seeded_db, make_batch):
    batch = make_batch(age_days=30, samples=[(28, 1500)])

    r = client.get(f"/batches/{batch.batch_id}/growth-chart")
    assert r.status_code == 200, r.text
    data = r.json()
    assert data["age_days"] == 30
    assert [p["day"] for p in data["points"]] == [0, 7, 14, 21, 28, 35, 42]
    day28 = next(p for p in data["points"] if p["day"] == 28)
    assert day28["actual_weight_g"] == 1500


# ==================== /projections/compute ====================

def compute_payload(today, samples):
    acquisition = today - timedelta(days=20)
    return {
        "batch": {
            "species": "Broiler",
            "breed_name": "cobb_500",
            "acquisition_date": acquisition.isoformat(),
            "initial_quantity": 500,
            "current_quantity": 480,
            "target_weight_g": 2500,
        },
        "samples": [
            {"date": (acquisition + timedelta(days=d)).isoformat(), "average_weight_g": w}
            for d, w in samples
        ],
        "today": today.isoformat(),
    }


def test_compute_uses_reference_curve(client, today):
    r = client.post("/projections/compute", json=compute_payload(today, [(10, 300), (20, 650)]))
    assert r.status_code == 200, r.text
    data = r.json()
    assert data["kind"] == "projection"
    assert data["as_of"] == today.isoformat()
    assert data["adg_grams_per_day"] == pytest.approx(35)
    assert data["harvest"]["days_remaining"] == 53
    assert data["financials"]["reason"] == "no_target_price"


def test_compute_rejects_out_of_order_samples(client, today):
    r = client.post("/projections/compute", json=compute_payload(today, [(20, 650), (10, 300)]))
    assert r.status_code == 422
    body = r.json()
    assert body["error"] == "validation_error"
    assert body["detail"][0]["loc"] == ["samples", 1, "date"]


def test_compute_rejects_negative_weight(client, today):
    r = client.post("/projections/compute", json=compute_payload(today, [(10, -5)]))
    assert r.status_code == 422
    assert r.json()["error"] == "validation_error"
    assert r.json()["detail"][0]["loc"] == ["samples", 0, "average_weight_g"]


# ==================== portafolio ====================

def test_upcoming_harvests(client, seeded_db, make_batch):
    soon = make_batch(age_days=40, samples=[(35, 2200), (40, 2600)], target_weight_g=2800)
    sooner = make_batch(age_days=40, samples=[(35, 2400), (40, 2760)], target_weight_g=2800)
    make_batch(age_days=20, samples=[(10, 300), (20, 800)], target_weight_g=2800)
    make_batch(age_days=40, samples=[(40, 2600)])
    make_batch(age_days=40, samples=[(40, 2600)], target_weight_g=0)

    r = client.get("/projections/upcoming-harvests")
    assert r.status_code == 200, r.text
    data = r.json()
    assert [item["batch_id"] for item in data] == [sooner.batch_id, soon.batch_id]
    assert [item["days_remaining"] for item in data] == [1, 3]


def test_batches_needing_attention(client, seeded_db, make_batch):
    lagging = make_batch(age_days=30, samples=[(30, 1000)])
    make_batch(age_days=30, samples=[(30, 1700)])
    ahead = make_batch(age_days=30, samples=[(30, 2000)])

    r = client.get("/projections/attention")
    assert r.status_code == 200, r.text
    data = r.json()
    assert [item["batch_id"] for item in data] == [lagging.batch_id, ahead.batch_id]
    assert data[0]["alert"]["severity"] == "critical"
    assert data[1]["alert"]["severity"] == "info"
