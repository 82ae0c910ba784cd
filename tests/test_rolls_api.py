"""Tests for the /roll HTTP route."""

from __future__ import annotations


async def test_roll_without_aggregate(async_client, override_rng):
    override_rng(1, 2, 3, 4, 5, 11, 12)
    resp = await async_client.get("/roll", params={"dice": ["5d6", "2d12"]})

    assert resp.status_code == 200
    body = resp.json()
    assert body["ok"] is True
    assert body["aggregate"] is None
    assert [r["notation"] for r in body["results"]] == ["5d6", "2d12"]
    assert body["results"][0]["outcomes"] == [1, 2, 3, 4, 5]
    assert body["results"][1]["outcomes"] == [11, 12]
    assert body["results"][0]["aggregate"] is None


async def test_roll_with_sum(async_client, override_rng):
    override_rng(*range(1, 11))
    resp = await async_client.get("/roll", params={"dice": "10d50", "aggregate": "sum"})

    assert resp.status_code == 200
    body = resp.json()
    assert body["aggregate"] == "sum"
    (result,) = body["results"]
    assert result["outcomes"] == list(range(1, 11))
    assert result["aggregate"] == 55


async def test_roll_with_avg(async_client, override_rng):
    override_rng(1, 2)
    resp = await async_client.get("/roll", params={"dice": "2d6", "aggregate": "avg"})

    assert resp.json()["results"][0]["aggregate"] == 1.5


async def test_bad_token_is_reported_per_token(async_client, override_rng):
    override_rng(3)
    resp = await async_client.get("/roll", params={"dice": ["d6", "roll"]})

    assert resp.status_code == 200
    body = resp.json()
    assert body["ok"] is False
    good, bad = body["results"]
    assert good["outcomes"] == [3]
    assert bad["token"] == "roll"
    assert bad["notation"] is None
    assert bad["outcomes"] == []
    assert bad["error"]["kind"] == "missing_separator"
    assert "'roll'" in bad["error"]["message"]


async def test_unknown_aggregate_is_rejected(async_client, override_rng):
    rng = override_rng(1)
    resp = await async_client.get("/roll", params={"dice": "d6", "aggregate": "average"})

    assert resp.status_code == 400
    assert "'average'" in resp.json()["detail"]
    assert rng.calls == []


async def test_no_dice(async_client, override_rng):
    override_rng()
    resp = await async_client.get("/roll")

    assert resp.status_code == 200
    assert resp.json() == {"aggregate": None, "ok": True, "results": []}
