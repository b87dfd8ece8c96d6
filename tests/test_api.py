"""HTTP-level tests against the FastAPI app (in-memory SQLite)."""

import csv
import io

import httpx
import pytest
from fastapi.testclient import TestClient
from sqlmodel import Session

from backend.config import settings
from backend.database import engine
from backend.main import app
from backend.services import portfolio, trade_notes

from tests.helpers import OTHER_WALLET, WALLET


@pytest.fixture(scope="module")
def client():
    with TestClient(app) as c:
        yield c


# ---------------------------------------------------------------------------
# 1. System and markets
# ---------------------------------------------------------------------------

def test_health(client):
    assert client.get("/api/system/health").json() == {"status": "ok"}


def test_runtime_config(client):
    body = client.get("/api/system/config").json()
    assert body["trade_source"] == "synthetic"
    assert body["default_trade_count"] == 250


def test_markets(client):
    resp = client.get("/api/markets")
    assert resp.status_code == 200
    markets = resp.json()
    assert len(markets) == 13
    assert {"symbol", "name", "marketType", "price", "change24h", "volume24h"} <= markets[0].keys()


# ---------------------------------------------------------------------------
# 2. Portfolio
# ---------------------------------------------------------------------------

class TestPortfolioRoute:
    def test_returns_holdings(self, client):
        resp = client.get("/api/portfolio", params={"address": WALLET})
        assert resp.status_code == 200
        body = resp.json()
        assert body["address"] == WALLET
        assert body["totalUsdValue"] == pytest.approx(
            body["solUsdValue"] + sum(t["usdValue"] for t in body["tokens"])
        )

    def test_invalid_address(self, client):
        resp = client.get("/api/portfolio", params={"address": "nope"})
        assert resp.status_code == 400
        assert resp.json()["detail"] == "Invalid Solana wallet address"

    def test_missing_address(self, client):
        assert client.get("/api/portfolio").status_code == 422

    def test_rate_limited(self, client, monkeypatch):
        def _limited(address):
            raise RuntimeError("RPC request failed: 429")

        monkeypatch.setattr(portfolio, "generate_portfolio", _limited)
        resp = client.get("/api/portfolio", params={"address": WALLET})
        assert resp.status_code == 429
        assert "Rate limited" in resp.json()["detail"]

    def test_fetch_failed(self, client, monkeypatch):
        def _down(address):
            raise RuntimeError("upstream unavailable")

        monkeypatch.setattr(portfolio, "generate_portfolio", _down)
        resp = client.get("/api/portfolio", params={"address": WALLET})
        assert resp.status_code == 500
        assert resp.json()["detail"] == "Failed to fetch portfolio from blockchain"


# ---------------------------------------------------------------------------
# 3. Trades bundle
# ---------------------------------------------------------------------------

class TestTradesRoute:
    def test_bundle_shape(self, client):
        resp = client.get("/api/trades", params={"address": WALLET, "count": 40})
        assert resp.status_code == 200
        body = resp.json()
        assert set(body) == {
            "trades", "metrics", "dailyPerformance", "sessionPerformance", "symbolPerformance",
            "hourlyHeatmap", "feeBreakdown", "orderTypePerformance", "directionPerformance",
            "strategyPerformance", "marketTypePerformance", "riskSummary", "insights",
        }
        assert len(body["trades"]) == 40
        assert body["metrics"]["totalTrades"] == 40
        assert len(body["hourlyHeatmap"]) == 168
        assert {"pnlPercent", "feeBreakdown", "txHash", "walletAddress"} <= body["trades"][0].keys()

    def test_symbol_filter(self, client):
        body = client.get("/api/trades", params={"address": WALLET, "symbol": "SOL"}).json()
        assert body["trades"]
        assert all("SOL" in t["symbol"] for t in body["trades"])

    def test_count_bounds(self, client):
        assert client.get("/api/trades", params={"address": WALLET, "count": 0}).status_code == 422
        assert client.get("/api/trades", params={"address": WALLET, "count": 100000}).status_code == 422

    def test_invalid_address(self, client):
        resp = client.get("/api/trades", params={"address": "0xabc"})
        assert resp.status_code == 400


# ---------------------------------------------------------------------------
# 4. CSV export and notes
# ---------------------------------------------------------------------------

class TestExportRoute:
    def test_csv_download(self, client):
        resp = client.get("/api/trades/export", params={"address": WALLET, "count": 10})
        assert resp.status_code == 200
        assert resp.headers["content-type"].startswith("text/csv")
        assert "attachment" in resp.headers["content-disposition"]
        lines = resp.text.split("\n")
        assert len(lines) == 11
        assert lines[0].startswith("ID,Symbol,Market Type")

    def test_quoted_csv(self, client):
        resp = client.get("/api/trades/export", params={"address": WALLET, "count": 10, "quoted": True})
        rows = list(csv.reader(io.StringIO(resp.text)))
        assert all(len(r) == 19 for r in rows)


class TestNotesRoute:
    def _first_trade(self, client, address):
        return client.get("/api/trades", params={"address": address, "count": 5}).json()["trades"][0]

    def test_note_survives_regeneration(self, client):
        trade = self._first_trade(client, OTHER_WALLET)
        resp = client.put(
            f"/api/trades/{trade['id']}/notes",
            json={"address": OTHER_WALLET, "notes": "  cut size, chased entry  "},
        )
        assert resp.status_code == 200
        assert resp.json() == {"tradeId": trade["id"], "notes": "cut size, chased entry"}

        refreshed = self._first_trade(client, OTHER_WALLET)
        assert refreshed["notes"] == "cut size, chased entry"

        export = client.get("/api/trades/export", params={"address": OTHER_WALLET, "count": 5, "quoted": True})
        assert "cut size, chased entry" in export.text

    def test_empty_note_clears(self, client):
        trade = self._first_trade(client, WALLET)
        client.put(f"/api/trades/{trade['id']}/notes", json={"address": WALLET, "notes": "temp"})
        resp = client.put(f"/api/trades/{trade['id']}/notes", json={"address": WALLET, "notes": ""})
        assert resp.json()["notes"] is None
        assert self._first_trade(client, WALLET)["notes"] is None

    def test_foreign_trade_id(self, client):
        resp = client.put("/api/trades/someone-trade-1/notes", json={"address": WALLET, "notes": "x"})
        assert resp.status_code == 404

    def test_invalid_address(self, client):
        resp = client.put("/api/trades/x-trade-1/notes", json={"address": "bad", "notes": "x"})
        assert resp.status_code == 400

    @pytest.mark.parametrize("suffix", [
        "0",
        str(settings.max_trade_count + 1),
        "999999",
        "abc",
        "01",
        "",
    ])
    def test_ungenerable_trade_id_not_stored(self, client, suffix):
        trade_id = f"{WALLET[:8]}-trade-{suffix}"
        resp = client.put(f"/api/trades/{trade_id}/notes", json={"address": WALLET, "notes": "ghost"})
        assert resp.status_code == 404
        with Session(engine) as session:
            assert trade_id not in trade_notes.load_note_overrides(session, WALLET)

    def test_highest_generable_index_accepted(self, client):
        trade_id = f"{WALLET[:8]}-trade-{settings.max_trade_count}"
        resp = client.put(f"/api/trades/{trade_id}/notes", json={"address": WALLET, "notes": "last"})
        assert resp.status_code == 200

    def test_multiline_note_keeps_one_csv_row_per_trade(self, client):
        trades = client.get("/api/trades", params={"address": WALLET, "count": 5}).json()["trades"]
        resp = client.put(
            f"/api/trades/{trades[1]['id']}/notes",
            json={"address": WALLET, "notes": "line one\nline two\r\nline three"},
        )
        assert resp.json()["notes"] == "line one line two line three"

        export = client.get("/api/trades/export", params={"address": WALLET, "count": 5})
        lines = export.text.split("\n")
        assert len(lines) == len(trades) + 1
        assert "line one line two line three" in export.text


# ---------------------------------------------------------------------------
# 5. Async client
# ---------------------------------------------------------------------------

@pytest.mark.asyncio
async def test_portfolio_via_async_client():
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as ac:
        resp = await ac.get("/api/portfolio", params={"address": WALLET})
    assert resp.status_code == 200
    assert resp.json()["address"] == WALLET
