import pytest
from httpx import ASGITransport, AsyncClient

from tradeval.api import create_app
from tradeval.config import AnalyzerSettings


@pytest.fixture
async def client():
    app = create_app(AnalyzerSettings())
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://testserver") as async_client:
        async_client.app = app
        yield async_client


def _golden_request() -> dict:
    return {
        "team_a": ["Connor McDavid", "Cale Makar"],
        "team_b": ["Mitch Marner", "", "Tage Thompson", "Nobody Here"],
    }


async def _upload(client: AsyncClient, text: str, filename: str = "roster.csv", **data):
    files = {"roster": (filename, text, "text/csv")}
    return await client.post("/roster", files=files, data=data)


@pytest.mark.anyio
async def test_health(client: AsyncClient):
    resp = await client.get("/health")
    assert resp.status_code == 200
    assert resp.json()["status"] == "ok"


@pytest.mark.anyio
async def test_upload_roster(client: AsyncClient, sample_roster_text: str):
    resp = await _upload(client, sample_roster_text)

    assert resp.status_code == 200
    body = resp.json()
    assert body["players"] == 19
    assert body["mean"] == pytest.approx(80.0)
    assert body["std_dev"] == pytest.approx(10.0)
    assert "Team" in body["columns"]
    assert body["tracked_stats"] == ["goals", "assists", "pim", "ppp", "sog"]

    resp = await client.get("/roster")
    assert resp.status_code == 200
    assert resp.json()["players"] == 19


@pytest.mark.anyio
async def test_upload_with_column_mapping(client: AsyncClient):
    resp = await _upload(
        client,
        "Skater,Value\nA,10\nB,20\n",
        column_mapping='{"name": "Skater", "score": "Value"}',
    )
    assert resp.status_code == 200
    assert resp.json()["players"] == 2


@pytest.mark.anyio
async def test_upload_rejects_bad_mapping_json(client: AsyncClient):
    resp = await _upload(client, "Player,Score\nA,1\n", column_mapping="{not json")
    assert resp.status_code == 400
    assert "Invalid mapping JSON" in resp.json()["detail"]


@pytest.mark.anyio
async def test_upload_rejects_wrong_extension(client: AsyncClient):
    resp = await _upload(client, "Player,Score\nA,1\n", filename="roster.xlsx")
    assert resp.status_code == 415


@pytest.mark.anyio
async def test_upload_rejects_oversized_file():
    app = create_app(AnalyzerSettings(max_upload_bytes=16))
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://testserver") as small_client:
        resp = await _upload(small_client, "Player,Score\nA,1\nB,2\nC,3\n")
    assert resp.status_code == 413


@pytest.mark.anyio
async def test_upload_rejects_invalid_tables(client: AsyncClient):
    resp = await _upload(client, "Player,Score\nA,n/a\n")
    assert resp.status_code == 400
    assert "No numeric score data" in resp.json()["detail"]

    resp = await _upload(client, "")
    assert resp.status_code == 400

    resp = await client.get("/roster")
    assert resp.status_code == 404


@pytest.mark.anyio
async def test_trade_requires_roster(client: AsyncClient):
    resp = await client.post("/trade", json=_golden_request())
    assert resp.status_code == 409


@pytest.mark.anyio
async def test_trade_endpoint(client: AsyncClient, sample_roster_text: str):
    await _upload(client, sample_roster_text)

    resp = await client.post("/trade", json=_golden_request())

    assert resp.status_code == 200
    payload = resp.json()
    team_a, team_b = payload["teams"]
    assert team_a["label"] == "A"
    assert team_a["count"] == 2
    assert team_a["total_salary"] == pytest.approx(21_500_000)
    assert team_a["average_age"] == pytest.approx(26.5)
    assert team_a["position_counts"] == {"C": 1, "D": 1}
    assert [player["name"] for player in team_b["players"]] == ["Mitch Marner", "Tage Thompson"]
    assert team_b["total_relative_value"] == pytest.approx(-2.5)
    verdict = payload["verdict"]
    assert verdict["winner"] == "A"
    assert verdict["score_impact"] == pytest.approx(50.0)
    assert verdict["best_value"] is None


@pytest.mark.anyio
async def test_trade_with_third_group(client: AsyncClient, sample_roster_text: str):
    await _upload(client, sample_roster_text)
    request = _golden_request() | {"team_c": ["Leon Draisaitl"]}

    resp = await client.post("/trade", json=request)

    payload = resp.json()
    assert len(payload["teams"]) == 3
    assert payload["verdict"]["best_value"] is False


@pytest.mark.anyio
async def test_players_endpoint(client: AsyncClient, sample_roster_text: str):
    resp = await client.get("/players")
    assert resp.json()["players"] == []

    await _upload(client, sample_roster_text)
    resp = await client.get("/players", params={"q": "tkachuk"})
    assert resp.json()["players"] == ["Matthew Tkachuk", "Brady Tkachuk"]


@pytest.mark.anyio
async def test_report_export(client: AsyncClient, sample_roster_text: str):
    await _upload(client, sample_roster_text)

    resp = await client.post("/trade/report", json=_golden_request())

    assert resp.status_code == 200
    assert resp.headers["content-type"].startswith("text/plain")
    assert "trade_report.txt" in resp.headers["content-disposition"]
    assert "Team A wins the trade" in resp.text
    assert "Total Salary: $21,500,000" in resp.text


@pytest.mark.anyio
async def test_reset_roster(client: AsyncClient, sample_roster_text: str):
    await _upload(client, sample_roster_text)

    resp = await client.delete("/roster")
    assert resp.status_code == 200
    assert client.app.state.session.roster is None

    resp = await client.post("/trade", json=_golden_request())
    assert resp.status_code == 409
