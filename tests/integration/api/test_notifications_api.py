"""Integration tests for notification ingestion."""

import pytest
from httpx import AsyncClient


@pytest.fixture
async def known_user(client: AsyncClient) -> int:
    await client.post("/api/auth/telegram", json={"id": 777, "first_name": "Eve"})
    return 777


class TestIngestNotification:
    @pytest.mark.asyncio
    async def test_acknowledges_and_stores(self, client: AsyncClient, known_user: int):
        response = await client.post(
            "/api/notifications",
            json={
                "telegramId": known_user,
                "message": "Finished level 3",
                "activityType": "level_completed",
                "userData": {"username": "eve", "firstName": "Eve"},
                "metadata": {"level": 3, "stars": [1, 1, 0]},
            },
        )

        assert response.status_code == 200
        data = response.json()
        assert data["success"] is True
        assert data["received"] is True
        assert data["message"] == "Notification processed successfully"
        assert isinstance(data["notificationId"], int)
        assert "timestamp" in data

        profile = (await client.get(f"/api/profile/{known_user}")).json()
        assert profile["notifications"] == [
            {
                "message": "Finished level 3",
                "activityType": "level_completed",
                "timestamp": profile["notifications"][0]["timestamp"],
                "metadata": {"level": 3, "stars": [1, 1, 0]},
            }
        ]

    @pytest.mark.asyncio
    async def test_unknown_telegram_id_still_succeeds(self, client: AsyncClient):
        response = await client.post(
            "/api/notifications", json={"telegramId": 31337, "message": "hello"}
        )

        assert response.status_code == 200
        assert response.json()["success"] is True
        assert (await client.get("/api/health")).json()["profilesCount"] == 0

    @pytest.mark.asyncio
    async def test_empty_body_succeeds(self, client: AsyncClient):
        response = await client.post("/api/notifications", json={})

        assert response.status_code == 200
        assert response.json()["received"] is True

    @pytest.mark.asyncio
    async def test_history_keeps_latest_fifty(self, client: AsyncClient, known_user: int):
        for i in range(51):
            await client.post(
                "/api/notifications", json={"telegramId": known_user, "message": f"event {i}"}
            )

        profile = (await client.get(f"/api/profile/{known_user}")).json()

        messages = [n["message"] for n in profile["notifications"]]
        assert len(messages) == 50
        assert messages[0] == "event 1"
        assert messages[-1] == "event 50"

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "body",
        [
            {"telegramId": 777, "message": "hi", "userData": "alice"},
            {"telegramId": 777, "message": "hi", "userData": ["x"]},
            {"telegramId": 777, "message": 42},
            {"telegramId": 777, "message": "hi", "activityType": 7},
            {"telegramId": 1.5, "message": "hi"},
            {"telegramId": {"id": 777}, "message": None, "metadata": "plain"},
        ],
    )
    async def test_loosely_typed_fields_are_acknowledged(
        self, client: AsyncClient, known_user: int, body: dict
    ):
        response = await client.post("/api/notifications", json=body)

        assert response.status_code == 200
        assert response.json()["success"] is True

    @pytest.mark.asyncio
    async def test_non_string_values_are_stored_as_sent(
        self, client: AsyncClient, known_user: int
    ):
        await client.post(
            "/api/notifications",
            json={"telegramId": known_user, "message": 42, "activityType": 7, "userData": "x"},
        )

        profile = (await client.get(f"/api/profile/{known_user}")).json()
        assert profile["notifications"][0]["message"] == 42
        assert profile["notifications"][0]["activityType"] == 7
