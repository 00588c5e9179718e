"""
Tests for the seed feed client.

httpx.AsyncClient is mocked so no real HTTP requests are made.
"""

from unittest.mock import MagicMock, patch

import httpx
import pytest

from todo.exceptions import SeedFetchError
from todo.models import Task
from todo.seed import fetch_seed_tasks

SEED_URL = "https://jsonplaceholder.typicode.com/todos"


def create_mock_response(status_code: int, json_data=None, text: str = ""):
    """Create a mock httpx response."""
    response = MagicMock()
    response.status_code = status_code
    response.json.return_value = json_data
    response.text = text
    return response


def create_mock_async_client(get_response=None, get_error=None):
    """
    Create a mocked httpx.AsyncClient usable as an async context manager.

    Args:
        get_response: Response returned by client.get()
        get_error: Exception raised by client.get() instead
    """
    mock_client = MagicMock()

    async def async_enter():
        return mock_client

    async def async_exit(*args):
        pass

    mock_client.__aenter__ = MagicMock(side_effect=async_enter)
    mock_client.__aexit__ = MagicMock(side_effect=async_exit)

    async def mock_get(*args, **kwargs):
        if get_error is not None:
            raise get_error
        return get_response

    mock_client.get = MagicMock(side_effect=mock_get)
    return mock_client


def feed_items(count: int) -> list[dict]:
    return [
        {"userId": 1, "id": i, "title": f"task {i}", "completed": i % 2 == 0}
        for i in range(1, count + 1)
    ]


class TestFetchSeedTasks:
    @pytest.mark.asyncio
    async def test_success(self):
        mock_client = create_mock_async_client(create_mock_response(200, feed_items(5)))

        with patch("todo.seed.httpx.AsyncClient", return_value=mock_client):
            tasks = await fetch_seed_tasks(SEED_URL, limit=5)

        assert len(tasks) == 5
        assert tasks[0] == Task(id=1, title="task 1", completed=False, userId=1)
        assert tasks[1].completed is True
        mock_client.get.assert_called_once_with(SEED_URL, params={"_limit": 5})

    @pytest.mark.asyncio
    async def test_truncates_to_limit(self):
        """The feed may ignore _limit; the result is still bounded."""
        mock_client = create_mock_async_client(create_mock_response(200, feed_items(200)))

        with patch("todo.seed.httpx.AsyncClient", return_value=mock_client):
            tasks = await fetch_seed_tasks(SEED_URL, limit=3)

        assert [task.id for task in tasks] == [1, 2, 3]

    @pytest.mark.asyncio
    async def test_extra_fields_ignored(self):
        items = [{"id": 1, "title": "t", "completed": False, "priority": "high"}]
        mock_client = create_mock_async_client(create_mock_response(200, items))

        with patch("todo.seed.httpx.AsyncClient", return_value=mock_client):
            tasks = await fetch_seed_tasks(SEED_URL)

        assert tasks == [Task(id=1, title="t")]

    @pytest.mark.asyncio
    async def test_http_error_status(self):
        mock_client = create_mock_async_client(create_mock_response(503, text="unavailable"))

        with patch("todo.seed.httpx.AsyncClient", return_value=mock_client):
            with pytest.raises(SeedFetchError, match="503"):
                await fetch_seed_tasks(SEED_URL)

    @pytest.mark.asyncio
    async def test_network_error(self):
        mock_client = create_mock_async_client(get_error=httpx.ConnectError("connection refused"))

        with patch("todo.seed.httpx.AsyncClient", return_value=mock_client):
            with pytest.raises(SeedFetchError, match="connection refused"):
                await fetch_seed_tasks(SEED_URL)

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "payload",
        [
            {"id": 1, "title": "not a list"},
            [{"title": "missing id"}],
            "garbage",
        ],
    )
    async def test_invalid_payload(self, payload):
        mock_client = create_mock_async_client(create_mock_response(200, payload))

        with patch("todo.seed.httpx.AsyncClient", return_value=mock_client):
            with pytest.raises(SeedFetchError, match="invalid payload"):
                await fetch_seed_tasks(SEED_URL)
