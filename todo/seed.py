"""
Seed Feed Client

Fetches a handful of task-shaped records from an unauthenticated,
read-only feed (jsonplaceholder by default). Used once, to populate an
empty task list.

Usage:
    tasks = await fetch_seed_tasks("https://jsonplaceholder.typicode.com/todos", limit=5)
"""

import logging

import httpx
from pydantic import TypeAdapter, ValidationError

from todo.exceptions import SeedFetchError
from todo.models import Task

logger = logging.getLogger(__name__)

_task_list = TypeAdapter(list[Task])


async def fetch_seed_tasks(
    url: str,
    limit: int = 5,
    timeout: float = 10.0,
) -> list[Task]:
    """
    Fetch at most `limit` tasks from the seed feed.

    The limit is sent as the feed's `_limit` query parameter and applied
    again locally, in case the feed ignores it.

    Args:
        url: Feed URL
        limit: Maximum number of tasks to return
        timeout: Request timeout in seconds

    Returns:
        Parsed tasks in feed order

    Raises:
        SeedFetchError: network failure, non-200 status, or a payload that
            is not a list of tasks
    """
    try:
        async with httpx.AsyncClient(timeout=timeout) as client:
            response = await client.get(url, params={"_limit": limit})
    except httpx.HTTPError as e:
        raise SeedFetchError(f"Seed request to {url} failed: {e}") from e

    if response.status_code != 200:
        logger.error(f"Seed feed returned {response.status_code}: {response.text}")
        raise SeedFetchError(f"Seed feed returned HTTP {response.status_code}")

    try:
        tasks = _task_list.validate_python(response.json())
    except (ValueError, ValidationError) as e:
        raise SeedFetchError(f"Seed feed returned an invalid payload: {e}") from e

    return tasks[:limit]
