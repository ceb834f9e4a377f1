# src/taskboard/todos/todo_client.py

from __future__ import annotations

import logging

import httpx

from ..errors import FetchError
from .todo_models import RemoteTodoItem, parse_todos

logger = logging.getLogger(__name__)

DEFAULT_TODOS_URL = "https://jsonplaceholder.typicode.com/todos"
DEFAULT_TODOS_LIMIT = 20


class HttpTodoSource:
    """
    Fetch a bounded todo list with a single GET: <url>?_limit=<limit>.

    Redirects are followed. No retries and no client timeout; the caller
    decides what to do with a FetchError. `transport` lets tests plug in
    httpx.MockTransport.
    """

    def __init__(
        self,
        url: str = DEFAULT_TODOS_URL,
        *,
        limit: int = DEFAULT_TODOS_LIMIT,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        if not url or not url.strip():
            raise ValueError("todos url is required")
        self._url = url.strip()
        self._limit = max(1, int(limit))
        self._transport = transport

    @property
    def url(self) -> str:
        return self._url

    @property
    def limit(self) -> int:
        return self._limit

    async def fetch_todos(self) -> list[RemoteTodoItem]:
        async with httpx.AsyncClient(
            timeout=None,
            follow_redirects=True,
            transport=self._transport,
        ) as client:
            try:
                resp = await client.get(self._url, params={"_limit": self._limit})
            except (httpx.HTTPError, httpx.InvalidURL) as e:
                raise FetchError(f"Failed to fetch: {e.__class__.__name__}: {e}") from e

        logger.debug("GET %s -> %s", resp.request.url, resp.status_code)

        if not resp.is_success:
            raise FetchError(
                f"Failed to fetch: HTTP {resp.status_code}",
                status_code=resp.status_code,
            )

        try:
            payload = resp.json()
        except ValueError as e:
            raise FetchError(f"Failed to fetch: response is not JSON ({e})") from e

        return parse_todos(payload, limit=self._limit)
