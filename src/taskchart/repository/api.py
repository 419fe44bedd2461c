# SPDX-License-Identifier: MIT

import logging
from typing import Any, Optional

import httpx

from taskchart.model.project import Project
from taskchart.model.task import Task
from taskchart.repository.convert import project_from_raw, task_from_raw

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "http://localhost:4500"
REQUEST_TIMEOUT_SECONDS = 10.0


class ApiError(Exception):
    def __init__(self, message: str, status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class ApiClient:
    """Read-only client for the project/task HTTP API."""

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = REQUEST_TIMEOUT_SECONDS,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.base_url = base_url
        self.timeout = timeout
        self._transport = transport
        self._client: Optional[httpx.AsyncClient] = None

    async def __aenter__(self) -> "ApiClient":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.close()

    async def _get_client(self) -> httpx.AsyncClient:
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                base_url=self.base_url,
                timeout=self.timeout,
                headers={"Accept": "application/json"},
                transport=self._transport,
            )
        return self._client

    async def close(self) -> None:
        if self._client is not None and not self._client.is_closed:
            await self._client.aclose()
        self._client = None

    async def _get_json(self, path: str) -> Any:
        client = await self._get_client()
        try:
            response = await client.get(path)
        except httpx.TimeoutException as e:
            logger.error(f"Request to {path} timed out")
            raise ApiError(str(e) or "Request timed out", status_code=504) from e
        except httpx.TransportError as e:
            logger.error(f"Cannot reach {self.base_url}: {e}")
            raise ApiError(str(e) or "Upstream request failed", status_code=502) from e

        if not response.is_success:
            text = response.text
            raise ApiError(
                text or f"Request failed: {response.status_code}",
                status_code=response.status_code,
            )

        logger.debug(f"GET {path} -> {response.status_code}")
        return response.json()

    async def get_projects(self) -> list[Project]:
        data = await self._get_json("/projects")
        return [project_from_raw(item) for item in data]

    async def get_project(self, project_id: int) -> Project:
        data = await self._get_json(f"/projects/{project_id}")
        return project_from_raw(data)

    async def get_project_tasks(self, project_id: int) -> list[Task]:
        data = await self._get_json(f"/projects/{project_id}/tasks")
        return [task_from_raw(item, project_id) for item in data]

    async def get_project_task(self, project_id: int, task_id: int) -> Task:
        data = await self._get_json(f"/projects/{project_id}/tasks/{task_id}")
        return task_from_raw(data, project_id)
