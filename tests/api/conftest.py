"""
Endpoint Suite Configuration
============================

Fixtures for the live endpoint suites:
- API reachability check (skip or fail the whole suite)
- Authenticated, anonymous and invalid-token clients
- Resources created on demand and deleted on teardown
"""

from typing import Any, AsyncGenerator, Dict

import httpx
import pytest
import pytest_asyncio

from chapter_api.client.http import build_client, send
from chapter_api.config.settings import Settings
from tests.utils.data_generators import EnvVarPayloads, SchedulePayloads, TaskPayloads
from tests.utils.helpers import cancel_fixture_run, cleanup_resource, require_live_api

NONEXISTENT_ID = "nonexistent-id-000000000000"


@pytest.fixture(scope="session")
def live_api(settings: Settings) -> str:
    """Probe the API once; skip (or fail) every endpoint suite when it is down."""
    return require_live_api(settings)


@pytest.fixture(autouse=True)
def _require_live_api(live_api: str) -> None:
    pass


@pytest.fixture
def require_token(settings: Settings) -> str:
    """Skip tests that need an authenticated client when no token is configured."""
    if not settings.auth_token:
        pytest.skip("API_AUTH_TOKEN is not configured")
    return settings.auth_token


@pytest_asyncio.fixture
async def api_client(settings: Settings) -> AsyncGenerator[httpx.AsyncClient, None]:
    """Client authenticated with API_AUTH_TOKEN."""
    async with build_client(settings.auth_token, settings=settings) as client:
        yield client


@pytest_asyncio.fixture
async def anonymous_client(settings: Settings) -> AsyncGenerator[httpx.AsyncClient, None]:
    """Client without an Authorization header."""
    async with build_client(None, settings=settings) as client:
        yield client


@pytest_asyncio.fixture
async def invalid_token_client(settings: Settings) -> AsyncGenerator[httpx.AsyncClient, None]:
    """Client carrying a token the API must reject."""
    async with build_client(settings.invalid_token, settings=settings) as client:
        yield client


@pytest.fixture
def project_ref(settings: Settings) -> str:
    return settings.project_ref


@pytest.fixture
def env_slug(settings: Settings) -> str:
    return settings.env_slug


@pytest.fixture
def task_identifier(settings: Settings) -> str:
    return settings.task_identifier


@pytest.fixture
def nonexistent_id() -> str:
    return NONEXISTENT_ID


@pytest_asyncio.fixture
async def created_schedule(
    api_client: httpx.AsyncClient, require_token: str, task_identifier: str
) -> AsyncGenerator[Dict[str, Any], None]:
    """An imperative schedule created for the test and deleted afterwards."""
    response = await send(api_client, "create_schedule", json=SchedulePayloads.valid(task_identifier))
    if response.status_code not in (200, 201):
        pytest.skip(f"Could not create fixture schedule: HTTP {response.status_code}")
    schedule = response.json()
    yield schedule
    await cleanup_resource(api_client, "delete_schedule", schedule_id=schedule["id"])


@pytest_asyncio.fixture
async def created_env_var(
    api_client: httpx.AsyncClient, require_token: str, project_ref: str, env_slug: str
) -> AsyncGenerator[Dict[str, Any], None]:
    """An environment variable created for the test and deleted afterwards."""
    payload = EnvVarPayloads.valid()
    response = await send(
        api_client, "create_env_var", json=payload, project_ref=project_ref, env=env_slug
    )
    if response.status_code not in (200, 201):
        pytest.skip(f"Could not create fixture env var: HTTP {response.status_code}")
    yield payload
    await cleanup_resource(
        api_client, "delete_env_var", project_ref=project_ref, env=env_slug, name=payload["name"]
    )


async def _trigger_run(client: httpx.AsyncClient, task_identifier: str, **options: Any) -> str:
    response = await send(
        client,
        "trigger_task",
        json=TaskPayloads.trigger(**options),
        task_identifier=task_identifier,
    )
    if response.status_code != 200:
        pytest.skip(f"Could not trigger fixture run: HTTP {response.status_code}")
    return response.json()["id"]


@pytest_asyncio.fixture
async def run_id(
    settings: Settings, api_client: httpx.AsyncClient, require_token: str, task_identifier: str
) -> AsyncGenerator[str, None]:
    """API_RUN_ID when configured, otherwise a freshly triggered run cancelled afterwards."""
    if settings.run_id:
        yield settings.run_id
        return
    triggered = await _trigger_run(api_client, task_identifier)
    yield triggered
    await cancel_fixture_run(api_client, triggered)


@pytest_asyncio.fixture
async def delayed_run_id(
    settings: Settings, api_client: httpx.AsyncClient, require_token: str, task_identifier: str
) -> AsyncGenerator[str, None]:
    """API_DELAYED_RUN_ID when configured, otherwise a delayed run cancelled afterwards."""
    if settings.delayed_run_id:
        yield settings.delayed_run_id
        return
    triggered = await _trigger_run(api_client, task_identifier, delay="1h")
    yield triggered
    await cancel_fixture_run(api_client, triggered)
