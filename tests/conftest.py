"""Shared fixtures for the todo MCP server tests."""

import asyncio
from datetime import datetime, timedelta, timezone

import anyio
import pytest
from fastapi.testclient import TestClient
from mcp.shared.memory import create_connected_server_and_client_session

from todo_mcp.config import Settings
from todo_mcp.main import create_app
from todo_mcp.mcp.server import create_mcp_server
from todo_mcp.services.task_service import TaskStore


class FakeClock:
    """Clock that moves forward one second every time it is read."""

    def __init__(self, start=None):
        self.now = start or datetime(2024, 1, 1, 12, 0, 0, tzinfo=timezone.utc)

    def __call__(self):
        current = self.now
        self.now += timedelta(seconds=1)
        return current


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def store(clock):
    return TaskStore(clock=clock)


@pytest.fixture
def settings():
    return Settings()


@pytest.fixture
def server(store, settings):
    return create_mcp_server(store=store, settings=settings)


@pytest.fixture
def call_tool(server):
    """Call a tool through the registry and return its text."""
    def call(name, arguments=None):
        content = asyncio.run(server.invoke_tool(name, arguments or {}))
        assert len(content) == 1
        assert content[0].type == "text"
        return content[0].text

    return call


@pytest.fixture
def with_session(server):
    """Run ``action(session)`` against an initialized in-memory MCP client session."""
    def run(action):
        async def main():
            async with create_connected_server_and_client_session(server.build_sdk_server()) as session:
                return await action(session)

        return anyio.run(main)

    return run


@pytest.fixture
def client(store, settings):
    with TestClient(create_app(settings=settings, store=store)) as test_client:
        yield test_client
