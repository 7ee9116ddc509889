"""
Common test fixtures and configuration.
"""

import pytest

from fastmcp import Client, FastMCP
from fastmcp.exceptions import ToolError

from humane.errors import attach
from humane.errors.tools import humane_tool

from .testing.settings import default_settings, override_setting


# add imported fixtures to __all__ so they're considered in use in the module
__all__ = ["default_settings", "override_setting"]


def parse_port(value: str) -> int:
    """Parse a port number."""
    try:
        return int(value)
    except ValueError as e:
        raise attach(e, "The port is not a number", ["Use a value like 8080"])


async def fetch_token(name: str) -> str:
    """Fetch an API token."""
    tokens: dict[str, str] = {}
    try:
        return tokens[name]
    except KeyError as e:
        raise RuntimeError("token lookup failed") from attach(
            e, "The API token is not configured", [f"Set the {name} token"]
        )


def delete_everything() -> str:
    """Refuse to do anything."""
    raise ToolError("Deleting everything is not allowed")


@pytest.fixture
async def mcp_client():
    """A client for an MCP server exposing humane tools."""
    server = FastMCP(
        name="Humane",
        tools=[humane_tool(parse_port), humane_tool(fetch_token), humane_tool(delete_everything)],
    )
    async with Client(server) as client:
        yield client
