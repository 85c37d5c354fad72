import httpx
import pytest
from fastmcp import Client
from fastmcp.exceptions import ToolError

from aptos_mcp.mcp import server
from aptos_mcp.mcp.handler import APTOS_TOOL_NAME
from aptos_mcp.mcp.registry import SERVER_NAME, mcp

from helpers import reply_with


@pytest.fixture
def use_handler(monkeypatch):
    def install(handler):
        monkeypatch.setattr("aptos_mcp.mcp.tools.aptos.aptos_tool_handler", handler)
        return handler

    return install


@pytest.mark.asyncio
async def test_tool_is_listed_with_required_message():
    async with Client(mcp) as client:
        tools = await client.list_tools()

    (tool,) = [tool for tool in tools if tool.name == APTOS_TOOL_NAME]
    assert tool.description == "Retrieval-Augmented Generation tool for contextual responses"
    assert tool.inputSchema["required"] == ["message"]
    assert tool.inputSchema["properties"]["message"]["type"] == "string"
    assert tool.inputSchema["properties"]["message"]["description"] == "Input message to process"


@pytest.mark.asyncio
async def test_server_answers_ping():
    assert mcp.name == SERVER_NAME
    async with Client(mcp) as client:
        assert await client.ping()


@pytest.mark.asyncio
async def test_call_returns_single_text_block(make_handler, use_handler):
    use_handler(make_handler(reply_with("pong")))

    async with Client(mcp) as client:
        result = await client.call_tool(APTOS_TOOL_NAME, {"message": "ping"})

    assert len(result.content) == 1
    assert result.content[0].type == "text"
    assert result.content[0].text == "pong"


@pytest.mark.asyncio
async def test_remote_failure_is_reported_as_tool_error(make_handler, use_handler):
    use_handler(make_handler(lambda request: httpx.Response(500, text="internal error")))

    async with Client(mcp) as client:
        with pytest.raises(ToolError, match="internal error"):
            await client.call_tool(APTOS_TOOL_NAME, {"message": "ping"})


@pytest.mark.asyncio
async def test_missing_message_is_rejected(make_handler, use_handler, recorded_requests):
    use_handler(make_handler(reply_with("unused")))

    async with Client(mcp) as client:
        with pytest.raises(ToolError):
            await client.call_tool(APTOS_TOOL_NAME, {})

    assert recorded_requests == []


@pytest.mark.asyncio
async def test_in_process_call_tool_returns_text(make_handler, use_handler):
    use_handler(make_handler(reply_with("pong")))

    assert await server.call_tool(APTOS_TOOL_NAME, {"message": "ping"}) == "pong"


@pytest.mark.asyncio
async def test_in_process_call_tool_unknown_name():
    with pytest.raises(KeyError):
        await server.call_tool("Unknown-TOOL", {})


@pytest.mark.asyncio
async def test_list_tool_names():
    assert await server.list_tool_names() == [APTOS_TOOL_NAME]
