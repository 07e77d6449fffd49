"""Runs the aiohttp transport against a local aiohttp server"""

from __future__ import annotations

from typing import AsyncIterator, List

import aiohttp
import pytest
import pytest_asyncio
from aiohttp import test_utils, web

from azmgmt.core import ResourceNotFoundError
from azmgmt.core.transport import AiohttpTransport, HttpRequest
from azmgmt.scvmm import ScVmmClient
from fakes import FakeCredential


async def _echo(request: web.Request) -> web.Response:
    return web.json_response(
        {
            "method": request.method,
            "query": dict(request.query),
            "contentType": request.headers.get("Content-Type"),
            "authorization": request.headers.get("Authorization"),
            "body": (await request.read()).decode("utf-8"),
        },
        headers={"X-Ms-Request-Id": "abc"},
    )


async def _get_vmm_server(request: web.Request) -> web.Response:
    name = request.match_info["name"]
    if name == "missing":
        return web.json_response(
            {"error": {"code": "ResourceNotFound", "message": f"{name} not found"}},
            status=404,
        )
    return web.json_response(
        {
            "id": request.path,
            "name": name,
            "location": "eastus",
            "properties": {"fqdn": "vmm.contoso.com"},
            "extendedLocation": {"type": "customLocation", "name": "cl"},
        }
    )


def _cloud(name: str) -> dict:
    return {
        "name": name,
        "location": "eastus",
        "properties": {"cloudName": name},
        "extendedLocation": {"type": "customLocation", "name": "cl"},
    }


async def _list_clouds(request: web.Request) -> web.Response:
    if "$skiptoken" not in request.query:
        next_link = str(request.url.update_query({"$skiptoken": "1"}))
        return web.json_response(
            {
                "value": [_cloud("c0")],
                "nextLink": next_link,
            }
        )
    return web.json_response({"value": [_cloud("c1")]})


@pytest_asyncio.fixture
async def server() -> AsyncIterator[test_utils.TestServer]:
    app = web.Application()
    app.router.add_route("*", "/echo", _echo)
    app.router.add_get(
        "/subscriptions/{subscription}/resourceGroups/{group}/providers/"
        "Microsoft.ScVmm/vmmServers/{name}",
        _get_vmm_server,
    )
    app.router.add_get(
        "/subscriptions/{subscription}/providers/Microsoft.ScVmm/clouds",
        _list_clouds,
    )
    async with test_utils.TestServer(app) as test_server:
        yield test_server


@pytest.mark.asyncio
async def test_json_body(server: test_utils.TestServer) -> None:
    transport = AiohttpTransport()
    response = await transport.send(
        HttpRequest(
            "POST",
            str(server.make_url("/echo?a=1")),
            {"Content-Type": "application/json"},
            json_content={"hello": "world"},
        )
    )

    assert response.status == 200
    assert response.headers["x-ms-request-id"] == "abc"
    assert response.content_type.startswith("application/json")
    actual = response.json()
    assert actual["query"] == {"a": "1"}, actual
    assert actual["body"] == '{"hello": "world"}', actual


@pytest.mark.asyncio
async def test_bytes_body_with_session(server: test_utils.TestServer) -> None:
    async with aiohttp.ClientSession() as session:
        transport = AiohttpTransport(session)
        response = await transport.send(
            HttpRequest(
                "PUT",
                str(server.make_url("/echo")),
                {"Content-Type": "application/octet-stream"},
                data=b"\x00\x01",
            )
        )
        await transport.close()
        assert not session.closed

    actual = response.json()
    assert actual["method"] == "PUT"
    assert actual["contentType"] == "application/octet-stream"
    assert actual["body"] == "\x00\x01"


@pytest.mark.asyncio
async def test_client_end_to_end(server: test_utils.TestServer) -> None:
    endpoint = str(server.make_url("")).rstrip("/")
    async with ScVmmClient.create(
        FakeCredential(), endpoint, transport=AiohttpTransport()
    ) as client:
        vmm_server = await client.vmm_servers().get("sub", "rg", "vmm1")
        assert vmm_server.tracked_resource.resource.name == "vmm1"
        assert vmm_server.properties.fqdn == "vmm.contoso.com"

        with pytest.raises(ResourceNotFoundError) as exc_info:
            await client.vmm_servers().get("sub", "rg", "missing")
        assert exc_info.value.message == "missing not found"

        names: List[str] = [
            cloud.tracked_resource.resource.name
            async for cloud in client.clouds().list_by_subscription("sub")
        ]
        assert names == ["c0", "c1"], names
