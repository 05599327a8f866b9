import pytest
from aiohttp import web
from aiohttp import test_utils

from core.api import LOGIN_SENTINEL, ApiClient, ApiClientError


@pytest.fixture
def seen():
    return []


@pytest.fixture
def backend(seen):
    async def signup(request):
        body = await request.json()
        seen.append(("POST", request.path, body))
        if body["username"] == LOGIN_SENTINEL:
            return web.Response(text=f"Login successful {body['email'].split('@')[0]}")
        return web.Response(status=201, text="created")

    async def category_summary(request):
        seen.append(("GET", request.path, dict(request.query)))
        return web.json_response([])

    async def category_create(request):
        seen.append(("POST", request.path, await request.json()))
        return web.Response(status=400, text="Nickname already exists")

    async def delete_category(request):
        seen.append(("DELETE", request.path, dict(request.query)))
        return web.Response(text="deleted")

    webapp = web.Application()
    webapp.router.add_post("/signup", signup)
    webapp.router.add_get("/category_summary", category_summary)
    webapp.router.add_post("/category_create", category_create)
    webapp.router.add_delete("/delete_category", delete_category)
    return webapp


async def test_signup_and_login_share_endpoint(backend, seen):
    async with test_utils.TestServer(backend) as server:
        client = ApiClient(str(server.make_url("/")))
        try:
            resp = await client.signup("bob", "bob@x.io", "pw")
            assert resp.status == 201
            resp = await client.login("alice@x.io", "pw")
            assert resp.ok
            assert resp.text == "Login successful alice"
        finally:
            await client.close()
    assert seen[0] == ("POST", "/signup", {"username": "bob", "email": "bob@x.io", "password": "pw"})
    assert seen[1][2]["username"] == "_login"


async def test_query_params_are_encoded(backend, seen):
    async with test_utils.TestServer(backend) as server:
        client = ApiClient(str(server.make_url("/")))
        try:
            resp = await client.delete_category("bob@x.io", "eating out")
            assert resp.status == 200
            resp = await client.category_summary("bob@x.io")
            assert resp.text == "[]"
        finally:
            await client.close()
    assert seen[0] == ("DELETE", "/delete_category", {"email": "bob@x.io", "category_nickname": "eating out"})
    assert seen[1] == ("GET", "/category_summary", {"email": "bob@x.io"})


async def test_error_status_is_returned_not_raised(backend):
    async with test_utils.TestServer(backend) as server:
        client = ApiClient(str(server.make_url("/")))
        try:
            resp = await client.create_category({"email": "a@x.io", "nickname": "food"})
        finally:
            await client.close()
    assert resp.status == 400
    assert not resp.ok
    assert resp.text == "Nickname already exists"


async def test_unreachable_backend_raises_client_error():
    client = ApiClient("http://127.0.0.1:1", timeout=2)
    try:
        with pytest.raises(ApiClientError):
            await client.report_overview("a@x.io")
    finally:
        await client.close()
