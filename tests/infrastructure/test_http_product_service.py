"""Tests for the httpx-based ProductService.

Requests are answered by ``httpx.MockTransport``, no server involved.
"""

import json

import httpx
import pytest

from catalog.application.product_list import ProductListState
from catalog.application.uniqueness_check import Idle, UniquenessCheckCoordinator
from catalog.domain.exceptions import (
    DuplicateIdentifierError,
    EntityNotFoundError,
    RemoteFailureError,
)
from catalog.infrastructure.client.http_product_service import HttpProductService
from tests.fakes import RecordingNavigator, RecordingNotifier, make_product

BASE_URL = "http://catalog.test/bp"


def _service(handler) -> HttpProductService:
    return HttpProductService(BASE_URL, transport=httpx.MockTransport(handler))


@pytest.mark.asyncio
async def test_list_all_unwraps_data():
    def handler(request):
        assert request.url.path == "/bp/products"
        return httpx.Response(200, json={"data": [make_product("a-1").to_dict()]})

    products = await _service(handler).list_all()
    assert [p.id for p in products] == ["a-1"]


@pytest.mark.asyncio
async def test_verify_id():
    def handler(request):
        return httpx.Response(200, json=request.url.path.endswith("/taken"))

    service = _service(handler)
    assert await service.verify_id("taken") is True
    assert await service.verify_id("free1") is False


@pytest.mark.asyncio
async def test_create_sends_iso_dates():
    seen = {}

    def handler(request):
        seen.update(json.loads(request.content))
        return httpx.Response(200, json={"message": "ok", "data": seen})

    created = await _service(handler).create(make_product("abc123"))
    assert seen["date_release"] == "2025-01-01"
    assert created.id == "abc123"


@pytest.mark.asyncio
async def test_update_serializes_date_values():
    seen = {}

    def handler(request):
        seen.update(json.loads(request.content))
        return httpx.Response(200, json={"message": "ok", "data": make_product("abc123").to_dict()})

    product = make_product("abc123")
    await _service(handler).update("abc123", product.to_dict() | {"date_release": product.date_release})
    assert seen["date_release"] == "2025-01-01"


@pytest.mark.asyncio
async def test_404_maps_to_not_found():
    def handler(request):
        return httpx.Response(404, json={"name": "NotFoundError", "message": "Not product found"})

    with pytest.raises(EntityNotFoundError, match="Not product found"):
        await _service(handler).get_by_id("missing")


@pytest.mark.asyncio
async def test_400_duplicate_maps_to_conflict():
    def handler(request):
        return httpx.Response(
            400, json={"name": "BadRequestError", "message": "Duplicate identifier found in the database"}
        )

    with pytest.raises(DuplicateIdentifierError):
        await _service(handler).create(make_product())


@pytest.mark.asyncio
async def test_other_400_is_generic_failure():
    def handler(request):
        return httpx.Response(400, json={"name": "BadRequestError", "message": "Invalid body"})

    with pytest.raises(RemoteFailureError, match=r"Server error \(400\): Invalid body"):
        await _service(handler).create(make_product())


@pytest.mark.asyncio
async def test_500_is_generic_failure():
    def handler(request):
        return httpx.Response(500, text="")

    with pytest.raises(RemoteFailureError, match=r"Server error \(500\)"):
        await _service(handler).delete("abc123")


@pytest.mark.asyncio
async def test_transport_error_is_network_failure():
    def handler(request):
        raise httpx.ConnectError("connection refused", request=request)

    with pytest.raises(RemoteFailureError, match="Network error"):
        await _service(handler).list_all()


@pytest.mark.asyncio
async def test_ids_are_escaped_in_the_path():
    seen = []

    def handler(request):
        seen.append(request.url.raw_path)
        return httpx.Response(200, json=False)

    await _service(handler).verify_id("a/b?c#d")
    assert seen == [b"/bp/products/verification/a%2Fb%3Fc%23d"]


# ── Unreadable success bodies ────────────────────────────────────────────────


def _html(request):
    return httpx.Response(200, text="<html>proxy</html>", headers={"content-type": "text/html"})


@pytest.mark.asyncio
@pytest.mark.parametrize("call", [
    lambda s: s.list_all(),
    lambda s: s.verify_id("abc123"),
    lambda s: s.get_by_id("abc123"),
    lambda s: s.create(make_product("abc123")),
    lambda s: s.update("abc123", {"name": "Other name"}),
])
async def test_html_body_is_remote_failure(call):
    with pytest.raises(RemoteFailureError, match=r"Server error \(200\)"):
        await call(_service(_html))


@pytest.mark.asyncio
@pytest.mark.parametrize("body", [{"items": []}, {"data": [{"id": "x"}]}, None, "oops"])
async def test_wrong_shape_is_remote_failure(body):
    def handler(request):
        return httpx.Response(200, json=body)

    with pytest.raises(RemoteFailureError):
        await _service(handler).list_all()


@pytest.mark.asyncio
async def test_non_boolean_verification_is_remote_failure():
    def handler(request):
        return httpx.Response(200, json={"exists": True})

    with pytest.raises(RemoteFailureError):
        await _service(handler).verify_id("abc123")


@pytest.mark.asyncio
async def test_list_state_flags_error_on_unreadable_body():
    state = ProductListState(_service(_html), RecordingNavigator(), RecordingNotifier())
    await state.load()
    assert state.error is True
    assert state.loading is False


@pytest.mark.asyncio
async def test_uniqueness_check_returns_to_idle_on_unreadable_body():
    coordinator = UniquenessCheckCoordinator(_service(_html), delay=0.01)
    coordinator.push("abcdef")
    await coordinator.wait()
    assert coordinator.state == Idle()
