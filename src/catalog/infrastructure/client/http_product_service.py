"""HTTP implementation of the ProductService port.

Talks to the products API with httpx and translates failures into the
domain exception taxonomy:

- 404                          -> EntityNotFoundError
- 400 mentioning "duplicate"   -> DuplicateIdentifierError
- any other error / transport  -> RemoteFailureError
- a 2xx body that is not the expected JSON -> RemoteFailureError
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Mapping, Optional
from urllib.parse import quote

import httpx

from catalog.application.ports import ProductService
from catalog.domain.exceptions import (
    DuplicateIdentifierError,
    EntityNotFoundError,
    RemoteFailureError,
    ValidationError,
)
from catalog.domain.model.product import DATE_FIELDS, Product

logger = logging.getLogger(__name__)


def _server_message(response: httpx.Response) -> str:
    try:
        body = response.json()
    except ValueError:
        return response.text
    if isinstance(body, dict):
        return str(body.get("message") or body.get("error") or "")
    if isinstance(body, str):
        return body
    return ""


def _friendly_message(response: httpx.Response) -> str:
    message = _server_message(response)
    if message:
        return f"Server error ({response.status_code}): {message}"
    return f"Server error ({response.status_code}) {response.reason_phrase}".rstrip()


def _segment(product_id: str) -> str:
    # ids are free text; keep "/", "?" and "#" inside the path segment
    return quote(product_id, safe="")


def _as_bool(body: Any) -> bool:
    if not isinstance(body, bool):
        raise TypeError(f"expected a JSON boolean, got {type(body).__name__}")
    return body


def _data_products(body: Any) -> list[Product]:
    return [Product.from_dict(raw) for raw in body["data"]]


def _data_product(body: Any) -> Product:
    return Product.from_dict(body["data"])


def _decode(response: httpx.Response, parse: Optional[Callable[[Any], Any]]) -> Any:
    """Decode a 2xx body; an unreadable or mis-shaped one is a remote failure."""
    try:
        body = response.json() if response.content else None
        return parse(body) if parse is not None else body
    except (ValueError, KeyError, TypeError, ValidationError) as exc:
        logger.error("Unreadable response from products API (%s): %s", response.status_code, exc)
        raise RemoteFailureError(
            f"Server error ({response.status_code}): unexpected response body"
        ) from exc


class HttpProductService(ProductService):

    def __init__(
        self,
        base_url: str,
        *,
        timeout: float = 10.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._transport = transport

    # --- ProductService interface ---------------------------------------------

    async def list_all(self) -> list[Product]:
        return await self._request("GET", "/products", parse=_data_products)

    async def verify_id(self, product_id: str) -> bool:
        return await self._request(
            "GET", f"/products/verification/{_segment(product_id)}", parse=_as_bool
        )

    async def get_by_id(self, product_id: str) -> Product:
        return await self._request(
            "GET", f"/products/{_segment(product_id)}", parse=Product.from_dict
        )

    async def create(self, product: Product) -> Product:
        return await self._request(
            "POST", "/products", json=product.to_dict(), parse=_data_product
        )

    async def update(self, product_id: str, changes: Mapping[str, Any]) -> Product:
        payload = {
            key: (value.isoformat() if key in DATE_FIELDS and hasattr(value, "isoformat") else value)
            for key, value in changes.items()
        }
        return await self._request(
            "PUT", f"/products/{_segment(product_id)}", json=payload, parse=_data_product
        )

    async def delete(self, product_id: str) -> None:
        await self._request("DELETE", f"/products/{_segment(product_id)}")

    # --- Internal helpers -----------------------------------------------------

    async def _request(
        self,
        method: str,
        path: str,
        json: Any = None,
        parse: Optional[Callable[[Any], Any]] = None,
    ) -> Any:
        url = f"{self._base_url}{path}"
        logger.debug("%s %s", method, url)
        try:
            async with httpx.AsyncClient(timeout=self._timeout, transport=self._transport) as client:
                response = await client.request(method, url, json=json)
        except httpx.RequestError as exc:
            logger.error("Request error calling %s %s: %s", method, url, exc)
            raise RemoteFailureError(f"Network error: {exc or 'connection issue'}") from exc

        if response.is_success:
            return _decode(response, parse)

        message = _server_message(response)
        if response.status_code == 404:
            raise EntityNotFoundError(message or "Product not found")
        if response.status_code == 400 and "duplicate" in message.lower():
            raise DuplicateIdentifierError(message)

        logger.error("HTTP error from products API: %s %s", response.status_code, message)
        raise RemoteFailureError(_friendly_message(response))
