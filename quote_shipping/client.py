"""
Quote Shipping API Client

HTTP client for storefronts and checkout flows that need to read or
select a cart's shipping method.
"""

import logging
from typing import Optional, Any

import httpx

logger = logging.getLogger(__name__)


class ShippingClient:
    """Client for the quote shipping API"""

    def __init__(
        self,
        base_url: str,
        timeout: float = 30.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Initialize shipping client.

        Args:
            base_url: Base URL of the quote shipping service
            timeout: Request timeout in seconds
            transport: Optional transport (e.g. httpx.ASGITransport for tests)
        """
        self.base_url = base_url.rstrip("/")
        self._http_client = httpx.AsyncClient(
            base_url=self.base_url,
            timeout=timeout,
            transport=transport,
        )

    async def close(self) -> None:
        """Close HTTP client"""
        await self._http_client.aclose()

    async def __aenter__(self) -> "ShippingClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.close()

    async def _request(
        self,
        method: str,
        path: str,
        body: Optional[dict] = None,
    ) -> Any:
        response = await self._http_client.request(
            method=method,
            url=path,
            headers={"Accept": "application/json"},
            json=body,
        )

        if response.status_code >= 400:
            logger.error(f"Request failed: {response.status_code} - {response.text}")
            response.raise_for_status()

        return response.json()

    # ==================== Cart APIs ====================

    async def create_cart(self, currency: Optional[str] = None) -> dict:
        """Create a new shopping cart"""
        body = {"currency": currency} if currency else None
        return await self._request("POST", "/api/carts", body=body)

    async def get_cart(self, cart_id: int) -> dict:
        """Get cart by ID"""
        return await self._request("GET", f"/api/carts/{cart_id}")

    async def add_to_cart(self, cart_id: int, product_id: str, quantity: int = 1) -> dict:
        """Add item to cart"""
        return await self._request(
            "POST",
            f"/api/carts/{cart_id}/items",
            body={"product_id": product_id, "quantity": quantity},
        )

    async def set_shipping_address(self, cart_id: int, address: dict) -> dict:
        return await self._request("PUT", f"/api/carts/{cart_id}/shipping-address", body=address)

    async def set_billing_address(self, cart_id: int, address: dict) -> dict:
        return await self._request("PUT", f"/api/carts/{cart_id}/billing-address", body=address)

    # ==================== Shipping method APIs ====================

    async def get_shipping_methods(self, cart_id: int) -> list[dict]:
        """List shipping methods applicable to a cart"""
        return await self._request("GET", f"/api/carts/{cart_id}/shipping-methods")

    async def get_selected_shipping_method(self, cart_id: int) -> Optional[dict]:
        """Get the selected shipping method, or None when nothing is selected"""
        return await self._request("GET", f"/api/carts/{cart_id}/selected-shipping-method")

    async def set_shipping_method(self, cart_id: int, carrier_code: str, method_code: str) -> bool:
        """Select a shipping method for a cart"""
        return await self._request(
            "PUT",
            f"/api/carts/{cart_id}/selected-shipping-method",
            body={"carrier_code": carrier_code, "method_code": method_code},
        )
