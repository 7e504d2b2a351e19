from dataclasses import dataclass
from typing import Any, Optional

import requests

from storefront.core.config import settings
from storefront.core.logger import get_logger

logger = get_logger(__name__)


class TransportError(Exception):
    """The request never produced an HTTP response."""


@dataclass
class ApiResponse:
    status_code: int
    data: Any

    @property
    def ok(self) -> bool:
        return self.status_code == 200

    @property
    def error(self) -> Optional[str]:
        if not isinstance(self.data, dict):
            return None
        # Cart routes answer {error}, validation and auth failures answer {detail}
        message = self.data.get("error") or self.data.get("detail")
        return message if isinstance(message, str) else None


class StorefrontAPI:
    def __init__(self, base_url: Optional[str] = None, session=None, timeout: float = 10):
        self.base_url = (settings.API_URL if base_url is None else base_url).rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    def _request(self, method: str, path: str, token: Optional[str] = None, json: Any = None) -> ApiResponse:
        headers = {"Content-Type": "application/json"}
        if token:
            headers["Authorization"] = token
        url = f"{self.base_url}{path}"
        try:
            response = self.session.request(method, url, headers=headers, json=json, timeout=self.timeout)
        except requests.RequestException as e:
            logger.warning("request failed", method=method, url=url, error=e)
            raise TransportError(str(e)) from e

        try:
            data = response.json()
        except ValueError:
            data = None
        return ApiResponse(status_code=response.status_code, data=data)

    def get_products(self) -> ApiResponse:
        return self._request("GET", "/product/")

    def get_cart(self, user_id: str, token: str) -> ApiResponse:
        return self._request("GET", f"/cart/getCart/{user_id}", token=token)

    def add_item(self, user_id: str, token: str, product_id: str, quantity: int = 1, size: Optional[str] = None) -> ApiResponse:
        return self._request(
            "POST",
            f"/cart/addItem/{user_id}",
            token=token,
            json={"productID": product_id, "quantity": quantity, "size": size},
        )

    def delete_item(self, user_id: str, token: str, item_id: str) -> ApiResponse:
        return self._request("PATCH", f"/cart/deleteItem/{user_id}", token=token, json={"itemID": item_id})
