"""
HTTP client used by the inventory page.

The page keeps a local copy of the product list for rendering, searching and
the summary counters. That copy lives in an explicit ProductCache that is
dropped and refetched after every write; it is never trusted for ids or
stock levels.
"""
from typing import Any, Dict, List, Optional

import httpx
import structlog

from services.product_service.validation import parse_quantity

from . import catalog

logger = structlog.get_logger(__name__)


class InventoryClientError(Exception):
    def __init__(self, status_code: int, detail: str):
        self.status_code = status_code
        self.detail = detail
        super().__init__(f"HTTP {status_code}: {detail}")


class ProductCache:
    def __init__(self):
        self._products: Optional[List[Dict[str, Any]]] = None

    @property
    def is_stale(self) -> bool:
        return self._products is None

    def invalidate(self) -> None:
        self._products = None

    def replace(self, products: List[Dict[str, Any]]) -> None:
        self._products = list(products)

    def products(self) -> List[Dict[str, Any]]:
        if self._products is None:
            return []
        return list(self._products)

    def find(self, product_id: int) -> Optional[Dict[str, Any]]:
        for product in self._products or []:
            if product["id"] == product_id:
                return product
        return None


class InventoryClient:
    def __init__(self, http: httpx.Client, api_prefix: str = "/api"):
        self.http = http
        self.api_prefix = api_prefix.rstrip("/")
        self.cache = ProductCache()

    @classmethod
    def connect(cls, base_url: str = "http://localhost:8000", timeout: float = 10.0) -> "InventoryClient":
        return cls(httpx.Client(base_url=base_url.rstrip("/"), timeout=timeout))

    def close(self) -> None:
        self.http.close()

    def _url(self, path: str = "") -> str:
        return f"{self.api_prefix}/products{path}"

    @staticmethod
    def _unwrap(resp: httpx.Response) -> Dict[str, Any]:
        if resp.is_error:
            try:
                detail = resp.json().get("detail", resp.text)
            except ValueError:
                detail = resp.text
            raise InventoryClientError(resp.status_code, str(detail))
        return resp.json()

    # ---------------------------
    # Reads
    # ---------------------------
    def load_products(self) -> List[Dict[str, Any]]:
        """Fetch the full list (newest first) and replace the cache with it."""
        body = self._unwrap(self.http.get(self._url()))
        self.cache.replace(body.get("products", []))
        return self.cache.products()

    def products(self) -> List[Dict[str, Any]]:
        if self.cache.is_stale:
            return self.load_products()
        return self.cache.products()

    def get_product(self, product_id: int) -> Dict[str, Any]:
        return self._unwrap(self.http.get(self._url(f"/{product_id}")))["product"]

    def search(self, term: Optional[str] = None, category: Optional[str] = None) -> List[Dict[str, Any]]:
        return catalog.filter_products(self.products(), search=term, category=category)

    def categories(self) -> List[str]:
        return catalog.categories(self.products())

    def stats(self) -> catalog.InventoryStats:
        return catalog.inventory_stats(self.products())

    # ---------------------------
    # Writes (each one refetches the list)
    # ---------------------------
    def _after_write(self) -> None:
        self.cache.invalidate()
        self.load_products()

    def create_product(self, payload: Dict[str, Any]) -> int:
        body = self._unwrap(self.http.post(self._url(), json=payload))
        self._after_write()
        return body["id"]

    def update_product(self, product_id: int, payload: Dict[str, Any]) -> None:
        self._unwrap(self.http.put(self._url(f"/{product_id}"), json=payload))
        self._after_write()

    def delete_product(self, product_id: int) -> None:
        self._unwrap(self.http.delete(self._url(f"/{product_id}")))
        self._after_write()

    def adjust_quantity(self, product_id: int, new_quantity: Any) -> Dict[str, Any]:
        """Stock +/- control: read the product, replace its quantity, send it back whole."""
        # Same rules as the API, checked before any request goes out.
        quantity = parse_quantity(new_quantity)

        product = self.get_product(product_id)
        payload = {key: value for key, value in product.items() if key != "id"}
        payload["quantity"] = quantity

        self.update_product(product_id, payload)
        logger.info("stock_adjusted", product_id=product_id, quantity=quantity)
        return self.get_product(product_id)
