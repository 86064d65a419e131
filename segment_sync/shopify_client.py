from __future__ import annotations
"""
Shopify Admin API Client
Counts orders and sums sales over the trailing window for a segment
"""

from datetime import datetime
from typing import Any, Dict, Optional

import requests

from segment_sync.config.sync_windows import (
    SHOPIFY_ORDER_FIELDS,
    SHOPIFY_ORDER_STATUS,
    SHOPIFY_PAGE_LIMIT,
)
from segment_sync.errors import ConfigError, ShopifyAPIError
from segment_sync.utils.logs import log_step
from segment_sync.utils.pagination import get_next_page_info
from segment_sync.utils.windows import to_iso_timestamp, trailing_window


def parse_price(value: Any) -> float:
    """Order total as float; missing or non-numeric totals count as 0"""
    try:
        return float(value or 0)
    except (TypeError, ValueError):
        return 0.0


class ShopifyClient:
    """Client for the Shopify Admin REST orders endpoint of a single store"""

    def __init__(
        self,
        store: Optional[str],
        access_token: Optional[str],
        query: Optional[str] = "",
        session: Optional[requests.Session] = None,
        api_version: str = "2024-07",
    ):
        if not store or not access_token:
            raise ConfigError(
                "Missing SHOPIFY_STORE or SHOPIFY_ADMIN_TOKEN environment variables"
            )

        self.store = store
        self.access_token = access_token
        self.query = query or ""
        self.api_version = api_version
        self.session = session or requests.Session()

    @property
    def orders_url(self) -> str:
        return f"https://{self.store}/admin/api/{self.api_version}/orders.json"

    @property
    def headers(self) -> Dict[str, str]:
        return {
            "X-Shopify-Access-Token": self.access_token,
            "Content-Type": "application/json",
        }

    def build_params(self, start: datetime, end: datetime, page_info: Optional[str] = None) -> Dict[str, Any]:
        params = {
            "status": SHOPIFY_ORDER_STATUS,
            "limit": SHOPIFY_PAGE_LIMIT,
            "fields": SHOPIFY_ORDER_FIELDS,
            "processed_at_min": to_iso_timestamp(start),
            "processed_at_max": to_iso_timestamp(end),
        }
        if self.query:
            params["query"] = self.query
        if page_info:
            params["page_info"] = page_info
        return params

    def fetch_orders(self, now: Optional[datetime] = None) -> Dict[str, Any]:
        """
        Walk every page of orders in the trailing window.

        Args:
            now: End of the window (defaults to the current UTC time)

        Returns:
            Dict with 'orders' (count) and 'sales' (sum of total_price)

        Raises:
            ShopifyAPIError: on the first non-success response
        """
        start, end = trailing_window(now)
        log_step(
            "SHOPIFY",
            f"Fetching orders for {self.store} ({to_iso_timestamp(start)} to {to_iso_timestamp(end)})",
            "PROGRESS"
        )

        orders = 0
        sales = 0.0
        page_info = None
        page = 0

        while True:
            response = self.session.get(
                self.orders_url,
                headers=self.headers,
                params=self.build_params(start, end, page_info),
            )
            if not response.ok:
                raise ShopifyAPIError(response.status_code, response.text)

            page += 1
            for order in response.json().get("orders", []):
                orders += 1
                sales += parse_price(order.get("total_price"))

            log_step("SHOPIFY", f"Page {page}: {orders} orders so far")

            page_info = get_next_page_info(response.headers.get("Link"))
            if not page_info:
                break

        log_step("SHOPIFY", f"Fetched {orders} orders totalling {sales:.2f}", "SUCCESS")
        return {"orders": orders, "sales": sales}
