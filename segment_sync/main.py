from __future__ import annotations
"""
Segment Sync - Nightly Shopify + GA4 summary

Fetches the trailing 90-day order totals (Shopify) and traffic metrics (GA4)
in parallel, merges them into one record and overwrites the dashboard's
segment.json. Intended to run from a scheduler: exit code 1 on any failure,
and nothing is written unless both sources succeed.
"""

import argparse
import sys
from concurrent.futures import ThreadPoolExecutor
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List, Optional

from segment_sync.ga4_client import GA4Client
from segment_sync.segment_writer import write_segment
from segment_sync.settings import Settings, settings as default_settings
from segment_sync.shopify_client import ShopifyClient
from segment_sync.utils.logs import log_step
from segment_sync.utils.metrics import build_output_record


def build_shopify_client(config: Settings) -> ShopifyClient:
    return ShopifyClient(
        store=config.SHOPIFY_STORE,
        access_token=config.SHOPIFY_ADMIN_TOKEN,
        query=config.SEGMENT_SHOPIFY_QUERY,
        api_version=config.SHOPIFY_API_VERSION,
    )


def build_ga_client(config: Settings) -> GA4Client:
    return GA4Client(
        property_id=config.GA4_PROPERTY_ID,
        client_email=config.GA4_CLIENT_EMAIL,
        private_key=config.GA4_PRIVATE_KEY,
        dimension_filter=config.SEGMENT_GA_FILTER,
    )


def run_sync(
    config: Optional[Settings] = None,
    now: Optional[datetime] = None,
    shopify_client: Optional[ShopifyClient] = None,
    ga_client: Optional[GA4Client] = None,
    dest: Optional[Path] = None,
) -> Dict[str, Any]:
    """
    Execute one sync run.

    Clients are built from settings unless injected, so missing credentials
    fail before any network call. Both fetches must succeed before the
    output file is touched.

    Returns:
        The OutputRecord that was written
    """
    config = config or default_settings
    dest = Path(dest) if dest else config.OUTPUT_PATH

    log_step("SYNC", "STARTING SEGMENT SYNC")

    shopify_client = shopify_client or build_shopify_client(config)
    ga_client = ga_client or build_ga_client(config)

    with ThreadPoolExecutor(max_workers=2) as executor:
        shopify_future = executor.submit(shopify_client.fetch_orders, now)
        ga_future = executor.submit(ga_client.fetch_summary)

        # Raise if either failed
        shopify = shopify_future.result()
        ga = ga_future.result()

    record = build_output_record(shopify, ga)
    write_segment(record, dest)

    log_step("SYNC", f"Updated {dest}", "SUCCESS")
    return record


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Write the trailing 90-day Shopify + GA4 segment summary."
    )
    parser.add_argument(
        "--output",
        type=Path,
        default=None,
        help="Destination JSON file (defaults to SEGMENT_OUTPUT_PATH or public/data/segment.json)",
    )
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None):
    args = parse_args(argv)

    try:
        run_sync(dest=args.output)
    except Exception as e:
        log_step("SYNC", f"FATAL ERROR: {e}", "ERROR")
        sys.exit(1)


if __name__ == "__main__":
    main()
