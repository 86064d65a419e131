from __future__ import annotations
"""
Link header pagination for the Shopify Admin REST API.

Shopify returns cursors as:
    Link: <https://shop/admin/api/2024-07/orders.json?page_info=abc&limit=250>; rel="next"
"""

import re
from typing import Optional
from urllib.parse import unquote

PAGE_INFO_PATTERN = re.compile(r"page_info=([^&>]+)")


def get_next_page_info(link_header: Optional[str]) -> Optional[str]:
    """
    Extract the page_info cursor of the rel="next" link.

    Returns None when the header is empty, has no "next" relation,
    or the next URL carries no page_info parameter.
    """
    if not link_header:
        return None

    for part in link_header.split(","):
        pieces = [piece.strip() for piece in part.strip().split(";")]
        url_part = pieces[0]
        rel_part = pieces[1] if len(pieces) > 1 else ""

        if rel_part == 'rel="next"':
            match = PAGE_INFO_PATTERN.search(url_part)
            return unquote(match.group(1)) if match else None

    return None
