"""
Canonical configuration for the segment sync windows and upstream queries.
Both sources must describe the same trailing window, so the Shopify
timestamps and the GA4 relative range are defined side by side.
"""

# Trailing window
WINDOW_DAYS = 90         # Inclusive, ending today
WINDOW_OFFSET_DAYS = 89  # start = now - 89 days

# GA4 relative date range covering the same window
GA4_START_DATE = "90daysAgo"
GA4_END_DATE = "today"
GA4_METRICS = ["sessions", "sessionConversionRate"]

# Shopify Orders API
SHOPIFY_PAGE_LIMIT = 250  # Max page size allowed by the Admin REST API
SHOPIFY_ORDER_FIELDS = "total_price,created_at"
SHOPIFY_ORDER_STATUS = "any"
