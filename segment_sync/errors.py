"""
Exceptions raised by the segment sync job
"""


class SegmentSyncError(Exception):
    """Base class for sync failures"""
    pass


class ConfigError(SegmentSyncError):
    """Raised when required credentials are missing"""
    pass


class ShopifyAPIError(SegmentSyncError):
    """Raised when the Shopify Admin API answers with a non-success status"""

    def __init__(self, status_code: int, body: str):
        self.status_code = status_code
        self.body = body
        super().__init__(f"Shopify API error {status_code}: {body}")
