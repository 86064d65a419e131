from __future__ import annotations
"""
Google Analytics 4 Data API Client
Pulls sessions and session conversion rate for the trailing window
"""

import json
from typing import Any, Dict, List, Optional

from google.oauth2 import service_account
from googleapiclient.discovery import build

from segment_sync.config.sync_windows import GA4_END_DATE, GA4_METRICS, GA4_START_DATE
from segment_sync.errors import ConfigError
from segment_sync.utils.logs import log_step

SCOPES = ["https://www.googleapis.com/auth/analytics.readonly"]
TOKEN_URI = "https://oauth2.googleapis.com/token"


class GA4Client:
    """Client for the GA4 runReport endpoint of a single property"""

    def __init__(
        self,
        property_id: Optional[str],
        client_email: Optional[str],
        private_key: Optional[str],
        dimension_filter: Optional[str] = None,
        service=None,
    ):
        # GA4_PRIVATE_KEY may contain escaped newlines
        private_key = private_key.replace("\\n", "\n") if private_key else private_key

        if not property_id or not client_email or not private_key:
            raise ConfigError("Missing GA4 service account credentials.")

        self.property_id = property_id
        self.client_email = client_email
        self.private_key = private_key
        self.dimension_filter = dimension_filter
        self.service = service or self._init_service()

    def _load_credentials(self) -> service_account.Credentials:
        return service_account.Credentials.from_service_account_info(
            {
                "type": "service_account",
                "client_email": self.client_email,
                "private_key": self.private_key,
                "token_uri": TOKEN_URI,
            },
            scopes=SCOPES,
        )

    def _init_service(self):
        return build(
            "analyticsdata",
            "v1beta",
            credentials=self._load_credentials(),
            cache_discovery=False,
        )

    @property
    def property_name(self) -> str:
        return f"properties/{self.property_id}"

    def build_report_request(self) -> Dict[str, Any]:
        """
        Build the runReport body. An unparsable dimension filter is ignored
        with a warning rather than failing the run.
        """
        request_body = {
            "dateRanges": [{"startDate": GA4_START_DATE, "endDate": GA4_END_DATE}],
            "metrics": [{"name": name} for name in GA4_METRICS],
        }

        if self.dimension_filter:
            try:
                request_body["dimensionFilter"] = json.loads(self.dimension_filter)
            except json.JSONDecodeError:
                log_step("GA4", "Invalid SEGMENT_GA_FILTER JSON, ignoring", "WARNING")

        return request_body

    def fetch_summary(self) -> Dict[str, Any]:
        """
        Run the report and read the first row.

        Returns:
            Dict with 'sessions' and 'conversionRate' (fraction); zeros when
            the report has no rows
        """
        log_step("GA4", f"Running report for {self.property_name}", "PROGRESS")

        response = self.service.properties().runReport(
            property=self.property_name,
            body=self.build_report_request()
        ).execute()

        rows: List[Dict[str, Any]] = response.get("rows") or []
        log_step("GA4", f"Report returned {len(rows)} rows")

        if not rows:
            return {"sessions": 0.0, "conversionRate": 0.0}

        metric_values = rows[0]["metricValues"]
        sessions = float(metric_values[0]["value"])
        conversion_rate = float(metric_values[1]["value"])

        log_step("GA4", f"Sessions: {sessions:.0f}, conversion rate: {conversion_rate:.4f}", "SUCCESS")
        return {"sessions": sessions, "conversionRate": conversion_rate}
