"""
RRA VSDC/EBM connector.

Most gateway endpoints still answer with RRA-shaped mock payloads; the
connector is the pass-through used when data really has to reach the EBM
server (item synchronisation).
"""

import logging

import requests

from apps.vsdc.config import get_vsdc_config

logger = logging.getLogger("vsdc_gateway.vsdc")


class VSDCConnector:
    """POST/GET JSON to the EBM API of the configured environment. Never raises."""

    def __init__(self, config=None, session=None):
        self.config  = config or get_vsdc_config()
        self.session = session or requests

    def call(self, endpoint: str, method="POST", data=None, token=None) -> dict:
        url = f"{self.config.ebm_api_url}{endpoint}"
        headers = {"Content-Type": "application/json"}
        if token:
            headers["Authorization"] = f"Bearer {token}"

        try:
            resp = self.session.request(
                method,
                url,
                json=data,
                headers=headers,
                timeout=self.config.timeout,
            )
            resp.raise_for_status()
            return {"success": True, "data": resp.json(), "status": resp.status_code}
        except requests.RequestException as exc:
            response = getattr(exc, "response", None)
            error = str(exc)
            status = 500
            if response is not None:
                status = response.status_code
                try:
                    error = response.json()
                except ValueError:
                    error = response.text or error
            logger.error("VSDC API call %s %s failed: %s", method, endpoint, error)
            return {"success": False, "error": error, "status": status}

    def save_item(self, item: dict) -> dict:
        return self.call("/items/saveItems", "POST", item)
