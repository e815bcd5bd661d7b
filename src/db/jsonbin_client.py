"""JSONBin connection and utilities."""

import logging
from typing import Any

import httpx

from src.config import JSONBIN_CONFIG
from src.db.exceptions import StoreUnavailableError, StoreWriteError

logger = logging.getLogger(__name__)


class JsonBinClient:
    def __init__(self, config: dict[str, Any] = JSONBIN_CONFIG, http_client: httpx.Client | None = None):
        self.bin_url = f"{config['api_url']}/{config['bin_id']}"
        self.headers = {"X-Master-Key": config["api_key"], "Content-Type": "application/json"}
        self.client = http_client or httpx.Client(timeout=config["timeout"])

    def get_json(self) -> Any | None:
        """Get the latest document record. Returns None if the bin does not exist yet."""
        try:
            response = self.client.get(f"{self.bin_url}/latest", headers=self.headers)
        except httpx.HTTPError as e:
            raise StoreUnavailableError(f"Failed to fetch document: {e}") from e

        if response.status_code == httpx.codes.NOT_FOUND:
            logger.info(f"Document {self.bin_url} not found, treating as empty")
            return None
        if not response.is_success:
            raise StoreUnavailableError(f"Failed to fetch document: HTTP {response.status_code}")

        try:
            return response.json().get("record")
        except (ValueError, AttributeError) as e:
            raise StoreUnavailableError(f"Malformed document response: {e}") from e

    def set_json(self, value: Any) -> None:
        """Replace the whole document with value."""
        try:
            response = self.client.put(self.bin_url, json=value, headers=self.headers)
        except httpx.HTTPError as e:
            raise StoreWriteError(f"Failed to save document: {e}") from e

        if not response.is_success:
            raise StoreWriteError(f"Failed to save document: HTTP {response.status_code}")

    def close(self):
        self.client.close()
