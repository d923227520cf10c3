#!/usr/bin/env python3

"""DNS provider client that repoints A records to a new address.

Provides the updater that pushes an address to every configured record of
a zone, one authenticated PUT per record, reporting each outcome separately.
"""

import logging

import requests

from typing import Any, Dict, Iterable, Tuple


DEFAULT_API_BASE_URL = "https://api.cloudflare.com/client/v4"
DEFAULT_TTL_A = 120


def make_record_payload(hostname: str, ip: str, ttl: int) -> Dict[str, Any]:
    """Build the A record descriptor sent to the provider."""
    return {"type": "A", "name": hostname, "content": ip, "ttl": ttl}


class DnsRecordUpdater:
    """Client for the per-zone, per-record update endpoint of the provider."""

    @property
    def zone_id(self) -> str:
        """Get the zone whose records are updated."""
        return self._zone_id

    @property
    def ttl(self) -> int:
        """Get the TTL written into every record."""
        return self._ttl

    def __init__(
        self,
        api_token: str,
        zone_id: str,
        timeout: float,
        api_base_url: str = DEFAULT_API_BASE_URL,
        ttl: int = DEFAULT_TTL_A,
    ):
        """Initialize updater with provider credentials and request timeout."""
        if not api_token:
            raise ValueError("API token cannot be empty")
        if not zone_id:
            raise ValueError("Zone identifier cannot be empty")
        if timeout <= 0:
            raise ValueError("Timeout must be positive")
        if ttl <= 0:
            raise ValueError("TTL for A records must be positive")

        self._zone_id = zone_id
        self._timeout = float(timeout)
        self._api_base_url = api_base_url.rstrip("/")
        self._ttl = ttl

        self._session = requests.Session()
        self._session.headers.update(
            {
                "Authorization": f"Bearer {api_token}",
                "Content-Type": "application/json",
            }
        )

    def _record_url(self, record_id: str) -> str:
        return f"{self._api_base_url}/zones/{self._zone_id}/dns_records/{record_id}"

    def update_record(self, record_id: str, ip: str, hostname: str) -> Tuple[bool, str]:
        """Point one record to the given address."""
        try:
            response = self._session.put(
                self._record_url(record_id),
                json=make_record_payload(hostname, ip, self._ttl),
                timeout=self._timeout,
            )
        except requests.RequestException as ex:
            return (False, f"Request failed: {ex}")

        if response.status_code != requests.codes.ok:
            return (
                False,
                f"Failed to update DNS record, status code: {response.status_code}",
            )

        return (True, "")

    def update_records(
        self, record_ids: Iterable[str], ip: str, hostname: str
    ) -> Dict[str, bool]:
        """Point every record to the given address, whatever the others do."""
        results = {}
        for record_id in record_ids:
            success, error = self.update_record(record_id, ip, hostname)
            if success:
                logging.info("DNS record %s updated to: %s", record_id, ip)
            else:
                logging.error("Error updating DNS record %s: %s", record_id, error)

            results[record_id] = success

        return results
