#!/usr/bin/env python3

"""HTTP liveness probe.

Provides a function to check whether an address answers a plain HTTP GET
with status 200, used to decide whether it can be published in DNS.
"""

import logging

import requests


def is_reachable(ip: str, timeout: float) -> bool:
    """Probe http://<ip>/ once and report whether it answered 200."""
    url = f"http://{ip}/"
    try:
        response = requests.get(url, timeout=timeout, allow_redirects=False)
    except requests.RequestException as ex:
        logging.debug("Liveness probe to '%s' failed: %s", url, ex)
        return False

    if response.status_code != requests.codes.ok:
        logging.debug(
            "Liveness probe to '%s' answered status %d", url, response.status_code
        )
        return False

    logging.debug("Liveness probe to '%s' successful", url)
    return True
