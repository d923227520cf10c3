#!/usr/bin/env python3

"""IPv4 address validation utilities.

Provides functions to validate the IPv4 addresses in the candidate pool
before they are published in DNS A records.
"""

import dns.exception
import dns.ipv4

from typing import Any, Tuple


def is_valid_ip(ip: Any) -> Tuple[bool, str]:
    """Validate IPv4 address format and octet ranges."""
    if not isinstance(ip, str) or not ip:
        return (False, "IP address must be a non-empty string")

    try:
        dns.ipv4.inet_aton(ip)
    except dns.exception.SyntaxError:
        return (
            False,
            "IP address must have 4 octets, each a number between 0 and 255",
        )

    return (True, "")
