#!/usr/bin/env python3

"""Hostname validation utilities.

Provides functions to validate the DNS name written into each A record
according to basic DNS naming rules and character restrictions.
"""

import dns.exception
import dns.name

from typing import Tuple


def is_valid_hostname(name: str) -> Tuple[bool, str]:
    """Validate hostname format, label lengths and character restrictions."""
    if not name:
        return (False, "It cannot be empty")

    labels = name.split(".")
    if labels[0] == "*":
        labels = labels[1:]

    if not labels or not all(
        label and all(c.isalnum() or c == "-" for c in label) for label in labels
    ):
        return (False, "Labels must contain only alphanumeric characters or hyphens")

    try:
        dns.name.from_text(name, origin=dns.name.root)
    except dns.exception.DNSException as ex:
        return (False, f"Not a valid DNS name: {ex}")

    return (True, "")
