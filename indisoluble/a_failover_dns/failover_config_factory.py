#!/usr/bin/env python3

"""Failover configuration factory.

Builds the validated failover configuration from raw string settings,
logging every problem found and returning None when the configuration
cannot be used.
"""

import logging

from typing import Any, Dict, NamedTuple, Optional, Tuple

from indisoluble.a_failover_dns.tools.is_valid_hostname import is_valid_hostname
from indisoluble.a_failover_dns.tools.is_valid_ip import is_valid_ip


class FailoverConfig(NamedTuple):
    api_token: str
    zone_id: str
    record_ids: Tuple[str, ...]
    ips: Tuple[str, ...]
    hostname: str
    telegram_bot_token: Optional[str]
    telegram_chat_id: Optional[str]


ARG_API_TOKEN = "CLOUDFLARE_API_TOKEN"
ARG_ZONE_ID = "CLOUDFLARE_ZONE_ID"
ARG_RECORD_IDS = "CLOUDFLARE_RECORD_IDS"
ARG_MONITOR_IPS = "MONITOR_IPS"
ARG_DOMAIN = "DOMAIN"
ARG_TELEGRAM_BOT_TOKEN = "TELEGRAM_BOT_TOKEN"
ARG_TELEGRAM_CHAT_ID = "TELEGRAM_CHAT_ID"

REQUIRED_ARGS = (ARG_API_TOKEN, ARG_ZONE_ID, ARG_RECORD_IDS, ARG_MONITOR_IPS, ARG_DOMAIN)


def _split_list(value: Optional[str]) -> Tuple[str, ...]:
    if not value:
        return ()

    return tuple(item.strip() for item in value.split(",") if item.strip())


def _get_str(args: Dict[str, Any], key: str) -> Optional[str]:
    value = args.get(key)
    if value is None:
        return None

    value = str(value).strip()
    return value or None


def _find_missing(args: Dict[str, Any]) -> list[str]:
    missing = []
    for key in REQUIRED_ARGS:
        value = _get_str(args, key)
        if key in (ARG_RECORD_IDS, ARG_MONITOR_IPS):
            value = _split_list(value)

        if not value:
            missing.append(key)

    return missing


def _make_ips(args: Dict[str, Any]) -> Optional[Tuple[str, ...]]:
    ips = _split_list(_get_str(args, ARG_MONITOR_IPS))
    for ip in ips:
        success, error = is_valid_ip(ip)
        if not success:
            logging.error("Monitored IP '%s' is not valid: %s", ip, error)
            return None

    if len(set(ips)) != len(ips):
        logging.warning("Monitored IP list contains duplicates: %s", list(ips))

    return ips


def _make_hostname(args: Dict[str, Any]) -> Optional[str]:
    hostname = _get_str(args, ARG_DOMAIN)
    success, error = is_valid_hostname(hostname)
    if not success:
        logging.error("Domain '%s' is not a valid hostname: %s", hostname, error)
        return None

    return hostname


def _make_telegram_settings(
    args: Dict[str, Any],
) -> Tuple[Optional[str], Optional[str]]:
    bot_token = _get_str(args, ARG_TELEGRAM_BOT_TOKEN)
    chat_id = _get_str(args, ARG_TELEGRAM_CHAT_ID)
    if bot_token and chat_id:
        return (bot_token, chat_id)

    if bot_token or chat_id:
        logging.warning(
            "Both %s and %s are needed to send alerts, Telegram alerts disabled",
            ARG_TELEGRAM_BOT_TOKEN,
            ARG_TELEGRAM_CHAT_ID,
        )
    else:
        logging.info("Telegram alerts not configured")

    return (None, None)


def make_config(args: Dict[str, Any]) -> Optional[FailoverConfig]:
    missing = _find_missing(args)
    if missing:
        logging.error("Environment variables %s must be set", ", ".join(missing))
        return None

    ips = _make_ips(args)
    if not ips:
        return None

    hostname = _make_hostname(args)
    if not hostname:
        return None

    telegram_bot_token, telegram_chat_id = _make_telegram_settings(args)

    return FailoverConfig(
        api_token=_get_str(args, ARG_API_TOKEN),
        zone_id=_get_str(args, ARG_ZONE_ID),
        record_ids=_split_list(_get_str(args, ARG_RECORD_IDS)),
        ips=ips,
        hostname=hostname,
        telegram_bot_token=telegram_bot_token,
        telegram_chat_id=telegram_chat_id,
    )
