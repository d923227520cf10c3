#!/usr/bin/env python3

import pytest

from typing import Any, Dict
from unittest.mock import patch

import indisoluble.a_failover_dns.failover_config_factory as fcf


@pytest.fixture
def args() -> Dict[str, Any]:
    return {
        fcf.ARG_API_TOKEN: "test-token",
        fcf.ARG_ZONE_ID: "zone123",
        fcf.ARG_RECORD_IDS: "rec1,rec2",
        fcf.ARG_MONITOR_IPS: "192.168.1.1,192.168.1.2",
        fcf.ARG_DOMAIN: "example.com",
        fcf.ARG_TELEGRAM_BOT_TOKEN: "bot-token",
        fcf.ARG_TELEGRAM_CHAT_ID: "chat123",
    }


def test_make_config(args):
    config = fcf.make_config(args)

    assert config == fcf.FailoverConfig(
        api_token="test-token",
        zone_id="zone123",
        record_ids=("rec1", "rec2"),
        ips=("192.168.1.1", "192.168.1.2"),
        hostname="example.com",
        telegram_bot_token="bot-token",
        telegram_chat_id="chat123",
    )


def test_make_config_strips_list_items(args):
    args[fcf.ARG_RECORD_IDS] = " rec1 , ,rec2, "
    args[fcf.ARG_MONITOR_IPS] = "192.168.1.1 ,  192.168.1.2,"

    config = fcf.make_config(args)

    assert config.record_ids == ("rec1", "rec2")
    assert config.ips == ("192.168.1.1", "192.168.1.2")


@pytest.mark.parametrize("key", fcf.REQUIRED_ARGS)
@pytest.mark.parametrize("value", [None, "", "   "])
@patch("indisoluble.a_failover_dns.failover_config_factory.logging")
def test_make_config_missing_required_value(mock_logging, args, key, value):
    args[key] = value

    assert fcf.make_config(args) is None
    mock_logging.error.assert_called_once_with(
        "Environment variables %s must be set", key
    )


@pytest.mark.parametrize("key", [fcf.ARG_RECORD_IDS, fcf.ARG_MONITOR_IPS])
def test_make_config_list_with_only_separators(args, key):
    args[key] = " , ,"

    assert fcf.make_config(args) is None


@patch("indisoluble.a_failover_dns.failover_config_factory.logging")
def test_make_config_names_every_missing_value(mock_logging):
    assert fcf.make_config({}) is None
    mock_logging.error.assert_called_once_with(
        "Environment variables %s must be set",
        "CLOUDFLARE_API_TOKEN, CLOUDFLARE_ZONE_ID, CLOUDFLARE_RECORD_IDS, "
        "MONITOR_IPS, DOMAIN",
    )


def test_make_config_invalid_ip(args):
    args[fcf.ARG_MONITOR_IPS] = "192.168.1.1,192.168.1.300"

    assert fcf.make_config(args) is None


@patch("indisoluble.a_failover_dns.failover_config_factory.logging")
def test_make_config_duplicated_ips_allowed(mock_logging, args):
    args[fcf.ARG_MONITOR_IPS] = "192.168.1.1,192.168.1.1"

    config = fcf.make_config(args)

    assert config.ips == ("192.168.1.1", "192.168.1.1")
    mock_logging.warning.assert_called_once()


def test_make_config_invalid_hostname(args):
    args[fcf.ARG_DOMAIN] = "exa_mple.com"

    assert fcf.make_config(args) is None


@pytest.mark.parametrize(
    "bot_token, chat_id", [(None, None), ("bot-token", None), (None, "chat123")]
)
def test_make_config_telegram_disabled(args, bot_token, chat_id):
    args[fcf.ARG_TELEGRAM_BOT_TOKEN] = bot_token
    args[fcf.ARG_TELEGRAM_CHAT_ID] = chat_id

    config = fcf.make_config(args)

    assert config is not None
    assert config.telegram_bot_token is None
    assert config.telegram_chat_id is None
