#!/usr/bin/env python3

import logging
import os
import sys

from typing import Any, Dict, Mapping, Optional

from . import failover_config_factory as fcf
from .dns_record_updater import DnsRecordUpdater
from .failover_updater import FailoverUpdater
from .failover_updater_threaded import FailoverUpdaterThreaded
from .notifier import LoggingNotifier, Notifier, TelegramNotifier


_ARG_API_TIMEOUT = "API_TIMEOUT"
_ARG_CHECK_INTERVAL = "CHECK_INTERVAL"
_ARG_LOG_LEVEL = "LOG_LEVEL"
_ARG_PROBE_TIMEOUT = "PROBE_TIMEOUT"
_VAL_API_TIMEOUT = 10
_VAL_CHECK_INTERVAL = 30
_VAL_LOG_LEVEL = logging._levelToName[logging.INFO].lower()
_VAL_PROBE_TIMEOUT = 5

_CONFIG_KEYS = (
    fcf.ARG_API_TOKEN,
    fcf.ARG_ZONE_ID,
    fcf.ARG_RECORD_IDS,
    fcf.ARG_MONITOR_IPS,
    fcf.ARG_DOMAIN,
    fcf.ARG_TELEGRAM_BOT_TOKEN,
    fcf.ARG_TELEGRAM_CHAT_ID,
)
_NUMERIC_DEFAULTS = {
    _ARG_API_TIMEOUT: _VAL_API_TIMEOUT,
    _ARG_CHECK_INTERVAL: _VAL_CHECK_INTERVAL,
    _ARG_PROBE_TIMEOUT: _VAL_PROBE_TIMEOUT,
}


def _parse_log_level(environ: Mapping[str, str]) -> Optional[int]:
    name = environ.get(_ARG_LOG_LEVEL, _VAL_LOG_LEVEL).strip().upper()
    if name not in logging._nameToLevel or name == "NOTSET":
        return None

    return logging._nameToLevel[name]


def _parse_positive_int(environ: Mapping[str, str], key: str) -> Optional[int]:
    raw_value = environ.get(key, "").strip()
    if not raw_value:
        logging.debug(
            "%s not provided, using default: %d", key, _NUMERIC_DEFAULTS[key]
        )
        return _NUMERIC_DEFAULTS[key]

    try:
        value = int(raw_value)
    except ValueError:
        logging.error("%s must be an integer, got '%s'", key, raw_value)
        return None

    if value <= 0:
        logging.error("%s must be positive, got %d", key, value)
        return None

    return value


def _make_args(environ: Mapping[str, str]) -> Optional[Dict[str, Any]]:
    args = {key: environ.get(key) for key in _CONFIG_KEYS}
    for key in _NUMERIC_DEFAULTS:
        value = _parse_positive_int(environ, key)
        if value is None:
            return None

        args[key] = value

    return args


def _make_notifier(config: fcf.FailoverConfig, timeout: int) -> Notifier:
    if config.telegram_bot_token and config.telegram_chat_id:
        return TelegramNotifier(
            config.telegram_bot_token, config.telegram_chat_id, timeout
        )

    return LoggingNotifier()


def _main(environ: Mapping[str, str]) -> int:
    # Set up logging
    numeric_level = _parse_log_level(environ)
    logging.basicConfig(
        level=numeric_level if numeric_level is not None else logging.INFO,
        format="%(asctime)s - %(levelname)s - %(module)s.%(funcName)s - %(message)s",
    )
    if numeric_level is None:
        logging.error(
            "%s must be one of %s",
            _ARG_LOG_LEVEL,
            ", ".join(
                name.lower()
                for name in logging._levelToName.values()
                if name != "NOTSET"
            ),
        )
        return 1

    # Complete config
    args = _make_args(environ)
    if not args:
        return 1

    config = fcf.make_config(args)
    if not config:
        return 1

    # Compose failover loop
    try:
        updater = FailoverUpdater(
            config,
            args[_ARG_PROBE_TIMEOUT],
            DnsRecordUpdater(config.api_token, config.zone_id, args[_ARG_API_TIMEOUT]),
            _make_notifier(config, args[_ARG_API_TIMEOUT]),
        )
        failover_loop = FailoverUpdaterThreaded(args[_ARG_CHECK_INTERVAL], updater)
    except ValueError as ex:
        logging.error("Failed to initialize failover loop: %s", ex)
        return 1

    logging.info(
        "Monitoring %s for %s, publishing %s",
        list(config.ips),
        config.hostname,
        updater.selector.current_ip,
    )

    # Run forever
    failover_loop.start()
    failover_loop.join()

    return 0


def main():
    sys.exit(_main(os.environ))


if __name__ == "__main__":
    main()
