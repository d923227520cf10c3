#!/usr/bin/env python3

"""Alerting sinks for failover events.

Provides the notifier interface the failover loop depends on, a Telegram
implementation and a fallback that only writes to the log.
"""

import logging

import requests

from typing import Dict, Tuple


NOTIFICATION_SUBJECT = "DNS Update Notification"
TELEGRAM_API_BASE_URL = "https://api.telegram.org"


def make_failover_message(
    hostname: str, old_ip: str, new_ip: str, results: Dict[str, bool]
) -> str:
    """Compose the status message sent after a failover."""
    lines = [f"{hostname}: {old_ip} is down, switched to {new_ip}."]

    failed = [record_id for record_id, success in results.items() if not success]
    if failed:
        lines.append(
            f"Failed to update {len(failed)} of {len(results)} DNS records: "
            f"{', '.join(failed)}"
        )
    else:
        lines.append(f"All {len(results)} DNS records updated.")

    return "\n".join(lines)


class Notifier:
    """Destination for human-readable status messages."""

    def send(self, message: str) -> Tuple[bool, str]:
        raise NotImplementedError


class LoggingNotifier(Notifier):
    """Notifier used when no alerting sink is configured."""

    def send(self, message: str) -> Tuple[bool, str]:
        logging.warning("%s: %s", NOTIFICATION_SUBJECT, message)
        return (True, "")


class TelegramNotifier(Notifier):
    """Notifier posting messages to a Telegram chat through a bot."""

    def __init__(
        self,
        bot_token: str,
        chat_id: str,
        timeout: float,
        api_base_url: str = TELEGRAM_API_BASE_URL,
    ):
        if not bot_token:
            raise ValueError("Telegram bot token cannot be empty")
        if not chat_id:
            raise ValueError("Telegram chat identifier cannot be empty")
        if timeout <= 0:
            raise ValueError("Timeout must be positive")

        self._url = f"{api_base_url.rstrip('/')}/bot{bot_token}/sendMessage"
        self._chat_id = chat_id
        self._timeout = float(timeout)

    def send(self, message: str) -> Tuple[bool, str]:
        try:
            response = requests.post(
                self._url,
                json={
                    "chat_id": self._chat_id,
                    "text": f"{NOTIFICATION_SUBJECT}\n{message}",
                },
                timeout=self._timeout,
            )
        except requests.RequestException as ex:
            # Exception text may carry the URL, which embeds the bot token
            return (False, f"Request failed: {type(ex).__name__}")

        if response.status_code != requests.codes.ok:
            return (
                False,
                f"Failed to send notification, status code: {response.status_code}",
            )

        return (True, "")

    def __repr__(self):
        return f"TelegramNotifier(chat_id='{self._chat_id}')"
