#!/usr/bin/env python3

"""Threaded failover loop.

Provides a threaded wrapper around FailoverUpdater that runs a failover
check, waits a fixed interval and repeats, in a background thread.
"""

import logging
import threading

from typing import Optional

from indisoluble.a_failover_dns.failover_updater import FailoverUpdater


class FailoverUpdaterThreaded:
    """Runs failover checks in a background thread at a fixed interval."""

    @property
    def updater(self) -> FailoverUpdater:
        """Get the wrapped failover updater."""
        return self._updater

    def __init__(self, interval: int, updater: FailoverUpdater):
        """Initialize threaded loop with the interval between checks."""
        if interval <= 0:
            raise ValueError("Check interval must be positive")

        self._interval = float(interval)
        self._updater = updater

        self._stop_event = threading.Event()
        self._updater_thread = None

    def _update_loop(self):
        while not self._stop_event.is_set():
            try:
                result = self._updater.update()
                logging.debug("Failover check completed: %s", result.value)
            except Exception:
                logging.exception("Unexpected error during failover check")

            if not self._stop_event.wait(self._interval):
                logging.debug("Completed sleep between failover checks")

    def start(self):
        """Start the background failover thread."""
        if self._updater_thread and self._updater_thread.is_alive():
            logging.warning("Failover Updater is already running")
            return

        logging.info("Starting Failover Updater...")
        self._stop_event.clear()
        self._updater_thread = threading.Thread(
            target=self._update_loop, name="FailoverUpdaterThread", daemon=True
        )
        self._updater_thread.start()

    def join(self, timeout: Optional[float] = None) -> bool:
        """Block until the background thread ends or the timeout expires."""
        if not self._updater_thread:
            logging.warning("Failover Updater is not running")
            return True

        self._updater_thread.join(timeout=timeout)

        return not self._updater_thread.is_alive()

    def stop(self, timeout: Optional[float] = None) -> bool:
        """Stop the background failover thread and wait for completion."""
        if not self._updater_thread or not self._updater_thread.is_alive():
            logging.warning("Failover Updater is not running")
            return True

        logging.info("Stopping Failover Updater...")
        self._stop_event.set()
        if not self.join(timeout=timeout):
            logging.warning("Failover Updater thread did not terminate gracefully")
            return False

        return True
