#!/usr/bin/env python3

"""Single failover check over the candidate pool.

Provides the updater that probes the published address and, when it is
down and the following candidate answers, repoints every DNS record to
that candidate and sends a notification.
"""

import enum
import logging

from indisoluble.a_failover_dns.dns_record_updater import DnsRecordUpdater
from indisoluble.a_failover_dns.failover_config_factory import FailoverConfig
from indisoluble.a_failover_dns.failover_selector import FailoverSelector
from indisoluble.a_failover_dns.notifier import Notifier, make_failover_message
from indisoluble.a_failover_dns.tools.is_reachable import is_reachable


class FailoverResult(enum.Enum):
    STABLE = "stable"
    SWITCHED = "switched"
    DEGRADED = "degraded"


class FailoverUpdater:
    """Failover state machine evaluated once per call to update()."""

    @property
    def selector(self) -> FailoverSelector:
        """Get the selector holding the published address."""
        return self._selector

    def __init__(
        self,
        config: FailoverConfig,
        probe_timeout: float,
        record_updater: DnsRecordUpdater,
        notifier: Notifier,
    ):
        """Initialize updater on the first address of the configured pool."""
        if probe_timeout <= 0:
            raise ValueError("Probe timeout must be positive")
        if not config.record_ids:
            raise ValueError("Record identifier list cannot be empty")

        self._selector = FailoverSelector(config.ips)
        self._record_ids = config.record_ids
        self._hostname = config.hostname
        self._probe_timeout = float(probe_timeout)
        self._record_updater = record_updater
        self._notifier = notifier

    def _notify(self, message: str):
        try:
            success, error = self._notifier.send(message)
        except Exception as ex:
            success, error = (False, str(ex))

        if not success:
            logging.warning("Error sending notification: %s", error)

    def _switch(self, old_ip: str, new_ip: str):
        results = self._record_updater.update_records(
            self._record_ids, new_ip, self._hostname
        )
        if not all(results.values()):
            logging.warning(
                "%d of %d DNS records not updated to %s",
                len(results) - sum(results.values()),
                len(results),
                new_ip,
            )

        self._notify(make_failover_message(self._hostname, old_ip, new_ip, results))

        # Switch is committed even if some records were not updated
        self._selector.advance()

    def update(self) -> FailoverResult:
        """Probe the published address and fail over to the next one if needed."""
        current_ip = self._selector.current_ip
        if is_reachable(current_ip, self._probe_timeout):
            logging.info("IP %s is online, no action needed", current_ip)
            return FailoverResult.STABLE

        logging.info("IP %s is down, checking next IP...", current_ip)
        next_ip = self._selector.next_ip
        if not is_reachable(next_ip, self._probe_timeout):
            logging.info("Next IP %s is also down, not updating DNS records", next_ip)
            return FailoverResult.DEGRADED

        logging.info("Next IP %s is online, updating DNS records...", next_ip)
        self._switch(current_ip, next_ip)

        return FailoverResult.SWITCHED
