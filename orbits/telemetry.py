"""Periodic per-body diagnostic output on a real-time cadence."""

import logging

from . import constants as C

logger = logging.getLogger(__name__)


def _format_vector(v):
    return "[" + ", ".join(f"{x:.6e}" for x in v) + "]"


def format_record(record):
    return (
        f"{record['name']}: a: {_format_vector(record['acceleration'])}, "
        f"v: {_format_vector(record['velocity'])}, "
        f"p: {_format_vector(record['position'])}"
    )


class TelemetryReporter:
    """Emit a state line for every body once per ``interval`` real seconds.

    The timer repeats: leftover time carries into the next interval and a
    single tick fires at most once, however long the frame was.  Output goes
    to ``sink`` (the module logger by default).  A sink that raises is
    logged and otherwise ignored so the simulation keeps running.
    """

    def __init__(self, interval: float = C.TELEMETRY_INTERVAL, sink=None):
        if not interval > 0:
            raise ValueError(f"telemetry interval must be positive, got {interval}")
        self.interval = float(interval)
        self.sink = sink if sink is not None else logger.info
        self.elapsed = 0.0
        self.reports = 0

    def tick(self, real_dt: float, registry) -> bool:
        self.elapsed += real_dt
        if self.elapsed < self.interval:
            return False
        self.elapsed %= self.interval
        self.report(registry)
        return True

    @staticmethod
    def records(registry):
        return [
            {
                "name": s.name,
                "acceleration": s.acceleration,
                "velocity": s.velocity,
                "position": s.position,
            }
            for s in registry.snapshot()
        ]

    def report(self, registry):
        self.reports += 1
        for record in self.records(registry):
            try:
                self.sink(format_record(record))
            except Exception:
                logger.warning("telemetry sink failed for %s", record["name"], exc_info=True)
