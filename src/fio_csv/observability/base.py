from typing import Protocol


class MetricsHook(Protocol):
    """Sink for parser and writer metrics.

    Implementations forward to whatever backend the caller runs
    (Prometheus, StatsD, ...). Metric names live in ``names``.
    """

    def record_latency(
        self,
        name: str,
        value_ms: float,
        labels: dict[str, str] | None = None,
    ) -> None:
        """Wall time of one call: ``CSV_PARSE_DURATION``, ``CSV_WRITE_DURATION``."""
        ...

    def increment(
        self,
        name: str,
        value: int = 1,
        labels: dict[str, str] | None = None,
    ) -> None:
        """Monotonic counters.

        ``CSV_PARSE_REQUESTS_TOTAL`` (label ``source``: file or stream),
        ``CSV_PARSE_ERRORS_TOTAL`` (label ``kind``: the error class name),
        ``CSV_ROWS_PARSED``, ``CSV_ROW_ERRORS_TOTAL`` and ``CSV_ROWS_WRITTEN``.
        """
        ...

    def record_gauge(
        self,
        name: str,
        value: float,
        labels: dict[str, str] | None = None,
    ) -> None:
        """Point-in-time values: ``CSV_COLUMNS``, the width of the last document."""
        ...


class NoOpMetricsHook:
    """Default hook: discards every metric."""

    def record_latency(
        self, name: str, value_ms: float, labels: dict[str, str] | None = None
    ) -> None:
        pass

    def increment(
        self, name: str, value: int = 1, labels: dict[str, str] | None = None
    ) -> None:
        pass

    def record_gauge(
        self, name: str, value: float, labels: dict[str, str] | None = None
    ) -> None:
        pass
