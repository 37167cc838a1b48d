from __future__ import annotations


class BackoffStrategy:
    """Delay between fetch retries.

    Every failed non-final attempt waits the same configured delay; the
    value is used as given, with no upper cap."""

    def __init__(self, base_seconds: float = 2.0) -> None:
        if base_seconds < 0:
            raise ValueError("base_seconds must be >= 0")
        self._base = base_seconds

    @classmethod
    def from_millis(cls, delay_ms: int) -> "BackoffStrategy":
        return cls(base_seconds=delay_ms / 1000.0)

    def get_sleep(self, attempt: int) -> float:
        """Return the sleep duration in seconds after failed attempt *attempt*."""
        return self._base
