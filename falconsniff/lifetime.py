"""Measure how long a scope lives and report it to a collector."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional

from .stopwatch import Stopwatch, TimeVal, format_timeval


class LifetimeCollector(ABC):
    """Receives finished lifetimes."""

    @abstractmethod
    def collect(self, lifetime: "Lifetime") -> None:
        """Handle a lifetime that has just ended."""


class Lifetime:
    """Timer started on creation and reported to its collector on close."""

    def __init__(self, collector: LifetimeCollector, prefix_text: str = "") -> None:
        self.collector = collector
        self.prefix_text = prefix_text
        self._stopwatch = Stopwatch()
        self._stopwatch.start()
        self._closed = False

    def get_lifetime(self) -> TimeVal:
        return self._stopwatch.get_and_continue()

    def get_lifetime_string(self) -> str:
        return format_timeval(self.get_lifetime())

    def close(self) -> None:
        """End the lifetime and hand it to the collector, once."""
        if not self._closed:
            self._closed = True
            self.collector.collect(self)

    def __enter__(self) -> "Lifetime":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


class GlobalLifetimePrinter(LifetimeCollector):
    """Collector that prints each lifetime to standard output."""

    _instance: Optional["GlobalLifetimePrinter"] = None

    @classmethod
    def get_instance(cls) -> "GlobalLifetimePrinter":
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    def collect(self, lifetime: Lifetime) -> None:
        print(f"{lifetime.prefix_text}{lifetime.get_lifetime_string()}")


class PrintLifetime(Lifetime):
    """Lifetime that prints itself through the global printer."""

    def __init__(self, prefix_text: str = "") -> None:
        super().__init__(GlobalLifetimePrinter.get_instance(), prefix_text)