"""Dispatch of SIGINT to registered handler objects."""

from __future__ import annotations

import signal
from abc import ABC, abstractmethod
from typing import List, Optional


class SignalHandler(ABC):
    """Object that wants to be told when the process receives SIGINT."""

    def __init__(self) -> None:
        self.gate: Optional["SignalGate"] = None

    @abstractmethod
    def handle_signal(self) -> None:
        """React to an incoming interrupt."""

    def register_gate(self, gate: "SignalGate") -> None:
        self.gate = gate

    def deregister_gate(self) -> None:
        self.gate = None


class SignalGate:
    """Fans out SIGINT to every attached handler."""

    _instance: Optional["SignalGate"] = None

    def __init__(self) -> None:
        self.handlers: List[SignalHandler] = []

    @classmethod
    def get_instance(cls) -> "SignalGate":
        """Return the process-wide gate, creating it on first use."""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    def notify(self) -> None:
        """Call every attached handler in attachment order."""
        for handler in list(self.handlers):
            handler.handle_signal()

    @classmethod
    def signal_entry(cls, signum, frame) -> None:
        """Signal callback: forwards SIGINT to the shared gate."""
        if signum == signal.SIGINT:
            cls.get_instance().notify()

    def init(self) -> None:
        """Unblock SIGINT and route it to the shared gate."""
        if hasattr(signal, "pthread_sigmask"):
            signal.pthread_sigmask(signal.SIG_UNBLOCK, {signal.SIGINT})
        signal.signal(signal.SIGINT, type(self).signal_entry)

    def attach(self, handler: SignalHandler) -> None:
        handler.register_gate(self)
        self.handlers.append(handler)

    def detach(self, handler: SignalHandler) -> None:
        handler.deregister_gate()
        self.handlers = [h for h in self.handlers if h is not handler]