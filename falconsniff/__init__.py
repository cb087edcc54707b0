"""Helpers for LTE control-channel sniffing: DCI search spaces, CCE power, grant and MCS computations, and profiling, queueing, signal and UDP broadcast utilities."""

__version__ = "0.1.0"