"""UDP broadcast endpoints used to coordinate measurement nodes."""

from __future__ import annotations

import socket
from typing import Optional, Tuple


class BroadcastMaster:
    """Sends datagrams to a (broadcast) address and receives replies."""

    def __init__(self, ip: str, port: int, timeout: Optional[float] = None) -> None:
        self.send_addr: Tuple[str, int] = (ip, port)
        self.recv_addr: Optional[Tuple[str, int]] = None
        self._sock = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
        try:
            self._sock.setsockopt(socket.SOL_SOCKET, socket.SO_BROADCAST, 1)
            self._sock.settimeout(timeout)
        except OSError:
            self._sock.close()
            raise

    def send_bytes(self, data: bytes) -> bool:
        """Send one datagram to the configured address."""
        self._sock.sendto(data, self.send_addr)
        return True

    def receive_bytes(self, bufsize: int) -> bytes:
        """Receive one datagram of at most bufsize bytes."""
        data, self.recv_addr = self._sock.recvfrom(bufsize)
        return data

    def close(self) -> None:
        self._sock.close()

    def __enter__(self) -> "BroadcastMaster":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


class BroadcastSlave:
    """Listens on a port and answers the last sender."""

    def __init__(self, port: int, timeout: Optional[float] = None) -> None:
        self.send_addr: Optional[Tuple[str, int]] = None
        self._sock = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
        try:
            self._sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
            self._sock.bind(("", port))
            self._sock.settimeout(timeout)
        except OSError:
            self._sock.close()
            raise

    @property
    def port(self) -> int:
        """The local port the slave is bound to."""
        return self._sock.getsockname()[1]

    def receive_bytes(self, bufsize: int) -> bytes:
        """Receive one datagram and remember its sender for replies."""
        data, self.send_addr = self._sock.recvfrom(bufsize)
        return data

    def reply_bytes(self, data: bytes) -> bool:
        """Answer the last sender; does nothing until something was received."""
        if self.send_addr is not None:
            self._sock.sendto(data, self.send_addr)
        return True

    def close(self) -> None:
        self._sock.close()

    def __enter__(self) -> "BroadcastSlave":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()