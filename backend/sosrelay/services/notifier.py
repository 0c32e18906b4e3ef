"""Relay of emergency coordinates to the field beacon over a serial line.

The beacon expects one ASCII line per request::

    EMERGENCY:<id>,<latitude>,<longitude>

Delivery is best effort. Every failure is logged and swallowed; nothing a
notifier does may reach the caller that created the request.
"""
import logging
import os
import threading
from abc import ABC, abstractmethod
from typing import Optional

import serial

from sosrelay.config import settings

logger = logging.getLogger(__name__)


class Notifier(ABC):

    @abstractmethod
    def notify(self, latitude: str, longitude: str, request_id: int) -> None:
        """Fire-and-forget relay of a request's coordinates."""


class NullNotifier(Notifier):
    """Used when no beacon is attached; only records the call in the log."""

    def notify(self, latitude: str, longitude: str, request_id: int) -> None:
        logger.info("Beacon relay disabled; request %d at (%s, %s) not forwarded", request_id, latitude, longitude)


class SerialNotifier(Notifier):

    def __init__(self, port: str, baud_rate: int = 9600, write_timeout: float = 2.0):
        self.port = port
        self.baud_rate = baud_rate
        self.write_timeout = write_timeout
        self._conn: Optional[serial.Serial] = None
        self._lock = threading.Lock()

    def _connection(self) -> Optional[serial.Serial]:
        if self._conn is not None and self._conn.is_open:
            return self._conn
        if not os.path.exists(self.port):
            logger.warning("Serial port %s not found; beacon might not be connected", self.port)
            return None
        try:
            self._conn = serial.Serial(self.port, self.baud_rate, write_timeout=self.write_timeout)
        except serial.SerialException as exc:
            logger.error("Failed to open serial port %s: %s", self.port, exc)
            self._conn = None
            return None
        logger.info("Serial connection opened at %s", self.port)
        return self._conn

    def _write_line(self, line: str) -> bool:
        with self._lock:
            conn = self._connection()
            if conn is None:
                return False
            try:
                conn.write(line.encode("ascii", errors="replace"))
                conn.flush()
            except (serial.SerialException, OSError) as exc:
                logger.error("Failed to write to beacon on %s: %s", self.port, exc)
                conn.close()
                self._conn = None
                return False
        logger.info("Sent to beacon: %s", line.strip())
        return True

    def send_message(self, message: str) -> bool:
        """Write an arbitrary trimmed line to the beacon."""
        return self._write_line(message.strip() + "\n")

    def notify(self, latitude: str, longitude: str, request_id: int) -> None:
        self._write_line(f"EMERGENCY:{request_id},{latitude.strip()},{longitude.strip()}\n")

    def close(self) -> None:
        with self._lock:
            if self._conn is not None:
                self._conn.close()
                self._conn = None


def build_notifier() -> Notifier:
    if settings.NOTIFIER == "serial":
        return SerialNotifier(
            port=settings.SERIAL_PORT,
            baud_rate=settings.SERIAL_BAUD_RATE,
            write_timeout=settings.SERIAL_WRITE_TIMEOUT,
        )
    return NullNotifier()
