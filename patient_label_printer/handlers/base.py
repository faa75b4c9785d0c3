"""
Base Handler
============

Abstract base class for printer handlers.

Printers are reached through their device special file (/dev/usb/lpN), a
one-way byte stream: nothing is read back from the printer.
"""

import logging
import os
from abc import ABC, abstractmethod
from datetime import datetime
from typing import Optional, Dict, Any

from ..config import DEFAULT_DEVICE_PATH
from ..models import PrinterDevice, PatientLabel

logger = logging.getLogger(__name__)


class BaseHandler(ABC):
    """Abstract base class for printer handlers."""

    def __init__(self, printer: Optional[PrinterDevice] = None):
        """Initialize handler with a discovered printer, or the default device path."""
        self.printer = printer

    @property
    def device_path(self) -> str:
        if self.printer is not None:
            return self.printer.device_path
        return DEFAULT_DEVICE_PATH

    @abstractmethod
    def render_label(self, label: PatientLabel, printed_at: datetime) -> str:
        """
        Render a patient label in the printer's command language.

        Args:
            label: Patient fields
            printed_at: Timestamp stamped on the label

        Returns:
            Printer command document
        """
        pass

    def encode(self, document: str) -> bytes:
        """Bytes written to the device for a rendered document."""
        return document.encode('utf-8')

    def send(self, payload: bytes) -> Dict[str, Any]:
        """
        Write a document to the printer device file.

        The device is opened write-only and never created; the whole payload is
        written and flushed before the file is closed.

        Args:
            payload: Raw printer commands

        Returns:
            Dict with success status and details
        """
        path = self.device_path

        try:
            fd = os.open(path, os.O_WRONLY)
            with os.fdopen(fd, 'wb') as device:
                device.write(payload)
                device.flush()

            logger.debug("Sent %d bytes to %s", len(payload), path)
            return {
                'success': True,
                'device_path': path,
                'bytes_sent': len(payload)
            }

        except FileNotFoundError as e:
            error = f'Printer device not found: {e}'
        except PermissionError as e:
            error = f'Permission denied opening printer device: {e}'
        except OSError as e:
            error = str(e)

        logger.warning("Write to %s failed: %s", path, error)
        return {'success': False, 'device_path': path, 'error': error}
