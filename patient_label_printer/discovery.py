"""
Printer Discovery
=================

Finds USB label printers through the usblp driver's sysfs entries.

Layout walked for each printer:
    /sys/class/usbmisc/lp0/device  -> symlink to the USB interface
    <interface>/../idVendor        -> e.g. "0a5f"
    <interface>/../idProduct       -> e.g. "0120"
"""

import logging
from pathlib import Path
from typing import List, Optional

from .config import USBMISC_PATH, USB_DEV_ROOT, ZEBRA_VENDOR_ID
from .models import PrinterDevice

logger = logging.getLogger(__name__)


def _read_sysfs_file(path: Path) -> Optional[str]:
    """Read a sysfs attribute, or None if it cannot be read."""
    try:
        return path.read_text().strip()
    except (OSError, UnicodeDecodeError):
        return None


def _probe_entry(entry: Path, dev_root: str) -> Optional[PrinterDevice]:
    device_link = entry / 'device'
    if not device_link.is_symlink():
        logger.debug("Skipping %s: no device link", entry.name)
        return None

    try:
        usb_device = device_link.resolve(strict=True).parent
    except (OSError, RuntimeError) as e:
        logger.debug("Skipping %s: %s", entry.name, e)
        return None

    vendor_id = _read_sysfs_file(usb_device / 'idVendor')
    product_id = _read_sysfs_file(usb_device / 'idProduct')
    if vendor_id is None or product_id is None:
        logger.debug("Skipping %s: missing idVendor/idProduct", entry.name)
        return None

    return PrinterDevice(
        vendor_id=vendor_id,
        device_path=str(Path(dev_root) / entry.name),
        product_id=product_id,
        name=entry.name,
    )


def detect_printers(sysfs_root: str = USBMISC_PATH,
                    dev_root: str = USB_DEV_ROOT) -> List[PrinterDevice]:
    """
    List every readable usblp printer, in device name order.

    Args:
        sysfs_root: usbmisc class directory
        dev_root: Directory holding the lp* device nodes

    Returns:
        PrinterDevice per entry; unreadable entries are skipped
    """
    root = Path(sysfs_root)

    try:
        entries = sorted(root.iterdir(), key=lambda p: p.name)
    except OSError as e:
        logger.debug("Cannot list %s: %s", root, e)
        return []

    printers = []
    for entry in entries:
        if not entry.name.startswith('lp'):
            continue
        printer = _probe_entry(entry, dev_root)
        if printer is not None:
            printers.append(printer)

    return printers


def find_printers(vendor_id: str = ZEBRA_VENDOR_ID,
                  sysfs_root: str = USBMISC_PATH,
                  dev_root: str = USB_DEV_ROOT) -> List[PrinterDevice]:
    """Printers whose vendor id exactly matches ``vendor_id``."""
    matches = [p for p in detect_printers(sysfs_root, dev_root) if p.vendor_id == vendor_id]
    for printer in matches:
        logger.info("Found printer %s", printer.describe())
    return matches
