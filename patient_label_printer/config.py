"""
Patient Label Printer Configuration
"""

import logging

# =============================================================================
# Printer Discovery
# =============================================================================

# USB vendor id reported by Zebra Technologies devices
ZEBRA_VENDOR_ID = '0a5f'

# sysfs class directory listing usblp character devices (lp0, lp1, ...)
USBMISC_PATH = '/sys/class/usbmisc'

# Where the usblp driver exposes its device nodes
USB_DEV_ROOT = '/dev/usb'

# Used when a handler is built without a discovered device
DEFAULT_DEVICE_PATH = '/dev/usb/lp0'

# =============================================================================
# Label Layout (ZPL, dots)
# =============================================================================

LABEL_ORIGIN_X = 40
LABEL_ORIGIN_Y = 30
LINE_SPACING = 25
FONT_SIZE = 25

# Code-128 block
BARCODE_HEIGHT = 70
BARCODE_MODULE_WIDTH = 3

TIMESTAMP_FORMAT = '%d/%m/%Y, %H:%M'

# =============================================================================
# Logging
# =============================================================================

# Kept above INFO so log lines do not interleave with the prompts
LOG_LEVEL = logging.WARNING
LOG_FORMAT = '%(asctime)s - %(levelname)s - %(message)s'
