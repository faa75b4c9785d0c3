"""
Printer Device Model
====================

A USB printer found during discovery.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class PrinterDevice:
    """USB printer device exposed by the usblp driver."""

    vendor_id: str
    device_path: str
    product_id: str = ""
    name: str = ""  # sysfs entry, e.g. "lp0"

    def describe(self) -> str:
        """One-line description for the selection list."""
        name = self.name or self.device_path
        if self.product_id:
            return f"{name} ({self.vendor_id}:{self.product_id}) at {self.device_path}"
        return f"{name} ({self.vendor_id}) at {self.device_path}"
