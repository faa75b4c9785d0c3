"""
ZPL Handler
===========

Handler for ZPL (Zebra Programming Language) printers.
"""

from datetime import datetime
from typing import List

from .base import BaseHandler
from ..models import PatientLabel, clean_field_data
from ..config import (
    LABEL_ORIGIN_X, LABEL_ORIGIN_Y, LINE_SPACING, FONT_SIZE,
    BARCODE_HEIGHT, BARCODE_MODULE_WIDTH, TIMESTAMP_FORMAT,
)


def _text_field(y: int, text: str) -> str:
    return (f"^FO{LABEL_ORIGIN_X},{y}^A0N,{FONT_SIZE},{FONT_SIZE}"
            f"^FD{clean_field_data(text)}^FS")


def generate_zpl(label: PatientLabel, printed_at: datetime) -> str:
    """
    Render a patient label as ZPL.

    Args:
        label: Patient fields
        printed_at: Timestamp printed in the "Date:" line

    Returns:
        ZPL document, "^XA" ... "^XZ"
    """
    y = LABEL_ORIGIN_Y
    lines: List[str] = ["^XA"]

    lines.append(_text_field(y, f"{label.last_name.upper()}, {label.first_name.upper()}"))
    y += LINE_SPACING
    lines.append(_text_field(y, f"DOB: {label.date_of_birth}, {label.gender.upper()}"))
    y += LINE_SPACING
    lines.append(_text_field(y, f"Date: {printed_at.strftime(TIMESTAMP_FORMAT)}"))
    y += LINE_SPACING

    if label.has_barcode:
        # Code 128, interpretation line below, automatic subset selection
        lines.append(
            f"^FO{LABEL_ORIGIN_X},{y}^BY{BARCODE_MODULE_WIDTH}"
            f"^BCN,{BARCODE_HEIGHT},Y,N,N,A^FD{clean_field_data(label.barcode)}^FS"
        )

    lines.append("^XZ")
    return "\n".join(lines)


class ZPLHandler(BaseHandler):
    """Handler for Zebra printers."""

    def render_label(self, label: PatientLabel, printed_at: datetime) -> str:
        return generate_zpl(label, printed_at)
