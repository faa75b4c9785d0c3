"""
Patient Label Model
===================

The fields printed on a single patient label.
"""

from dataclasses import dataclass
from typing import Optional


def clean_field_data(value: str) -> str:
    """Strip ZPL command prefixes (^ and ~) from user supplied text."""
    return value.replace('^', '').replace('~', '')


@dataclass
class PatientLabel:
    """Patient identifiers collected from the prompts."""

    first_name: str
    last_name: str
    date_of_birth: str  # canonical DD/MM/YYYY
    gender: str
    barcode: Optional[str] = None
    copies: int = 1

    @property
    def has_barcode(self) -> bool:
        return bool(self.barcode and clean_field_data(self.barcode).strip())
