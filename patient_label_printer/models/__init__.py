"""
Patient Label Printer Models
"""

from .printer import PrinterDevice
from .label import PatientLabel, clean_field_data
from .job import PrintJob

__all__ = ['PrinterDevice', 'PatientLabel', 'PrintJob', 'clean_field_data']
