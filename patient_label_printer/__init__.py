"""
Patient Label Printer
=====================

Interactive patient label printing for Zebra USB label printers.

Flow:
- Detect Zebra printers attached through the usblp driver
- Prompt for the patient's name, date of birth, gender and an optional barcode
- Render the label as ZPL and stream it to the printer device file

Usage:
    python -m patient_label_printer
"""

__version__ = '1.0.0'
__author__ = 'Patient Label Printer Maintainers'
