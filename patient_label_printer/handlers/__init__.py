"""
Patient Label Printer Handlers
==============================

Label languages and the device-file transport they share.
"""

from .base import BaseHandler
from .zpl import ZPLHandler, generate_zpl

__all__ = ['BaseHandler', 'ZPLHandler', 'generate_zpl']
