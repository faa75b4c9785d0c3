"""
Patient Label Printer - Main Application
========================================

Interactive session: detect the printer, then collect, render and print
labels until the user is done.

Run: python -m patient_label_printer
"""

import logging
from datetime import datetime
from typing import Callable, List

import click

from .config import USBMISC_PATH, USB_DEV_ROOT, ZEBRA_VENDOR_ID
from .discovery import find_printers
from .handlers import BaseHandler, ZPLHandler
from .models import PrintJob
from .prompts import collect_label, select_printer

logger = logging.getLogger(__name__)


# =============================================================================
# Print Dispatch
# =============================================================================

def print_copy(handler: BaseHandler, payload: bytes, job: PrintJob) -> PrintJob:
    """
    Send one copy, asking before every retry.

    Declining a retry aborts this copy only.
    """
    while True:
        job.start()
        result = handler.send(payload)

        if result['success']:
            job.complete()
            click.secho("✓ Label sent to printer successfully!", fg="green")
            return job

        job.fail(result['error'])
        click.secho(f"✗ Error printing label: {result['error']}", fg="red", err=True)
        click.secho(f"Make sure the printer is connected at: {handler.device_path}", fg="red", err=True)

        if not click.confirm("Try again?", default=False):
            job.abort()
            logger.warning("Copy %d aborted after %d attempt(s)", job.copy_number, job.attempts)
            return job


def print_copies(handler: BaseHandler, document: str, copies: int) -> List[PrintJob]:
    """Print ``copies`` copies of a rendered document."""
    payload = handler.encode(document)
    jobs = []

    for number in range(1, copies + 1):
        if copies > 1:
            click.echo(f"Printing copy {number} of {copies}...")
        job = PrintJob(copy_number=number, device_path=handler.device_path)
        jobs.append(print_copy(handler, payload, job))

    return jobs


# =============================================================================
# Session
# =============================================================================

def run_session(sysfs_root: str = USBMISC_PATH,
                dev_root: str = USB_DEV_ROOT,
                vendor_id: str = ZEBRA_VENDOR_ID,
                clock: Callable[[], datetime] = datetime.now) -> int:
    """
    Run the interactive label printing session.

    Args:
        sysfs_root: usbmisc class directory to scan
        dev_root: Directory holding the lp* device nodes
        vendor_id: USB vendor id of supported printers
        clock: Source of the timestamp stamped on each label

    Returns:
        Process exit status
    """
    click.echo("=== Label Printer ===")

    printer = select_printer(find_printers(vendor_id, sysfs_root, dev_root))
    if printer is None:
        click.secho("✗ No Zebra printer found. Is the printer connected and switched on?",
                    fg="red", err=True)
        return 1

    click.secho(f"✓ Using Zebra printer at: {printer.device_path}", fg="green")
    handler = ZPLHandler(printer)

    while True:
        click.echo("\n--- New Label ---")
        label = collect_label()
        document = handler.render_label(label, clock())

        jobs = print_copies(handler, document, label.copies)
        printed = sum(1 for job in jobs if job.succeeded)
        if printed < len(jobs):
            click.secho(f"{printed} of {len(jobs)} label(s) printed", fg="yellow")

        if not click.confirm("Print another label?", default=False):
            break

    return 0
