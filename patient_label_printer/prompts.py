"""
Terminal Prompts
================

Printer selection and patient label input.
"""

from typing import List, Optional

import click

from .dates import format_date_ddmmyyyy
from .models import PrinterDevice, PatientLabel, clean_field_data


def _prompt_text(prompt: str) -> str:
    """Prompt until an answer with printable content is given."""
    while True:
        value = clean_field_data(click.prompt(prompt)).strip()
        if value:
            return value


def select_printer(printers: List[PrinterDevice]) -> Optional[PrinterDevice]:
    """
    Choose the printer to print on.

    Args:
        printers: Discovered printers

    Returns:
        None when nothing was discovered, the only printer without prompting,
        or the user's choice from a numbered list
    """
    if not printers:
        return None
    if len(printers) == 1:
        return printers[0]

    click.echo("Multiple printers found:")
    for number, printer in enumerate(printers, start=1):
        click.echo(f"  {number}. {printer.describe()}")

    choice = click.prompt("Select printer", type=click.IntRange(1, len(printers)))
    return printers[choice - 1]


def prompt_date_of_birth() -> str:
    """Prompt until the answer is a real DDMMYYYY or DD/MM/YYYY date."""
    while True:
        formatted = format_date_ddmmyyyy(click.prompt("Date of birth (DDMMYYYY or DD/MM/YYYY)"))
        if formatted is not None:
            return formatted
        click.secho("Invalid date format. Please use DDMMYYYY or DD/MM/YYYY", fg="yellow")


def collect_label() -> PatientLabel:
    """Ask for every field of a patient label."""
    first_name = _prompt_text("First name")
    last_name = _prompt_text("Last name")
    date_of_birth = prompt_date_of_birth()
    gender = _prompt_text("Gender")

    barcode = None
    if click.confirm("Do you want to print a barcode?", default=False):
        barcode = _prompt_text("Please enter a barcode")

    copies = click.prompt("Num labels", type=click.IntRange(min=1))

    return PatientLabel(
        first_name=first_name,
        last_name=last_name,
        date_of_birth=date_of_birth,
        gender=gender,
        barcode=barcode,
        copies=copies,
    )
