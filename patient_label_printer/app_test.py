import sys
from datetime import datetime

import click
import pytest
from click.testing import CliRunner

from . import app
from .__main__ import main
from .app import print_copies, run_session
from .discovery_test import make_usblp
from .handlers import BaseHandler, ZPLHandler
from .models import PrinterDevice

PRINTED_AT = datetime(2024, 5, 6, 14, 7)


@pytest.fixture
def sent(monkeypatch):
    """Record every payload written through a handler."""
    writes = []
    original_send = BaseHandler.send

    def recording_send(self, payload):
        writes.append((self.device_path, payload))
        return original_send(self, payload)

    monkeypatch.setattr(BaseHandler, "send", recording_send)
    return writes


@pytest.fixture
def usb(tmp_path):
    """A fake sysfs with one Zebra printer and its device node."""
    usbmisc = make_usblp(tmp_path / "sys", "lp0", vendor_id="0a5f")
    dev_root = tmp_path / "dev"
    dev_root.mkdir()
    (dev_root / "lp0").touch()
    return str(usbmisc), str(dev_root)


def run(usb, text):
    sysfs_root, dev_root = usb

    @click.command()
    def session():
        sys.exit(run_session(sysfs_root, dev_root, clock=lambda: PRINTED_AT))

    result = CliRunner().invoke(session, [], input=text)
    return result.exit_code, result.output


def run_copies(handler, copies, text):
    jobs = []

    @click.command()
    def dispatch():
        jobs.extend(print_copies(handler, "^XA^XZ", copies))

    result = CliRunner().invoke(dispatch, [], input=text)
    return jobs, result.output


def failing_send(*errors):
    """Fail with each error in turn, then succeed."""
    remaining = list(errors)

    def send(self, payload):
        if remaining:
            return {'success': False, 'device_path': self.device_path, 'error': remaining.pop(0)}
        return {'success': True, 'device_path': self.device_path, 'bytes_sent': len(payload)}

    return send


def test_prints_requested_copies_to_selected_printer(usb, sent):
    status, output = run(usb, "John\nSmith\n15031985\nM\ny\n12345678\n2\nn\n")

    assert status == 0
    assert len(sent) == 2
    assert sent[0] == sent[1]

    device_path, payload = sent[0]
    assert device_path == usb[1] + "/lp0"
    zpl = payload.decode()
    assert "SMITH, JOHN" in zpl
    assert "DOB: 15/03/1985, M" in zpl
    assert "^BCN,70,Y,N,N,A^FD12345678^FS" in zpl
    assert output.count("Label sent to printer successfully") == 2


def test_invalid_date_never_reaches_the_printer(usb, sent):
    status, output = run(usb, "John\nSmith\n30021999\n15031985\nM\nn\n1\nn\n")

    assert status == 0
    assert "Invalid date format" in output
    assert len(sent) == 1
    assert "30/02/1999" not in sent[0][1].decode()


def test_prints_another_label_when_asked(usb, sent):
    status, _ = run(usb, "John\nSmith\n15031985\nM\nn\n1\ny\n"
                         "Jane\nDoe\n01022003\nF\nn\n1\nn\n")

    assert status == 0
    assert len(sent) == 2
    assert "SMITH, JOHN" in sent[0][1].decode()
    assert "DOE, JANE" in sent[1][1].decode()


def test_no_printer_halts_before_collecting_labels(monkeypatch):
    def fail():
        pytest.fail("label collected without a printer")

    monkeypatch.setattr(app, "find_printers", lambda *args: [])
    monkeypatch.setattr(app, "collect_label", fail)

    result = CliRunner().invoke(main, [], input="")

    assert result.exit_code == 1
    assert "No Zebra printer found" in result.output


def test_main_exits_cleanly_after_printing(monkeypatch, tmp_path):
    device = tmp_path / "lp0"
    device.touch()
    monkeypatch.setattr(app, "find_printers", lambda *args: [PrinterDevice("0a5f", str(device))])

    result = CliRunner().invoke(main, [], input="John\nSmith\n15031985\nM\nn\n1\nn\n")

    assert result.exit_code == 0
    assert "SMITH, JOHN" in device.read_text()


def test_failed_copy_is_retried_on_confirmation(monkeypatch):
    monkeypatch.setattr(BaseHandler, "send", failing_send("Device or resource busy"))
    handler = ZPLHandler(PrinterDevice("0a5f", "/dev/usb/lp0"))

    jobs, output = run_copies(handler, 1, "y\n")

    assert [job.status for job in jobs] == ["completed"]
    assert jobs[0].attempts == 2
    assert "Error printing label: Device or resource busy" in output
    assert "Make sure the printer is connected at: /dev/usb/lp0" in output


def test_declined_retry_aborts_only_that_copy(monkeypatch):
    monkeypatch.setattr(BaseHandler, "send", failing_send("Printer device not found"))
    handler = ZPLHandler(PrinterDevice("0a5f", "/dev/usb/lp0"))

    jobs, _ = run_copies(handler, 2, "n\n")

    assert [job.status for job in jobs] == ["aborted", "completed"]
    assert jobs[0].error_message == "Printer device not found"
    assert jobs[1].copy_number == 2


def test_session_continues_after_aborted_copy(usb, monkeypatch):
    monkeypatch.setattr(BaseHandler, "send", failing_send("busy", "busy"))

    status, output = run(usb, "John\nSmith\n15031985\nM\nn\n2\nn\nn\nn\n")

    assert status == 0
    assert "0 of 2 label(s) printed" in output


def test_end_of_input_aborts_without_printing(monkeypatch, tmp_path, sent):
    device = tmp_path / "lp0"
    device.touch()
    monkeypatch.setattr(app, "find_printers", lambda *args: [PrinterDevice("0a5f", str(device))])

    result = CliRunner().invoke(main, [], input="John\nSmith\n")

    assert result.exit_code == 1
    assert "Aborted!" in result.output
    assert sent == []
    assert device.read_bytes() == b""
