"""
Print Job Model
===============

Tracks the dispatch of one label copy to the printer.
"""

from datetime import datetime
from dataclasses import dataclass, field
from typing import Optional


@dataclass
class PrintJob:
    """State of a single label copy."""

    copy_number: int = 1
    device_path: str = ""

    # Status
    status: str = "pending"  # pending, printing, completed, failed, aborted
    attempts: int = 0
    error_message: Optional[str] = None

    # Timestamps
    created_at: datetime = field(default_factory=datetime.now)
    started_at: Optional[datetime] = None
    completed_at: Optional[datetime] = None

    @property
    def succeeded(self) -> bool:
        return self.status == "completed"

    def start(self):
        """Mark an attempt as started."""
        self.status = "printing"
        self.attempts += 1
        if self.started_at is None:
            self.started_at = datetime.now()

    def complete(self):
        """Mark job as completed."""
        self.status = "completed"
        self.completed_at = datetime.now()
        self.error_message = None

    def fail(self, error: str):
        """Mark the current attempt as failed."""
        self.status = "failed"
        self.error_message = error

    def abort(self):
        """Give up on this copy after a failed attempt."""
        self.status = "aborted"
        self.completed_at = datetime.now()
