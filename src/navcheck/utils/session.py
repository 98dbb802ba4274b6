"""Session logging utilities for navcheck.

This module records a verification run as JSON. Each step entry is the
StepResult's own dictionary form plus the time it was logged and the
failure screenshot filename, if one was taken.
"""

from __future__ import annotations

import json
from datetime import datetime
from pathlib import Path
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from navcheck.core.protocols import RunReport, StepResult


class SessionLogger:
    """Logs run data to a JSON report file.

    Persists data after each step so a partial report survives a crash.

    Attributes:
        session_id: Unique identifier for this session.
        session_dir: Directory where session data is stored.
        data: Dictionary containing all session data.
    """

    def __init__(self, output_dir: Path, base_url: str, target: str) -> None:
        """Initialize a new session logger.

        Args:
            output_dir: Parent directory where session folder will be created.
            base_url: The page root every scenario navigates to.
            target: Target identifier ("live" or "mock").
        """
        self.session_id = f"navcheck_{datetime.now().strftime('%Y%m%d_%H%M%S')}"
        self.session_dir = output_dir / self.session_id
        self.session_dir.mkdir(parents=True, exist_ok=True)

        self.data: dict[str, Any] = {
            "session_id": self.session_id,
            "base_url": base_url,
            "target": target,
            "started_at": datetime.now().isoformat(),
            "completed_at": None,
            "result": None,
            "total_steps": 0,
            "failed_steps": 0,
            "steps": [],
        }

    def log_step(self, result: StepResult, screenshot: str | None = None) -> None:
        """Log one step outcome.

        Args:
            result: The finished step.
            screenshot: Filename of a failure screenshot.
        """
        entry = {"timestamp": datetime.now().isoformat(), **result.to_dict()}
        entry["screenshot"] = screenshot
        self.data["steps"].append(entry)
        self.data["total_steps"] += 1
        if not result.passed:
            self.data["failed_steps"] += 1
        self._save()

    def complete(self, report: RunReport) -> None:
        """Mark session complete with the run's overall result."""
        self.data["completed_at"] = datetime.now().isoformat()
        self.data["result"] = "passed" if report.passed else "failed"
        self._save()

    def _save(self) -> None:
        """Write session data to JSON file."""
        with open(self.report_path, "w") as f:
            json.dump(self.data, f, indent=2)

    @property
    def report_path(self) -> Path:
        """Path of the JSON report file."""
        return self.session_dir / "report.json"

    @property
    def screenshots_dir(self) -> Path:
        """Directory for failure screenshots.

        Returns:
            Path to the session directory where screenshots should be stored.
        """
        return self.session_dir
