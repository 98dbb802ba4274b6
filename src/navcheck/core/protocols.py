"""Core protocols and result types for navcheck.

This module defines the types every other component depends on:
- FailureKind enum classifying why a step failed
- Data classes for step, scenario and run results
- Protocol definition for the browser page session
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from playwright.async_api import Locator

    from navcheck.pages.locators import LocatorStrategy


class FailureKind(Enum):
    """Why a step failed.

    - RESOLUTION: the locator matched zero or several elements
    - MISMATCH: the element exists but did not reach the expected state
    - NAVIGATION: the scenario's page never loaded
    """

    RESOLUTION = "resolution"
    MISMATCH = "mismatch"
    NAVIGATION = "navigation"


@dataclass(frozen=True)
class StepResult:
    """Outcome of one named step.

    Attributes:
        scenario: Identifier of the owning scenario.
        name: Step name shown in reports.
        passed: Whether the step passed.
        kind: Failure classification, None when passed.
        expected: Expected value, where the step compares one.
        observed: Value read from the page when the step failed.
        message: Failure message, empty when passed.
        duration_ms: Wall time spent on the step.
    """

    scenario: str
    name: str
    passed: bool
    kind: FailureKind | None = None
    expected: str | None = None
    observed: str | None = None
    message: str = ""
    duration_ms: int = 0

    def to_dict(self) -> dict[str, Any]:
        return {
            "scenario": self.scenario,
            "name": self.name,
            "passed": self.passed,
            "kind": self.kind.value if self.kind else None,
            "expected": self.expected,
            "observed": self.observed,
            "message": self.message,
            "duration_ms": self.duration_ms,
        }


@dataclass
class ScenarioResult:
    """Steps recorded for one scenario, in execution order."""

    scenario_id: str
    title: str
    steps: list[StepResult] = field(default_factory=list)

    @property
    def passed(self) -> bool:
        """True when every step passed. A scenario with no steps passes."""
        return all(step.passed for step in self.steps)

    @property
    def failures(self) -> list[StepResult]:
        return [step for step in self.steps if not step.passed]


@dataclass
class RunReport:
    """Aggregate result of a run.

    Attributes:
        base_url: The page root every scenario navigated to.
        scenarios: Scenario results in registry order.
    """

    base_url: str
    scenarios: list[ScenarioResult] = field(default_factory=list)

    @property
    def passed(self) -> bool:
        return all(scenario.passed for scenario in self.scenarios)

    @property
    def total_steps(self) -> int:
        return sum(len(scenario.steps) for scenario in self.scenarios)

    @property
    def failed_steps(self) -> int:
        return sum(len(scenario.failures) for scenario in self.scenarios)


class PageSessionProtocol(Protocol):
    """Protocol for one isolated browser page session.

    The runner opens one session per scenario and never shares a session
    between scenarios.
    """

    async def launch(self) -> None:
        """Start the browser and open a fresh page."""
        ...

    async def navigate(self, url: str, timeout: int = 30000) -> None:
        """Navigate to URL.

        Raises:
            NavigationError: If the page does not load.
        """
        ...

    def locate(self, locator: LocatorStrategy) -> Locator:
        """Return a Playwright locator on the current page."""
        ...

    async def click(self, locator: LocatorStrategy, timeout: int = 5000) -> None:
        """Click the element.

        Raises:
            ElementNotFound: If the element cannot be clicked in time.
        """
        ...

    async def screenshot(self, path: str | None = None) -> bytes:
        """Capture the current page."""
        ...

    async def close(self) -> None:
        """Close the session and release browser resources."""
        ...
