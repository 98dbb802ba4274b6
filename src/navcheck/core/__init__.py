"""Core module for navcheck: result types, scenarios, browser and runner."""

from navcheck.core.browser import PlaywrightBrowser
from navcheck.core.protocols import (
    FailureKind,
    PageSessionProtocol,
    RunReport,
    ScenarioResult,
    StepResult,
)
from navcheck.core.runner import AssertionRunner, PlannedStep
from navcheck.core.scenarios import (
    SCENARIO_REGISTRY,
    ScenarioInfo,
    get_all_scenarios,
    get_scenario_by_id,
    suggest_scenario,
)

__all__ = [
    "AssertionRunner",
    "FailureKind",
    "PageSessionProtocol",
    "PlannedStep",
    "PlaywrightBrowser",
    "RunReport",
    "SCENARIO_REGISTRY",
    "ScenarioInfo",
    "ScenarioResult",
    "StepResult",
    "get_all_scenarios",
    "get_scenario_by_id",
    "suggest_scenario",
]
