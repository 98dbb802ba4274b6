"""Scenario registry: the named checks the runner knows how to execute."""

import difflib
from dataclasses import dataclass


@dataclass(frozen=True)
class ScenarioInfo:
    """Information about a verification scenario."""

    id: str
    title: str
    description: str


# Registry order is run order
SCENARIO_REGISTRY: list[ScenarioInfo] = [
    ScenarioInfo(
        id="visibility",
        title="Header navigation elements are visible",
        description="Every registered header element is shown",
    ),
    ScenarioInfo(
        id="text",
        title="Header navigation elements have expected text",
        description="Elements with an expected text render exactly that text",
    ),
    ScenarioInfo(
        id="href",
        title="Header navigation links point to expected targets",
        description="Elements with an expected link target carry that href",
    ),
    ScenarioInfo(
        id="theme",
        title="Theme switch toggles light and dark mode",
        description="Three clicks cycle data-theme light, dark, light",
    ),
    ScenarioInfo(
        id="hero",
        title="Hero heading is shown on the home page",
        description="The hero heading is visible and carries the tagline",
    ),
]


def get_all_scenarios() -> list[ScenarioInfo]:
    """Get all scenarios in run order."""
    return list(SCENARIO_REGISTRY)


def get_scenario_by_id(scenario_id: str) -> ScenarioInfo | None:
    """Get a scenario by its ID (case-insensitive).

    Args:
        scenario_id: The scenario ID to look up.

    Returns:
        ScenarioInfo if found, None otherwise.
    """
    scenario_id_lower = scenario_id.lower()
    for scenario in SCENARIO_REGISTRY:
        if scenario.id == scenario_id_lower:
            return scenario
    return None


def suggest_scenario(typo: str) -> str | None:
    """Suggest a scenario ID for a likely typo.

    Args:
        typo: The misspelled scenario ID.

    Returns:
        The closest matching scenario ID, or None if nothing is close.
    """
    matches = difflib.get_close_matches(
        typo.lower(),
        [s.id for s in SCENARIO_REGISTRY],
        n=1,
        cutoff=0.6,
    )
    return matches[0] if matches else None
