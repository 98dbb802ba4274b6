"""Tests for result types."""

import dataclasses

import pytest

from navcheck.core.protocols import FailureKind, RunReport, ScenarioResult, StepResult


def _step(name: str, passed: bool = True, **kwargs) -> StepResult:
    return StepResult(scenario="text", name=name, passed=passed, **kwargs)


class TestStepResult:
    def test_to_dict_for_failure(self) -> None:
        step = _step(
            "Element text: Docs",
            passed=False,
            kind=FailureKind.MISMATCH,
            expected="Docs",
            observed="Docs Guide",
            message="mismatch",
            duration_ms=12,
        )
        assert step.to_dict() == {
            "scenario": "text",
            "name": "Element text: Docs",
            "passed": False,
            "kind": "mismatch",
            "expected": "Docs",
            "observed": "Docs Guide",
            "message": "mismatch",
            "duration_ms": 12,
        }

    def test_to_dict_for_pass_has_no_kind(self) -> None:
        assert _step("ok").to_dict()["kind"] is None

    def test_is_frozen(self) -> None:
        with pytest.raises(dataclasses.FrozenInstanceError):
            _step("ok").passed = False  # type: ignore[misc]


class TestScenarioResult:
    def test_empty_scenario_passes(self) -> None:
        assert ScenarioResult("text", "Text").passed is True

    def test_any_failure_fails(self) -> None:
        result = ScenarioResult(
            "text",
            "Text",
            steps=[_step("a"), _step("b", passed=False, kind=FailureKind.RESOLUTION)],
        )
        assert result.passed is False
        assert [s.name for s in result.failures] == ["b"]


class TestRunReport:
    def test_counts(self) -> None:
        report = RunReport(
            base_url="https://playwright.dev/",
            scenarios=[
                ScenarioResult("text", "Text", steps=[_step("a"), _step("b")]),
                ScenarioResult(
                    "href",
                    "Href",
                    steps=[_step("c", passed=False, kind=FailureKind.MISMATCH)],
                ),
            ],
        )
        assert report.total_steps == 3
        assert report.failed_steps == 1
        assert report.passed is False
