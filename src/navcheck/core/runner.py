"""Assertion runner for navcheck.

This module drives the registered scenarios against a live page. Each
scenario runs in its own browser session; steps inside a scenario run
strictly one after another and each step's outcome is recorded on its own,
so one failed step never hides the result of the next.
"""

from __future__ import annotations

import asyncio
import logging
import time
from collections.abc import Awaitable, Callable, Iterable
from dataclasses import dataclass

from playwright.async_api import Error as PlaywrightError
from playwright.async_api import Locator, expect
from playwright.async_api import TimeoutError as PlaywrightTimeoutError

from navcheck.core.browser import PlaywrightBrowser
from navcheck.core.protocols import (
    FailureKind,
    PageSessionProtocol,
    RunReport,
    ScenarioResult,
    StepResult,
)
from navcheck.core.scenarios import (
    SCENARIO_REGISTRY,
    get_scenario_by_id,
    suggest_scenario,
)
from navcheck.pages.home import (
    DOCUMENT_ROOT,
    HERO_HEADING,
    HERO_TEXT,
    NAV_ELEMENTS,
    THEME_ATTRIBUTE,
    THEME_SEQUENCE,
    THEME_SWITCH,
    ElementDescriptor,
    with_href,
    with_text,
)
from navcheck.pages.locators import LocatorStrategy
from navcheck.utils.config import AppConfig
from navcheck.utils.exceptions import (
    ElementNotFound,
    ExpectationMismatch,
    NavigationError,
    ResolutionFailure,
)
from navcheck.utils.session import SessionLogger

logger = logging.getLogger(__name__)

# Short wait used only to read the observed value after an expectation failed
OBSERVE_TIMEOUT = 1000  # ms

Check = Callable[[PageSessionProtocol], Awaitable[None]]


@dataclass(frozen=True)
class PlannedStep:
    """A named step and the check it runs."""

    name: str
    check: Check


class AssertionRunner:
    """Runs verification scenarios against the configured page.

    Attributes:
        config: Application configuration.
        base_url: Page root each scenario navigates to.
        session: Optional session logger for the JSON report.
        step_callback: Called with every StepResult as soon as it is known.

    Example:
        >>> runner = AssertionRunner(config=ConfigLoader.load())
        >>> report = await runner.run(["text", "theme"])
        >>> print(report.passed)
    """

    def __init__(
        self,
        config: AppConfig,
        base_url: str | None = None,
        browser_factory: Callable[[], PageSessionProtocol] | None = None,
        session: SessionLogger | None = None,
        step_callback: Callable[[StepResult], None] | None = None,
    ) -> None:
        """Initialize the AssertionRunner.

        Args:
            config: Application configuration (timeouts, browser options).
            base_url: Page root; defaults to config.base_url.
            browser_factory: Builds a fresh page session per scenario.
                Defaults to a PlaywrightBrowser built from config.
            session: Optional session logger; steps are persisted as they run.
            step_callback: Optional progress callback.
                Signature: (result: StepResult) -> None
        """
        self.config = config
        self.base_url = base_url or config.base_url
        self.browser_factory = browser_factory or self._default_browser
        self.session = session
        self.step_callback = step_callback or (lambda result: None)

    def _default_browser(self) -> PageSessionProtocol:
        return PlaywrightBrowser(
            headless=self.config.headless,
            stealth=self.config.stealth,
            browser_name=self.config.browser_name,
        )

    @staticmethod
    def select(scenario_ids: Iterable[str] | None = None) -> list[str]:
        """Normalize a scenario selection to registry order.

        Args:
            scenario_ids: IDs to run; None or empty selects every scenario.

        Returns:
            Unique scenario IDs, ordered as in the registry.

        Raises:
            ValueError: If an ID is unknown.
        """
        if not scenario_ids:
            return [s.id for s in SCENARIO_REGISTRY]
        wanted: set[str] = set()
        for scenario_id in scenario_ids:
            info = get_scenario_by_id(scenario_id)
            if info is None:
                suggestion = suggest_scenario(scenario_id)
                if suggestion:
                    raise ValueError(
                        f"Unknown scenario '{scenario_id}'. "
                        f"Did you mean '{suggestion}'?"
                    )
                raise ValueError(f"Unknown scenario '{scenario_id}'")
            wanted.add(info.id)
        return [s.id for s in SCENARIO_REGISTRY if s.id in wanted]

    async def run(
        self,
        scenario_ids: Iterable[str] | None = None,
        parallel: bool | None = None,
    ) -> RunReport:
        """Run the selected scenarios.

        Args:
            scenario_ids: Scenarios to run, all when None.
            parallel: Run scenarios concurrently in isolated sessions.
                Defaults to config.parallel.

        Returns:
            RunReport with scenarios in registry order.
        """
        selected = self.select(scenario_ids)
        if parallel is None:
            parallel = self.config.parallel

        logger.info(
            f"Running {len(selected)} scenario(s) against {self.base_url}"
            f"{' in parallel' if parallel else ''}"
        )
        if parallel:
            results = list(
                await asyncio.gather(*(self.run_scenario(s) for s in selected))
            )
        else:
            results = [await self.run_scenario(s) for s in selected]

        report = RunReport(base_url=self.base_url, scenarios=results)
        if self.session:
            self.session.complete(report)
        return report

    async def run_scenario(self, scenario_id: str) -> ScenarioResult:
        """Run one scenario in a fresh page session.

        A failed launch or navigation fails every planned step of the
        scenario, since none of them can succeed without the page.
        """
        info = get_scenario_by_id(scenario_id)
        if info is None:
            raise ValueError(f"Unknown scenario '{scenario_id}'")
        result = ScenarioResult(scenario_id=info.id, title=info.title)
        plan = self.plan(info.id)

        browser = self.browser_factory()
        try:
            try:
                await browser.launch()
                await browser.navigate(self.base_url, timeout=self.config.page_timeout)
            except NavigationError as e:
                self._fail_plan(result, plan, str(e))
                return result
            except PlaywrightError as e:
                self._fail_plan(result, plan, f"Browser launch failed: {e}")
                return result

            for index, step in enumerate(plan, start=1):
                outcome = await self._execute(info.id, index, step, browser)
                result.steps.append(outcome)
        finally:
            await browser.close()

        logger.info(
            f"Scenario '{info.id}': {len(result.steps) - len(result.failures)}"
            f"/{len(result.steps)} steps passed"
        )
        return result

    def plan(self, scenario_id: str) -> list[PlannedStep]:
        """Build the ordered step list for a scenario.

        Descriptors without an expected text or href produce no step in the
        text and href scenarios.
        """
        if scenario_id == "visibility":
            return [
                PlannedStep(
                    f"Element is visible: {d.name}",
                    self._visible_check(d.name, d.locator),
                )
                for d in NAV_ELEMENTS
            ]
        if scenario_id == "text":
            return [
                PlannedStep(f"Element text: {d.name}", self._text_check(d))
                for d in with_text()
            ]
        if scenario_id == "href":
            return [
                PlannedStep(f"Element href: {d.name} -> {d.href}", self._href_check(d))
                for d in with_href()
            ]
        if scenario_id == "theme":
            names = ("Switch to light mode", "Switch to dark mode",
                     "Switch back to light mode")
            return [
                PlannedStep(name, self._toggle_check(name, expected))
                for name, expected in zip(names, THEME_SEQUENCE, strict=True)
            ]
        if scenario_id == "hero":
            return [
                PlannedStep(
                    "Hero heading is visible",
                    self._visible_check("Hero heading", HERO_HEADING),
                ),
                PlannedStep("Hero heading text", self._hero_text_check()),
            ]
        raise ValueError(f"Unknown scenario '{scenario_id}'")

    def _fail_plan(
        self, result: ScenarioResult, plan: list[PlannedStep], message: str
    ) -> None:
        logger.error(f"Scenario '{result.scenario_id}' could not start: {message}")
        for step in plan:
            outcome = StepResult(
                scenario=result.scenario_id,
                name=step.name,
                passed=False,
                kind=FailureKind.NAVIGATION,
                message=message,
            )
            result.steps.append(outcome)
            self._record(outcome)

    async def _execute(
        self,
        scenario_id: str,
        index: int,
        step: PlannedStep,
        browser: PageSessionProtocol,
    ) -> StepResult:
        """Run one step and turn its outcome into a StepResult."""
        started = time.monotonic()
        kind: FailureKind | None = None
        expected: str | None = None
        observed: str | None = None
        message = ""
        try:
            await step.check(browser)
        except ResolutionFailure as e:
            kind, message = FailureKind.RESOLUTION, str(e)
        except ExpectationMismatch as e:
            kind, message = FailureKind.MISMATCH, str(e)
            expected, observed = e.expected, e.observed
        except PlaywrightError as e:
            kind, message = FailureKind.RESOLUTION, f"{step.name}: {e}"

        outcome = StepResult(
            scenario=scenario_id,
            name=step.name,
            passed=kind is None,
            kind=kind,
            expected=expected,
            observed=observed,
            message=message,
            duration_ms=int((time.monotonic() - started) * 1000),
        )
        screenshot = None
        if kind is not None:
            logger.warning(f"[{scenario_id}] {step.name} failed: {message}")
            screenshot = await self._capture(browser, scenario_id, index)
        self._record(outcome, screenshot)
        return outcome

    def _record(self, outcome: StepResult, screenshot: str | None = None) -> None:
        if self.session:
            self.session.log_step(outcome, screenshot=screenshot)
        self.step_callback(outcome)

    async def _capture(
        self, browser: PageSessionProtocol, scenario_id: str, index: int
    ) -> str | None:
        """Save a failure screenshot into the session directory."""
        if not (self.session and self.config.screenshots):
            return None
        filename = f"{scenario_id}_{index:02d}.png"
        try:
            await browser.screenshot(str(self.session.screenshots_dir / filename))
        except PlaywrightError as e:
            logger.warning(f"Screenshot capture failed: {e}")
            return None
        return filename

    async def _resolve(
        self, browser: PageSessionProtocol, name: str, locator: LocatorStrategy
    ) -> Locator:
        """Wait until the locator matches exactly one element.

        Raises:
            ResolutionFailure: If nothing matches in time or several elements
                match.
        """
        target = browser.locate(locator)
        try:
            await target.wait_for(state="attached", timeout=self.config.element_timeout)
        except PlaywrightTimeoutError as e:
            raise ResolutionFailure(name, locator.describe(), "no matching element") from e
        except PlaywrightError as e:
            if "strict mode violation" not in str(e):
                raise
            count = await target.count()
            raise ResolutionFailure(
                name, locator.describe(), f"matched {count} elements, expected 1"
            ) from e
        return target

    @staticmethod
    async def _observe(read: Awaitable[str | None]) -> str | None:
        try:
            return await read
        except PlaywrightError:
            return None

    def _visible_check(self, name: str, locator: LocatorStrategy) -> Check:
        async def check(browser: PageSessionProtocol) -> None:
            target = await self._resolve(browser, name, locator)
            try:
                await expect(target).to_be_visible(timeout=self.config.expect_timeout)
            except AssertionError as e:
                raise ExpectationMismatch(name, "visible", "hidden") from e

        return check

    def _text_check(self, descriptor: ElementDescriptor) -> Check:
        assert descriptor.text is not None
        expected = descriptor.text

        async def check(browser: PageSessionProtocol) -> None:
            target = await self._resolve(browser, descriptor.name, descriptor.locator)
            try:
                await expect(target).to_have_text(
                    expected, timeout=self.config.expect_timeout
                )
            except AssertionError as e:
                observed = await self._observe(
                    target.text_content(timeout=OBSERVE_TIMEOUT)
                )
                raise ExpectationMismatch(descriptor.name, expected, observed) from e

        return check

    def _href_check(self, descriptor: ElementDescriptor) -> Check:
        assert descriptor.href is not None
        expected = descriptor.href

        async def check(browser: PageSessionProtocol) -> None:
            target = await self._resolve(browser, descriptor.name, descriptor.locator)
            try:
                await expect(target).to_have_attribute(
                    "href", expected, timeout=self.config.expect_timeout
                )
            except AssertionError as e:
                observed = await self._observe(
                    target.get_attribute("href", timeout=OBSERVE_TIMEOUT)
                )
                raise ExpectationMismatch(descriptor.name, expected, observed) from e

        return check

    def _toggle_check(self, name: str, expected: str) -> Check:
        """Click the theme switch, then wait for data-theme to settle."""

        async def check(browser: PageSessionProtocol) -> None:
            await self._resolve(browser, "Theme switch", THEME_SWITCH)
            root = await self._resolve(browser, "Document root", DOCUMENT_ROOT)
            try:
                await browser.click(THEME_SWITCH, timeout=self.config.element_timeout)
            except ElementNotFound as e:
                raise ResolutionFailure(
                    "Theme switch", THEME_SWITCH.describe(), str(e)
                ) from e
            try:
                await expect(root).to_have_attribute(
                    THEME_ATTRIBUTE, expected, timeout=self.config.expect_timeout
                )
            except AssertionError as e:
                observed = await self._observe(
                    root.get_attribute(THEME_ATTRIBUTE, timeout=OBSERVE_TIMEOUT)
                )
                raise ExpectationMismatch(name, expected, observed) from e

        return check

    def _hero_text_check(self) -> Check:
        async def check(browser: PageSessionProtocol) -> None:
            target = await self._resolve(browser, "Hero heading", HERO_HEADING)
            try:
                await expect(target).to_contain_text(
                    HERO_TEXT, timeout=self.config.expect_timeout
                )
            except AssertionError as e:
                observed = await self._observe(
                    target.text_content(timeout=OBSERVE_TIMEOUT)
                )
                raise ExpectationMismatch("Hero heading", HERO_TEXT, observed) from e

        return check
