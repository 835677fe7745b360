from __future__ import annotations

from domain.models import Credentials, PaginationCursor, RunConfig, RunSummary
from domain.ports import (
    BrowserPagePort,
    ClockPort,
    IdGeneratorPort,
    LoggerPort,
    MessageCatalogPort,
    OutcomeRecorderPort,
    UserInteractionPort,
)
from domain.services import (
    ActionPrimitives,
    ApplicationFormDriver,
    ApplicationRunController,
    DeduplicationTracker,
    EligibilityFilter,
    ElementLocator,
    FieldPolicy,
    ResultPageNavigator,
    RunSetup,
    SearchFilterService,
    SignInService,
)


class EasyApplyRunner:
    """Composes the domain services for one run over a browser page.

    The page, recorder and console are owned by the caller; the runner only
    wires them together and drives setup followed by the run.
    """

    def __init__(
        self,
        *,
        config: RunConfig,
        browser: BrowserPagePort,
        recorder: OutcomeRecorderPort,
        ui: UserInteractionPort,
        messages: MessageCatalogPort,
        clock: ClockPort,
        id_generator: IdGeneratorPort,
        logger: LoggerPort,
        run_id: str | None = None,
    ) -> None:
        timings = config.timings
        locator = ElementLocator(browser=browser, clock=clock, logger=logger)
        actions = ActionPrimitives(
            browser=browser,
            locator=locator,
            clock=clock,
            logger=logger,
            timings=timings,
        )
        self._config = config
        self._setup = RunSetup(
            browser=browser,
            sign_in=SignInService(browser=browser, actions=actions, logger=logger),
            search=SearchFilterService(
                browser=browser,
                actions=actions,
                ui=ui,
                messages=messages,
                logger=logger,
            ),
            ui=ui,
            logger=logger,
        )
        self._controller = ApplicationRunController(
            config=config,
            browser=browser,
            actions=actions,
            navigator=ResultPageNavigator(
                browser=browser,
                locator=locator,
                clock=clock,
                logger=logger,
                timings=timings,
                cursor=PaginationCursor(),
            ),
            tracker=DeduplicationTracker(),
            eligibility=EligibilityFilter(
                excluded_companies=config.excluded_companies,
                excluded_titles=config.excluded_titles,
            ),
            form_driver=ApplicationFormDriver(
                browser=browser,
                locator=locator,
                actions=actions,
                clock=clock,
                logger=logger,
                policy=FieldPolicy(
                    defaults=config.form_defaults,
                    affirmative_tokens=messages.tokens("affirmative") or ("yes",),
                ),
                timings=timings,
            ),
            recorder=recorder,
            ui=ui,
            messages=messages,
            id_generator=id_generator,
            logger=logger,
            run_id=run_id,
        )

    @property
    def controller(self) -> ApplicationRunController:
        return self._controller

    async def run(self, credentials: Credentials | None, *, skip_setup: bool = False) -> RunSummary:
        if not skip_setup:
            await self._setup.prepare(self._config, credentials)
        return await self._controller.run()
