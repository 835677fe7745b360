from __future__ import annotations

from domain import selectors
from domain.models import Credentials, RunConfig
from domain.ports import BrowserPagePort, LoggerPort, UserInteractionPort
from domain.services.actions import ActionPrimitives
from domain.services.search import SearchFilterService


class SetupError(RuntimeError):
    """A failure before the run starts: launch, first navigation, sign-in."""


class SignInService:
    """Sign in with email/password unless the persisted session already is."""

    def __init__(
        self,
        *,
        browser: BrowserPagePort,
        actions: ActionPrimitives,
        logger: LoggerPort,
    ) -> None:
        self._browser = browser
        self._actions = actions
        self._logger = logger

    async def is_signed_in(self) -> bool:
        return not await self._browser.is_present(selectors.GUEST_SIGN_IN_BUTTON)

    async def ensure_signed_in(self, credentials: Credentials | None) -> bool:
        """Returns True when a sign-in was performed, False if already signed in."""
        if await self.is_signed_in():
            self._logger.info("session_reused")
            return False
        if credentials is None:
            raise SetupError("Not signed in and no EMAIL/PASSWORD credentials were provided.")
        await self._actions.type_into(selectors.SESSION_KEY_INPUT, credentials.email)
        await self._actions.type_into(selectors.SESSION_PASSWORD_INPUT, credentials.password)
        await self._browser.press_key("Enter")
        await self._browser.wait_for_load()
        self._logger.info("signed_in")
        return True


class RunSetup:
    """Open the site, sign in, and run the configured search."""

    def __init__(
        self,
        *,
        browser: BrowserPagePort,
        sign_in: SignInService,
        search: SearchFilterService,
        ui: UserInteractionPort,
        logger: LoggerPort,
    ) -> None:
        self._browser = browser
        self._sign_in = sign_in
        self._search = search
        self._ui = ui
        self._logger = logger

    async def prepare(self, config: RunConfig, credentials: Credentials | None) -> None:
        try:
            await self._browser.goto(config.base_url)
        except Exception as exc:
            raise SetupError(f"Cannot open {config.base_url}: {exc}") from exc
        try:
            await self._sign_in.ensure_signed_in(credentials)
        except SetupError:
            raise
        except Exception as exc:
            raise SetupError(f"Sign-in failed: {exc}") from exc
        await self._search.apply(config.search)
        self._logger.info("run_setup_complete", url=self._browser.current_url())
