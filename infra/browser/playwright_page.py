from __future__ import annotations

from typing import Any, Sequence

from domain.page_scripts import PageScript

_DISPATCH_CLICK_JS = """(selector) => {
    const el = document.querySelector(selector);
    if (!el) return false;
    el.click();
    return true;
}"""

_CLEAR_VALUE_JS = """(selector) => {
    const el = document.querySelector(selector);
    if (el) el.value = '';
}"""

_TEXT_CONTENT_JS = """(selector) => {
    const el = document.querySelector(selector);
    if (!el) return null;
    return el.innerText || el.textContent || '';
}"""

_ATTRIBUTE_JS = """({ selector, name }) => {
    const el = document.querySelector(selector);
    if (!el) return null;
    if (name in el && typeof el[name] === 'string') return el[name];
    return el.getAttribute(name);
}"""

_MARK_BY_TEXT_JS = """({ tag, needles }) => {
    const lowered = needles.map((needle) => needle.toLowerCase());
    const match = Array.from(document.querySelectorAll(tag)).find((el) => {
        const text = (el.textContent || '').trim().toLowerCase();
        return lowered.some((needle) => text.includes(needle));
    });
    if (!match) return null;
    const target = match.closest('button') || match;
    const ref = `ea-text-${Date.now()}`;
    target.setAttribute('data-easy-apply-ref', ref);
    return `[data-easy-apply-ref="${ref}"]`;
}"""

_SCROLL_CENTER_JS = "(el) => el.scrollIntoView({ behavior: 'smooth', block: 'center' })"


class PlaywrightBrowserPage:
    """
    Playwright-backed implementation of BrowserPagePort.

    Requires ``playwright`` to be installed and browsers set up via
    ``playwright install chromium``.

    A persistent Chromium profile is used so the LinkedIn sign-in survives
    between runs. Use as an async context manager, or call ``launch()`` and
    ``close()`` explicitly.
    """

    def __init__(
        self,
        *,
        user_data_dir: str = "./userData",
        headless: bool = False,
        executable_path: str | None = None,
        window_size: tuple[int, int] | None = None,
        action_timeout: float = 10.0,
    ) -> None:
        self._user_data_dir = user_data_dir
        self._headless = headless
        self._executable_path = executable_path
        self._window_size = window_size
        self._action_timeout_ms = action_timeout * 1000
        self._playwright: Any = None
        self._context: Any = None
        self._page: Any = None

    async def __aenter__(self) -> "PlaywrightBrowserPage":
        await self.launch()
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.close()

    async def launch(self) -> None:
        from playwright.async_api import async_playwright

        args = ["--disable-blink-features=AutomationControlled"]
        if self._window_size:
            args.append(f"--window-size={self._window_size[0]},{self._window_size[1]}")

        self._playwright = await async_playwright().start()
        self._context = await self._playwright.chromium.launch_persistent_context(
            self._user_data_dir,
            headless=self._headless,
            executable_path=self._executable_path,
            args=args,
            no_viewport=True,
        )
        pages = self._context.pages
        self._page = pages[0] if pages else await self._context.new_page()
        for extra in pages[1:]:
            await extra.close()

    async def close(self) -> None:
        try:
            if self._context:
                await self._context.close()
        finally:
            if self._playwright:
                await self._playwright.stop()
            self._context = None
            self._page = None
            self._playwright = None

    def _ensure_page(self) -> Any:
        if self._page is None:
            raise RuntimeError("Browser not launched. Call launch() first.")
        return self._page

    # -- navigation ---------------------------------------------------------

    async def goto(self, url: str) -> None:
        page = self._ensure_page()
        await page.goto(url, wait_until="domcontentloaded")

    async def wait_for_load(self) -> None:
        page = self._ensure_page()
        await page.wait_for_load_state("domcontentloaded", timeout=30_000)

    def current_url(self) -> str:
        return str(self._ensure_page().url)

    # -- element lookup -----------------------------------------------------

    async def wait_for_visible(self, selector: str, timeout: float) -> bool:
        from playwright.async_api import TimeoutError as PlaywrightTimeoutError

        page = self._ensure_page()
        if timeout <= 0:
            # Playwright treats a zero timeout as "wait forever".
            return bool(await page.locator(selector).first.is_visible())
        try:
            await page.wait_for_selector(selector, state="visible", timeout=timeout * 1000)
            return True
        except PlaywrightTimeoutError:
            return False

    async def is_present(self, selector: str) -> bool:
        page = self._ensure_page()
        return await page.locator(selector).count() > 0

    async def is_enabled(self, selector: str) -> bool:
        page = self._ensure_page()
        locator = page.locator(selector)
        if await locator.count() == 0:
            return False
        return bool(await locator.first.is_enabled())

    async def find_by_text(self, tag: str, needles: Sequence[str]) -> str | None:
        page = self._ensure_page()
        return await page.evaluate(_MARK_BY_TEXT_JS, {"tag": tag, "needles": list(needles)})

    # -- element interactions -----------------------------------------------

    async def scroll_into_view(self, selector: str) -> None:
        page = self._ensure_page()
        await page.locator(selector).first.evaluate(_SCROLL_CENTER_JS)

    async def click(self, selector: str) -> None:
        page = self._ensure_page()
        await page.locator(selector).first.click(timeout=self._action_timeout_ms)

    async def dispatch_click(self, selector: str) -> bool:
        page = self._ensure_page()
        return bool(await page.evaluate(_DISPATCH_CLICK_JS, selector))

    async def type_text(self, selector: str, text: str) -> None:
        page = self._ensure_page()
        await page.locator(selector).first.press_sequentially(text)

    async def clear_value(self, selector: str) -> None:
        page = self._ensure_page()
        await page.evaluate(_CLEAR_VALUE_JS, selector)

    async def press_key(self, key: str) -> None:
        page = self._ensure_page()
        await page.keyboard.press(key)

    # -- reads --------------------------------------------------------------

    async def text_content(self, selector: str) -> str | None:
        page = self._ensure_page()
        return await page.evaluate(_TEXT_CONTENT_JS, selector)

    async def attribute(self, selector: str, name: str) -> str | None:
        page = self._ensure_page()
        return await page.evaluate(_ATTRIBUTE_JS, {"selector": selector, "name": name})

    async def evaluate(self, script: PageScript, arg: Any = None) -> Any:
        page = self._ensure_page()
        return await page.evaluate(script.source, arg)
