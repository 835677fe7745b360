from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Sequence

from domain import BrowserPagePort
from domain.page_scripts import PageScript


@dataclass
class FakeElement:
    """One addressable element of the fake page.

    ``on_click`` fires for both real and dispatched clicks. ``click_raises``
    makes the real click fail while a dispatched click still goes through,
    which is how an overlay intercepting pointer events behaves.
    """

    text: str = ""
    visible: bool = True
    enabled: bool = True
    tag: str = ""
    attributes: dict[str, str] = field(default_factory=dict)
    on_click: Callable[[], None] | None = None
    click_raises: Exception | None = None


class FakeBrowserPage:
    """
    In-memory implementation of ``BrowserPagePort``.

    Elements are keyed by the exact selector the code asks for. Page scripts
    are answered by name from ``scripts``: a callable receives the script
    argument, anything else is returned as-is.
    """

    def __init__(self, url: str = "https://www.linkedin.com/") -> None:
        self.url = url
        self.elements: dict[str, FakeElement] = {}
        self.scripts: dict[str, Any] = {}
        self.visited: list[str] = []
        self.clicks: list[str] = []
        self.dispatched: list[str] = []
        self.typed: list[tuple[str, str]] = []
        self.cleared: list[str] = []
        self.keys: list[str] = []
        self.evaluations: list[tuple[str, Any]] = []
        self.load_waits = 0

    # -- test helpers -------------------------------------------------------

    def add(self, selector: str, **kwargs: Any) -> FakeElement:
        element = FakeElement(**kwargs)
        self.elements[selector] = element
        return element

    def remove(self, *selectors: str) -> None:
        for selector in selectors:
            self.elements.pop(selector, None)

    def evaluated(self, name: str) -> list[Any]:
        return [arg for script_name, arg in self.evaluations if script_name == name]

    def _require(self, selector: str) -> FakeElement:
        element = self.elements.get(selector)
        if element is None or not element.visible:
            raise LookupError(f"No visible element for {selector}")
        return element

    # -- BrowserPagePort ----------------------------------------------------

    async def goto(self, url: str) -> None:
        self.visited.append(url)
        self.url = url

    async def wait_for_load(self) -> None:
        self.load_waits += 1

    def current_url(self) -> str:
        return self.url

    async def wait_for_visible(self, selector: str, timeout: float) -> bool:
        element = self.elements.get(selector)
        return element is not None and element.visible

    async def is_present(self, selector: str) -> bool:
        return selector in self.elements

    async def is_enabled(self, selector: str) -> bool:
        element = self.elements.get(selector)
        return element is not None and element.enabled

    async def scroll_into_view(self, selector: str) -> None:
        self._require(selector)

    async def click(self, selector: str) -> None:
        element = self._require(selector)
        if element.click_raises is not None:
            raise element.click_raises
        self.clicks.append(selector)
        if element.on_click:
            element.on_click()

    async def dispatch_click(self, selector: str) -> bool:
        element = self.elements.get(selector)
        if element is None:
            return False
        self.dispatched.append(selector)
        if element.on_click:
            element.on_click()
        return True

    async def type_text(self, selector: str, text: str) -> None:
        element = self._require(selector)
        element.attributes["value"] = element.attributes.get("value", "") + text
        self.typed.append((selector, text))

    async def clear_value(self, selector: str) -> None:
        self.cleared.append(selector)
        element = self.elements.get(selector)
        if element is not None:
            element.attributes["value"] = ""

    async def press_key(self, key: str) -> None:
        self.keys.append(key)

    async def text_content(self, selector: str) -> str | None:
        element = self.elements.get(selector)
        return element.text if element is not None else None

    async def attribute(self, selector: str, name: str) -> str | None:
        element = self.elements.get(selector)
        if element is None:
            return None
        return element.attributes.get(name)

    async def find_by_text(self, tag: str, needles: Sequence[str]) -> str | None:
        lowered = [n.lower() for n in needles]
        for selector, element in self.elements.items():
            if element.tag != tag:
                continue
            if any(n in element.text.lower() for n in lowered):
                return selector
        return None

    async def evaluate(self, script: PageScript, arg: Any = None) -> Any:
        self.evaluations.append((script.name, arg))
        handler = self.scripts.get(script.name)
        if callable(handler):
            return handler(arg)
        return handler


_page_check: BrowserPagePort = FakeBrowserPage()
