from .playwright_page import PlaywrightBrowserPage

__all__ = ["PlaywrightBrowserPage"]
