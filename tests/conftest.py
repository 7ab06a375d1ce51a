import pytest
from contextlib import asynccontextmanager
from typing import Any, Dict, List

from design_scraper.services.extraction import extractors


BORDER_SCRIPT = extractors.get_border_sample_script()
FONT_SCRIPT = extractors.get_font_sample_script()
COLOR_SCRIPT = extractors.get_color_sample_script()
THEME_SCRIPT = extractors.get_theme_signal_script()


class FakePage:
    """In-memory page that answers the extractor scripts with canned payloads."""

    def __init__(self, payloads: Dict[str, Any]):
        self.payloads = payloads
        self.evaluated: List[str] = []
        self.closed = False

    async def evaluate(self, script: str) -> Any:
        self.evaluated.append(script)
        payload = self.payloads.get(script)
        if isinstance(payload, Exception):
            raise payload
        return payload


class FakeProvider:
    """Rendered-page provider handing out a single FakePage."""

    def __init__(self, page: FakePage, navigation_error: Exception = None):
        self.page = page
        self.navigation_error = navigation_error
        self.is_initialized = False
        self.initialize_calls = 0
        self.navigations: List[str] = []
        self.pages_acquired = 0
        self.pages_released = 0
        self.cleaned_up = False

    async def initialize(self) -> None:
        self.initialize_calls += 1
        self.is_initialized = True

    @asynccontextmanager
    async def page_context(self, **context_options):
        self.pages_acquired += 1
        try:
            yield self.page
        finally:
            self.page.closed = True
            self.pages_released += 1

    async def navigate_to_url(self, page, url: str) -> None:
        if self.navigation_error is not None:
            raise self.navigation_error
        self.navigations.append(url)

    async def cleanup(self) -> None:
        self.cleaned_up = True
        self.is_initialized = False


def border_row(radius="0px", width="0px", color="rgba(0, 0, 0, 0)", shorthand="0px none rgba(0, 0, 0, 0)"):
    return {
        "radius": radius,
        "widths": [width] * 4,
        "colors": [color] * 4,
        "shorthand": shorthand,
    }


def font_row(family, tag, size="16px", weight="400", style="normal", class_name="", text="Sample"):
    return {
        "family": family,
        "size": size,
        "weight": weight,
        "style": style,
        "tag": tag,
        "class_name": class_name,
        "text": text,
    }


def synthetic_payloads() -> Dict[str, Any]:
    """A small but complete page: light theme, one dominant button style."""
    return {
        BORDER_SCRIPT: {"elements": [
            border_row("8px", "1px", "rgb(0, 0, 0)", "1px solid rgb(0, 0, 0)") for _ in range(6)
        ]},
        FONT_SCRIPT: {"elements": [
            font_row('"Playfair Display", Georgia, serif', "h1", size="48px", weight="700"),
            font_row('"Playfair Display", Georgia, serif', "h2", size="32px", weight="700"),
            font_row("Inter, sans-serif", "p"),
            font_row("Inter, sans-serif", "p"),
            font_row("Inter, sans-serif", "li"),
        ]},
        COLOR_SCRIPT: {
            "body": {"background": "rgb(255, 255, 255)", "foreground": "rgb(33, 37, 41)"},
            "header": {"background": "rgb(13, 110, 253)", "foreground": "rgb(255, 255, 255)"},
            "footer": {"background": None, "foreground": None},
            "buttons": [
                {"background": "rgb(13, 110, 253)", "foreground": "rgb(255, 255, 255)"},
                {"background": "rgb(13, 110, 253)", "foreground": "rgb(255, 255, 255)"},
                {"background": "rgb(108, 117, 125)", "foreground": "rgb(255, 255, 255)"},
            ],
        },
        THEME_SCRIPT: {
            "body_background": "rgb(255, 255, 255)",
            "root_background": "rgba(0, 0, 0, 0)",
            "text_color": "rgb(33, 37, 41)",
            "has_dark_class": False,
            "color_scheme": "normal",
            "prefers_dark": False,
        },
    }


@pytest.fixture
def fake_page():
    return FakePage(synthetic_payloads())


@pytest.fixture
def fake_provider(fake_page):
    return FakeProvider(fake_page)
