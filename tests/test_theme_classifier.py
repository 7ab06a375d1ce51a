import pytest

from design_scraper.models.theme import Theme, ThemeSignal
from design_scraper.services.extraction.collector import StyleSampleCollector
from design_scraper.services.extraction.theme import ThemeClassifier

from conftest import THEME_SCRIPT, FakePage


class TestThemeClassifier:
    """Test light/dark decisions."""

    @pytest.fixture
    def classifier(self):
        return ThemeClassifier()

    def test_dark_class_wins_over_bright_background(self, classifier):
        signal = ThemeSignal(background_brightness=240, has_dark_class=True)
        assert classifier.classify(signal) == Theme.DARK

    def test_dark_color_scheme(self, classifier):
        signal = ThemeSignal(background_brightness=250, color_scheme="dark")
        assert classifier.classify(signal) == Theme.DARK

    def test_light_color_scheme_defers_to_brightness(self, classifier):
        signal = ThemeSignal(background_brightness=20, color_scheme="light")
        assert classifier.classify(signal) == Theme.DARK

    def test_threshold_is_light(self, classifier):
        assert classifier.classify(ThemeSignal(background_brightness=128)) == Theme.LIGHT

    def test_just_below_threshold_is_dark(self, classifier):
        assert classifier.classify(ThemeSignal(background_brightness=127.999)) == Theme.DARK

    def test_unknown_brightness_defaults_to_light(self, classifier):
        assert classifier.classify(ThemeSignal()) == Theme.LIGHT

    def test_prefers_dark_alone_does_not_decide(self, classifier):
        signal = ThemeSignal(background_brightness=255, prefers_dark=True)
        assert classifier.classify(signal) == Theme.LIGHT

    def test_text_brightness_is_ignored(self, classifier):
        signal = ThemeSignal(background_brightness=200, text_brightness=250)
        assert classifier.classify(signal) == Theme.LIGHT

    @pytest.mark.asyncio
    async def test_dark_root_behind_transparent_body(self, classifier):
        page = FakePage({THEME_SCRIPT: {
            "body_background": "rgba(0, 0, 0, 0)",
            "root_background": "#121212",
            "text_color": "#e0e0e0",
            "has_dark_class": False,
            "color_scheme": "normal",
            "prefers_dark": False,
        }})

        signal = await StyleSampleCollector().collect_theme_signal(page)

        assert classifier.classify(signal) == Theme.DARK

    @pytest.mark.asyncio
    async def test_white_page(self, classifier):
        page = FakePage({THEME_SCRIPT: {
            "body_background": "rgb(255, 255, 255)",
            "root_background": "rgba(0, 0, 0, 0)",
            "text_color": "rgb(0, 0, 0)",
            "has_dark_class": False,
            "color_scheme": None,
            "prefers_dark": False,
        }})

        signal = await StyleSampleCollector().collect_theme_signal(page)

        assert signal.background_brightness == pytest.approx(255.0)
        assert classifier.classify(signal) == Theme.LIGHT
