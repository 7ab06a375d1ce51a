import pytest

from design_scraper.models.fonts import FontSample, FontType, NOT_DETECTED
from design_scraper.services.extraction.collector import StyleSampleCollector
from design_scraper.services.extraction.fonts import (
    FontAnalyzer,
    categorize_font_type,
    font_usage,
    is_web_font,
    parse_font_family,
)

from conftest import FakePage, synthetic_payloads


def sample(family, tag, size="16px", weight="400", style="normal", text="Sample"):
    is_heading = tag.startswith("h") and tag[1:].isdigit()
    return FontSample(
        family=family, size=size, weight=weight, style=style, tag=tag,
        text=text, is_heading=is_heading, is_body=not is_heading,
    )


class TestParseFontFamily:

    def test_strips_quotes_and_whitespace(self):
        assert parse_font_family('"Helvetica Neue", Arial, sans-serif') == ["Helvetica Neue", "Arial", "sans-serif"]

    def test_single_quotes(self):
        assert parse_font_family("'Open Sans' , serif") == ["Open Sans", "serif"]

    def test_drops_empty_entries(self):
        assert parse_font_family("Inter,, ,monospace") == ["Inter", "monospace"]

    @pytest.mark.parametrize("value", [None, "", "inherit", "initial"])
    def test_nothing_to_parse(self, value):
        assert parse_font_family(value) == []


class TestCategorizeFontType:

    @pytest.mark.parametrize("name,expected", [
        ("Georgia", FontType.SERIF),
        ("Times New Roman", FontType.SERIF),
        ("serif", FontType.SERIF),
        ("sans-serif", FontType.SANS_SERIF),
        ("Helvetica Neue", FontType.SANS_SERIF),
        ("Inter", FontType.SANS_SERIF),
        ("Roboto", FontType.SANS_SERIF),
        ("Roboto Mono", FontType.MONOSPACE),
        ("Roboto Serif", FontType.SERIF),
        ("Ubuntu Serif", FontType.SERIF),
        ("Lato Serif", FontType.SERIF),
        ("Source Code Pro", FontType.MONOSPACE),
        ("Courier New", FontType.MONOSPACE),
        ("Comic Sans MS", FontType.CURSIVE),
        ("Papyrus", FontType.FANTASY),
        ("XKCDScript", FontType.CUSTOM),
    ])
    def test_categories(self, name, expected):
        assert categorize_font_type(name) == expected

    def test_case_insensitive(self):
        assert categorize_font_type("GEORGIA") == FontType.SERIF


class TestIsWebFont:

    @pytest.mark.parametrize("name", ["Arial", "georgia", "sans-serif", "system-ui", "Times New Roman"])
    def test_system_fonts(self, name):
        assert not is_web_font(name)

    @pytest.mark.parametrize("name", ["Inter", "Playfair Display", "Roboto"])
    def test_web_fonts(self, name):
        assert is_web_font(name)


class TestFontAnalyzer:
    """Test grouping and ranking of font samples."""

    @pytest.fixture
    def analyzer(self):
        return FontAnalyzer()

    def test_group_variants(self, analyzer):
        variants = analyzer.group_variants([
            sample("Inter", "p"),
            sample("Inter", "h2", size="24px", weight="700"),
            sample("Inter", "p"),
            sample("Inter", "span"),
        ])

        assert len(variants) == 2
        assert variants[0].size == "16px"
        assert variants[0].total_count == 3
        assert variants[0].body_count == 3
        assert variants[1].heading_count == 1

    def test_variant_keeps_at_most_five_samples(self, analyzer):
        variants = analyzer.group_variants([sample("Inter", "p", text=str(i)) for i in range(8)])

        assert variants[0].total_count == 8
        assert [e.text_excerpt for e in variants[0].sample_elements] == ["0", "1", "2", "3", "4"]

    def test_family_usage_is_sum_of_variants(self, analyzer):
        variants = analyzer.group_variants([
            sample("Inter, sans-serif", "p"),
            sample("Inter, sans-serif", "p"),
            sample('"Inter", Arial', "span", size="14px"),
            sample("Inter, sans-serif", "h3", size="20px", weight="600"),
        ])

        families = analyzer.group_families(variants)

        assert len(families) == 1
        inter = families[0]
        assert inter.name == "Inter"
        assert inter.total_usage == 4
        assert inter.total_usage == sum(v.usage for v in inter.variants)
        assert inter.heading_usage == 1
        assert inter.body_usage == 3
        assert inter.font_type == FontType.SANS_SERIF
        assert inter.is_web_font

    def test_families_merge_case_insensitively(self, analyzer):
        families = analyzer.group_families(analyzer.group_variants([
            sample("Inter", "p"),
            sample("inter", "p", size="12px"),
        ]))

        assert [f.name for f in families] == ["Inter"]

    def test_top_fonts(self, analyzer):
        variants = analyzer.group_variants([
            sample("Lato", "h1", size="40px"),
            sample("Georgia", "h2", size="28px"),
            sample("Georgia", "h2", size="28px"),
            sample("Lato", "p"),
        ])

        headings = analyzer.top_fonts(variants, "heading")
        body = analyzer.top_fonts(variants, "body")

        assert [(e.font_family, e.usage) for e in headings] == [("Georgia", 2), ("Lato", 1)]
        assert headings[0].font_type == FontType.SERIF
        assert not headings[0].is_web_font
        assert [(e.font_family, e.size) for e in body] == [("Lato", "16px")]

    def test_summary(self, analyzer):
        summary = analyzer.analyze([
            sample("Georgia, serif", "h1"),
            sample("Inter", "p"),
            sample("Inter", "p"),
            sample("Roboto Mono", "span"),
        ])

        stats = summary.summary
        assert stats.total_font_families == 3
        assert stats.web_fonts == 2
        assert stats.system_fonts == 1
        assert stats.type_distribution == {"sans-serif": 1, "serif": 1, "monospace": 1}
        assert stats.primary_heading_font == "Georgia"
        assert stats.primary_body_font == "Inter"

    def test_no_samples(self, analyzer):
        summary = analyzer.analyze([])

        assert summary.headings == []
        assert summary.body == []
        assert summary.summary.primary_heading_font == NOT_DETECTED
        assert font_usage(summary).headings == NOT_DETECTED
        assert font_usage(summary).body == NOT_DETECTED

    @pytest.mark.asyncio
    async def test_font_usage_from_page(self, analyzer):
        page = FakePage(synthetic_payloads())
        samples = await StyleSampleCollector().collect_fonts(page)

        usage = font_usage(analyzer.analyze(samples))

        assert usage.headings == "Playfair Display"
        assert usage.body == "Inter"
