from typing import Any, Dict, Iterable, Mapping, Optional, Union

from ..core.exceptions import ConfigurationError
from ..models.analysis import AnalysisResult
from ..models.borders import BorderSummary
from ..models.colors import ColorSummary
from ..models.fonts import FontSummary, FontUsage
from ..models.theme import Theme
from ..utils.logger import get_logger, log_performance
from .browser_service import BrowserService
from .extraction.borders import BorderAnalyzer
from .extraction.collector import StyleSampleCollector
from .extraction.colors import ColorAnalyzer
from .extraction.fonts import FontAnalyzer, font_usage
from .extraction.theme import ThemeClassifier
from .extraction_pipeline import ExtractionPipeline, StageFunction
from .page_provider import RenderedPage, RenderedPageProvider

logger = get_logger(__name__)

_collector = StyleSampleCollector()


async def theme_stage(page: RenderedPage, url: str) -> Theme:
    signal = await _collector.collect_theme_signal(page)
    return ThemeClassifier().classify(signal)


async def colors_stage(page: RenderedPage, url: str) -> ColorSummary:
    samples = await _collector.collect_colors(page)
    return ColorAnalyzer().summarize(samples)


async def font_analysis_stage(page: RenderedPage, url: str) -> FontSummary:
    samples = await _collector.collect_fonts(page)
    return FontAnalyzer().analyze(samples)


async def fonts_stage(page: RenderedPage, url: str) -> FontUsage:
    return font_usage(await font_analysis_stage(page, url))


async def borders_stage(page: RenderedPage, url: str) -> BorderSummary:
    tables = await _collector.collect_borders(page)
    return BorderAnalyzer().summarize(tables)


# Order matches the sections of AnalysisResult
DEFAULT_STAGES: Dict[str, StageFunction] = {
    "theme": theme_stage,
    "colors": colors_stage,
    "fonts": font_analysis_stage,
    "borders": borders_stage,
}


class DesignTokenService:
    """
    Public entry points for design token extraction.

    Every direct call acquires its own page, navigates once and releases
    the page before returning or raising. The provider is initialized on
    first use and stays up until ``cleanup``.
    """

    def __init__(self, provider: Optional[RenderedPageProvider] = None):
        self.provider = provider or BrowserService()

    async def _run_single(self, url: Optional[str], stage: StageFunction) -> Any:
        if not url:
            raise ConfigurationError("URL is required for extraction", config_key="url")
        if not self.provider.is_initialized:
            await self.provider.initialize()
        async with self.provider.page_context() as page:
            await self.provider.navigate_to_url(page, url)
            return await stage(page, url)

    async def analyze_borders(self, url: str) -> BorderSummary:
        return await self._run_single(url, borders_stage)

    async def get_colors(self, url: Optional[str]) -> ColorSummary:
        """Color palettes of ``url``; the empty structure when no URL is given."""
        if not url:
            return ColorSummary.empty()
        return await self._run_single(url, colors_stage)

    async def analyze_fonts(self, url: str) -> FontSummary:
        return await self._run_single(url, font_analysis_stage)

    async def get_font_usage(self, url: str) -> FontUsage:
        return await self._run_single(url, fonts_stage)

    async def detect_theme(self, url: str) -> Theme:
        return await self._run_single(url, theme_stage)

    def build_pipeline(
        self,
        stages: Optional[Union[Mapping[str, StageFunction], Iterable[str]]] = None
    ) -> ExtractionPipeline:
        """
        Build a pipeline from a mapping of stages or built-in stage names.

        Raises:
            ConfigurationError: For an unknown built-in stage name
        """
        pipeline = ExtractionPipeline(self.provider)
        if stages is None:
            stages = DEFAULT_STAGES
        if isinstance(stages, Mapping):
            for name, stage in stages.items():
                pipeline.add(name, stage)
            return pipeline
        if isinstance(stages, str):
            raise ConfigurationError("Stages must be a mapping or a list of stage names", config_key="stages")

        for name in stages:
            if name not in DEFAULT_STAGES:
                raise ConfigurationError(
                    f"Unknown stage '{name}', expected one of: {', '.join(DEFAULT_STAGES)}",
                    config_key="stages"
                )
            pipeline.add(name, DEFAULT_STAGES[name])
        return pipeline

    async def run_pipeline(
        self,
        url: Optional[str],
        stages: Optional[Union[Mapping[str, StageFunction], Iterable[str]]] = None
    ) -> Dict[str, Optional[Any]]:
        return await self.build_pipeline(stages).extract(url)

    @log_performance
    async def generate(self, url: Optional[str]) -> AnalysisResult:
        """Run all built-in stages against one page and aggregate the tokens."""
        results = await self.run_pipeline(url)
        return AnalysisResult(url=url, **results)

    async def cleanup(self) -> None:
        await self.provider.cleanup()

    async def __aenter__(self):
        await self.provider.initialize()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.cleanup()


# Global design token service instance
design_token_service = DesignTokenService()


async def analyze_borders(url: str) -> BorderSummary:
    return await design_token_service.analyze_borders(url)


async def get_colors(url: Optional[str] = None) -> ColorSummary:
    return await design_token_service.get_colors(url)


async def analyze_fonts(url: str) -> FontSummary:
    return await design_token_service.analyze_fonts(url)


async def get_font_usage(url: str) -> FontUsage:
    return await design_token_service.get_font_usage(url)


async def detect_theme(url: str) -> Theme:
    return await design_token_service.detect_theme(url)


async def run_pipeline(
    url: str,
    stages: Optional[Union[Mapping[str, StageFunction], Iterable[str]]] = None
) -> Dict[str, Optional[Any]]:
    return await design_token_service.run_pipeline(url, stages)


async def generate(url: str) -> AnalysisResult:
    return await design_token_service.generate(url)
