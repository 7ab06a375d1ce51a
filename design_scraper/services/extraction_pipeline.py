from typing import Any, Awaitable, Callable, Dict, List, Optional, Tuple, Union
import inspect
import time
import uuid

from ..core.exceptions import ConfigurationError, ExtractionFailure, DesignScraperException
from ..utils.logger import get_logger
from .page_provider import RenderedPage, RenderedPageProvider

logger = get_logger(__name__)


StageFunction = Callable[[RenderedPage, str], Union[Any, Awaitable[Any]]]


class ExtractionPipeline:
    """
    Named extraction stages run against a single rendered page.

    The page is acquired and navigated once per ``extract`` call, then every
    stage runs in registration order. A stage that raises is reported as
    ``None`` and does not stop the others.
    """

    def __init__(self, provider: RenderedPageProvider):
        self.provider = provider
        self._stages: Dict[str, StageFunction] = {}

    def add(self, name: str, stage: StageFunction) -> "ExtractionPipeline":
        """
        Register a stage.

        Raises:
            ConfigurationError: If the name is empty or the stage is not callable
        """
        if not isinstance(name, str) or not name.strip():
            raise ConfigurationError("Stage name must be a non-empty string", config_key="stage")
        if not callable(stage):
            raise ConfigurationError(f"Extractor for '{name}' must be a function", config_key=name)
        self._stages[name] = stage
        return self

    def remove(self, name: str) -> bool:
        return self._stages.pop(name, None) is not None

    def clear(self) -> None:
        self._stages.clear()

    @property
    def names(self) -> List[str]:
        return list(self._stages)

    def __len__(self) -> int:
        return len(self._stages)

    def __contains__(self, name: object) -> bool:
        return name in self._stages

    async def _run_stage(
        self, name: str, stage: StageFunction, page: RenderedPage, url: str, run_id: str
    ) -> Tuple[bool, Optional[Any]]:
        """Run one stage; returns (succeeded, result)."""
        try:
            result = stage(page, url)
            if inspect.isawaitable(result):
                result = await result
            return True, result
        except Exception as e:
            logger.warning(
                f"Stage '{name}' failed for {url}: {str(e)}",
                exc_info=not isinstance(e, DesignScraperException),
                extra={"run_id": run_id, "url": url}
            )
            return False, None

    async def extract(self, url: Optional[str]) -> Dict[str, Optional[Any]]:
        """
        Run every registered stage against one page of ``url``.

        Returns:
            Mapping of stage name to its result, or None if the stage failed

        Raises:
            ConfigurationError: If ``url`` is missing
            ExtractionFailure: If the page cannot be acquired or navigated
        """
        if not url:
            raise ConfigurationError("URL is required for extraction", config_key="url")

        if not self._stages:
            return {}

        run_id = uuid.uuid4().hex[:8]
        context = {"run_id": run_id, "url": url}
        start_time = time.perf_counter()
        logger.info(f"Running {len(self._stages)} stages for {url}: {', '.join(self._stages)}", extra=context)

        # Snapshot so a concurrent add/remove does not affect this run
        stages = list(self._stages.items())
        results: Dict[str, Optional[Any]] = {}
        failed: List[str] = []

        if not self.provider.is_initialized:
            await self.provider.initialize()

        try:
            async with self.provider.page_context() as page:
                await self.provider.navigate_to_url(page, url)
                for name, stage in stages:
                    succeeded, results[name] = await self._run_stage(name, stage, page, url, run_id)
                    if not succeeded:
                        failed.append(name)
        except ExtractionFailure:
            logger.error(f"Extraction aborted for {url}", extra=context)
            raise
        except Exception as e:
            logger.error(f"Extraction aborted for {url}: {str(e)}", extra=context)
            raise ExtractionFailure(f"Extraction failed for {url}: {str(e)}", url=url)

        logger.info(
            f"Pipeline finished in {time.perf_counter() - start_time:.2f}s"
            + (f" ({len(failed)} unavailable: {', '.join(failed)})" if failed else ""),
            extra=context
        )
        return results
