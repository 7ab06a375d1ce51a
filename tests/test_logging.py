import logging
import pytest

from design_scraper.utils.logger import (
    ColoredFormatter,
    RunContextFilter,
    get_logger,
    log_performance,
    setup_logging,
)


class TestLogging:
    """Test logger naming, formatting and the performance decorator."""

    def test_child_logger_names(self):
        assert get_logger("pipeline").name == "design_scraper.pipeline"
        assert get_logger("design_scraper.services.colors").name == "design_scraper.services.colors"
        assert get_logger("design_scraper").name == "design_scraper"

    def test_root_logger_is_configured(self):
        get_logger("anything")
        root = logging.getLogger("design_scraper")
        assert root.handlers
        assert root.propagate is False

    def test_colored_formatter_leaves_record_untouched(self):
        record = logging.LogRecord("design_scraper", logging.WARNING, __file__, 1, "careful", None, None)
        formatted = ColoredFormatter(fmt="%(levelname)s %(message)s").format(record)

        assert "\033[33m" in formatted
        assert record.levelname == "WARNING"

    def test_run_context_defaults(self):
        record = logging.LogRecord("design_scraper", logging.INFO, __file__, 1, "msg", None, None)
        assert RunContextFilter().filter(record)
        assert record.run_id == "N/A"
        assert record.url == "N/A"

    def test_file_logging(self, tmp_path):
        log_file = tmp_path / "logs" / "scraper.log"
        logger = setup_logging("design_scraper_file_test", log_level="DEBUG", log_file=str(log_file),
                               enable_console=False, enable_file=True)

        logger.error("stage failed", extra={"run_id": "abc123", "url": "https://example.com"})
        for handler in logger.handlers:
            handler.flush()

        content = log_file.read_text(encoding="utf-8")
        assert "run:abc123" in content
        assert "url:https://example.com" in content
        assert (tmp_path / "logs" / "scraper_errors.log").exists()

        for handler in list(logger.handlers):
            handler.close()
            logger.removeHandler(handler)

    @pytest.mark.asyncio
    async def test_log_performance_async(self):
        @log_performance
        async def double(x):
            return x * 2

        assert await double(4) == 8
        assert double.__name__ == "double"

    def test_log_performance_sync_reraises(self):
        @log_performance
        def explode():
            raise ValueError("nope")

        with pytest.raises(ValueError, match="nope"):
            explode()
