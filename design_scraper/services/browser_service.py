from typing import Optional, Dict, Any, List
import asyncio
from contextlib import asynccontextmanager
from playwright.async_api import async_playwright, Browser, BrowserContext, Page, Playwright
from playwright.async_api import TimeoutError as PlaywrightTimeoutError

from ..config import settings
from ..core.exceptions import (
    BrowserError,
    BrowserTimeoutError,
    BrowserConnectionError,
    DesignScraperException,
)
from ..utils.logger import get_logger

logger = get_logger(__name__)


class BrowserService:
    """
    Rendered-page provider backed by Playwright.

    Manages browser lifecycle and hands out isolated pages, one browser
    context per page, so independent analysis runs can share a browser.
    """

    def __init__(self):
        self._playwright: Optional[Playwright] = None
        self._browser: Optional[Browser] = None
        self._contexts: List[BrowserContext] = []
        self._is_initialized = False
        self._init_lock = asyncio.Lock()

    @property
    def is_initialized(self) -> bool:
        return self._is_initialized

    async def initialize(self) -> None:
        """Launch the configured browser engine."""
        async with self._init_lock:
            if self._is_initialized:
                logger.debug("Browser service already initialized")
                return

            try:
                logger.info("Initializing browser service with Playwright")
                self._playwright = await async_playwright().start()

                browser_type = getattr(self._playwright, settings.BROWSER_TYPE)
                self._browser = await browser_type.launch(**self._get_launch_options())

                self._is_initialized = True
                logger.info(f"Browser service initialized successfully with {settings.BROWSER_TYPE}")

            except Exception as e:
                logger.error(f"Failed to initialize browser service: {str(e)}")
                await self._shutdown()
                raise BrowserConnectionError(f"Browser initialization failed: {str(e)}")

    def _get_launch_options(self) -> Dict[str, Any]:
        """Get browser launch options based on configuration."""
        return {
            "headless": settings.BROWSER_HEADLESS,
            "timeout": settings.BROWSER_TIMEOUT * 1000,  # Convert to milliseconds
            "args": [
                "--no-sandbox",
                "--disable-dev-shm-usage",
                "--disable-gpu",
                "--no-first-run",
                "--no-default-browser-check",
                f"--window-size={settings.BROWSER_VIEWPORT_WIDTH},{settings.BROWSER_VIEWPORT_HEIGHT}",
            ]
        }

    async def create_context(self, **context_options) -> BrowserContext:
        """
        Create a new browser context with optional configuration.

        Raises:
            BrowserError: If the service is not initialized or creation fails
        """
        if not self._is_initialized or not self._browser:
            raise BrowserError("Browser service not initialized")

        try:
            default_options = {
                "viewport": {
                    "width": settings.BROWSER_VIEWPORT_WIDTH,
                    "height": settings.BROWSER_VIEWPORT_HEIGHT
                },
                "java_script_enabled": True,
                "accept_downloads": False,
                "ignore_https_errors": True,
            }
            if settings.BROWSER_USER_AGENT:
                default_options["user_agent"] = settings.BROWSER_USER_AGENT

            context = await self._browser.new_context(**{**default_options, **context_options})
            self._contexts.append(context)

            logger.debug(f"Created new browser context (total: {len(self._contexts)})")
            return context

        except Exception as e:
            logger.error(f"Failed to create browser context: {str(e)}")
            raise BrowserError(f"Context creation failed: {str(e)}")

    async def create_page(self, context: BrowserContext) -> Page:
        """Create a page in ``context`` with the configured timeouts."""
        try:
            page = await context.new_page()
            page.set_default_timeout(settings.BROWSER_TIMEOUT * 1000)
            page.set_default_navigation_timeout(settings.BROWSER_NAVIGATION_TIMEOUT * 1000)

            logger.debug("Created new browser page")
            return page

        except Exception as e:
            logger.error(f"Failed to create browser page: {str(e)}")
            raise BrowserError(f"Page creation failed: {str(e)}")

    @asynccontextmanager
    async def page_context(self, **context_options):
        """
        Context manager for creating and cleaning up browser pages.

        The page and its context are closed on every exit path.

        Yields:
            Page: Browser page instance
        """
        context = None
        page = None

        try:
            context = await self.create_context(**context_options)
            page = await self.create_page(context)
            yield page

        except DesignScraperException:
            raise

        except PlaywrightTimeoutError as e:
            logger.error(f"Browser operation timed out: {str(e)}")
            raise BrowserTimeoutError(f"Operation timed out: {str(e)}")

        except Exception as e:
            logger.error(f"Error in page context: {str(e)}")
            raise BrowserError(f"Page context error: {str(e)}")

        finally:
            if page:
                try:
                    await page.close()
                    logger.debug("Page closed successfully")
                except Exception as e:
                    logger.warning(f"Error closing page: {str(e)}")

            if context:
                try:
                    await context.close()
                    logger.debug("Context closed successfully")
                except Exception as e:
                    logger.warning(f"Error closing context: {str(e)}")
                finally:
                    if context in self._contexts:
                        self._contexts.remove(context)

    async def navigate_to_url(self, page: Page, url: str, wait_for: Optional[str] = None) -> None:
        """
        Navigate to a URL and wait for the page to settle.

        Inputs:
            page: Browser page instance
            url: URL to navigate to
            wait_for: Wait condition (defaults to BROWSER_WAIT_UNTIL)

        Raises:
            BrowserTimeoutError: If navigation times out
            BrowserError: If navigation fails
        """
        wait_for = wait_for or settings.BROWSER_WAIT_UNTIL
        try:
            logger.info(f"Navigating to URL: {url}")

            response = await page.goto(
                url,
                wait_until=wait_for,
                timeout=settings.BROWSER_NAVIGATION_TIMEOUT * 1000
            )

            if response is None:
                raise BrowserError(f"Failed to navigate to {url}: No response received", url=url)

            if not response.ok:
                logger.warning(f"Navigation returned non-OK status: {response.status}")

            logger.info(f"Successfully navigated to {url} (status: {response.status})")

        except BrowserError:
            raise

        except PlaywrightTimeoutError as e:
            logger.error(f"Navigation timeout for {url}: {str(e)}")
            raise BrowserTimeoutError(f"Navigation to {url} timed out", url=url)

        except Exception as e:
            logger.error(f"Navigation failed for {url}: {str(e)}")
            raise BrowserError(f"Navigation to {url} failed: {str(e)}", url=url)

    async def _shutdown(self) -> None:
        for context in self._contexts[:]:
            try:
                await context.close()
            except Exception as e:
                logger.warning(f"Error closing context: {str(e)}")
            finally:
                self._contexts.remove(context)

        if self._browser:
            try:
                await self._browser.close()
                logger.info("Browser closed successfully")
            except Exception as e:
                logger.warning(f"Error closing browser: {str(e)}")
            finally:
                self._browser = None

        if self._playwright:
            try:
                await self._playwright.stop()
                logger.info("Playwright stopped successfully")
            except Exception as e:
                logger.warning(f"Error stopping Playwright: {str(e)}")
            finally:
                self._playwright = None

        self._is_initialized = False

    async def cleanup(self) -> None:
        """Clean up browser resources."""
        logger.info("Cleaning up browser service")
        async with self._init_lock:
            await self._shutdown()
        logger.info("Browser service cleanup completed")

    async def __aenter__(self):
        """Async context manager entry."""
        await self.initialize()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit."""
        await self.cleanup()
