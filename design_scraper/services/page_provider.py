from typing import Any, AsyncContextManager, Protocol, runtime_checkable


@runtime_checkable
class RenderedPage(Protocol):
    """A live page whose DOM and computed styles can be queried."""

    async def evaluate(self, expression: str) -> Any:
        ...


@runtime_checkable
class RenderedPageProvider(Protocol):
    """
    Capability that launches a renderer and hands out pages.

    Lifecycle: ``initialize`` -> ``page_context`` (acquire/release, any
    number of times, concurrently) -> ``cleanup``.
    """

    @property
    def is_initialized(self) -> bool:
        ...

    async def initialize(self) -> None:
        ...

    def page_context(self, **context_options) -> AsyncContextManager[RenderedPage]:
        ...

    async def navigate_to_url(self, page: RenderedPage, url: str) -> None:
        ...

    async def cleanup(self) -> None:
        ...
