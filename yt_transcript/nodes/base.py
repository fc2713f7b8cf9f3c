from abc import ABC, abstractmethod
from typing import Any

from yt_transcript.models.node import NodeExecutionContext


class BaseNode(ABC):
    """
    A batch step that turns input items into output items.

    Items are plain parameter dicts. Each output entry carries ``pairedItem``,
    the index of the input item it came from, so callers can line results up
    with their inputs even when some items failed.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Key the node is registered and dispatched under."""
        raise NotImplementedError

    @property
    @abstractmethod
    def description(self) -> str:
        raise NotImplementedError

    @property
    @abstractmethod
    def properties(self) -> dict[str, Any]:
        """Object schema every input item must satisfy before ``execute`` sees it."""
        raise NotImplementedError

    @abstractmethod
    async def execute(self, items: list[dict[str, Any]], context: NodeExecutionContext) -> list[dict[str, Any]]:
        """
        Process the items in order.

        Returns:
            One entry per processed item. A success is ``{"json": <record>, "pairedItem": i}``.
            When ``context.continue_on_fail`` is set, a failed item becomes
            ``{"json": <the input item>, "error": <ErrorDetail dict>, "pairedItem": i}``
            and the batch carries on.

        Raises:
            TranscriptError: The first failure when ``continue_on_fail`` is off,
                with ``item_index`` set to the failing item.
        """
        raise NotImplementedError
