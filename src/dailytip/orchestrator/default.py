# topmark:header:start
#
#   project      : DailyTip
#   file         : default.py
#   file_relpath : src/dailytip/orchestrator/default.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Default orchestrator: load once, then select and format on every call.

Lifecycle:
    1) Construction queries the loader exactly once for its tips and (when the
       loader has one) its collection title, and caches both. The loader itself
       is not kept, so the orchestrator is a snapshot of that load.
    2) Every `DefaultTipOrchestrator.get_tip` call asks the selector for a tip
       from the cached set and hands it, with the cached title as category, to
       the formatter. Calls are independent of one another.

Example:
    ```python
    orchestrator = DefaultTipOrchestrator(
        JsonTipLoader("tips.json"),
        RandomTipSelector(),
        ShellTipFormatter(),
    )
    print(orchestrator.get_tip())
    ```
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Generic, TypeVar

from dailytip.config.logging import get_logger
from dailytip.loaders.base import collection_title_of

if TYPE_CHECKING:
    from dailytip.config.logging import DailyTipLogger
    from dailytip.formatters.base import TipFormatter
    from dailytip.loaders.base import TipLoader
    from dailytip.model import Tip
    from dailytip.selectors.base import TipSelector

logger: DailyTipLogger = get_logger(__name__)

T = TypeVar("T")


class DefaultTipOrchestrator(Generic[T]):
    """Orchestrator over a cached tip set.

    Args:
        loader (TipLoader): Queried once, during construction.
        selector (TipSelector): Chooses a tip on each call.
        formatter (TipFormatter[T]): Renders the chosen tip.

    Raises:
        ConfigurationError: If ``loader`` is a poison loader.
        LoadError: Propagated from the loader.
    """

    def __init__(
        self,
        loader: TipLoader,
        selector: TipSelector,
        formatter: TipFormatter[T],
    ) -> None:
        self._tips: tuple[Tip, ...] = tuple(loader.get_tips())
        self._collection_title: str | None = collection_title_of(loader)
        self._selector: TipSelector = selector
        self._formatter: TipFormatter[T] = formatter
        logger.debug(
            "Orchestrator ready: %d tip(s), collection title %r",
            len(self._tips),
            self._collection_title,
        )

    @property
    def tips(self) -> tuple[Tip, ...]:
        """The tips cached at construction time."""
        return self._tips

    @property
    def collection_title(self) -> str | None:
        """The collection title cached at construction time, if any."""
        return self._collection_title

    def get_tip(self) -> T:
        """Select one of the cached tips and return it formatted.

        Returns:
            T: The formatter's output, unchanged.

        Raises:
            SelectionError: If no tips were loaded (raised by the selector).
            ConfigurationError: If the selector or formatter is a poison stand-in.
        """
        selected: Tip = self._selector.get_tip(self._tips)
        logger.trace("Formatting tip '%s'", selected.title)
        return self._formatter.format_tip(selected, self._collection_title)
