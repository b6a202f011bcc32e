# topmark:header:start
#
#   project      : DailyTip
#   file         : builder.py
#   file_relpath : src/dailytip/builder.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Fluent assembly of a tip pipeline.

`DailyTipBuilder` holds four slots (loader, selector, formatter and
orchestrator factory). Every slot starts out as a *poison* implementation that
raises `ConfigurationError` when exercised, so a forgotten ``with_*()`` call
fails loudly instead of yielding an empty or garbage tip.

`build` performs no validation of its own. A missing loader surfaces while the
orchestrator is constructed; a missing selector or formatter on the first
``get_tip()``.

Example:
    ```python
    orchestrator = (
        DailyTipBuilder[str]()
        .with_loader(JsonTipLoader("tips.json"))
        .with_selector(RandomTipSelector())
        .with_formatter(ShellTipFormatter())
        .with_orchestrator(DefaultTipOrchestrator)
        .build()
    )
    print(orchestrator.get_tip())
    ```
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Generic, TypeVar

from dailytip.config.logging import get_logger
from dailytip.formatters.poison import PoisonTipFormatter
from dailytip.loaders.poison import PoisonTipLoader
from dailytip.orchestrator.poison import PoisonTipOrchestrator
from dailytip.selectors.poison import PoisonTipSelector

if TYPE_CHECKING:
    from typing_extensions import Self

    from dailytip.config.logging import DailyTipLogger
    from dailytip.formatters.base import TipFormatter
    from dailytip.loaders.base import TipLoader
    from dailytip.orchestrator.base import OrchestratorFactory, TipOrchestrator
    from dailytip.selectors.base import TipSelector

logger: DailyTipLogger = get_logger(__name__)

T = TypeVar("T")


class DailyTipBuilder(Generic[T]):
    """Builder for a `TipOrchestrator` with fail-fast defaults.

    Each ``with_*`` setter stores its argument and returns the same builder
    instance, enabling method chaining.
    """

    def __init__(self) -> None:
        self._loader: TipLoader = PoisonTipLoader()
        self._selector: TipSelector = PoisonTipSelector()
        self._formatter: TipFormatter[T] = PoisonTipFormatter()
        self._orchestrator: OrchestratorFactory[T] = PoisonTipOrchestrator

    def with_loader(self, loader: TipLoader) -> Self:
        """Set the loader.

        Args:
            loader (TipLoader): Source of tips.

        Returns:
            Self: This builder.
        """
        self._loader = loader
        return self

    def with_selector(self, selector: TipSelector) -> Self:
        """Set the selector.

        Args:
            selector (TipSelector): Selection strategy.

        Returns:
            Self: This builder.
        """
        self._selector = selector
        return self

    def with_formatter(self, formatter: TipFormatter[T]) -> Self:
        """Set the formatter.

        Args:
            formatter (TipFormatter[T]): Output renderer.

        Returns:
            Self: This builder.
        """
        self._formatter = formatter
        return self

    def with_orchestrator(self, orchestrator: OrchestratorFactory[T]) -> Self:
        """Set the orchestrator factory (typically an orchestrator class).

        Args:
            orchestrator (OrchestratorFactory[T]): Called by `build` with the
                loader, selector and formatter.

        Returns:
            Self: This builder.
        """
        self._orchestrator = orchestrator
        return self

    def build(self) -> TipOrchestrator[T]:
        """Construct the orchestrator from the current slots.

        Returns:
            TipOrchestrator[T]: The orchestrator.

        Raises:
            ConfigurationError: If the orchestrator factory loads from a poison loader.
            LoadError: Propagated from the loader.
        """
        logger.debug(
            "Building orchestrator %s with loader=%s selector=%s formatter=%s",
            getattr(self._orchestrator, "__name__", self._orchestrator),
            type(self._loader).__name__,
            type(self._selector).__name__,
            type(self._formatter).__name__,
        )
        return self._orchestrator(self._loader, self._selector, self._formatter)
