# topmark:header:start
#
#   project      : DailyTip
#   file         : base.py
#   file_relpath : src/dailytip/orchestrator/base.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Type contracts for orchestrators.

An orchestrator binds a loaded tip set to a selector and a formatter and
answers one question: "give me one formatted tip". `DailyTipBuilder` creates
orchestrators through an `OrchestratorFactory`, which is normally just an
orchestrator class.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, TypeVar

if TYPE_CHECKING:
    from dailytip.formatters.base import TipFormatter
    from dailytip.loaders.base import TipLoader
    from dailytip.selectors.base import TipSelector

T = TypeVar("T")
T_co = TypeVar("T_co", covariant=True)


class TipOrchestrator(Protocol[T_co]):
    """Protocol for producing formatted tips on demand."""

    def get_tip(self) -> T_co:
        """Select and format one tip.

        Returns:
            T_co: The formatter's output for the selected tip.
        """
        ...


class OrchestratorFactory(Protocol[T]):
    """Callable (usually a class) that builds an orchestrator from its three stages."""

    def __call__(
        self,
        loader: TipLoader,
        selector: TipSelector,
        formatter: TipFormatter[T],
    ) -> TipOrchestrator[T]:
        """Construct an orchestrator."""
        ...
