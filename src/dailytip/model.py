# topmark:header:start
#
#   project      : DailyTip
#   file         : model.py
#   file_relpath : src/dailytip/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tip and collection value types.

Both types are frozen dataclasses: once a collection has been loaded nothing
mutates it. Composition (see `dailytip.loaders.composite`) derives new `Tip`
values with `dataclasses.replace` instead of editing the originals.

The ``from_mapping`` constructors validate the JSON collection shape::

    {
        "title": "Leadership Tone",
        "tips": [
            {"title": "Lead with questions", "tip": "Ask before you tell."}
        ]
    }

Extra keys are ignored.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from dailytip.errors import LoadError

# Key names in the collection source format
KEY_TITLE: str = "title"
KEY_TIPS: str = "tips"
KEY_TIP: str = "tip"


@dataclass(frozen=True, slots=True)
class Tip:
    """A single displayable tip.

    Attributes:
        title (str): Heading of the tip. By convention it does not end in
            ``" *fragment*"``; that suffix is reserved for collection tagging.
        tip (str): Body of the tip; may contain inline markdown (bold, italic,
            inline code, bullet lines).
    """

    title: str
    tip: str

    @classmethod
    def from_mapping(cls, data: Any) -> Tip:
        """Build a `Tip` from a parsed JSON object.

        Args:
            data (Any): The parsed JSON value.

        Returns:
            Tip: The validated tip.

        Raises:
            LoadError: If ``data`` is not an object or lacks string ``title``/``tip`` values.
        """
        if not isinstance(data, Mapping):
            raise LoadError(f"tip entry must be an object, got {type(data).__name__}")
        title: Any = data.get(KEY_TITLE)
        body: Any = data.get(KEY_TIP)
        if not isinstance(title, str):
            raise LoadError(f"tip entry is missing a string '{KEY_TITLE}'")
        if not isinstance(body, str):
            raise LoadError(f"tip entry '{title}' is missing a string '{KEY_TIP}'")
        return cls(title=title, tip=body)

    def to_dict(self) -> dict[str, str]:
        """Return the JSON shape of this tip."""
        return {KEY_TITLE: self.title, KEY_TIP: self.tip}


@dataclass(frozen=True, slots=True)
class TipCollection:
    """A named, ordered group of tips from one source.

    Attributes:
        title (str): Human-readable name of the collection (e.g. ``"Leadership Tone"``).
        tips (tuple[Tip, ...]): The tips in source order.
    """

    title: str
    tips: tuple[Tip, ...] = ()

    @classmethod
    def from_mapping(cls, data: Any) -> TipCollection:
        """Build a `TipCollection` from a parsed JSON document.

        Args:
            data (Any): The parsed JSON value (expected to be an object).

        Returns:
            TipCollection: The validated collection.

        Raises:
            LoadError: If the document is not an object, or ``title``/``tips`` are
                missing or of the wrong type, or any tip entry is malformed.
        """
        if not isinstance(data, Mapping):
            raise LoadError(f"collection must be an object, got {type(data).__name__}")
        if KEY_TITLE not in data:
            raise LoadError(f"collection is missing '{KEY_TITLE}'")
        if KEY_TIPS not in data:
            raise LoadError(f"collection is missing a '{KEY_TIPS}' array")
        title: Any = data[KEY_TITLE]
        raw_tips: Any = data[KEY_TIPS]
        if not isinstance(title, str):
            raise LoadError(f"collection '{KEY_TITLE}' must be a string")
        if not isinstance(raw_tips, list):
            raise LoadError(f"collection '{KEY_TIPS}' must be an array")
        return cls(title=title, tips=tuple(Tip.from_mapping(item) for item in raw_tips))

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON shape of this collection."""
        return {KEY_TITLE: self.title, KEY_TIPS: [t.to_dict() for t in self.tips]}
