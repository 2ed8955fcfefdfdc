"""Declaration model: a ``property: value`` pair located in a document."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class Declaration:
    """A single declaration found in a stylesheet.

    ``start`` is the offset of the property name in the document and
    ``between`` is the raw text separating property from value (``": "``).
    ``value`` is writable; fixing replaces it with the rewritten value while
    ``original_value`` keeps what the document contained. An ``!important``
    flag is not part of ``value``; it is recorded in ``important`` and left
    untouched in the document.
    """

    prop: str
    value: str
    start: int = 0
    between: str = ":"
    important: bool = False
    original_value: str = field(default="", repr=False)

    def __post_init__(self) -> None:
        if not self.original_value:
            self.original_value = self.value

    @property
    def value_start(self) -> int:
        return self.start + len(self.prop) + len(self.between)

    @property
    def value_end(self) -> int:
        return self.value_start + len(self.original_value)

    @property
    def is_modified(self) -> bool:
        return self.value != self.original_value
