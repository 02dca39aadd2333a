"""Socket tags and the connection compatibility rule."""

from __future__ import annotations

from enum import Enum
from typing import FrozenSet, Optional, Union


class SocketTag(str, Enum):
    NUMBER = 'Number'
    SHAPE = 'SHAPE'
    LIGHT = 'LIGHT'
    MATERIAL = 'MATERIAL'
    COORDS = 'COORDS'

    def __str__(self) -> str:
        return self.value


# ``None`` is the wildcard: the input accepts any expression block.
TagSet = Optional[FrozenSet[SocketTag]]

ANY: TagSet = None

_BY_VALUE = {tag.value.lower(): tag for tag in SocketTag}


def parse_tag(text: Union[str, SocketTag]) -> SocketTag:
    if isinstance(text, SocketTag):
        return text
    tag = _BY_VALUE.get(str(text).strip().lower())
    if tag is None:
        known = ', '.join(t.value for t in SocketTag)
        raise ValueError(f'unknown socket tag {text!r} (expected one of: {known})')
    return tag


def check(*tags: Union[str, SocketTag]) -> FrozenSet[SocketTag]:
    """Build the accepted tag set of a value input."""
    if not tags:
        raise ValueError('an accepted tag set needs at least one tag; use ANY for a wildcard')
    return frozenset(parse_tag(tag) for tag in tags)


def accepts(accepted: TagSet, candidate: Optional[SocketTag]) -> bool:
    """Return True when a block producing ``candidate`` may plug into an input accepting ``accepted``.

    A candidate of ``None`` is a statement block and never fits a value input.
    """
    if candidate is None:
        return False
    if accepted is None:
        return True
    return candidate in accepted


def format_tag_set(accepted: TagSet) -> str:
    if accepted is None:
        return 'any'
    return '|'.join(sorted(tag.value for tag in accepted))

