"""Flat catalogue mapping a block kind to its shape and code-generation rule."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Callable, Dict, Iterator, List, Mapping, Optional, Tuple, Union

from .ast import Block
from .fields import BlockShape

if TYPE_CHECKING:
    from .codegen.generator import CodeGenerator

logger = logging.getLogger(__name__)

TranspileResult = Union[str, Tuple[str, int]]
Transpile = Callable[[Block, "CodeGenerator"], TranspileResult]


class UnknownBlockError(KeyError):
    """Raised when a block kind has no registered definition."""

    def __init__(self, kind: str, available: List[str]) -> None:
        super().__init__(kind)
        self.kind = kind
        self.available = available

    def __str__(self) -> str:
        return f"Unknown block kind '{self.kind}'. Available: {', '.join(self.available) or '(none)'}"


@dataclass(frozen=True)
class BlockDefinition:
    shape: BlockShape
    transpile: Transpile
    # statement kinds whose runtime call must be awaited
    asynchronous: bool = False

    @property
    def kind(self) -> str:
        return self.shape.kind


class Registry:
    """Kind name -> :class:`BlockDefinition`."""

    def __init__(self) -> None:
        self._by_kind: Dict[str, BlockDefinition] = {}

    def register(self, definition: BlockDefinition) -> BlockDefinition:
        if definition.asynchronous and definition.shape.is_expression:
            raise ValueError(f"expression block {definition.kind!r} cannot be asynchronous")
        if definition.kind in self._by_kind:
            logger.warning("Overwriting block definition '%s'", definition.kind)
        self._by_kind[definition.kind] = definition
        return definition

    def block(self, shape: BlockShape, *, asynchronous: bool = False) -> Callable[[Transpile], Transpile]:
        """Decorator form of :meth:`register` for a transpile function."""

        def decorator(func: Transpile) -> Transpile:
            self.register(BlockDefinition(shape, func, asynchronous))
            return func

        return decorator

    def get(self, kind: str) -> BlockDefinition:
        try:
            return self._by_kind[kind]
        except KeyError:
            raise UnknownBlockError(kind, self.kinds()) from None

    def kinds(self) -> List[str]:
        return sorted(self._by_kind)

    def __contains__(self, kind: object) -> bool:
        return kind in self._by_kind

    def __iter__(self) -> Iterator[BlockDefinition]:
        return iter(self._by_kind.values())

    def __len__(self) -> int:
        return len(self._by_kind)

    def copy(self) -> "Registry":
        clone = Registry()
        clone._by_kind = dict(self._by_kind)
        return clone

    def new_block(
        self,
        kind: str,
        block_id: str,
        *,
        fields: Optional[Mapping[str, Any]] = None,
        inputs: Optional[Mapping[str, Optional[Block]]] = None,
        statements: Optional[Mapping[str, Optional[Block]]] = None,
        next: Optional[Block] = None,
        enabled: bool = True,
    ) -> Block:
        """Build a :class:`Block` whose output tag comes from the registered shape."""
        shape = self.get(kind).shape
        if next is not None and shape.is_expression:
            raise ValueError(f"expression block {kind!r} cannot have a next block")
        return Block(
            id=block_id,
            kind=kind,
            fields=dict(fields or {}),
            inputs=dict(inputs or {}),
            statements=dict(statements or {}),
            next=next,
            output=shape.output,
            enabled=enabled,
        )


BLOCKS = Registry()
