"""Declarative block shapes: fields, inputs and sockets.

A shape is plain data consumed by the editor (rendering, default field values)
and by :mod:`sceneblocks.validate`. Fields form a closed tagged union keyed by
``kind``; every variant is a frozen dataclass.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Optional, Tuple, Union

from .sockets import SocketTag, TagSet


@dataclass(frozen=True)
class LabelField:
    text: str
    name: Optional[str] = None
    kind: str = 'label'


@dataclass(frozen=True)
class TextField:
    name: str
    default: str = ''
    kind: str = 'text'


@dataclass(frozen=True)
class NumberField:
    name: str
    default: float = 0
    kind: str = 'number'


@dataclass(frozen=True)
class DropdownField:
    name: str
    options: Tuple[Tuple[str, str], ...]  # (label, value)
    kind: str = 'dropdown'

    @property
    def default(self) -> str:
        return self.options[0][1]

    def values(self) -> Tuple[str, ...]:
        return tuple(value for _, value in self.options)


@dataclass(frozen=True)
class ColourField:
    name: str
    default: str = '#ffffff'
    kind: str = 'colour'


@dataclass(frozen=True)
class CheckboxField:
    name: str
    default: bool = False
    kind: str = 'checkbox'


@dataclass(frozen=True)
class FirstOfType:
    """Default a variable picker to the ``position``-th declared variable of ``tag``."""

    fallback: str
    position: int = 0


@dataclass(frozen=True)
class UniqueName:
    """Default a variable picker to a fresh ``prefix_N`` name."""

    prefix: str


VariableDefault = Union[FirstOfType, UniqueName]


@dataclass(frozen=True)
class VariableField:
    name: str
    tag: Optional[SocketTag]
    default: VariableDefault = FirstOfType('item')
    # default lookup ignores ``tag`` and considers every declared variable
    lookup_any_type: bool = False
    kind: str = 'variable'


Field = Union[LabelField, TextField, NumberField, DropdownField, ColourField, CheckboxField, VariableField]


@dataclass(frozen=True)
class DummyInput:
    fields: Tuple[Field, ...] = ()
    kind: str = 'dummy'


@dataclass(frozen=True)
class ValueInput:
    name: str
    check: TagSet = None
    fields: Tuple[Field, ...] = ()
    kind: str = 'value'


@dataclass(frozen=True)
class StatementInput:
    name: str
    fields: Tuple[Field, ...] = ()
    kind: str = 'statement'


Input = Union[DummyInput, ValueInput, StatementInput]


@dataclass(frozen=True)
class BlockShape:
    kind: str
    inputs: Tuple[Input, ...] = ()
    output: Optional[SocketTag] = None
    previous_statement: bool = False
    next_statement: bool = False
    colour: int = 0
    category: str = ''
    inputs_inline: bool = False
    tooltip: str = ''

    def __post_init__(self) -> None:
        if self.output is not None and (self.previous_statement or self.next_statement):
            raise ValueError(f'block {self.kind!r} cannot both produce a value and chain as a statement')
        seen = set()
        for name in [inp.name for inp in self.inputs if not isinstance(inp, DummyInput)] + [
            f.name for f in self.fields() if f.name is not None
        ]:
            if name in seen:
                raise ValueError(f'block {self.kind!r} declares {name!r} twice')
            seen.add(name)

    @property
    def is_expression(self) -> bool:
        return self.output is not None

    def fields(self) -> Iterator[Field]:
        for inp in self.inputs:
            yield from inp.fields

    def named_fields(self) -> Iterator[Field]:
        for fld in self.fields():
            if not isinstance(fld, LabelField):
                yield fld

    def field(self, name: str) -> Optional[Field]:
        for fld in self.named_fields():
            if fld.name == name:
                return fld
        return None

    def value_inputs(self) -> Tuple[ValueInput, ...]:
        return tuple(inp for inp in self.inputs if isinstance(inp, ValueInput))

    def statement_inputs(self) -> Tuple[StatementInput, ...]:
        return tuple(inp for inp in self.inputs if isinstance(inp, StatementInput))

    def value_input(self, name: str) -> Optional[ValueInput]:
        for inp in self.value_inputs():
            if inp.name == name:
                return inp
        return None
