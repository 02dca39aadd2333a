"""Statement blocks that pass their fields and inputs straight to one runtime operation.

Each action is a row: the block kind, the runtime operation it calls, a
leading label and its arguments in call order. An argument is a variable
picker, an axis dropdown, a colour or a mandatory value input; a block with
an unconnected value input emits nothing.
"""

from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from ..codegen import Order, quote
from ..fields import (
    BlockShape,
    ColourField,
    DropdownField,
    DummyInput,
    FirstOfType,
    LabelField,
    ValueInput,
    VariableField,
)
from ..registry import BLOCKS, BlockDefinition, Registry
from ..sockets import SocketTag, check

AXIS_OPTIONS = (('x', 'x'), ('y', 'y'), ('z', 'z'))


@dataclass(frozen=True)
class Arg:
    role: str  # 'variable' | 'axis' | 'colour' | 'value'
    name: str
    label: str = ''
    tag: Optional[SocketTag] = None
    default: str = ''


def shape_arg(label: str = '', name: str = 'VAR') -> Arg:
    return Arg('variable', name, label, SocketTag.SHAPE, 'item')


def light_arg(label: str = '', name: str = 'VAR') -> Arg:
    return Arg('variable', name, label, SocketTag.LIGHT, 'light_1')


def axis_arg(label: str = '') -> Arg:
    return Arg('axis', 'AXIS', label)


def number_arg(name: str, label: str = '') -> Arg:
    return Arg('value', name, label, SocketTag.NUMBER)


def coords_arg(label: str = '') -> Arg:
    return Arg('value', 'COORDS', label, SocketTag.COORDS)


def colour_arg(label: str = '', default: str = '#ffffff') -> Arg:
    return Arg('colour', 'COLOR', label, default=default)


@dataclass(frozen=True)
class Action:
    kind: str
    operation: str
    label: str
    args: Tuple[Arg, ...]
    tooltip: str = ''


def _field(arg: Arg):
    if arg.role == 'variable':
        return VariableField(arg.name, arg.tag, FirstOfType(arg.default))
    if arg.role == 'axis':
        return DropdownField(arg.name, AXIS_OPTIONS)
    if arg.role == 'colour':
        return ColourField(arg.name, arg.default)
    raise ValueError(f'unknown argument role {arg.role!r}')


def action_shape(action: Action, colour: int, category: str) -> BlockShape:
    inputs = []
    pending: List = [LabelField(action.label)]
    for arg in action.args:
        if arg.label:
            pending.append(LabelField(arg.label))
        if arg.role == 'value':
            inputs.append(ValueInput(arg.name, check(arg.tag), tuple(pending)))
            pending = []
        else:
            pending.append(_field(arg))
    if pending:
        inputs.append(DummyInput(tuple(pending)))
    return BlockShape(
        kind=action.kind,
        inputs=tuple(inputs),
        previous_statement=True,
        next_statement=True,
        colour=colour,
        category=category,
        inputs_inline=True,
        tooltip=action.tooltip,
    )


def _transpile(action: Action):
    def transpile(block, gen):
        values = []
        for arg in action.args:
            if arg.role == 'variable':
                values.append(gen.variable(block, arg.name))
            elif arg.role == 'value':
                code = gen.value_to_code(block, arg.name, Order.COMMA)
                if not code:
                    return ''
                values.append(code)
            else:
                values.append(quote(gen.field(block, arg.name)))
        return gen.runtime_call(block, action.operation, *values)

    return transpile


def register_actions(
    actions: Sequence[Action], colour: int, category: str, registry: Registry = BLOCKS
) -> None:
    for action in actions:
        registry.register(BlockDefinition(action_shape(action, colour, category), _transpile(action)))
