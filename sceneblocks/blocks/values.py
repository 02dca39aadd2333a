"""Literal value blocks: numbers and coordinates."""

from ..codegen import Order, js_object, number_literal
from ..fields import BlockShape, DummyInput, LabelField, NumberField, ValueInput
from ..registry import BLOCKS
from ..sockets import SocketTag, check

AXES = ('X', 'Y', 'Z')


@BLOCKS.block(
    BlockShape(
        kind='math_number',
        inputs=(DummyInput((NumberField('NUM', 0),)),),
        output=SocketTag.NUMBER,
        colour=230,
        category='values',
    )
)
def math_number(block, gen):
    return number_literal(gen.field(block, 'NUM'))


@BLOCKS.block(
    BlockShape(
        kind='coordinates',
        inputs=tuple(
            ValueInput(axis, check(SocketTag.NUMBER), (LabelField(axis.lower() + ':'),)) for axis in AXES
        ),
        output=SocketTag.COORDS,
        colour=250,
        category='values',
        inputs_inline=True,
        tooltip='A position in the scene.',
    )
)
def coordinates(block, gen):
    parts = [(axis.lower(), gen.value_to_code(block, axis, Order.COMMA) or '0') for axis in AXES]
    return f'[{js_object(parts)}]', Order.ATOMIC
