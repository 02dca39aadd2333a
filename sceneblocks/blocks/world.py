"""Scene-level statements: placing shapes, moving them, the sky."""

from ..codegen import Order, boolean_literal, quote
from ..fields import (
    BlockShape,
    CheckboxField,
    ColourField,
    DummyInput,
    FirstOfType,
    LabelField,
    UniqueName,
    ValueInput,
    VariableField,
)
from ..registry import BLOCKS
from ..sockets import SocketTag, check
from .actions import Action, axis_arg, coords_arg, number_arg, register_actions, shape_arg

WORLD_COLOUR = 250


@BLOCKS.block(
    BlockShape(
        kind='createShapeAs',
        inputs=(
            DummyInput((LabelField('create shape'),)),
            ValueInput(
                'SHAPE',
                check(SocketTag.SHAPE),
                (LabelField('as'), VariableField('VAR', SocketTag.SHAPE, UniqueName('shape'))),
            ),
            ValueInput('COORDS', check(SocketTag.COORDS), (LabelField('at coords'),)),
        ),
        previous_statement=True,
        next_statement=True,
        colour=WORLD_COLOUR,
        category='world',
    ),
    asynchronous=True,
)
def create_shape_as(block, gen):
    shape = gen.value_to_code(block, 'SHAPE')
    coords = gen.value_to_code(block, 'COORDS')
    if not shape or not coords:
        return ''
    variable = gen.variable(block, 'VAR')
    return f'{variable} = {shape}; ' + gen.runtime_call(block, 'createShape', variable, coords)


@BLOCKS.block(
    BlockShape(
        kind='createShapeAndAddTo',
        inputs=(
            DummyInput((LabelField('create shape'),)),
            ValueInput(
                'SHAPE',
                check(SocketTag.SHAPE),
                (
                    LabelField('and add to'),
                    VariableField('VAR', SocketTag.SHAPE, FirstOfType('item'), lookup_any_type=True),
                ),
            ),
            ValueInput('COORDS', check(SocketTag.COORDS), (LabelField('at coords'),)),
        ),
        previous_statement=True,
        next_statement=True,
        colour=WORLD_COLOUR,
        category='world',
    ),
    asynchronous=True,
)
def create_shape_and_add_to(block, gen):
    shape = gen.value_to_code(block, 'SHAPE', Order.COMMA)
    coords = gen.value_to_code(block, 'COORDS', Order.COMMA)
    if not shape or not coords:
        return ''
    return gen.runtime_call(block, 'createShapeAndAddTo', shape, gen.variable(block, 'VAR'), coords)


@BLOCKS.block(
    BlockShape(
        kind='moveShapeTowardsShape',
        inputs=(
            DummyInput((LabelField('move shape'), VariableField('VAR_A', SocketTag.SHAPE, FirstOfType('shape_1')))),
            DummyInput(
                (LabelField('towards shape'), VariableField('VAR_B', SocketTag.SHAPE, FirstOfType('shape_2', position=1)))
            ),
            ValueInput('STEPS', check(SocketTag.NUMBER), (LabelField('by'),)),
            DummyInput((LabelField('units'), LabelField('ignore y-axis'), CheckboxField('IGNORE_Y', True))),
        ),
        previous_statement=True,
        next_statement=True,
        colour=WORLD_COLOUR,
        category='world',
        inputs_inline=True,
        tooltip='Moves the first shape towards the second shape by a specified number of units.',
    )
)
def move_shape_towards_shape(block, gen):
    steps = gen.value_to_code(block, 'STEPS', Order.COMMA) or '1'
    return gen.runtime_call(
        block,
        'moveShapeTowardsShape',
        gen.variable(block, 'VAR_A'),
        gen.variable(block, 'VAR_B'),
        steps,
        boolean_literal(gen.field(block, 'IGNORE_Y')),
    )


@BLOCKS.block(
    BlockShape(
        kind='setSkyColor',
        inputs=(DummyInput((LabelField('set color of sky to'), ColourField('COLOR', '#000'))),),
        previous_statement=True,
        next_statement=True,
        colour=WORLD_COLOUR,
        category='world',
    )
)
def set_sky_color(block, gen):
    return gen.runtime_call(block, 'setSkyColor', quote(gen.field(block, 'COLOR')))


register_actions(
    (
        Action('moveShape', 'moveShape', 'move shape', (shape_arg(), coords_arg('to'))),
        Action(
            'moveShapeAlong',
            'moveShapeAlong',
            'move shape',
            (shape_arg(), axis_arg('along'), number_arg('STEPS', 'axis by')),
        ),
        Action(
            'rotate',
            'rotate',
            'rotate shape',
            (shape_arg(), axis_arg('around'), number_arg('DEGREES', 'axis by')),
            tooltip='Rotates a shape around an axis by a number of degrees.',
        ),
        Action('clone', 'clone', 'clone shape', (shape_arg(), coords_arg('to'))),
        Action('remove', 'remove', 'remove shape', (shape_arg(),)),
    ),
    WORLD_COLOUR,
    'world',
)
