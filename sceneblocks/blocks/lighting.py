"""Light creation and control blocks."""

from ..codegen import Order, js_object, quote
from ..fields import (
    BlockShape,
    ColourField,
    DropdownField,
    DummyInput,
    FirstOfType,
    LabelField,
    UniqueName,
    ValueInput,
    VariableField,
)
from ..registry import BLOCKS
from ..sockets import SocketTag, check
from .actions import AXIS_OPTIONS, Action, colour_arg, coords_arg, light_arg, register_actions

LIGHT_COLOUR = 60


@BLOCKS.block(
    BlockShape(
        kind='createLightAs',
        inputs=(
            DummyInput((LabelField('create light'),)),
            ValueInput(
                'LIGHT',
                check(SocketTag.LIGHT),
                (LabelField('as'), VariableField('VAR', SocketTag.LIGHT, UniqueName('light'))),
            ),
            ValueInput('COORDS', check(SocketTag.COORDS), (LabelField('at coords'),)),
        ),
        previous_statement=True,
        next_statement=True,
        colour=LIGHT_COLOUR,
        category='lighting',
    ),
    asynchronous=True,
)
def create_light_as(block, gen):
    light = gen.value_to_code(block, 'LIGHT')
    coords = gen.value_to_code(block, 'COORDS')
    if not light or not coords:
        return ''
    variable = gen.variable(block, 'VAR')
    return f'{variable} = {light}; ' + gen.runtime_call(block, 'createLight', variable, coords)


@BLOCKS.block(
    BlockShape(
        kind='lightBulb',
        inputs=(
            DummyInput((LabelField('light bulb of color'), ColourField('COLOR', '#ffffff'))),
            ValueInput('B', check(SocketTag.NUMBER), (LabelField('brightness'),)),
        ),
        output=SocketTag.LIGHT,
        colour=LIGHT_COLOUR,
        category='lighting',
        tooltip='A light bulb with brightness and color',
    )
)
def light_bulb(block, gen):
    brightness = gen.value_to_code(block, 'B', Order.COMMA)
    if not brightness:
        return '', Order.ATOMIC
    props = js_object([('b', brightness), ('c', quote(gen.field(block, 'COLOR')))])
    return f'[{{ id: {quote(block.id)}, type: "lightbulb", props: {props}}}]', Order.ATOMIC


@BLOCKS.block(
    BlockShape(
        kind='moveLightAlong',
        inputs=(
            DummyInput((LabelField('move light'), VariableField('VAR', SocketTag.LIGHT, FirstOfType('light_1')))),
            ValueInput(
                'STEPS',
                check(SocketTag.NUMBER),
                (LabelField('along'), DropdownField('AXIS', AXIS_OPTIONS), LabelField('axis by')),
            ),
        ),
        previous_statement=True,
        next_statement=True,
        colour=LIGHT_COLOUR,
        category='lighting',
        inputs_inline=True,
    )
)
def move_light_along(block, gen):
    steps = gen.value_to_code(block, 'STEPS', Order.COMMA)
    if not steps:
        return ''
    variable = gen.variable(block, 'VAR')
    return gen.runtime_call(block, 'moveLightAlong', variable, quote(gen.field(block, 'AXIS')), steps)


@BLOCKS.block(
    BlockShape(
        kind='setAmbientLightIntensity',
        inputs=(
            ValueInput('INTENSITY', check(SocketTag.NUMBER), (LabelField('set brightness of ambient light to'),)),
        ),
        previous_statement=True,
        next_statement=True,
        colour=LIGHT_COLOUR,
        category='lighting',
    )
)
def set_ambient_light_intensity(block, gen):
    intensity = gen.value_to_code(block, 'INTENSITY', Order.COMMA)
    if not intensity:
        return ''
    return gen.runtime_call(block, 'setAmbientLightIntensity', intensity)


@BLOCKS.block(
    BlockShape(
        kind='setLightIntensity',
        inputs=(
            ValueInput(
                'INTENSITY',
                check(SocketTag.NUMBER),
                (
                    LabelField('set brightness of'),
                    VariableField('VAR', SocketTag.LIGHT, FirstOfType('light_1')),
                    LabelField('to'),
                ),
            ),
        ),
        previous_statement=True,
        next_statement=True,
        colour=LIGHT_COLOUR,
        category='lighting',
    )
)
def set_light_intensity(block, gen):
    intensity = gen.value_to_code(block, 'INTENSITY', Order.COMMA)
    if not intensity:
        return ''
    return gen.runtime_call(block, 'setLightIntensity', gen.variable(block, 'VAR'), intensity)


register_actions(
    (
        Action('moveLight', 'moveLight', 'move light', (light_arg(), coords_arg('to'))),
        Action(
            'setLightColor',
            'setLightColor',
            'set color of',
            (light_arg(), colour_arg('to')),
            tooltip='Changes the colour a light shines with.',
        ),
    ),
    LIGHT_COLOUR,
    'lighting',
)
