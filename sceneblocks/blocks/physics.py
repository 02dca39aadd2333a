from ..codegen import Order
from ..fields import BlockShape, FirstOfType, LabelField, ValueInput, VariableField
from ..registry import BLOCKS
from ..sockets import SocketTag, check
from .actions import Action, axis_arg, number_arg, register_actions, shape_arg

PHYSICS_COLOUR = 250


@BLOCKS.block(
    BlockShape(
        kind='setMass',
        inputs=(
            ValueInput(
                'MASS',
                check(SocketTag.NUMBER),
                (LabelField('set mass of'), VariableField('VAR', SocketTag.SHAPE, FirstOfType('item')), LabelField('to')),
            ),
        ),
        previous_statement=True,
        next_statement=True,
        colour=PHYSICS_COLOUR,
        category='physics',
    )
)
def set_mass(block, gen):
    mass = gen.value_to_code(block, 'MASS', Order.COMMA)
    if not mass:
        return ''
    return gen.runtime_call(block, 'setMass', gen.variable(block, 'VAR'), mass)


register_actions(
    (
        Action('setGravity', 'setGravity', 'set gravity to', (number_arg('UNITS'),)),
        Action(
            'applyForce',
            'applyForce',
            'apply force to',
            (shape_arg(), axis_arg('along'), number_arg('UNITS', 'axis of')),
        ),
    ),
    PHYSICS_COLOUR,
    'physics',
)
