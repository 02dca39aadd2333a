from ..fields import BlockShape, LabelField, DummyInput, ValueInput
from ..registry import BLOCKS
from ..sockets import SocketTag, check
from .actions import Action, axis_arg, number_arg, register_actions, shape_arg

CAMERA_COLOUR = 160


@BLOCKS.block(
    BlockShape(
        kind='moveCamera',
        inputs=(
            DummyInput((LabelField('move camera to'),)),
            ValueInput('COORDS', check(SocketTag.COORDS)),
        ),
        previous_statement=True,
        next_statement=True,
        colour=CAMERA_COLOUR,
        category='camera',
        inputs_inline=True,
    )
)
def move_camera(block, gen):
    coords = gen.value_to_code(block, 'COORDS')
    if not coords:
        return ''
    return gen.runtime_call(block, 'moveCamera', coords)


register_actions(
    (
        Action('moveCameraAlong', 'moveCameraAlong', 'move camera along', (axis_arg(), number_arg('UNITS', 'axis by'))),
        Action('pointCameraTowards', 'pointCameraTowards', 'point camera towards', (shape_arg(),)),
        Action(
            'keepDistanceOf',
            'keepDistanceOf',
            'keep camera at a distance of',
            (number_arg('UNITS'),),
            tooltip='Sets how far a following camera stays from its target.',
        ),
    ),
    CAMERA_COLOUR,
    'camera',
)
