"""Shape descriptor blocks.

A shape block evaluates to ``[{ id, type, ... }]``; the runtime looks the
mesh up by the block id, so re-running a script updates shapes in place.
Primitive sizes fall back to their defaults, the material is mandatory.
"""

from ..codegen import Order, js_object, quote
from ..fields import BlockShape, DummyInput, LabelField, TextField, ValueInput
from ..registry import BLOCKS, BlockDefinition
from ..sockets import SocketTag, check

SHAPE_COLOUR = 180

# kind -> ((input name, descriptor key, label, default), ...)
PRIMITIVES = {
    'box': (('W', 'w', 'width', '1'), ('H', 'h', 'height', '1'), ('L', 'l', 'length', '1')),
    'sphere': (('W', 'w', 'diameter x', '1'), ('H', 'h', 'diameter y', '1'), ('L', 'l', 'diameter z', '1')),
    'cylinder': (('H', 'h', 'height', '1'), ('D', 'd', 'diameter', '1')),
    'cone': (('H', 'h', 'height', '1'), ('T', 't', 'top diameter', '0'), ('B', 'b', 'bottom diameter', '1')),
    'torus': (('D', 'd', 'diameter', '1'), ('T', 't', 'thickness', '0.5'), ('S', 's', 'tessellation', '32')),
    'capsule': (('H', 'h', 'height', '2'), ('D', 'd', 'diameter', '1')),
    'ramp': (('W', 'w', 'width', '1'), ('H', 'h', 'height', '1'), ('L', 'l', 'length', '1')),
    'wall': (('W', 'w', 'width', '1'), ('H', 'h', 'height', '1'), ('S', 's', 'tile size', '1'), ('R', 'r', 'rotation', '0')),
}


def _primitive_transpile(kind, sizes):
    def transpile(block, gen):
        material = gen.value_to_code(block, 'MATERIAL', Order.COMMA)
        if not material:
            return '', Order.ATOMIC
        size = js_object([(key, gen.value_to_code(block, name, Order.COMMA) or default) for name, key, _, default in sizes])
        entries = [('id', quote(block.id)), ('type', quote(kind)), ('size', size), ('material', material)]
        return f'[{js_object(entries)}]', Order.ATOMIC

    return transpile


for _kind, _sizes in PRIMITIVES.items():
    BLOCKS.register(
        BlockDefinition(
            BlockShape(
                kind=_kind,
                inputs=(DummyInput((LabelField(_kind),)),)
                + tuple(ValueInput(name, check(SocketTag.NUMBER), (LabelField(label),)) for name, _, label, _ in _sizes)
                + (ValueInput('MATERIAL', check(SocketTag.MATERIAL), (LabelField('material'),)),),
                output=SocketTag.SHAPE,
                colour=SHAPE_COLOUR,
                category='shapes',
            ),
            _primitive_transpile(_kind, _sizes),
        )
    )


@BLOCKS.block(
    BlockShape(
        kind='customObject',
        inputs=(
            DummyInput((LabelField('custom object'),)),
            DummyInput((LabelField('name'), TextField('NAME', 'default_id'))),
            ValueInput('SCALE', check(SocketTag.NUMBER), (LabelField('scale'),)),
            ValueInput('MATERIAL', check(SocketTag.MATERIAL), (LabelField('material'),)),
        ),
        output=SocketTag.SHAPE,
        colour=SHAPE_COLOUR,
        category='shapes',
        tooltip='Loads a custom 3D object from a predefined library using its name.',
    )
)
def custom_object(block, gen):
    scale = gen.value_to_code(block, 'SCALE', Order.COMMA) or '1'
    material = gen.value_to_code(block, 'MATERIAL', Order.COMMA) or 'null'
    entries = [
        ('id', quote(block.id)),
        ('type', quote('customObject')),
        ('name', quote(gen.field(block, 'NAME'))),
        ('scale', scale),
        ('material', material),
    ]
    return f'[{js_object(entries)}]', Order.ATOMIC
