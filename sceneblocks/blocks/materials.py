"""Material blocks.

Materials are pure data: a PBR texture set picked from a dropdown, or a
flat texture with a colour. Each evaluates to a one-element descriptor list.
"""

from typing import Tuple

from ..codegen import Order, js_object, quote
from ..fields import BlockShape, ColourField, DropdownField, DummyInput, LabelField
from ..registry import BLOCKS, BlockDefinition
from ..sockets import SocketTag

MATERIAL_COLOUR = 100

# kind -> (label, texture sets, extra PBR properties)
PBR_MATERIALS = {
    'carpet': ('carpet:', ('Carpet006', 'Carpet008'), (('roughness', '1'),)),
    'chip': ('circuit board:', ('Chip001', 'Chip002', 'Chip004', 'Chip005'), (('metallic', '1.0'),)),
    'gravel': ('gravel:', ('Gravel026', 'Gravel035'), (('roughness', '1'),)),
    'snow': ('snow:', ('Snow004',), (('roughness', '1'),)),
    'woodfloor': ('wood floor:', ('WoodFloor042',), (('metallic', '1.0'), ('roughness', '0.9'))),
}

# kind -> (label, default colour)
COLOUR_MATERIALS = {
    'glass': ('glass color:', '#ffffff'),
    'matte': ('matte color:', '#ff4040'),
    'metal': ('metal color:', '#ffffff'),
}


def _texture_options(kind: str, names: Tuple[str, ...]) -> Tuple[Tuple[str, str], ...]:
    return tuple((name, f'{kind}/{name}') for name in names)


def _pbr_transpile(extra):
    def transpile(block, gen):
        entries = [('pbr', quote(gen.field(block, 'MATERIAL')))] + list(extra)
        return f'[ {js_object(entries)} ]', Order.ATOMIC

    return transpile


def _colour_transpile(texture: str):
    def transpile(block, gen):
        entries = [('texture', quote(texture)), ('color', quote(gen.field(block, 'MATERIAL')))]
        return f'[ {js_object(entries)} ]', Order.ATOMIC

    return transpile


for _kind, (_label, _names, _extra) in PBR_MATERIALS.items():
    BLOCKS.register(
        BlockDefinition(
            BlockShape(
                kind=_kind,
                inputs=(DummyInput((LabelField(_label), DropdownField('MATERIAL', _texture_options(_kind, _names)))),),
                output=SocketTag.MATERIAL,
                colour=MATERIAL_COLOUR,
                category='materials',
            ),
            _pbr_transpile(_extra),
        )
    )

for _kind, (_label, _default) in COLOUR_MATERIALS.items():
    BLOCKS.register(
        BlockDefinition(
            BlockShape(
                kind=_kind,
                inputs=(DummyInput((LabelField(_label), ColourField('MATERIAL', _default))),),
                output=SocketTag.MATERIAL,
                colour=MATERIAL_COLOUR,
                category='materials',
            ),
            _colour_transpile(_kind),
        )
    )
