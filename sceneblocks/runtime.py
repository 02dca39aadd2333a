"""Operations of the external ``threeD`` scene runtime that generated scripts call.

Only the call surface lives here; the runtime itself is provided by the host
application. Shape, light, material and coordinate arguments are descriptor
lists (``[{...}]``) that the runtime interprets.
"""

from dataclasses import dataclass
from typing import Dict, Tuple

RUNTIME_NAMESPACE = 'threeD'


@dataclass(frozen=True)
class RuntimeOperation:
    name: str
    params: Tuple[str, ...]


RUNTIME_OPERATIONS: Dict[str, RuntimeOperation] = {
    op.name: op
    for op in (
        RuntimeOperation('moveCamera', ('coords',)),
        RuntimeOperation('onClick', ('shape', 'handler')),
        RuntimeOperation('createLight', ('light', 'coords')),
        RuntimeOperation('moveLightAlong', ('light', 'axis', 'steps')),
        RuntimeOperation('setAmbientLightIntensity', ('intensity',)),
        RuntimeOperation('setLightIntensity', ('light', 'intensity')),
        RuntimeOperation('setMass', ('shape', 'mass')),
        RuntimeOperation('createShapeAndAddTo', ('shape', 'parent', 'coords')),
        RuntimeOperation('createShape', ('shape', 'coords')),
        RuntimeOperation('moveShapeTowardsShape', ('shape', 'target', 'steps', 'ignoreY')),
        RuntimeOperation('setSkyColor', ('color',)),
        RuntimeOperation('moveShape', ('shape', 'coords')),
        RuntimeOperation('moveShapeAlong', ('shape', 'axis', 'steps')),
        RuntimeOperation('rotate', ('shape', 'axis', 'degrees')),
        RuntimeOperation('clone', ('shape', 'coords')),
        RuntimeOperation('remove', ('shape',)),
        RuntimeOperation('setGravity', ('units',)),
        RuntimeOperation('applyForce', ('shape', 'axis', 'units')),
        RuntimeOperation('moveLight', ('light', 'coords')),
        RuntimeOperation('setLightColor', ('light', 'color')),
        RuntimeOperation('moveCameraAlong', ('axis', 'units')),
        RuntimeOperation('pointCameraTowards', ('shape',)),
        RuntimeOperation('keepDistanceOf', ('units',)),
    )
}


def runtime_operation(name: str, arity: int) -> RuntimeOperation:
    op = RUNTIME_OPERATIONS.get(name)
    if op is None:
        raise KeyError(f'{RUNTIME_NAMESPACE}.{name} is not part of the runtime surface')
    if len(op.params) != arity:
        raise ValueError(
            f'{RUNTIME_NAMESPACE}.{name} takes {len(op.params)} argument(s) '
            f'({", ".join(op.params)}), got {arity}'
        )
    return op
