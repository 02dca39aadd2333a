from sceneblocks import BLOCKS, Workspace, workspace_to_code


def num(value, block_id=None):
    return BLOCKS.new_block('math_number', block_id or f'num_{value}', fields={'NUM': value})


def coords(x=None, y=None, z=None, block_id='coords'):
    inputs = {}
    for axis, value in (('X', x), ('Y', y), ('Z', z)):
        if value is not None:
            inputs[axis] = num(value, f'{block_id}_{axis.lower()}')
    return BLOCKS.new_block('coordinates', block_id, inputs=inputs)


def chain(*blocks):
    """Link statement blocks through ``next`` and return the head."""
    for current, following in zip(blocks, blocks[1:]):
        current.next = following
    return blocks[0]


def compile_blocks(*tops, variables=None, **kwargs):
    return workspace_to_code(Workspace(list(tops), list(variables or [])), **kwargs)
