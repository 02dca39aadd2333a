import pytest

from sceneblocks import (
    BLOCKS,
    CompileOptions,
    ValidationError,
    Variable,
    Workspace,
    compile_chains,
    get_compile_options,
    set_compile_options,
    workspace_to_code,
)
from sceneblocks.sockets import SocketTag

from helpers import chain, coords, num


def test_empty_workspace_compiles_to_empty_text():
    assert workspace_to_code(Workspace()) == ''


def test_top_level_chains_keep_stored_order():
    first = chain(BLOCKS.new_block('setSkyColor', 'a', fields={'COLOR': '#111'}), BLOCKS.new_block('setMass', 'm', inputs={'MASS': num(1)}))
    second = BLOCKS.new_block('moveCamera', 'cam', inputs={'COORDS': coords(0, 0, 5)})

    chains = compile_chains(Workspace([first, second]))

    assert chains == [
        'threeD.setSkyColor("#111");\nthreeD.setMass(item, 1);',
        'threeD.moveCamera([{ x: 0, y: 0, z: 5 }]);',
    ]
    assert workspace_to_code(Workspace([second, first])).split('\n')[0] == chains[1]


def test_orphan_expressions_and_empty_chains_are_dropped():
    orphan = coords(1, 2, 3)
    incomplete = BLOCKS.new_block('moveCamera', 'cam')
    sky = BLOCKS.new_block('setSkyColor', 'sky')

    assert compile_chains(Workspace([orphan, incomplete, sky])) == ['threeD.setSkyColor("#000");']


def test_declare_variables_prepends_var_statement():
    variables = [Variable('v1', 'box one', SocketTag.SHAPE), Variable('v2', 'lamp', SocketTag.LIGHT)]
    sky = BLOCKS.new_block('setSkyColor', 'sky')

    code = workspace_to_code(Workspace([sky], variables), options=CompileOptions(declare_variables=True))

    assert code.split('\n') == ['var box_one, lamp;', 'threeD.setSkyColor("#000");']


def test_declare_variables_includes_names_of_unnamed_created_shapes():
    shape = BLOCKS.new_block('sphere', 'sp', inputs={'MATERIAL': BLOCKS.new_block('matte', 'm')})
    create = BLOCKS.new_block('createShapeAs', 'c', inputs={'SHAPE': shape, 'COORDS': coords()})
    variables = [Variable('v1', 'lamp', SocketTag.LIGHT)]

    code = workspace_to_code(Workspace([create], variables), options=CompileOptions(declare_variables=True))

    assert code.split('\n')[0] == 'var lamp, shape_1;'


def test_declare_variables_without_variables_adds_nothing():
    sky = BLOCKS.new_block('setSkyColor', 'sky')

    assert workspace_to_code(Workspace([sky]), options=CompileOptions(declare_variables=True)) == 'threeD.setSkyColor("#000");'


def test_validate_option_runs_validation_first():
    cam = BLOCKS.new_block('moveCamera', 'cam', inputs={'COORDS': num(3)})

    with pytest.raises(ValidationError):
        workspace_to_code(Workspace([cam]), options=CompileOptions(validate=True))


def test_module_options_are_copied_on_read():
    original = get_compile_options()
    try:
        set_compile_options(CompileOptions(indent='    '))
        options = get_compile_options()
        options.indent = '\t'
        assert get_compile_options().indent == '    '

        click = BLOCKS.new_block('onClick', 'click', statements={'EVENT': BLOCKS.new_block('setSkyColor', 'sky')})
        assert workspace_to_code(Workspace([click])) == (
            'threeD.onClick(item, async () => {\n    threeD.setSkyColor("#000");\n});'
        )
    finally:
        set_compile_options(original)


def test_runtime_namespace_is_configurable():
    sky = BLOCKS.new_block('setSkyColor', 'sky')

    code = workspace_to_code(Workspace([sky]), options=CompileOptions(runtime_namespace='scene'))

    assert code == 'scene.setSkyColor("#000");'
