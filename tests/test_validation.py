import pytest

from sceneblocks import BLOCKS, Block, Variable, Workspace
from sceneblocks.sockets import SocketTag
from sceneblocks.validate import ValidationError, collect_errors, validate

from helpers import chain, coords, num


def valid_workspace():
    bulb = BLOCKS.new_block('lightBulb', 'bulb', inputs={'B': num(5)})
    box = BLOCKS.new_block('box', 'box', inputs={'MATERIAL': BLOCKS.new_block('carpet', 'carpet')})
    head = chain(
        BLOCKS.new_block('createLightAs', 'cl', fields={'VAR': 'v1'}, inputs={'LIGHT': bulb, 'COORDS': coords()}),
        BLOCKS.new_block('createShapeAs', 'cs', fields={'VAR': 'v2'}, inputs={'SHAPE': box, 'COORDS': coords(block_id='c2')}),
        BLOCKS.new_block('moveLightAlong', 'ml', fields={'VAR': 'v1', 'AXIS': 'z'}, inputs={'STEPS': num(2, 'two')}),
        BLOCKS.new_block(
            'onClick', 'click', fields={'VAR': 'v2'}, statements={'EVENT': BLOCKS.new_block('setSkyColor', 'sky')}
        ),
    )
    variables = [Variable('v1', 'light_1', SocketTag.LIGHT), Variable('v2', 'shape_1', SocketTag.SHAPE)]
    return Workspace([head], variables)


def test_validate_accepts_valid_workspace():
    validate(valid_workspace())


def test_type_mismatched_connection_is_rejected():
    cam = BLOCKS.new_block('moveCamera', 'cam', inputs={'COORDS': num(3)})

    with pytest.raises(ValidationError) as exc:
        validate(Workspace([cam]))

    assert 'input "COORDS" accepts COORDS, got Number' in str(exc.value)


def test_statement_block_in_value_input_is_rejected():
    cam = BLOCKS.new_block('moveCamera', 'cam', inputs={'COORDS': BLOCKS.new_block('setSkyColor', 'sky')})

    with pytest.raises(ValidationError) as exc:
        validate(Workspace([cam]))

    assert 'statement block plugged into a value input' in str(exc.value)


def test_expression_block_in_statement_input_is_rejected():
    click = BLOCKS.new_block('onClick', 'click', statements={'EVENT': num(1)})

    with pytest.raises(ValidationError) as exc:
        validate(Workspace([click]))

    assert 'expression block used as a statement' in str(exc.value)


def test_chained_expression_block_is_rejected():
    number = Block('n', 'math_number', fields={'NUM': 1}, output=SocketTag.NUMBER, next=BLOCKS.new_block('setSkyColor', 's'))

    with pytest.raises(ValidationError) as exc:
        validate(Workspace([number]))

    assert 'cannot be followed' in str(exc.value)


def test_output_tag_must_match_shape():
    number = Block('n', 'math_number', output=SocketTag.SHAPE)

    with pytest.raises(ValidationError) as exc:
        validate(Workspace([number]))

    assert 'does not match its shape' in str(exc.value)


def test_unknown_kind_is_reported():
    with pytest.raises(ValidationError) as exc:
        validate(Workspace([Block('x', 'teleport')]))

    assert "Unknown block kind 'teleport'" in str(exc.value)


@pytest.mark.parametrize(
    'block, message_part',
    [
        (Block('s', 'setSkyColor', inputs={'COLOR': None}), 'has no value input "COLOR"'),
        (Block('s', 'setSkyColor', statements={'DO': None}), 'has no statement input "DO"'),
        (Block('s', 'setSkyColor', fields={'COLOUR': '#fff'}), 'has no field "COLOUR"'),
        (Block('m', 'moveLightAlong', fields={'AXIS': 'w'}), 'field "AXIS" must be one of x, y, z'),
    ],
)
def test_undeclared_names_and_bad_options(block, message_part):
    with pytest.raises(ValidationError) as exc:
        validate(Workspace([block]))

    assert message_part in str(exc.value)


def test_variable_type_must_match_field():
    mass = BLOCKS.new_block('setMass', 'm', fields={'VAR': 'v1'}, inputs={'MASS': num(1)})
    ws = Workspace([mass], [Variable('v1', 'lamp', SocketTag.LIGHT)])

    with pytest.raises(ValidationError) as exc:
        validate(ws)

    assert "expects a SHAPE variable, 'lamp' is LIGHT" in str(exc.value)


def test_undeclared_variable_reference_is_allowed():
    mass = BLOCKS.new_block('setMass', 'm', fields={'VAR': 'ghost'}, inputs={'MASS': num(1)})

    validate(Workspace([mass]))


def test_block_ids_must_be_unique():
    head = chain(BLOCKS.new_block('setSkyColor', 'dup'), BLOCKS.new_block('setSkyColor', 'dup'))

    with pytest.raises(ValidationError) as exc:
        validate(Workspace([head]))

    assert 'block id is not unique' in str(exc.value)


def test_shared_block_is_rejected():
    sky = BLOCKS.new_block('setSkyColor', 'sky')

    with pytest.raises(ValidationError) as exc:
        validate(Workspace([sky, sky]))

    assert 'linked into the workspace twice' in str(exc.value)


def test_variable_names_must_be_unique():
    ws = Workspace([], [Variable('v1', 'box'), Variable('v2', 'box')])

    with pytest.raises(ValidationError) as exc:
        validate(ws)

    assert "'box' is declared twice" in str(exc.value)


def test_collect_errors_reports_each_chain():
    bad_camera = BLOCKS.new_block('moveCamera', 'cam', inputs={'COORDS': num(3)})
    bad_light = BLOCKS.new_block('moveLightAlong', 'ml', fields={'AXIS': 'q'})
    fine = BLOCKS.new_block('setSkyColor', 'sky')

    errors = collect_errors(Workspace([bad_camera, fine, bad_light]))

    assert len(errors) == 2
    assert 'cam' in errors[0]
    assert 'AXIS' in errors[1]
    assert collect_errors(valid_workspace()) == []
