from sceneblocks import BLOCKS, Registry, Workspace, block_definition_json, block_definitions_json, toolbox_json
from sceneblocks.fields import BlockShape, ValueInput
from sceneblocks.sockets import SocketTag


def test_statement_block_definition():
    definition = block_definition_json(BLOCKS.get('createShapeAs').shape)

    assert definition['type'] == 'createShapeAs'
    assert definition['message0'] == 'create shape %1'
    assert definition['args0'] == [{'type': 'input_dummy'}]
    assert definition['message1'] == 'as %1 %2'
    assert definition['args1'] == [
        {
            'type': 'field_variable',
            'name': 'VAR',
            'variable': 'shape_1',
            'variableTypes': ['SHAPE'],
            'defaultType': 'SHAPE',
        },
        {'type': 'input_value', 'name': 'SHAPE', 'check': ['SHAPE']},
    ]
    assert definition['previousStatement'] is None
    assert definition['nextStatement'] is None
    assert 'output' not in definition


def test_variable_default_follows_workspace():
    ws = Workspace()
    ws.create_variable('shape_1', SocketTag.SHAPE)

    definition = block_definition_json(BLOCKS.get('createShapeAs').shape, ws)

    assert definition['args1'][0]['variable'] == 'shape_2'


def test_expression_block_definition():
    definition = block_definition_json(BLOCKS.get('moveLightAlong').shape)
    number = block_definition_json(BLOCKS.get('math_number').shape)

    assert definition['args1'][0] == {'type': 'field_dropdown', 'name': 'AXIS', 'options': [['x', 'x'], ['y', 'y'], ['z', 'z']]}
    assert definition['message1'] == 'along %1 axis by %2'
    assert definition['inputsInline'] is True
    assert number['output'] == 'Number'
    assert number['args0'][0] == {'type': 'field_number', 'name': 'NUM', 'value': 0}
    assert 'previousStatement' not in number


def test_wildcard_input_has_no_check():
    shape = BlockShape('anything', (ValueInput('VALUE'),), previous_statement=True, tooltip='Takes anything')

    definition = block_definition_json(shape)

    assert definition['args0'] == [{'type': 'input_value', 'name': 'VALUE'}]
    assert definition['tooltip'] == 'Takes anything'


def test_toolbox_groups_by_category_in_registration_order():
    toolbox = toolbox_json(BLOCKS)
    categories = {category['name']: [entry['type'] for entry in category['contents']] for category in toolbox['contents']}

    assert toolbox['kind'] == 'categoryToolbox'
    assert categories['materials'] == ['carpet', 'chip', 'gravel', 'snow', 'woodfloor', 'glass', 'matte', 'metal']
    assert 'createShapeAs' in categories['world']
    assert categories['values'] == ['math_number', 'coordinates']


def test_block_definitions_cover_registry():
    registry = Registry()
    registry.register(BLOCKS.get('setSkyColor'))

    assert block_definitions_json(registry) == [
        {
            'type': 'setSkyColor',
            'message0': 'set color of sky to %1 %2',
            'args0': [{'type': 'field_colour', 'name': 'COLOR', 'colour': '#000'}, {'type': 'input_dummy'}],
            'previousStatement': None,
            'nextStatement': None,
            'colour': 250,
        }
    ]


def test_action_block_definition_lays_fields_before_their_input():
    definition = block_definition_json(BLOCKS.get('moveShapeAlong').shape)

    assert definition['message0'] == 'move shape %1 along %2 axis by %3'
    assert [arg['type'] for arg in definition['args0']] == ['field_variable', 'field_dropdown', 'input_value']
    assert definition['args0'][0]['variable'] == 'item'
    assert definition['args0'][2] == {'type': 'input_value', 'name': 'STEPS', 'check': ['Number']}
    assert 'message1' not in definition
