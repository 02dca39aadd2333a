from ..fields import BlockShape, FirstOfType, LabelField, StatementInput, VariableField
from ..registry import BLOCKS
from ..sockets import SocketTag


@BLOCKS.block(
    BlockShape(
        kind='onClick',
        inputs=(
            StatementInput(
                'EVENT',
                (
                    LabelField('when'),
                    VariableField('VAR', SocketTag.SHAPE, FirstOfType('item')),
                    LabelField('is clicked'),
                ),
            ),
        ),
        previous_statement=True,
        next_statement=True,
        colour=295,
        category='events',
        inputs_inline=True,
    )
)
def on_click(block, gen):
    variable = gen.variable(block, 'VAR')
    body = gen.statement_to_code(block, 'EVENT')
    handler = f'async () => {{\n{body}\n}}' if body else 'async () => {}'
    return gen.runtime_call(block, 'onClick', variable, handler)
