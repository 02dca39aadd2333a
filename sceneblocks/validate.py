from typing import Dict, List, Optional

from .ast import Block, Workspace
from .fields import DropdownField, VariableField
from .registry import BLOCKS, Registry, UnknownBlockError
from .sockets import accepts, format_tag_set


class ValidationError(Exception):
    pass


def _where(block: Block) -> str:
    return f'[block {block.id} ({block.kind})]'


def _check_variables(ws: Workspace) -> None:
    seen: Dict[str, str] = {}
    for var in ws.variables:
        if var.name in seen:
            raise ValidationError(f'variable name {var.name!r} is declared twice')
        seen[var.name] = var.id


def _check_block(block: Block, ws: Workspace, registry: Registry, slot: str) -> None:
    try:
        shape = registry.get(block.kind).shape
    except UnknownBlockError as exc:
        raise ValidationError(f'{_where(block)} {exc}') from exc

    if block.output != shape.output:
        raise ValidationError(f'{_where(block)} output tag {block.output} does not match its shape ({shape.output})')
    if slot == 'value' and not shape.is_expression:
        raise ValidationError(f'{_where(block)} statement block plugged into a value input')
    if slot == 'statement' and shape.is_expression:
        raise ValidationError(f'{_where(block)} expression block used as a statement')
    if block.next is not None and not shape.next_statement:
        raise ValidationError(f'{_where(block)} cannot be followed by another block')

    for name, child in block.inputs.items():
        inp = shape.value_input(name)
        if inp is None:
            raise ValidationError(f'{_where(block)} has no value input "{name}"')
        # statement children are reported when the child itself is visited
        if child is None or not child.is_expression:
            continue
        if not accepts(inp.check, child.output):
            raise ValidationError(
                f'{_where(block)} input "{name}" accepts {format_tag_set(inp.check)}, '
                f'got {child.output} from block {child.id}'
            )

    statement_names = {inp.name for inp in shape.statement_inputs()}
    for name in block.statements:
        if name not in statement_names:
            raise ValidationError(f'{_where(block)} has no statement input "{name}"')

    for name, value in block.fields.items():
        fld = shape.field(name)
        if fld is None:
            raise ValidationError(f'{_where(block)} has no field "{name}"')
        if isinstance(fld, DropdownField) and value not in fld.values():
            raise ValidationError(f'{_where(block)} field "{name}" must be one of {", ".join(fld.values())} (got {value!r})')
        if isinstance(fld, VariableField) and value:
            var = ws.lookup_variable(str(value))
            if var is not None and fld.tag is not None and var.type is not None and var.type != fld.tag:
                raise ValidationError(
                    f'{_where(block)} field "{name}" expects a {fld.tag} variable, '
                    f'{var.name!r} is {var.type}'
                )


def _visit(block: Block, ws: Workspace, registry: Registry, slot: str, seen_ids: Dict[str, Block]) -> None:
    current: Optional[Block] = block
    while current is not None:
        previous = seen_ids.get(current.id)
        if previous is not None:
            if previous is current:
                raise ValidationError(f'{_where(current)} is linked into the workspace twice')
            raise ValidationError(f'{_where(current)} block id is not unique')
        seen_ids[current.id] = current
        _check_block(current, ws, registry, slot)
        for child in current.inputs.values():
            if child is not None:
                _visit(child, ws, registry, 'value', seen_ids)
        for head in current.statements.values():
            if head is not None:
                _visit(head, ws, registry, 'statement', seen_ids)
        if slot == 'value':
            break
        current = current.next


def validate(ws: Workspace, registry: Optional[Registry] = None) -> None:
    """Re-check the invariants the editor enforces when blocks are connected.

    Raises :class:`ValidationError` on the first violation.
    """
    registry = registry if registry is not None else BLOCKS
    _check_variables(ws)
    seen_ids: Dict[str, Block] = {}
    for top in ws.blocks:
        _visit(top, ws, registry, 'top', seen_ids)


def collect_errors(ws: Workspace, registry: Optional[Registry] = None) -> List[str]:
    """Like :func:`validate` but checks each top-level chain separately and returns messages."""
    registry = registry if registry is not None else BLOCKS
    errors: List[str] = []
    try:
        _check_variables(ws)
    except ValidationError as exc:
        errors.append(str(exc))
    seen_ids: Dict[str, Block] = {}
    for top in ws.blocks:
        try:
            _visit(top, ws, registry, 'top', seen_ids)
        except ValidationError as exc:
            errors.append(str(exc))
    return errors
