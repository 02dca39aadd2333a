"""Variable naming: default pickers, fresh names and emitted identifiers."""

from __future__ import annotations

import logging
import re
from typing import Any, Dict, Iterable, List, Optional, Set

from .ast import Workspace
from .fields import BlockShape, CheckboxField, ColourField, DropdownField, FirstOfType, NumberField, TextField, UniqueName, VariableField
from .logging_utils import apply_debug_logging
from .sockets import SocketTag

logger = logging.getLogger(__name__)

RESERVED_WORDS = frozenset(
    {
        'await', 'break', 'case', 'catch', 'class', 'const', 'continue', 'debugger', 'default',
        'delete', 'do', 'else', 'enum', 'export', 'extends', 'false', 'finally', 'for', 'function',
        'if', 'implements', 'import', 'in', 'instanceof', 'interface', 'let', 'new', 'null',
        'package', 'private', 'protected', 'public', 'return', 'static', 'super', 'switch', 'this',
        'throw', 'true', 'try', 'typeof', 'var', 'void', 'while', 'with', 'yield', 'async',
        'undefined', 'NaN', 'Infinity', 'arguments', 'eval', 'window', 'document', 'console',
        'Math', 'JSON', 'Object', 'Array', 'String', 'Number', 'Boolean', 'Promise',
    }
)

_ILLEGAL_RE = re.compile(r'[^A-Za-z0-9_$]')


def first_variable_of_type(
    workspace: Workspace,
    tag: Optional[SocketTag],
    fallback: str,
    position: int = 0,
) -> str:
    """Return the name of the ``position``-th declared variable of type ``tag``.

    ``tag=None`` considers every declared variable. When fewer than
    ``position + 1`` matches exist the last match is used; with no match at all
    the ``fallback`` literal is returned.
    """
    matches = [var.name for var in workspace.variables if tag is None or var.type == tag]
    if not matches:
        return fallback
    return matches[min(position, len(matches) - 1)]


def unique_name_with_prefix(workspace: Workspace, prefix: str) -> str:
    """Return ``prefix_N`` for the smallest N >= 1 not used by a declared variable."""
    taken = {var.name for var in workspace.variables}
    counter = 1
    while True:
        candidate = f'{prefix}_{counter}'
        if candidate not in taken:
            return candidate
        counter += 1


def default_variable_name(workspace: Workspace, fld: VariableField) -> str:
    policy = fld.default
    if isinstance(policy, UniqueName):
        return unique_name_with_prefix(workspace, policy.prefix)
    if isinstance(policy, FirstOfType):
        tag = None if fld.lookup_any_type else fld.tag
        return first_variable_of_type(workspace, tag, policy.fallback, policy.position)
    raise TypeError(f'unsupported variable default {policy!r}')


def default_field_values(shape: BlockShape, workspace: Workspace) -> Dict[str, Any]:
    """Initial field values for a block of ``shape`` placed into ``workspace``."""
    values: Dict[str, Any] = {}
    for fld in shape.named_fields():
        if isinstance(fld, VariableField):
            values[fld.name] = default_variable_name(workspace, fld)
        elif isinstance(fld, (TextField, NumberField, ColourField, CheckboxField, DropdownField)):
            values[fld.name] = fld.default
    return values


def legal_identifier(name: str) -> str:
    text = _ILLEGAL_RE.sub('_', name.replace(' ', '_'))
    if not text:
        return 'unnamed'
    if text[0].isdigit():
        text = 'my_' + text
    return text


class VariableNamespace:
    """Per-compile mapping from variable references to emitted identifiers.

    Declared variables are bound in declaration order when the namespace is
    built, so identifiers never depend on the order blocks are visited.
    """

    def __init__(self, workspace: Workspace, reserved: Iterable[str] = RESERVED_WORDS) -> None:
        self.workspace = workspace
        self._reserved: Set[str] = set(reserved)
        self._by_key: Dict[str, str] = {}
        self._taken: Set[str] = set()
        self._fresh: List[str] = []
        for var in workspace.variables:
            self._bind(('id', var.id), var.name)

    def first_variable_of_type(self, tag: Optional[SocketTag], fallback: str, position: int = 0) -> str:
        return first_variable_of_type(self.workspace, tag, fallback, position)

    def unique_name_with_prefix(self, prefix: str) -> str:
        return unique_name_with_prefix(self.workspace, prefix)

    def resolve(self, raw: str) -> str:
        """Map a stored variable reference (id or name) to its emitted identifier."""
        var = self.workspace.lookup_variable(raw)
        if var is not None:
            return self._by_key[self._key(('id', var.id))]
        key = self._key(('name', raw))
        if key in self._by_key:
            return self._by_key[key]
        logger.debug('Variable reference %r is not declared; emitting it by name', raw)
        return self._bind(('name', raw), raw)

    def fresh_name(self, owner: str, prefix: str) -> str:
        """Hand out ``prefix_N`` for the variable a block creates without a stored name.

        Each ``owner`` (a block id and field) gets one name per compile; names
        already declared or handed out are skipped.
        """
        key = self._key(('fresh', owner))
        if key in self._by_key:
            return self._by_key[key]
        declared = {var.name for var in self.workspace.variables}
        counter = 1
        candidate = f'{prefix}_{counter}'
        while candidate in declared or candidate in self._taken or candidate in self._reserved:
            counter += 1
            candidate = f'{prefix}_{counter}'
        name = self._bind(('name', candidate), candidate)
        self._by_key[key] = name
        self._fresh.append(name)
        return name

    def identifiers(self) -> List[str]:
        """Identifiers of every declared variable, in declaration order."""
        return [self._by_key[self._key(('id', var.id))] for var in self.workspace.variables]

    def fresh_names(self) -> List[str]:
        return list(self._fresh)

    @staticmethod
    def _key(parts: tuple) -> str:
        return f'{parts[0]}:{parts[1]}'

    def _bind(self, parts: tuple, name: str) -> str:
        base = legal_identifier(name)
        candidate = base
        suffix = 1
        while candidate in self._taken or candidate in self._reserved:
            suffix += 1
            candidate = f'{base}{suffix}'
        self._taken.add(candidate)
        self._by_key[self._key(parts)] = candidate
        return candidate


apply_debug_logging(globals(), logger=logger, skip={'legal_identifier'})
