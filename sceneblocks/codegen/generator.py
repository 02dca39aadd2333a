"""Block graph -> script text.

Value inputs are generated bottom-up into ``(code, order)`` fragments, statement
chains top-down in ``next`` order. The generator holds the workspace it reads
and a per-compile :class:`~sceneblocks.namespace.VariableNamespace`, so every
block rule is a pure function of ``(block, generator)``.
"""

from __future__ import annotations

import json
import logging
import math
import re
from enum import IntEnum
from typing import Any, Iterable, List, Optional, Tuple

from ..ast import Block, Fragment, Workspace
from ..config import CompileOptions, get_compile_options
from ..fields import UniqueName, VariableField
from ..namespace import RESERVED_WORDS, VariableNamespace, default_variable_name
from ..registry import BLOCKS, BlockDefinition, Registry
from ..runtime import runtime_operation

logger = logging.getLogger(__name__)

_INTEGER_RE = re.compile(r"[+-]?\d+")


class Order(IntEnum):
    """Operator precedence of an emitted expression, tightest first."""

    ATOMIC = 0
    MEMBER = 1
    FUNCTION_CALL = 2
    UNARY_NEGATION = 4
    MULTIPLICATION = 5
    ADDITION = 6
    RELATIONAL = 8
    EQUALITY = 9
    LOGICAL_AND = 13
    LOGICAL_OR = 14
    CONDITIONAL = 15
    ASSIGNMENT = 16
    COMMA = 18
    NONE = 99


def needs_parentheses(inner: int, outer: int) -> bool:
    if outer > inner:
        return False
    # equal orders at the extremes never bind ambiguously
    if outer == inner and outer in (Order.ATOMIC, Order.NONE):
        return False
    return True


def quote(text: Any) -> str:
    """Render ``text`` as a double-quoted script string literal.

    Colours, dropdown tokens and block ids pass through unchanged; anything
    else (free-form names) is escaped.
    """
    return json.dumps(str(text))


def number_literal(value: Any) -> Tuple[str, Order]:
    text = value.strip() if isinstance(value, str) else value
    integral = isinstance(text, int) and not isinstance(text, bool)
    if integral or (isinstance(text, str) and _INTEGER_RE.fullmatch(text)):
        # integral values keep every digit
        integer = int(text)
        return str(integer), (Order.UNARY_NEGATION if integer < 0 else Order.ATOMIC)
    try:
        number = float(value)
    except (TypeError, ValueError):
        logger.warning("Non-numeric number field %r; emitting 0", value)
        return "0", Order.ATOMIC
    if math.isnan(number) or math.isinf(number):
        logger.warning("Non-finite number field %r; emitting 0", value)
        return "0", Order.ATOMIC
    code = str(int(number)) if number.is_integer() else repr(number)
    return code, (Order.UNARY_NEGATION if number < 0 else Order.ATOMIC)


def boolean_literal(value: Any) -> str:
    if isinstance(value, str):
        return "true" if value.strip().upper() == "TRUE" else "false"
    return "true" if value else "false"


def js_object(entries: Iterable[Tuple[str, str]]) -> str:
    """``[("b", "5"), ("c", '"#fff"')]`` -> ``{ b: 5, c: "#fff" }``."""
    body = ", ".join(f"{key}: {value}" for key, value in entries)
    return f"{{ {body} }}" if body else "{}"


class CodeGenerator:
    def __init__(
        self,
        workspace: Workspace,
        registry: Optional[Registry] = None,
        options: Optional[CompileOptions] = None,
    ) -> None:
        self.workspace = workspace
        self.registry = registry if registry is not None else BLOCKS
        self.options = options if options is not None else get_compile_options()
        self.namespace = VariableNamespace(workspace, RESERVED_WORDS | {self.options.runtime_namespace})

    # -- lookups -----------------------------------------------------------

    def definition(self, block: Block) -> BlockDefinition:
        return self.registry.get(block.kind)

    def field(self, block: Block, name: str) -> Any:
        """Stored field value, or the shape's default when the field is unset."""
        value = block.fields.get(name)
        if value is not None:
            return value
        fld = self.definition(block).shape.field(name)
        if fld is None:
            return None
        if isinstance(fld, VariableField):
            return default_variable_name(self.workspace, fld)
        return getattr(fld, "default", None)

    def variable(self, block: Block, name: str) -> str:
        """Emitted identifier for the variable picked in field ``name``."""
        raw = block.fields.get(name)
        if raw is None or raw == "":
            fld = self.definition(block).shape.field(name)
            if not isinstance(fld, VariableField):
                raise KeyError(f"block {block.kind!r} has no variable field {name!r}")
            if isinstance(fld.default, UniqueName):
                return self.namespace.fresh_name(f"{block.id}:{name}", fld.default.prefix)
            raw = default_variable_name(self.workspace, fld)
        return self.namespace.resolve(str(raw))

    # -- expressions -------------------------------------------------------

    def fragment(self, block: Block) -> Fragment:
        if not block.enabled:
            return Fragment("", Order.ATOMIC)
        result = self.definition(block).transpile(block, self)
        if not isinstance(result, tuple) or len(result) != 2:
            raise TypeError(f"expression block {block.kind!r} must return (code, order), got {result!r}")
        code, order = result
        return Fragment(code, int(order))

    def value_to_code(self, block: Block, name: str, outer: int = Order.NONE) -> str:
        """Code of the expression plugged into input ``name``; ``""`` when nothing usable is connected."""
        child = block.inputs.get(name)
        if child is None:
            return ""
        frag = self.fragment(child)
        if not frag.code:
            return ""
        if needs_parentheses(frag.order, outer):
            return f"({frag.code})"
        return frag.code

    def number(self, value: Any) -> str:
        return number_literal(value)[0]

    # -- statements --------------------------------------------------------

    def statement_code(self, block: Block) -> str:
        """Code of a single statement block, ignoring its successors."""
        if not block.enabled:
            logger.debug("Skipping disabled block %s (%s)", block.id, block.kind)
            return ""
        result = self.definition(block).transpile(block, self)
        if not isinstance(result, str):
            raise TypeError(f"statement block {block.kind!r} must return a string, got {result!r}")
        if not result:
            logger.debug("Block %s (%s) produced no code", block.id, block.kind)
        return result.rstrip("\n")

    def chain_to_code(self, head: Optional[Block]) -> str:
        lines: List[str] = []
        current = head
        while current is not None:
            code = self.statement_code(current)
            if code.strip():
                lines.append(code)
            current = current.next
        return "\n".join(lines)

    def statement_to_code(self, block: Block, name: str) -> str:
        """Nested chain under statement input ``name``, each line indented."""
        body = self.chain_to_code(block.statements.get(name))
        if not body:
            return ""
        return "\n".join(self.options.indent + line if line else line for line in body.split("\n"))

    def runtime_call(self, block: Block, operation: str, *args: str) -> str:
        op = runtime_operation(operation, len(args))
        call = f"{self.options.runtime_namespace}.{op.name}({', '.join(args)});"
        if self.definition(block).asynchronous:
            return "await " + call
        return call
