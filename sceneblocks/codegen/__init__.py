"""Block graph -> threeD script code generation."""

from .generator import (
    CodeGenerator,
    Order,
    boolean_literal,
    js_object,
    needs_parentheses,
    number_literal,
    quote,
)

__all__ = [
    "CodeGenerator",
    "Order",
    "boolean_literal",
    "js_object",
    "needs_parentheses",
    "number_literal",
    "quote",
]
