"""Render block shapes as editor JSON block definitions and a toolbox."""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from .ast import Workspace
from .fields import (
    BlockShape,
    CheckboxField,
    ColourField,
    DropdownField,
    DummyInput,
    LabelField,
    NumberField,
    StatementInput,
    TextField,
    ValueInput,
    VariableField,
)
from .namespace import default_variable_name
from .registry import Registry


def _field_arg(fld: Any, workspace: Workspace) -> Dict[str, Any]:
    if isinstance(fld, LabelField):
        arg: Dict[str, Any] = {"type": "field_label", "text": fld.text}
        if fld.name:
            arg["name"] = fld.name
        return arg
    if isinstance(fld, TextField):
        return {"type": "field_input", "name": fld.name, "text": fld.default}
    if isinstance(fld, NumberField):
        return {"type": "field_number", "name": fld.name, "value": fld.default}
    if isinstance(fld, DropdownField):
        return {"type": "field_dropdown", "name": fld.name, "options": [list(option) for option in fld.options]}
    if isinstance(fld, ColourField):
        return {"type": "field_colour", "name": fld.name, "colour": fld.default}
    if isinstance(fld, CheckboxField):
        return {"type": "field_checkbox", "name": fld.name, "checked": bool(fld.default)}
    if isinstance(fld, VariableField):
        arg = {"type": "field_variable", "name": fld.name, "variable": default_variable_name(workspace, fld)}
        if fld.tag is not None:
            arg["variableTypes"] = [fld.tag.value]
            arg["defaultType"] = fld.tag.value
        return arg
    raise TypeError(f"unsupported field {fld!r}")


def _input_arg(inp: Any) -> Dict[str, Any]:
    if isinstance(inp, ValueInput):
        arg: Dict[str, Any] = {"type": "input_value", "name": inp.name}
        if inp.check is not None:
            arg["check"] = sorted(tag.value for tag in inp.check)
        return arg
    if isinstance(inp, StatementInput):
        return {"type": "input_statement", "name": inp.name}
    if isinstance(inp, DummyInput):
        return {"type": "input_dummy"}
    raise TypeError(f"unsupported input {inp!r}")


def block_definition_json(shape: BlockShape, workspace: Optional[Workspace] = None) -> Dict[str, Any]:
    """One ``messageN``/``argsN`` pair per input: unnamed labels inline, every other field and the input as ``%k``."""
    workspace = workspace if workspace is not None else Workspace()
    definition: Dict[str, Any] = {"type": shape.kind}
    for index, inp in enumerate(shape.inputs):
        parts: List[str] = []
        args: List[Dict[str, Any]] = []
        for fld in inp.fields:
            if isinstance(fld, LabelField) and fld.name is None:
                parts.append(fld.text.replace("%", "%%"))
                continue
            args.append(_field_arg(fld, workspace))
            parts.append(f"%{len(args)}")
        args.append(_input_arg(inp))
        parts.append(f"%{len(args)}")
        definition[f"message{index}"] = " ".join(parts)
        definition[f"args{index}"] = args

    if shape.output is not None:
        definition["output"] = shape.output.value
    if shape.previous_statement:
        definition["previousStatement"] = None
    if shape.next_statement:
        definition["nextStatement"] = None
    definition["colour"] = shape.colour
    if shape.inputs_inline:
        definition["inputsInline"] = True
    if shape.tooltip:
        definition["tooltip"] = shape.tooltip
    return definition


def block_definitions_json(registry: Registry, workspace: Optional[Workspace] = None) -> List[Dict[str, Any]]:
    return [block_definition_json(definition.shape, workspace) for definition in registry]


def toolbox_json(registry: Registry) -> Dict[str, Any]:
    """Category toolbox; categories and blocks keep registration order."""
    categories: Dict[str, List[Dict[str, str]]] = {}
    for definition in registry:
        name = definition.shape.category or "misc"
        categories.setdefault(name, []).append({"kind": "block", "type": definition.kind})
    return {
        "kind": "categoryToolbox",
        "contents": [{"kind": "category", "name": name, "contents": contents} for name, contents in categories.items()],
    }
