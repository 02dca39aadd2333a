"""Editor workspace JSON <-> :class:`~sceneblocks.ast.Workspace`.

The editor serialises a workspace as::

    {"blocks": {"languageVersion": 0, "blocks": [ ...top-level blocks... ]},
     "variables": [{"name": "shape_1", "id": "k3", "type": "SHAPE"}]}

where each block carries ``fields``, ``inputs`` (``{"NAME": {"block": ..., "shadow": ...}}``,
used for both value and statement sockets) and ``next`` (``{"block": ...}``).

A statement chain nests one level deeper per block, so ``next`` links are
validated and built one block at a time rather than by model recursion.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Dict, List, Mapping, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .ast import Block, Variable, Workspace
from .registry import BLOCKS, Registry
from .sockets import SocketTag, parse_tag

logger = logging.getLogger(__name__)


class WorkspaceFormatError(ValueError):
    """Raised when a workspace document does not match the editor format."""


class SerializedVariable(BaseModel):
    model_config = ConfigDict(extra="ignore")

    name: str = Field(..., min_length=1)
    id: str = Field(..., min_length=1)
    type: Optional[SocketTag] = None

    @field_validator("type", mode="before")
    def _parse_type(cls, value: Any) -> Optional[SocketTag]:
        if value is None or value == "":
            return None
        return parse_tag(value)


class SerializedConnection(BaseModel):
    model_config = ConfigDict(extra="ignore")

    block: Optional[SerializedBlock] = None
    shadow: Optional[SerializedBlock] = None

    def target(self) -> Optional[SerializedBlock]:
        # a shadow stands in until a real block is attached
        return self.block if self.block is not None else self.shadow


class SerializedBlock(BaseModel):
    model_config = ConfigDict(extra="ignore")

    type: str = Field(..., min_length=1)
    id: str = Field(..., min_length=1)
    x: Optional[float] = None
    y: Optional[float] = None
    fields: Dict[str, Any] = Field(default_factory=dict)
    inputs: Dict[str, SerializedConnection] = Field(default_factory=dict)
    # left raw; see _build_chain
    next: Optional[Dict[str, Any]] = None
    enabled: bool = True

    @field_validator("fields", mode="before")
    def _unwrap_variable_refs(cls, value: Any) -> Any:
        if not isinstance(value, dict):
            return value
        return {key: item["id"] if isinstance(item, dict) and "id" in item else item for key, item in value.items()}


SerializedConnection.model_rebuild()
SerializedBlock.model_rebuild()


class SerializedBlockList(BaseModel):
    model_config = ConfigDict(extra="ignore")

    languageVersion: int = 0
    blocks: List[SerializedBlock] = Field(default_factory=list)


class SerializedWorkspace(BaseModel):
    model_config = ConfigDict(extra="ignore")

    blocks: SerializedBlockList = Field(default_factory=SerializedBlockList)
    variables: List[SerializedVariable] = Field(default_factory=list)


def _format_error(exc: Exception) -> WorkspaceFormatError:
    return WorkspaceFormatError(f"invalid workspace document: {exc}")


def _successor(data: SerializedBlock) -> Optional[SerializedBlock]:
    if data.next is None:
        return None
    try:
        connection = SerializedConnection.model_validate(data.next)
    except ValidationError as exc:
        raise _format_error(exc) from exc
    return connection.target()


def _build_block(data: SerializedBlock, registry: Registry) -> Block:
    """Build one block with its inputs; ``next`` is linked by :func:`_build_chain`."""
    shape = registry.get(data.type).shape
    statement_names = {inp.name for inp in shape.statement_inputs()}

    inputs: Dict[str, Optional[Block]] = {}
    statements: Dict[str, Optional[Block]] = {}
    for name, connection in data.inputs.items():
        target = connection.target()
        child = _build_chain(target, registry) if target is not None else None
        if name in statement_names:
            statements[name] = child
        else:
            inputs[name] = child

    return Block(
        id=data.id,
        kind=data.type,
        fields=dict(data.fields),
        inputs=inputs,
        statements=statements,
        output=shape.output,
        enabled=data.enabled,
    )


def _build_chain(head: SerializedBlock, registry: Registry) -> Block:
    first = _build_block(head, registry)
    tail = first
    successor = _successor(head)
    while successor is not None:
        block = _build_block(successor, registry)
        tail.next = block
        tail = block
        successor = _successor(successor)
    return first


def load_workspace(data: Union[Mapping[str, Any], str, bytes], registry: Optional[Registry] = None) -> Workspace:
    """Parse an editor workspace document (a mapping or JSON text).

    Raises :class:`WorkspaceFormatError` for malformed documents and
    :class:`~sceneblocks.registry.UnknownBlockError` for unregistered kinds.
    """
    registry = registry if registry is not None else BLOCKS
    if isinstance(data, (str, bytes)):
        try:
            data = json.loads(data)
        except (ValueError, RecursionError) as exc:
            raise _format_error(exc) from exc
    try:
        document = SerializedWorkspace.model_validate(data)
    except ValidationError as exc:
        raise _format_error(exc) from exc

    variables = [Variable(var.id, var.name, var.type) for var in document.variables]
    blocks = [_build_chain(top, registry) for top in document.blocks.blocks]
    logger.debug("Loaded %d top-level block(s) and %d variable(s)", len(blocks), len(variables))
    return Workspace(blocks=blocks, variables=variables)


def _dump_block(block: Block) -> Dict[str, Any]:
    out: Dict[str, Any] = {"type": block.kind, "id": block.id}
    if block.fields:
        out["fields"] = dict(block.fields)
    connections = {**block.inputs, **block.statements}
    inputs = {name: {"block": _dump_chain(child)} for name, child in connections.items() if child is not None}
    if inputs:
        out["inputs"] = inputs
    if not block.enabled:
        out["enabled"] = False
    return out


def _dump_chain(head: Block) -> Dict[str, Any]:
    dumped = [_dump_block(block) for block in head.chain()]
    for previous, current in zip(dumped, dumped[1:]):
        previous["next"] = {"block": current}
    return dumped[0]


def dump_workspace(workspace: Workspace) -> Dict[str, Any]:
    """Serialise ``workspace`` back into the editor document layout."""
    return {
        "blocks": {"languageVersion": 0, "blocks": [_dump_chain(top) for top in workspace.blocks]},
        "variables": [
            {"name": var.name, "id": var.id, "type": var.type.value if var.type is not None else ""}
            for var in workspace.variables
        ],
    }
