from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, List, Optional

from .sockets import SocketTag


@dataclass
class Variable:
    id: str
    name: str
    type: Optional[SocketTag] = None


@dataclass
class Block:
    id: str
    kind: str
    fields: Dict[str, Any] = field(default_factory=dict)
    inputs: Dict[str, Optional['Block']] = field(default_factory=dict)
    statements: Dict[str, Optional['Block']] = field(default_factory=dict)
    next: Optional['Block'] = None
    output: Optional[SocketTag] = None
    enabled: bool = True

    @property
    def is_expression(self) -> bool:
        return self.output is not None

    def chain(self) -> Iterator['Block']:
        """Yield this block and every block linked after it through ``next``."""
        current: Optional[Block] = self
        while current is not None:
            yield current
            current = current.next

    def walk(self) -> Iterator['Block']:
        """Depth-first walk over this block, its inputs, nested statements and successors."""
        for block in self.chain():
            yield block
            for child in block.inputs.values():
                if child is not None:
                    yield from child.walk()
            for head in block.statements.values():
                if head is not None:
                    yield from head.walk()


@dataclass
class Fragment:
    code: str
    order: Optional[int] = None  # None for statement fragments


@dataclass
class Workspace:
    blocks: List[Block] = field(default_factory=list)
    variables: List[Variable] = field(default_factory=list)

    def all_blocks(self) -> Iterator[Block]:
        for top in self.blocks:
            yield from top.walk()

    def find_block(self, block_id: str) -> Optional[Block]:
        for block in self.all_blocks():
            if block.id == block_id:
                return block
        return None

    def previous_of(self, block: Block) -> Optional[Block]:
        for candidate in self.all_blocks():
            if candidate.next is block:
                return candidate
        return None

    def variable_by_id(self, var_id: str) -> Optional[Variable]:
        for var in self.variables:
            if var.id == var_id:
                return var
        return None

    def variable_by_name(self, name: str) -> Optional[Variable]:
        for var in self.variables:
            if var.name == name:
                return var
        return None

    def lookup_variable(self, ref: str) -> Optional[Variable]:
        """Find a variable by storage id first, then by name."""
        return self.variable_by_id(ref) or self.variable_by_name(ref)

    def create_variable(
        self, name: str, type: Optional[SocketTag] = None, var_id: Optional[str] = None
    ) -> Variable:
        if self.variable_by_name(name) is not None:
            raise ValueError(f'variable {name!r} already exists')
        var_id = var_id or f'var_{len(self.variables) + 1}'
        while self.variable_by_id(var_id) is not None:
            var_id = f'{var_id}_'
        var = Variable(var_id, name, type)
        self.variables.append(var)
        return var

    def delete_variable(self, name: str) -> None:
        self.variables = [var for var in self.variables if var.name != name]
