from .sockets import SocketTag, accepts, check, parse_tag
from .ast import Block, Fragment, Variable, Workspace
from .fields import BlockShape
from .registry import BLOCKS, BlockDefinition, Registry, UnknownBlockError
from .namespace import VariableNamespace, first_variable_of_type, unique_name_with_prefix
from .codegen import CodeGenerator, Order
from .assembler import compile_chains, workspace_to_code
from .config import CompileOptions, get_compile_options, set_compile_options
from .validate import validate, ValidationError
from .serialization import load_workspace, dump_workspace, WorkspaceFormatError
from .schema import block_definition_json, block_definitions_json, toolbox_json
from . import blocks

__all__ = [
    'SocketTag',
    'accepts',
    'check',
    'parse_tag',
    'Block',
    'Fragment',
    'Variable',
    'Workspace',
    'BlockShape',
    'BLOCKS',
    'BlockDefinition',
    'Registry',
    'UnknownBlockError',
    'VariableNamespace',
    'first_variable_of_type',
    'unique_name_with_prefix',
    'CodeGenerator',
    'Order',
    'compile_chains',
    'workspace_to_code',
    'CompileOptions',
    'get_compile_options',
    'set_compile_options',
    'validate',
    'ValidationError',
    'load_workspace',
    'dump_workspace',
    'WorkspaceFormatError',
    'block_definition_json',
    'block_definitions_json',
    'toolbox_json',
    'blocks',
]
