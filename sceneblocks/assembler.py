"""Sequence every top-level statement chain of a workspace into one script."""

from __future__ import annotations

import logging
from typing import List, Optional

from .ast import Workspace
from .codegen.generator import CodeGenerator
from .config import CompileOptions, get_compile_options
from .logging_utils import apply_debug_logging
from .registry import BLOCKS, Registry
from .validate import validate

logger = logging.getLogger(__name__)


def compile_chains(
    workspace: Workspace,
    registry: Optional[Registry] = None,
    options: Optional[CompileOptions] = None,
) -> List[str]:
    """Return the generated code of each top-level statement chain, in stored order.

    Chains that produce no code are omitted.
    """
    registry = registry if registry is not None else BLOCKS
    options = options if options is not None else get_compile_options()
    if options.validate:
        validate(workspace, registry)

    generator = CodeGenerator(workspace, registry, options)
    chains: List[str] = []
    for top in workspace.blocks:
        if top.is_expression:
            logger.debug("Skipping orphan expression block %s (%s)", top.id, top.kind)
            continue
        code = generator.chain_to_code(top)
        if code:
            chains.append(code)
    names = generator.namespace.identifiers() + generator.namespace.fresh_names()
    if options.declare_variables and names:
        chains.insert(0, f"var {', '.join(names)};")
    logger.debug("Compiled %d chain(s) from %d top-level block(s)", len(chains), len(workspace.blocks))
    return chains


def workspace_to_code(
    workspace: Workspace,
    registry: Optional[Registry] = None,
    options: Optional[CompileOptions] = None,
) -> str:
    return "\n".join(compile_chains(workspace, registry, options))


apply_debug_logging(globals(), logger=logger)
