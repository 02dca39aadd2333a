"""Configuration helpers for the compiler."""

from __future__ import annotations

import copy
from dataclasses import dataclass

from .runtime import RUNTIME_NAMESPACE


@dataclass
class CompileOptions:
    indent: str = '  '
    # prepend ``var a, b;`` for every declared variable
    declare_variables: bool = False
    # run sceneblocks.validate before generating code
    validate: bool = False
    runtime_namespace: str = RUNTIME_NAMESPACE


_COMPILE_OPTIONS = CompileOptions()


def get_compile_options() -> CompileOptions:
    return copy.deepcopy(_COMPILE_OPTIONS)


def set_compile_options(options: CompileOptions) -> None:
    global _COMPILE_OPTIONS
    _COMPILE_OPTIONS = copy.deepcopy(options)
