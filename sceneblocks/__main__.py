import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

from sceneblocks import (
    BLOCKS,
    CompileOptions,
    UnknownBlockError,
    ValidationError,
    WorkspaceFormatError,
    block_definitions_json,
    load_workspace,
    toolbox_json,
    workspace_to_code,
)

logger = logging.getLogger(__name__)


def _configure_logging(level: str) -> None:
    log_level = getattr(logging, level.upper(), logging.INFO)
    logging.basicConfig(
        level=log_level,
        format="%(levelname)s:%(name)s:%(message)s",
    )


def _print_blocks() -> None:
    for category in toolbox_json(BLOCKS)["contents"]:
        print(f"{category['name']}:")
        for entry in category["contents"]:
            definition = BLOCKS.get(entry["type"])
            shape = definition.shape
            if shape.output is not None:
                role = f"-> {shape.output.value}"
            else:
                role = "statement (await)" if definition.asynchronous else "statement"
            print(f"  {definition.kind:<24} {role}")


def _write_schema(path: Path) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    document = {"blocks": block_definitions_json(BLOCKS), "toolbox": toolbox_json(BLOCKS)}
    path.write_text(json.dumps(document, indent=2) + "\n", encoding="utf-8")
    logger.info("Wrote %d block definition(s) to %s", len(document["blocks"]), path)


def main(argv: Optional[Sequence[str]] = None) -> None:
    parser = argparse.ArgumentParser(description="Compile a scene block workspace to a threeD script")
    parser.add_argument("path", nargs="?", help="Path to the workspace JSON document")
    parser.add_argument(
        "--output",
        help="Write the generated script to the given path instead of stdout",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Validate block connections and variable types before generating code",
    )
    parser.add_argument(
        "--declare-variables",
        action="store_true",
        help="Prefix the script with a var declaration for every workspace variable",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        help="Logging level (default: INFO)",
    )
    parser.add_argument(
        "--list-blocks",
        action="store_true",
        help="List the registered block kinds by category and exit",
    )
    parser.add_argument(
        "--schema",
        help="Write editor block definitions and the toolbox as JSON to the given path",
    )
    args = parser.parse_args(argv)

    _configure_logging(args.log_level)

    if args.list_blocks:
        _print_blocks()
        return
    if args.schema:
        _write_schema(Path(args.schema))
        if not args.path:
            return
    if not args.path:
        parser.error("a workspace path is required")

    text = Path(args.path).read_text(encoding="utf-8")
    logger.info("Loading workspace from %s", args.path)

    options = CompileOptions(declare_variables=args.declare_variables, validate=args.strict)
    try:
        workspace = load_workspace(text)
        code = workspace_to_code(workspace, options=options)
    except (WorkspaceFormatError, ValidationError, UnknownBlockError) as exc:
        logger.error("%s", exc)
        raise SystemExit(1)

    if args.strict:
        logger.info("Validation succeeded")

    if args.output:
        output_path = Path(args.output)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(code + "\n" if code else "", encoding="utf-8")
        logger.info("Script written to %s", output_path)
    else:
        print(code)


if __name__ == "__main__":
    main(sys.argv[1:])
