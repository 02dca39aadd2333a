"""Example pipeline: load an editor workspace, validate it and print the threeD script."""

from pathlib import Path

from sceneblocks import CompileOptions, load_workspace, validate, workspace_to_code

WORKSPACE = Path(__file__).with_name("garden.json")


def main() -> None:
    workspace = load_workspace(WORKSPACE.read_text(encoding="utf-8"))
    validate(workspace)

    print("Variables:", ", ".join(var.name for var in workspace.variables))
    print("Top-level chains:", len(workspace.blocks))
    print()
    print(workspace_to_code(workspace, options=CompileOptions(declare_variables=True)))


if __name__ == "__main__":
    main()
