from __future__ import annotations

"""Utilities for resolving the question tree file and output paths."""

from pathlib import Path


def kb_dir() -> Path:
    return Path.cwd() / "kb"


def tree_path(path: str | None) -> str:
    return path or str(kb_dir() / "questions.txt")


def outputs_dir() -> Path:
    return Path.cwd() / "outputs"


def ensure_output_dir() -> None:
    outputs_dir().mkdir(parents=True, exist_ok=True)


def resolve_export_path(tree_file: str, output: str | None = None) -> str:
    """Resolve where the YAML export of ``tree_file`` is written.

    An explicit output path is used as given; if it has no .yaml extension,
    it will be added. Otherwise the export goes to outputs/<tree stem>.yaml.
    """
    if output:
        p = Path(output)
        if p.suffix not in (".yaml", ".yml"):
            p = p.with_name(f"{p.name}.yaml")
        return str(p)
    ensure_output_dir()
    return str(outputs_dir() / f"{Path(tree_file).stem}.yaml")


__all__ = [
    "kb_dir",
    "tree_path",
    "outputs_dir",
    "ensure_output_dir",
    "resolve_export_path",
]
