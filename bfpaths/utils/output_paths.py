"""Output path policy for CLI results files.

Results are written next to the current directory as
``<graph_stem>.results.json`` unless an output directory or an explicit
results path is given.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

RESULTS_SUFFIX = ".results.json"


def ensure_parent_dir(path: Path) -> None:
    """Ensure the parent directory exists for a file path."""
    path.parent.mkdir(parents=True, exist_ok=True)


def resolve_override_path(
    override: Optional[Path], output_dir: Optional[Path]
) -> Optional[Path]:
    """Resolve an explicit path against an optional output directory.

    Absolute paths are returned as-is. Relative paths are placed under
    ``output_dir`` when provided, otherwise left relative to the CWD.
    """
    if override is None:
        return None
    if override.is_absolute():
        return override
    if output_dir is not None:
        return (output_dir / override).resolve()
    return override


def results_path_for_run(
    graph_path: Path,
    output_dir: Optional[Path],
    results_override: Optional[Path],
) -> Path:
    """Determine where ``bfpaths run`` writes its JSON results.

    Args:
        graph_path: The graph YAML file.
        output_dir: Optional base output directory.
        results_override: Optional explicit results file path.

    Returns:
        The override (resolved), else ``output_dir/<stem>.results.json``,
        else ``<stem>.results.json`` in the current directory.
    """
    resolved = resolve_override_path(results_override, output_dir)
    if resolved is not None:
        return resolved
    name = f"{graph_path.stem}{RESULTS_SUFFIX}"
    if output_dir is not None:
        return output_dir / name
    return Path(name)
