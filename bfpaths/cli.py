"""Command-line interface for bfpaths."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from time import perf_counter
from typing import Any, List, Optional

import jsonschema
import yaml

from bfpaths.config import ENGINE_CONFIG, EngineConfig
from bfpaths.logging import get_logger, set_global_log_level
from bfpaths.scenario import Scenario
from bfpaths.types.base import OptimizationMode
from bfpaths.types.distance import Distance
from bfpaths.types.dto import BellmanFordResult
from bfpaths.utils.output_paths import ensure_parent_dir, results_path_for_run

logger = get_logger(__name__)

# Errors reported as a failed command rather than a traceback
_INPUT_ERRORS = (ValueError, yaml.YAMLError, jsonschema.ValidationError)

# Edge rows shown by ``inspect`` without --detail
_EDGE_PREVIEW = 10


def _format_table(
    headers: List[str],
    rows: List[List[str]],
    min_width: int = 6,
) -> str:
    """Format data as a simple ASCII table.

    Args:
        headers: Column headers
        rows: Data rows
        min_width: Minimum column width

    Returns:
        Formatted table string
    """
    if not rows:
        return ""

    all_data = [headers] + rows
    col_widths = [
        max(max(len(str(row[col_idx])) for row in all_data), min_width)
        for col_idx in range(len(headers))
    ]

    def format_row(row_data: List[str]) -> str:
        return "   " + " | ".join(
            f"{str(item):<{col_widths[i]}}" for i, item in enumerate(row_data)
        )

    lines = [format_row(headers)]
    lines.append("   " + "-+-".join("-" * width for width in col_widths))
    lines.extend(format_row(row) for row in rows)
    return "\n".join(lines)


def _format_cost(value: Any) -> str:
    """Return a weight with up to three decimals, trailing zeros trimmed.

    Examples:
        3 -> "3"; 2.5 -> "2.5"; -1234.5678 -> "-1,234.568".
    """
    try:
        v = float(value)
    except (TypeError, ValueError):
        return str(value)

    s = f"{v:,.3f}"
    if "." in s:
        s = s.rstrip("0").rstrip(".")
    return s


def _format_distance(distance: Distance) -> str:
    if not distance.is_finite:
        return "unreached"
    return _format_cost(distance.value)


def _format_duration(seconds: float) -> str:
    """Return a concise human-readable duration string.

    Examples:
        0.123 -> "123.0 ms"; 1.234 -> "1.23 s".
    """
    if seconds < 1.0:
        return f"{seconds * 1000.0:.1f} ms"
    return f"{seconds:.2f} s"


def _plural(n: int, singular: str, plural: Optional[str] = None) -> str:
    """Return grammatically correct unit for count n."""
    if n == 1:
        return singular
    return plural if plural is not None else f"{singular}s"


def _print_result_summary(result: BellmanFordResult) -> None:
    """Print the outcome of a run in human-readable form."""
    mode = result.mode.name.lower()
    n_steps = len(result.steps)
    print(
        f"✅ Bellman-Ford ({mode}) from {result.source} to {result.target}: "
        f"{result.rounds} {_plural(result.rounds, 'round')}, "
        f"{n_steps} {_plural(n_steps, 'step')}"
    )

    if result.cycle_detected:
        print("⚠️  Improving cycle reachable from the source; no optimal path is defined")
        return
    if result.optimal_distance is None:
        print(f"   Target {result.target} is unreachable from {result.source}")
        return

    n_paths = len(result.optimal_paths)
    print(f"   Optimal distance: {_format_distance(result.optimal_distance)}")
    print(f"   Optimal {_plural(n_paths, 'path')} ({n_paths}):")
    for path in result.optimal_paths:
        print("      " + " -> ".join(str(node) for node in path))


def _build_config(force_full_rounds: bool, max_paths: Optional[int]) -> EngineConfig:
    return ENGINE_CONFIG.with_overrides(
        early_exit=not force_full_rounds, max_paths=max_paths
    )


def _run_graph(
    path: Path,
    source: Optional[str] = None,
    target: Optional[str] = None,
    mode: Optional[str] = None,
    results_override: Optional[Path] = None,
    no_results: bool = False,
    stdout: bool = False,
    output_dir: Optional[Path] = None,
    force_full_rounds: bool = False,
    max_paths: Optional[int] = None,
) -> None:
    """Run the engine on a graph file and export results as JSON by default.

    Args:
        path: Graph YAML file.
        source: Source override; defaults to the file's selection.
        target: Target override; defaults to the file's selection.
        mode: Mode override (``minimize``/``maximize``).
        results_override: Explicit results JSON path.
        no_results: Disable results file generation.
        stdout: Also print the JSON results to stdout.
        output_dir: Directory for generated artifacts.
        force_full_rounds: Disable the early exit on fixpoint.
        max_paths: Cap on enumerated optimal paths.
    """
    logger.info(f"Loading graph from: {path}")
    _start_time = perf_counter()

    try:
        scenario = Scenario.from_yaml(path.read_text())
        config = _build_config(force_full_rounds, max_paths)
        result = scenario.run(config=config, source=source, target=target, mode=mode)
        _elapsed = perf_counter() - _start_time
        logger.info(f"Engine run completed in {_format_duration(_elapsed)}")
        _print_result_summary(result)

        json_str = json.dumps(result.to_dict(), indent=2, default=str)
        if not no_results:
            effective_output = results_path_for_run(
                graph_path=path,
                output_dir=output_dir,
                results_override=results_override,
            )
            ensure_parent_dir(effective_output)
            logger.info(f"Writing results to: {effective_output}")
            effective_output.write_text(json_str)
            print(f"✅ Results written to: {effective_output}")

        if stdout:
            print(json_str)

    except FileNotFoundError:
        logger.error(f"Graph file not found: {path}")
        print(f"❌ ERROR: Graph file not found: {path}")
        sys.exit(1)
    except _INPUT_ERRORS as e:
        logger.error(f"Failed to run graph: {type(e).__name__}: {e}")
        print(f"❌ ERROR: Failed to run graph: {type(e).__name__}: {e}")
        sys.exit(1)


def _inspect_graph(path: Path, detail: bool = False) -> None:
    """Validate a graph file and print its nodes, edges and selection.

    Args:
        path: Graph YAML file.
        detail: Show every node with its metadata and every edge.
    """
    logger.info(f"Inspecting graph from: {path}")

    try:
        scenario = Scenario.from_yaml(path.read_text())
    except FileNotFoundError:
        print(f"❌ ERROR: Graph file not found: {path}")
        sys.exit(1)
    except _INPUT_ERRORS as e:
        logger.error(f"Failed to inspect graph: {e}")
        print("❌ ERROR: Failed to inspect graph")
        print(f"  {type(e).__name__}: {e}")
        sys.exit(1)

    graph = scenario.graph
    n_nodes = len(graph)
    n_edges = len(graph.edges)
    negative = sum(1 for e in graph.edges if e.weight < 0)

    print("\n" + "=" * 60)
    print("BFPATHS GRAPH INSPECTION")
    print("=" * 60)
    print(
        f"\nGraph: {n_nodes} {_plural(n_nodes, 'node')}, "
        f"{n_edges} {_plural(n_edges, 'edge')} ({negative} negative)"
    )
    print(f"Source: {scenario.source if scenario.source is not None else '(not set)'}")
    print(f"Target: {scenario.target if scenario.target is not None else '(not set)'}")
    print(f"Mode: {scenario.mode.name.lower()}")

    if detail and graph.nodes:
        print("\nNodes:")
        rows = [
            [
                str(node.id),
                ", ".join(f"{k}={v}" for k, v in node.attrs.items()) or "-",
            ]
            for node in graph.nodes
        ]
        print(_format_table(["Node", "Attributes"], rows))

    if graph.edges:
        shown = graph.edges if detail else graph.edges[:_EDGE_PREVIEW]
        print("\nEdges:")
        rows = [
            [str(e.source), str(e.target), _format_cost(e.weight)] for e in shown
        ]
        print(_format_table(["Source", "Target", "Weight"], rows))
        hidden = n_edges - len(shown)
        if hidden:
            print(f"   ... {hidden} more (use --detail to show all)")

    logger.info("Graph inspection completed successfully")


def _positive_int(value: str) -> int:
    number = int(value)
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be >= 1, got {value}")
    return number


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for the ``bfpaths`` command.

    Args:
        argv: Optional list of command-line arguments. If ``None``, ``sys.argv``
            is used.
    """
    parser = argparse.ArgumentParser(
        prog="bfpaths",
        description="Enumerate all optimal paths with Bellman-Ford.",
    )

    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable debug logging"
    )
    parser.add_argument(
        "--quiet", action="store_true", help="Suppress console output (logs only)"
    )

    subparsers = parser.add_subparsers(
        dest="command",
        required=True,
        title="Available commands",
        metavar="{run,inspect}",
        help="Available commands",
    )

    run_parser = subparsers.add_parser("run", help="Run the engine on a graph file")
    run_parser.add_argument("graph", type=Path, help="Path to graph YAML")
    run_parser.add_argument("--source", "-s", default=None, help="Source node id")
    run_parser.add_argument("--target", "-t", default=None, help="Target node id")
    run_parser.add_argument(
        "--mode",
        "-m",
        choices=[m.name.lower() for m in OptimizationMode] + ["min", "max"],
        default=None,
        help="Optimization mode (default: from the file, else minimize)",
    )
    run_parser.add_argument(
        "--results",
        "-r",
        type=Path,
        default=None,
        help=(
            "Export results to JSON file (default: <graph_name>.results.json;"
            " placed under --output when provided)"
        ),
    )
    run_parser.add_argument(
        "--no-results",
        action="store_true",
        help="Disable results file generation",
    )
    run_parser.add_argument(
        "--stdout",
        action="store_true",
        help="Print results to stdout",
    )
    run_parser.add_argument(
        "--output",
        "-o",
        type=Path,
        default=None,
        help="Output directory for the results file",
    )
    run_parser.add_argument(
        "--force-full-rounds",
        action="store_true",
        help="Run all |V|-1 relaxation rounds instead of stopping at the fixpoint",
    )
    run_parser.add_argument(
        "--max-paths",
        type=_positive_int,
        default=None,
        help="Enumerate at most this many optimal paths",
    )

    inspect_parser = subparsers.add_parser(
        "inspect", help="Inspect and validate a graph file"
    )
    inspect_parser.add_argument("graph", type=Path, help="Path to graph YAML")
    inspect_parser.add_argument(
        "--detail",
        "-d",
        action="store_true",
        help="Show every node with its attributes and every edge",
    )

    args = parser.parse_args(argv)

    if args.verbose:
        set_global_log_level(logging.DEBUG)
        logger.debug("Debug logging enabled")
    elif args.quiet:
        set_global_log_level(logging.WARNING)
    else:
        set_global_log_level(logging.INFO)

    if args.command == "run":
        _run_graph(
            path=args.graph,
            source=args.source,
            target=args.target,
            mode=args.mode,
            results_override=args.results,
            no_results=args.no_results,
            stdout=args.stdout,
            output_dir=args.output,
            force_full_rounds=args.force_full_rounds,
            max_paths=args.max_paths,
        )
    elif args.command == "inspect":
        _inspect_graph(args.graph, args.detail)


if __name__ == "__main__":
    main()
