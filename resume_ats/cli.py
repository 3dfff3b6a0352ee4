"""CLI - Command line interface for Resume ATS."""

import asyncio
import json
import sys
from typing import List, Optional

from rich.console import Console
from rich.markdown import Markdown
from rich.markup import escape
from rich.table import Table

from .config import ConfigurationError, load_scoring_config
from .domain.ats_constants import SECTION_LABELS, SECTION_ORDER
from .domain.scoring_config import ScoringConfig
from .observability import ScoringObserver
from .tools import ATSScorerTool


console = Console()


def _load_config(config_path: Optional[str]) -> Optional[ScoringConfig]:
    try:
        return load_scoring_config(config_path)
    except FileNotFoundError as e:
        console.print(f"⚠️ {escape(str(e))}", style="yellow")
        console.print("Using default scoring configuration.", style="dim")
        return ScoringConfig()
    except ConfigurationError as e:
        console.print("❌ Invalid scoring configuration:", style="red")
        for issue in e.issues:
            console.print(f"  • {escape(issue.field)}: {escape(issue.message)}", style="red")
        return None


def run_score(path: str, config: ScoringConfig, workspace: str, as_json: bool, verbose: bool) -> int:
    """Score one resume file and print the report. Returns the exit code."""
    observer = ScoringObserver(verbose=verbose)
    tool = ATSScorerTool(workspace_dir=workspace, config=config, observer=observer)
    result = asyncio.run(tool.execute(path=path))

    if not result.success:
        console.print(f"❌ {escape(result.error or '')}", style="red")
        return 1

    if as_json:
        console.print_json(json.dumps(result.data))
    else:
        console.print(Markdown(result.output))
    return 0


def print_weights(config: ScoringConfig):
    """Print section weights as a table."""
    table = Table(title="ATS Section Weights")
    table.add_column("Section")
    table.add_column("Key", style="dim")
    table.add_column("Max Score", justify="right")
    for key in SECTION_ORDER:
        table.add_row(SECTION_LABELS[key], key, str(config.weight(key)))
    table.add_row("Total", "", str(sum(config.weight(k) for k in SECTION_ORDER)), style="bold")
    console.print(table)


def main(argv: Optional[List[str]] = None):
    """Main entry point."""
    import argparse

    parser = argparse.ArgumentParser(description="Resume ATS - rule-based ATS compatibility scorer")
    parser.add_argument(
        "--config",
        "-c",
        default=None,
        help="Path to scoring configuration file (default: config/scoring.yaml)",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    score_parser = subparsers.add_parser("score", help="Score a resume JSON file")
    score_parser.add_argument("path", help="Resume JSON file (editor export shape)")
    score_parser.add_argument(
        "--workspace",
        "-w",
        default=".",
        help="Directory relative paths are resolved against (default: current directory)",
    )
    score_parser.add_argument(
        "--json",
        dest="as_json",
        action="store_true",
        help="Print the raw score report as JSON",
    )
    score_parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        default=False,
        help="Verbose output (log scoring runs)",
    )

    subparsers.add_parser("weights", help="Show section weights")

    args = parser.parse_args(argv)

    config = _load_config(args.config)
    if config is None:
        sys.exit(1)

    if args.command == "weights":
        print_weights(config)
        sys.exit(0)

    sys.exit(run_score(args.path, config, args.workspace, args.as_json, args.verbose))


if __name__ == "__main__":
    main()
