# src/color_mix_solver/cli.py
import argparse
import logging
import random
import re
import sys
import time
from typing import List, Optional

from .color.primitives import hex_to_rgb
from .color.vocab import color_name, nearest_color_name
from .levels import (
    find_level,
    load_demo_targets,
    load_levels,
    demo_tolerance,
    summarize_levels,
)
from .solver import DEFAULT_PALETTE, SolverOptions, SolverResult, format_steps, solve
from .utils.load_config import ConfigFileNotFound, ConfigParseError, ConfigTypeError, DataDirNotFound

_CLI_HEX_RE = re.compile(r"#[0-9a-fA-F]{6}")
RULE = "-" * 60


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="color-mix-solver",
        description="Find the palette colors to mix into each slot to reproduce a target color.",
        epilog=(
            "examples:\n"
            '  color-mix-solver "#ff8000" 25   solve for orange with tolerance 25\n'
            '  color-mix-solver "#800080"      solve for purple with the default tolerance\n'
            "  color-mix-solver --demo         run the demo set\n"
            "  color-mix-solver --all-levels   solve every game level"
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("target", nargs="?", help="Target color in hex format (e.g. #ff8000)")
    parser.add_argument(
        "tolerance",
        nargs="?",
        type=int,
        default=25,
        help="Max Euclidean RGB distance accepted as a match, 0-255 (default: 25)",
    )
    mode = parser.add_mutually_exclusive_group()
    mode.add_argument("--demo", action="store_true", help="Run the demonstration set")
    mode.add_argument("--all-levels", action="store_true", dest="all_levels", help="Solve all game levels")
    mode.add_argument("--level", metavar="NAME", help="Solve one game level by (fuzzy) name")
    parser.add_argument("--seed", type=int, default=None, help="Seed for the evolutionary search")
    parser.add_argument("--debug", action="store_true", help="Verbose debug logs")
    return parser


def _options(tolerance: int) -> SolverOptions:
    return SolverOptions(tolerance=tolerance, available_colors=DEFAULT_PALETTE, max_slots=6, max_iterations=1000)


def _describe_color(hex_color: str) -> str:
    rgb = hex_to_rgb(hex_color)
    name = nearest_color_name(rgb) if rgb is not None else None
    return f"{hex_color} (≈ {name})" if name else hex_color


def print_result(target: str, result: SolverResult, elapsed_ms: float) -> None:
    print(f"⏱️  Solved in {elapsed_ms:.0f}ms\n")
    if result.success:
        print("✅ SUCCESS! Exact solution found:")
        print(f"🎯 Target: {target}")
        print(f"🎨 Result: {_describe_color(result.final_color)}")
    else:
        print("⚠️  No exact solution found within tolerance")
        print(f"🎯 Target: {target}")
        print(f"🎨 Best result: {_describe_color(result.final_color)}")
    print(f"📊 Accuracy: {result.accuracy:.1f}%")
    if result.steps:
        header = "Steps to achieve the color" if result.success else "Best attempt steps"
        print(f"\n📝 {header}:")
        for line in format_steps(result.steps).splitlines():
            print(f"   {line}")
    print(f"\n💡 {result.explanation}")


def solve_color(target: str, tolerance: int = 25, rng: Optional[random.Random] = None) -> SolverResult:
    print(f"\n🎯 Solving for color: {target}")
    print(f"📏 Tolerance: {tolerance}")
    print(f"🎨 Available colors: {', '.join(color_name(c).title() for c in DEFAULT_PALETTE)}")
    print(RULE)
    start = time.perf_counter()
    result = solve(target, _options(tolerance), rng=rng)
    print_result(target, result, (time.perf_counter() - start) * 1000)
    return result


def run_demo(rng: Optional[random.Random] = None) -> None:
    print("🧪 Color Mixing Solver Demo\n")
    print("=" * 60)
    targets = load_demo_targets()
    tolerance = demo_tolerance()
    for i, demo in enumerate(targets, start=1):
        print(f"\n{i}. {demo['name']} - {demo['description']}")
        print("─" * 40)
        solve_color(demo["color"], tolerance, rng=rng)
        if i < len(targets):
            print("\n" + "═" * 60)


def run_all_levels(rng: Optional[random.Random] = None) -> int:
    """Solve every level; returns the number solved within tolerance."""
    print("🎮 Solving All Game Levels\n")
    print("=" * 60)
    summary = summarize_levels(load_levels(), _options(25), rng=rng)
    for i, check in enumerate(summary["checks"], start=1):
        level, result = check["level"], check["result"]
        print(f"\n🎯 Level {i}: {level['name']}")
        print(f"Target: {level['target_color']} | Tolerance: {level['tolerance']}")
        print("─" * 50)
        if result.success:
            print(f"✅ SOLVED! Accuracy: {result.accuracy:.1f}%")
            print(f"Steps: {len(result.steps)} | Final: {result.final_color}")
        else:
            print(f"❌ No exact solution. Best: {result.accuracy:.1f}%")
            print(f"Best attempt: {result.final_color}")
    print("\n" + "=" * 60)
    print(f"📊 Summary: {summary['solved']}/{summary['total']} levels solved exactly")
    print(f"🎯 Success rate: {summary['success_rate']:.1f}%")
    return summary["solved"]


def main(argv: Optional[List[str]] = None) -> int:
    """CLI: solve a target color, a named level, the demo set, or every level."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    rng = random.Random(args.seed) if args.seed is not None else None

    try:
        if args.demo:
            run_demo(rng)
            return 0
        if args.all_levels:
            run_all_levels(rng)
            return 0
        if args.level:
            level = find_level(args.level)
            if level is None:
                print(f"❌ Error: no level matches {args.level!r}", file=sys.stderr)
                return 1
            print(f"🎮 Level: {level['name']}")
            solve_color(level["target_color"], level["tolerance"], rng=rng)
            return 0
    except (DataDirNotFound, ConfigFileNotFound, ConfigParseError, ConfigTypeError) as e:
        print(f"❌ Error: {e}", file=sys.stderr)
        return 1

    if args.target is None:
        parser.print_help()
        return 0
    if not _CLI_HEX_RE.fullmatch(args.target):
        parser.error("target color must be in hex format (e.g. #ff8000)")
    if not 0 <= args.tolerance <= 255:
        parser.error("tolerance must be a number between 0 and 255")

    solve_color(args.target, args.tolerance, rng=rng)
    return 0


if __name__ == "__main__":
    sys.exit(main())
