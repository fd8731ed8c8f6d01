"""Command-line interface for easeloom.

Lists the curve catalog and previews curves, parametric families, movement
profiles and cubic-Bezier timing functions as sampled tables.
"""

from __future__ import annotations

import argparse
import logging
import sys

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from easeloom.core.config.loader import load_app_config
from easeloom.core.config.models import AppConfig
from easeloom.core.curves.bezier import cubic_bezier
from easeloom.core.curves.functions.parametric import FAMILY_GENERATORS, generate_family
from easeloom.core.curves.library import build_default_registry
from easeloom.core.curves.modifiers import CurveModifier, apply_modifiers
from easeloom.core.curves.models import CurvePoint
from easeloom.core.curves.profiles import get_movement_profile
from easeloom.core.curves.protocols import Curve
from easeloom.core.curves.sampling import sample_curve
from easeloom.core.curves.semantics import SemanticSynthesizer
from easeloom.core.utils.json import dumps_json
from easeloom.core.utils.logging import configure_logging

console = Console()
logger = logging.getLogger(__name__)


def parse_param(raw: str) -> tuple[str, float]:
    """Parse a ``key=value`` family parameter.

    Raises:
        ValueError: If the pair is malformed or the value is not a number.
    """
    key, sep, value = raw.partition("=")
    if not sep or not key.strip():
        raise ValueError(f"Expected key=value, got '{raw}'")
    try:
        return key.strip(), float(value)
    except ValueError as exc:
        raise ValueError(f"Parameter '{key.strip()}' must be a number, got '{value}'") from exc


def render_samples(title: str, points: list[CurvePoint], as_json: bool = False) -> None:
    """Print sampled points as a table, or as JSON."""
    if as_json:
        payload = {"curve": title, "samples": [p.model_dump() for p in points]}
        console.print_json(dumps_json(payload))
        return

    table = Table(title=title)
    table.add_column("t", justify="right")
    table.add_column("value", justify="right")
    for point in points:
        table.add_row(f"{point.t:.3f}", f"{point.v:.4f}")
    console.print(table)


def _sample_count(args: argparse.Namespace, config: AppConfig) -> int:
    return args.samples if args.samples is not None else config.default_samples


def cmd_curves(args: argparse.Namespace, config: AppConfig) -> int:
    """List catalog curves and configured presets."""
    registry = build_default_registry()

    table = Table(title="Curves")
    table.add_column("id")
    table.add_column("family")
    table.add_column("category")
    for definition in registry.definitions():
        table.add_row(definition.curve_id, definition.family.value, definition.category.value)
    for name, preset in sorted(config.families.items()):
        table.add_row(name, preset.family, "preset")
    console.print(table)
    return 0


def _lookup_curve(name: str, config: AppConfig) -> Curve:
    registry = build_default_registry()
    if name not in registry and name in config.families:
        return config.families[name].build()
    return registry.get(name)


def cmd_sample(args: argparse.Namespace, config: AppConfig) -> int:
    """Sample a catalog curve or a configured family preset."""
    curve = apply_modifiers(
        _lookup_curve(args.curve, config),
        [CurveModifier(m) for m in args.modifier],
    )
    render_samples(args.curve, sample_curve(curve, _sample_count(args, config)), args.json)
    return 0


def cmd_family(args: argparse.Namespace, config: AppConfig) -> int:
    """Sample a parametric family built from ``--param`` overrides."""
    overrides = dict(parse_param(raw) for raw in args.param)
    curve = generate_family(args.name, **overrides)
    render_samples(args.name, sample_curve(curve, _sample_count(args, config)), args.json)
    return 0


def cmd_profile(args: argparse.Namespace, config: AppConfig) -> int:
    """Sample the semantic curve of a built-in or configured profile."""
    profile = get_movement_profile(args.name, custom=config.profiles)
    synthesizer = SemanticSynthesizer()

    if not args.json:
        selection = synthesizer.select(profile.characteristics)
        picks = ", ".join(f"{curve_id} ({weight:.2f})" for curve_id, weight in selection)
        console.print(f"[bold]{profile.name}[/bold]: {picks}")

    curve = synthesizer.synthesize(profile)
    render_samples(profile.name, sample_curve(curve, _sample_count(args, config)), args.json)
    return 0


def cmd_bezier(args: argparse.Namespace, config: AppConfig) -> int:
    """Sample a CSS-style cubic-bezier(x1, y1, x2, y2)."""
    curve = cubic_bezier(args.x1, args.y1, args.x2, args.y2, table_size=config.bezier_table_size)
    render_samples(repr(curve), sample_curve(curve, _sample_count(args, config)), args.json)
    return 0


COMMANDS = {
    "curves": cmd_curves,
    "sample": cmd_sample,
    "family": cmd_family,
    "profile": cmd_profile,
    "bezier": cmd_bezier,
}


def _add_sampling_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--samples",
        type=int,
        default=None,
        help="Number of samples including both endpoints (default: from config)",
    )
    parser.add_argument("--json", action="store_true", help="Print samples as JSON")


def build_arg_parser() -> argparse.ArgumentParser:
    """Build argument parser for CLI."""
    p = argparse.ArgumentParser(
        prog="easeloom",
        description="easeloom - compose, generate and preview easing curves",
    )
    p.add_argument("--config", default=None, help="Path to app config (.yaml, .yml or .json)")
    p.add_argument(
        "--log-level",
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Override the configured log level",
    )

    sub = p.add_subparsers(dest="cmd", required=True)

    sub.add_parser("curves", help="List available curves")

    sample = sub.add_parser("sample", help="Sample a catalog curve or family preset")
    sample.add_argument("curve", help="Curve id (see 'easeloom curves')")
    sample.add_argument(
        "--modifier",
        action="append",
        default=[],
        choices=[m.value for m in CurveModifier],
        help="Modifier to apply; repeatable, applied in order",
    )
    _add_sampling_args(sample)

    family = sub.add_parser("family", help="Sample a parametric curve family")
    family.add_argument("name", choices=list(FAMILY_GENERATORS), help="Family name")
    family.add_argument(
        "--param",
        action="append",
        default=[],
        metavar="KEY=VALUE",
        help="Family parameter, e.g. --param damping=0.8; repeatable",
    )
    _add_sampling_args(family)

    profile = sub.add_parser("profile", help="Sample the curve synthesized for a profile")
    profile.add_argument("name", help="Movement profile (built-in or from config)")
    _add_sampling_args(profile)

    bezier = sub.add_parser("bezier", help="Sample a cubic-bezier timing function")
    for coord in ("x1", "y1", "x2", "y2"):
        bezier.add_argument(coord, type=float)
    _add_sampling_args(bezier)

    return p


def main(argv: list[str] | None = None) -> int:
    """Main entry point for CLI."""
    p = build_arg_parser()
    args = p.parse_args(argv)

    try:
        config = load_app_config(args.config)
    except (FileNotFoundError, ValueError) as e:
        console.print(f"[red]ERROR: Could not load config: {escape(str(e))}[/red]")
        return 1

    configure_logging(
        level=args.log_level or config.logging.level,
        filename=config.logging.filename,
        structured=config.logging.structured,
    )
    logger.debug("Running '%s'", args.cmd)

    try:
        return COMMANDS[args.cmd](args, config)
    except ValueError as e:
        console.print(f"[red]ERROR: {escape(str(e))}[/red]")
        return 1


if __name__ == "__main__":
    sys.exit(main())
