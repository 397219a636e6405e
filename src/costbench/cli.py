"""costbench command line: sweep a password hasher's cost levels and report."""

from __future__ import annotations

import argparse
import logging
import sys

from pydantic import ValidationError

from costbench.config import DEFAULT_PASSWORD, BenchConfig
from costbench.core.types import CostSummary
from costbench.exceptions import ConfigError, HashInvocationError
from costbench.hashers import HASHERS, get_hasher
from costbench.passwords import resolve_password
from costbench.report import Spinner, render_json, render_report
from costbench.sweep import run_sweep

log = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="costbench",
        description="Benchmark password hashing across a range of cost levels.",
    )
    parser.add_argument("--start", type=int, default=10, help="Starting cost value (default: 10)")
    parser.add_argument("--end", type=int, default=16, help="Ending cost value (default: 16)")
    parser.add_argument("--password", default=DEFAULT_PASSWORD, help="Password to hash")
    parser.add_argument(
        "--generate",
        type=int,
        default=0,
        metavar="LENGTH",
        help="Generate random password of given length (overrides --password)",
    )
    parser.add_argument(
        "--iterations", type=int, default=3, help="Number of iterations per cost level (default: 3)"
    )
    parser.add_argument(
        "--hasher",
        choices=sorted(HASHERS),
        default=None,
        help="Hashing primitive (default: $COSTBENCH_HASHER or bcrypt)",
    )
    parser.add_argument("--json", action="store_true", help="Emit results as JSON")
    parser.add_argument("--no-progress", action="store_true", help="Disable the progress spinner")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return parser


def load_config(args: argparse.Namespace) -> BenchConfig:
    fields = {
        "start_cost": args.start,
        "end_cost": args.end,
        "password": args.password,
        "generate_length": args.generate,
        "iterations": args.iterations,
    }
    if args.hasher is not None:
        fields["hasher"] = args.hasher
    try:
        return BenchConfig(**fields)
    except ValidationError as exc:
        messages = "; ".join(err["msg"].removeprefix("Value error, ") for err in exc.errors())
        raise ConfigError(messages) from exc


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        cfg = load_config(args)
    except ConfigError as exc:
        log.error("%s", exc)
        return 2

    password = resolve_password(cfg)
    hasher = get_hasher(cfg.hasher)
    spinner = None if args.no_progress or args.json else Spinner()

    if not args.json:
        title = f"{cfg.hasher.capitalize()} Cost Benchmark"
        print(title)
        print("=" * len(title))
        print()

    try:
        results = run_sweep(cfg.to_sweep(password), hasher, on_progress=spinner)
    except HashInvocationError as exc:
        if spinner is not None:
            spinner.clear()
        if exc.completed:
            _emit(args, cfg, password, exc.completed)
        log.error("%s", exc)
        return 1

    if spinner is not None:
        spinner.clear()
    _emit(args, cfg, password, results)
    return 0


def _emit(
    args: argparse.Namespace,
    cfg: BenchConfig,
    password: bytes,
    results: list[CostSummary],
) -> None:
    if args.json:
        print(render_json(cfg, results))
    else:
        print(render_report(cfg, password, results), end="")


if __name__ == "__main__":
    sys.exit(main())
