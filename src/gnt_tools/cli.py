"""CLI entrypoint for GNT tools.

Usage:
  python -m gnt_tools.cli normalize "Εἶπεν δὲ παραβολὴν"
  echo "|κς|" | gnt-tools normalize --strict
  gnt-tools check < luke12.txt
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List

from .alphabet import describe
from .normalize import normalize_text
from .strict import CoreTextError, core_text_strict, find_unhandled

logger = logging.getLogger(__name__)

DEFAULT_CONFIG = {
    "expand_invisible_nu": False,
    "ignored_codepoints": [],
}


def parse_codepoint(value: str) -> str:
    """Accept ``U+0375`` / ``0x0375`` notation or a literal single character."""
    if len(value) == 1:
        return value
    v = value.strip().upper()
    for prefix in ("U+", "0X"):
        if v.startswith(prefix):
            try:
                return chr(int(v[len(prefix):], 16))
            except ValueError:
                break
    raise ValueError(f"Invalid codepoint: {value!r}")


def load_config(path: str | Path) -> dict:
    path = Path(path)
    cfg = dict(DEFAULT_CONFIG)
    if not path.exists():
        return cfg
    cfg.update(json.loads(path.read_text(encoding="utf-8")))
    if not isinstance(cfg["ignored_codepoints"], list):
        raise ValueError(f"ignored_codepoints must be a list in {path}")
    cfg["ignored_codepoints"] = [parse_codepoint(v) for v in cfg["ignored_codepoints"]]
    logger.info("Loaded config from %s", path)
    return cfg


def _read_text(args: argparse.Namespace) -> str:
    if args.text:
        return " ".join(args.text)
    return sys.stdin.read()


def cmd_normalize(args: argparse.Namespace) -> int:
    try:
        cfg = load_config(args.config)
    except ValueError as e:
        print(f"Error: {e}")
        return 1

    text = _read_text(args)
    if args.strict:
        try:
            core = core_text_strict(
                text,
                ignored=cfg["ignored_codepoints"],
                expand_invisible_nu=cfg["expand_invisible_nu"],
            )
        except CoreTextError as e:
            print(f"Error: {e}")
            return 1
    else:
        core = normalize_text(text, expand_invisible_nu=cfg["expand_invisible_nu"])
    print(core)
    return 0


def cmd_check(args: argparse.Namespace) -> int:
    """Report every Greek-block character the strict path cannot handle."""
    try:
        cfg = load_config(args.config)
    except ValueError as e:
        print(f"Error: {e}")
        return 1

    text = _read_text(args)
    faults = find_unhandled(text, ignored=cfg["ignored_codepoints"])
    for f in faults:
        print(f"{f.position}: {describe(f.char)}")
    if faults:
        distinct = sorted({f.char for f in faults})
        print(f"Found {len(faults)} unhandled characters ({len(distinct)} distinct)")
        return 1
    print("No unhandled characters")
    return 0


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="gnt-tools", description="Greek New Testament core text")
    p.add_argument(
        "-l",
        "--loglevel",
        default="WARNING",
        help="Logging level (case-insensitive: DEBUG, INFO, WARNING or ERROR)",
    )
    p.add_argument(
        "-v", "--verbose", action="store_true", help="Verbose output (logging level == INFO)"
    )
    sub = p.add_subparsers(dest="cmd", required=True)

    def add_common(sp: argparse.ArgumentParser) -> None:
        sp.add_argument("text", nargs="*", help="Text to process (reads stdin when omitted)")
        sp.add_argument(
            "--config",
            default="gnt_tools.json",
            help="Path to JSON config (optional; defaults will be used if missing)",
        )

    norm = sub.add_parser("normalize", help="Print the core text of the input")
    add_common(norm)
    norm.add_argument(
        "--strict",
        action="store_true",
        help="Use the per-character path and fail on unknown Greek characters",
    )
    norm.set_defaults(func=cmd_normalize)

    check = sub.add_parser("check", help="List unknown Greek characters with their positions")
    add_common(check)
    check.set_defaults(func=cmd_check)

    return p


def main(argv: List[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    level = logging.INFO if args.verbose else getattr(logging, args.loglevel.upper(), None)
    if not isinstance(level, int):
        print(f"Error: unknown log level {args.loglevel!r}")
        return 1
    logging.basicConfig(level=level)
    return args.func(args)


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
