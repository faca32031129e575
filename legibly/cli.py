# Copyright (c) 2026 Legibly
# SPDX-License-Identifier: MIT

"""
Command line front end.

    legibly check 'linear-gradient(135deg, #1e3a8a 0%, #f59e0b 100%)' '#ffffff'
    legibly suggest-text 'linear-gradient(#000 0%, #fff 100%)'
    legibly suggest-gradient 'radial-gradient(#ff0 0%, #0ff 100%)' '#fff' --max 4
    legibly saved add 'linear-gradient(#000 0%, #333 100%)' '#ffffff'
    legibly saved list

Exit status: 0 on success, 1 when a requested item is missing or an
optional dependency is absent, 2 on invalid input.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from legibly.errors import InvalidConfigError, LegiblyError
from legibly.measure import (
    DEFAULT_GRID,
    check_gradient,
    parse_gradient,
    suggest_gradient_fixes,
    suggest_text_colors,
    validate_grid,
)
from legibly.runtime import (
    JsonFileStore,
    remove_entry,
    render_overlay,
    save_entry,
    suggestions_report,
    to_json,
    to_report,
)
from legibly.runtime.serializers import SerializerFormat
from legibly.schema import SavedGradient

logger = logging.getLogger(__name__)


def _cmd_check(args: argparse.Namespace) -> int:
    grid = validate_grid(args.grid, strict=True)
    if args.scale < 1:
        raise InvalidConfigError(f"--scale must be >= 1, got {args.scale}")
    result = check_gradient(args.gradient, args.text, grid=grid)
    if args.as_json:
        print(to_json(result, include_map=args.include_map))
    else:
        print(to_report(result))
    if args.overlay:
        img = render_overlay(result, scale=args.scale)
        img.save(args.overlay)
        logger.info("Overlay written to %s", args.overlay)
    return 0


def _cmd_suggest_text(args: argparse.Namespace) -> int:
    # Unparsable input is an error here even though the library call
    # degrades to an empty list.
    spec = parse_gradient(args.gradient)
    suggestions = suggest_text_colors(spec, args.count, text_color=args.text)
    if args.as_json:
        print(to_json(suggestions))
    else:
        print(suggestions_report(suggestions))
    return 0


def _cmd_suggest_gradient(args: argparse.Namespace) -> int:
    grid = validate_grid(args.grid, strict=True)
    suggestions = suggest_gradient_fixes(
        args.gradient,
        args.text,
        grid=grid,
        max_suggestions=args.max,
        workers=args.workers,
    )
    if args.as_json:
        print(to_json(suggestions))
    else:
        print(suggestions_report(suggestions))
    return 0


def _cmd_saved(args: argparse.Namespace) -> int:
    store = JsonFileStore(args.store)

    if args.action == "list":
        items = store.load()
        if args.as_json:
            print(to_json(items, format=SerializerFormat.JSON_PRETTY))
        elif not items:
            print("(no saved gradients)")
        else:
            for item in items:
                print(f"{item.id}  {item.pass_pct:>3}%  {item.text_color:<10} {item.gradient}")
        return 0

    if args.action == "add":
        spec = parse_gradient(args.gradient)
        result = check_gradient(spec, args.text, grid=validate_grid(args.grid, strict=True))
        entry = SavedGradient(
            gradient=spec.to_css(),
            text_color=args.text,
            pass_pct=round(result.pass_rate * 100),
        )
        save_entry(store, entry)
        print(entry.id)
        return 0

    if not remove_entry(store, args.id):
        print(f"not found: {args.id}", file=sys.stderr)
        return 1
    print(f"removed {args.id}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="legibly",
        description="WCAG text contrast over CSS gradients",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
examples:
  legibly check 'linear-gradient(135deg, #1e3a8a 0%, #f59e0b 100%)' '#ffffff'
  legibly suggest-text 'linear-gradient(#000 0%, #fff 100%)' --count 4
  legibly suggest-gradient 'linear-gradient(#ccc 0%, #eee 100%)' '#ffffff'
  legibly saved list
""",
    )
    ap.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    sub = ap.add_subparsers(dest="cmd", required=True)

    p_check = sub.add_parser("check", help="Analyze text contrast over a gradient")
    p_check.add_argument("gradient")
    p_check.add_argument("text")
    p_check.add_argument("--grid", type=int, default=DEFAULT_GRID)
    p_check.add_argument("--json", dest="as_json", action="store_true")
    p_check.add_argument("--no-map", dest="include_map", action="store_false",
                         help="Omit the category map from JSON output")
    p_check.add_argument("--overlay", metavar="PATH", help="Write a compliance overlay PNG")
    p_check.add_argument("--scale", type=int, default=4, help="Overlay pixels per cell")
    p_check.set_defaults(func=_cmd_check)

    p_text = sub.add_parser("suggest-text", help="Suggest readable text colors")
    p_text.add_argument("gradient")
    p_text.add_argument("--count", type=int, default=6)
    p_text.add_argument("--text", default=None, help="Current text color, for ΔE")
    p_text.add_argument("--json", dest="as_json", action="store_true")
    p_text.set_defaults(func=_cmd_suggest_text)

    p_grad = sub.add_parser("suggest-gradient", help="Suggest gradient adjustments")
    p_grad.add_argument("gradient")
    p_grad.add_argument("text")
    p_grad.add_argument("--grid", type=int, default=DEFAULT_GRID)
    p_grad.add_argument("--max", type=int, default=6)
    p_grad.add_argument("--workers", type=int, default=1)
    p_grad.add_argument("--json", dest="as_json", action="store_true")
    p_grad.set_defaults(func=_cmd_suggest_gradient)

    p_saved = sub.add_parser("saved", help="Manage saved gradients")
    p_saved.add_argument("--store", metavar="PATH", default=None,
                         help="Store file (default: $LEGIBLY_STORE or ~/.legibly/saved.json)")
    saved_sub = p_saved.add_subparsers(dest="action", required=True)
    p_list = saved_sub.add_parser("list", help="List saved gradients")
    p_list.add_argument("--json", dest="as_json", action="store_true")
    p_add = saved_sub.add_parser("add", help="Save a gradient/text color pair")
    p_add.add_argument("gradient")
    p_add.add_argument("text")
    p_add.add_argument("--grid", type=int, default=DEFAULT_GRID)
    p_rm = saved_sub.add_parser("remove", help="Delete a saved entry")
    p_rm.add_argument("id")
    p_saved.set_defaults(func=_cmd_saved)

    return ap


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        return args.func(args)
    except LegiblyError as e:
        print(f"legibly: error: {e}", file=sys.stderr)
        return 2
    except ImportError as e:
        print(f"legibly: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
