"""
Check an image file against image_size / image_aspect rules.

Usage:
  imagerules photo.jpg --rule image_size:600
  imagerules photo.jpg --rule "image_size:>=300,100-400" --rule image_aspect:~3,4
  imagerules photo.jpg --rule "image_size:*,<=800|image_aspect:1.5" --attribute avatar

Exit status: 0 all rules pass, 1 a rule failed, 2 a rule is malformed.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional

from imagerules.core.errors import RuleError
from imagerules.validation.registry import check_image, format_report_text


def _build_arg_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="imagerules", description="Validate an image's pixel size and aspect ratio.")
    p.add_argument("image", help="Path to the image file")
    p.add_argument(
        "--rule", "-r", action="append", required=True,
        help='Rule such as "image_size:300,<200" or "image_aspect:~3,4" (repeatable, or join with "|")',
    )
    p.add_argument("--attribute", "-a", default="image", help="Name used in failure messages (default: image)")
    p.add_argument("--verbose", "-v", action="store_true", help="Log decoding and rule outcomes")
    return p


def main(argv: Optional[list[str]] = None) -> int:
    args = _build_arg_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    rules: list[str] = []
    for r in args.rule:
        rules.extend(part for part in r.split("|") if part.strip())

    try:
        report = check_image(args.image, rules, attribute=args.attribute)
    except RuleError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 2

    print(format_report_text(report))
    return 0 if report.passed else 1


if __name__ == "__main__":
    raise SystemExit(main())
