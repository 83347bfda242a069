"""Command-line entry point computing and classifying a BMI."""

from __future__ import annotations

import argparse
import math

from .calculator import Assessment, Gender, assess
from .validation import parse_number

VERSION = "1.2.1"


def _number(text: str) -> float:
    value = parse_number(text)
    if value is None:
        raise argparse.ArgumentTypeError(f"not a number: {text!r}")
    return float(value)


def _format_bmi(bmi: float) -> str:
    if math.isnan(bmi):
        return "NaN"
    if math.isinf(bmi):
        return "inf" if bmi > 0 else "-inf"
    if bmi.is_integer():
        return str(int(bmi))
    return repr(bmi)


def format_report(assessment: Assessment) -> str:
    """Render an assessment as plain text lines."""
    def label(category):
        return category.label if category is not None else "unclassified"

    return "\n".join(
        [
            f"BMI: {_format_bmi(assessment.bmi)}",
            f"WHO: {label(assessment.who)}",
            f"DGE: {label(assessment.dge)}",
        ]
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="bmicalc", description="Calculate the body mass index."
    )
    parser.add_argument("weight", type=_number, help="weight in kg")
    parser.add_argument("height", type=_number, help="height in cm")
    parser.add_argument(
        "--gender",
        choices=[g.name.lower() for g in Gender],
        default=Gender.MALE.name.lower(),
        help="gender used for the DGE classification",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {VERSION}")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Parse arguments, print the report and return the exit status."""
    parser = _build_parser()
    args = parser.parse_args(argv)
    try:
        result = assess(args.weight, args.height, Gender[args.gender.upper()])
    except ValueError as exc:
        parser.error(str(exc))
    print(format_report(result))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())