"""Command-line interface for policy number decoding."""

import argparse
import json
import logging
import sys
from pathlib import Path

from policyocr.errors import PolicyOCRError


def main(argv=None):
    parser = argparse.ArgumentParser(
        prog="policy-ocr",
        description="Decode pipe-and-underscore policy numbers and validate their checksums",
    )
    parser.add_argument(
        "input",
        help="Path to the file of glyph entries",
    )
    parser.add_argument(
        "--output",
        "-o",
        help="Write the report to this file instead of stdout",
    )
    parser.add_argument(
        "--format",
        choices=["text", "json"],
        default="text",
        help="Output format (default: text)",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Show the glyph entry above each number and enable debug logging",
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    input_path = Path(args.input)
    if not input_path.exists():
        print(f"Error: Input not found: {input_path}", file=sys.stderr)
        sys.exit(1)

    from policyocr.api import PolicyOCR

    ocr = PolicyOCR()

    try:
        policy_numbers = ocr.extract(input_path)
    except (PolicyOCRError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    if args.output and args.format == "text" and not args.verbose:
        ocr.write_report(policy_numbers, args.output)
        return

    output = _format_results(policy_numbers, args.format, args.verbose)
    if args.output:
        Path(args.output).write_text(output, encoding=ocr.encoding)
    else:
        print(output, end="")


def _format_results(policy_numbers, fmt, verbose):
    """Render decoded policy numbers as report text or JSON."""
    if fmt == "json":
        records = [p.to_dict() for p in policy_numbers]
        return json.dumps(records, indent=2) + "\n"

    lines = []
    for p in policy_numbers:
        if verbose:
            lines.append(p.render())
        lines.append(f"{p.report_line()}\n")
    return "".join(lines)


if __name__ == "__main__":
    main()
