#!/usr/bin/env python3
"""Ad Format Inspector CLI

Read-only tool for checking how dimension values are interpreted:
- Classify a value (or several alternative values) into a category
- Show the human-readable label for dimension codes
- Preview what the newsletter migration would do with a legacy string
- List the selector's grouped dimension options

Usage:
    python cli/format_inspector.py classify <value> [<value> ...]
    python cli/format_inspector.py label <value> [<value> ...]
    python cli/format_inspector.py resolve <legacy value> [--position POSITION]
    python cli/format_inspector.py options

Examples:
    python cli/format_inspector.py classify 300x250 600x150
    python cli/format_inspector.py resolve "Full email" --position dedicated
"""

import argparse
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from formats import category_label, display_dimensions, get_category, label, requires_pixel_dimensions
from formats.constants import DIMENSION_OPTIONS
from migrations.newsletter_formats import resolve_legacy_dimensions


def _dimension_value(values):
    return values[0] if len(values) == 1 else list(values)


def cmd_classify(args):
    """Classify one value, or several alternatives of one placement."""
    value = _dimension_value(args.values)
    category = get_category(value)
    print(f"Dimensions: {display_dimensions({'format': {'dimensions': value}})}")
    print(f"Category:   {category.value} ({category_label(category)})")
    print(f"Pixel size required: {'yes' if requires_pixel_dimensions(category) else 'no'}")


def cmd_label(args):
    """Print the label of each dimension code."""
    for value in args.values:
        print(f"{value:<24} {label(value)}")


def cmd_resolve(args):
    """Preview how the newsletter migration resolves a legacy value."""
    new_dimensions, outcome = resolve_legacy_dimensions(args.value, args.position)
    print(f"Legacy:   {args.value!r} (position: {args.position or 'unknown'})")
    print(f"Outcome:  {outcome.value}")
    print(f"Resolved: {new_dimensions}")
    if outcome.value != "needs-review":
        print(f"Category: {get_category(new_dimensions).value}")


def cmd_options(args):
    """List the selector's grouped options."""
    for group in DIMENSION_OPTIONS:
        print(f"\n{group.label}")
        for option in group.options:
            standard = f"  [{option.standard_id}]" if option.standard_id else ""
            print(f"  {option.value:<22} {option.label}{standard}")


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Ad Format Inspector",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s classify 300x250                 Category of a single size
  %(prog)s classify 300x250 600x150         Category of alternative sizes
  %(prog)s label full-newsletter 600x150    Human-readable labels
  %(prog)s resolve "Text only"              Preview migration of a legacy value
  %(prog)s options                          Selector options
        """
    )

    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    classify_parser = subparsers.add_parser("classify", help="Classify dimension values")
    classify_parser.add_argument("values", nargs="+", help="Dimension value(s)")
    classify_parser.set_defaults(func=cmd_classify)

    label_parser = subparsers.add_parser("label", help="Show dimension labels")
    label_parser.add_argument("values", nargs="+", help="Dimension code(s)")
    label_parser.set_defaults(func=cmd_label)

    resolve_parser = subparsers.add_parser("resolve", help="Preview legacy value migration")
    resolve_parser.add_argument("value", help="Legacy dimensions string")
    resolve_parser.add_argument("--position", type=str, help="Placement position (e.g. dedicated)")
    resolve_parser.set_defaults(func=cmd_resolve)

    options_parser = subparsers.add_parser("options", help="List selector options")
    options_parser.set_defaults(func=cmd_options)

    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    args.func(args)
    return 0


if __name__ == "__main__":
    sys.exit(main())
