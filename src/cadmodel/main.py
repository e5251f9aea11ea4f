"""Command line entry point for cadmodel."""

from __future__ import annotations

import argparse
import logging
import sys
from collections import Counter

from .core.document import Document
from .entities import EntityType
from .errors import CadModelError
from .loader import DrawingLoader


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="cadmodel",
        description="cadmodel - Summarise the layouts and entities of a drawing definition",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "drawing",
        metavar="PATH",
        help="YAML drawing definition to load",
    )
    parser.add_argument(
        "-l", "--layout",
        metavar="NAME",
        help="Layout to summarise (default: the definition's active layout)",
    )
    parser.add_argument(
        "-a", "--all-layouts",
        action="store_true",
        help="Summarise every layout",
    )
    parser.add_argument(
        "-k", "--kind",
        choices=[t.value for t in EntityType],
        help="List the handles of the entities of this kind",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="count",
        default=0,
        help="Increase log output (-v info, -vv debug)",
    )
    return parser.parse_args(argv)


def print_layout(document: Document, layout_name: str, kind: str | None = None) -> None:
    """Print the entity counts of one layout."""
    entities = document.entities
    entities.active_layout = layout_name
    block = entities.active_block

    counts = Counter(entity.type for entity in entities.all)
    print(f"Layout '{layout_name}' (block {block.name}): {sum(counts.values())} entities")
    for entity_type in sorted(counts, key=lambda t: t.value):
        print(f"  - {entity_type.value}: {counts[entity_type]}")

    if kind is not None:
        handles = [entity.handle for entity in entities.of_type(EntityType(kind))]
        print(f"  {kind} handles: {', '.join(handles) if handles else '(none)'}")


def main(argv: list[str] | None = None) -> int:
    """Run the cadmodel summary."""
    args = parse_args(argv)

    level = logging.WARNING
    if args.verbose == 1:
        level = logging.INFO
    elif args.verbose > 1:
        level = logging.DEBUG
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")

    try:
        document = DrawingLoader().load(args.drawing)
    except (CadModelError, FileNotFoundError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    print(f"Drawing '{document.name}'")
    print("=" * 40)
    print(
        f"{len(document.layouts)} layouts, {len(document.blocks)} blocks, "
        f"{len(document.underlay_definitions)} underlay definitions, "
        f"{len(document.image_definitions)} image definitions"
    )

    if args.all_layouts:
        layout_names = [layout.name for layout in sorted(document.layouts, key=lambda layout: layout.tab_order)]
    else:
        layout_names = [args.layout or document.entities.active_layout]

    try:
        for layout_name in layout_names:
            print_layout(document, layout_name, args.kind)
    except CadModelError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
