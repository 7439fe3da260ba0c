#!/usr/bin/env python3
"""
graphscope CLI

Developer tooling for inspecting graph layouts outside a host UI.

Usage:
    graphscope layout <results.json> [--json]
    graphscope edges <results.json>
    graphscope render <results.json> -o graph.svg [--select ID] [--pointer X Y]
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

import yaml

from . import __version__
from .config import ConfigError, load_config
from .graph.abstraction import Item, Point, ResultSet

logger = logging.getLogger(__name__)


def load_results(path: Path) -> ResultSet:
    """Load a result set from a JSON or YAML list of item mappings.

    A mapping with a top-level ``items`` key is accepted as well.
    """
    path = Path(path)
    text = path.read_text()
    if path.suffix.lower() in (".yaml", ".yml"):
        data = yaml.safe_load(text)
    else:
        data = json.loads(text)

    if isinstance(data, dict):
        data = data.get("items", [])
    if not isinstance(data, list):
        raise ValueError(f"{path}: expected a list of items")

    return ResultSet(Item.from_dict(entry) for entry in data)


def _build_session(args):
    from .session import GraphSession

    config = load_config(args.config)
    session = GraphSession(config=config)
    session.set_results(load_results(args.results))
    return session


def cmd_layout(args):
    """Print item positions."""
    session = _build_session(args)

    if args.json:
        payload = [
            {
                "id": p.id,
                "title": p.item.title,
                "relevance": p.relevance,
                "x": round(p.position.x, 3),
                "y": round(p.position.y, 3),
            }
            for p in session.positioned
        ]
        print(json.dumps(payload, indent=2))
        return 0

    if session.is_empty:
        headline, hint = session.empty_state
        print(headline)
        print(hint)
        return 0

    print(f"{'ID':<12} {'Relevance':>9} {'X':>9} {'Y':>9}  Title")
    for p in session.positioned:
        print(f"{p.id:<12} {p.relevance:>9.2f} {p.position.x:>9.2f} "
              f"{p.position.y:>9.2f}  {p.item.title}")
    return 0


def cmd_edges(args):
    """Print resolved edges."""
    session = _build_session(args)
    for segment in session.segments:
        print(f"{segment.edge.a} -- {segment.edge.b}")
    print(f"\n{len(session.segments)} edge(s)")
    return 0


def cmd_render(args):
    """Export an SVG snapshot."""
    from .visualization.scene import build_scene, export_svg

    session = _build_session(args)

    for _ in range(abs(args.zoom_steps)):
        session.viewport.zoom_by(1 if args.zoom_steps > 0 else -1)

    if args.select:
        target = session.get_positioned(args.select)
        if target is None:
            print(f"Error: no item with id {args.select!r} in result set")
            return 1
        if args.pointer:
            pointer = Point(*args.pointer)
        else:
            pointer = session.viewport.to_screen(target.position)
        session.selection.click_node(target.id, pointer)

    output = Path(args.output)
    export_svg(build_scene(session), output)
    print(f"Wrote {output}")
    return 0


def main(argv: Optional[List[str]] = None):
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="graphscope - relevance graph layout tools",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  graphscope layout results.json
  graphscope layout results.yaml --json
  graphscope edges results.json
  graphscope render results.json -o graph.svg --select 3 --pointer 1275 795
        """,
    )

    parser.add_argument('--version', action='version', version=f'graphscope {__version__}')
    parser.add_argument('-c', '--config', help='YAML file overriding the default configuration')
    parser.add_argument('-v', '--verbose', action='store_true', help='Verbose output')

    subparsers = parser.add_subparsers(dest='command', help='Available commands')

    layout_parser = subparsers.add_parser('layout', help='Print item positions')
    layout_parser.add_argument('results', help='Result set file (JSON or YAML)')
    layout_parser.add_argument('--json', action='store_true', help='Print JSON')

    edges_parser = subparsers.add_parser('edges', help='Print resolved edges')
    edges_parser.add_argument('results', help='Result set file (JSON or YAML)')

    render_parser = subparsers.add_parser('render', help='Export an SVG snapshot')
    render_parser.add_argument('results', help='Result set file (JSON or YAML)')
    render_parser.add_argument('-o', '--output', default='graph.svg', help='Output SVG path')
    render_parser.add_argument('--select', help='Item id to select (opens its popup)')
    render_parser.add_argument('--pointer', type=float, nargs=2, metavar=('X', 'Y'),
                               help='Pointer position for the popup anchor')
    render_parser.add_argument('--zoom-steps', type=int, default=0,
                               help='Wheel zoom steps (negative zooms out)')

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if not args.command:
        parser.print_help()
        return 1

    commands = {
        'layout': cmd_layout,
        'edges': cmd_edges,
        'render': cmd_render,
    }

    try:
        return commands[args.command](args)
    except (ConfigError, ValueError, OSError, yaml.YAMLError) as e:
        print(f"Error: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
