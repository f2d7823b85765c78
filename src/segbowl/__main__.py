#!/usr/bin/env python3
"""
Command line interface for segbowl.

Usage:
    python -m segbowl new OUT.json
    python -m segbowl summary DESIGN.json
    python -m segbowl cutlist DESIGN.json [--sawkerf MM]
    python -m segbowl dxf DESIGN.json (--ring N | --profile) -o OUT.dxf

Examples:
    # Start from the default profile
    python -m segbowl new my_bowl.json

    # Ring sizes after editing the design
    python -m segbowl summary my_bowl.json

    # Segment cutting template for ring 2
    python -m segbowl dxf my_bowl.json --ring 2 -o ring2.dxf
"""

import argparse
import logging
import sys
from pathlib import Path

from segbowl.config import get_config, use_config_file
from segbowl.errors import BowlGeometryError
from segbowl.logging_config import setup_logging

logger = logging.getLogger("segbowl.cli")


def _load(args):
    from segbowl.io.design_json import load_design

    source_path = Path(args.file)
    if not source_path.exists():
        print(f"Error: File not found: {source_path}", file=sys.stderr)
        return None
    return load_design(source_path)


def _calc(design):
    """calc_rings with the configured lead-in and added-ring defaults."""
    from segbowl.rings import calc_rings

    config = get_config()
    return calc_rings(design, ring_factory=config.ring_factory(), lead_in=config.lead_in)


def cmd_new(args):
    """Write the default design."""
    from segbowl.io.design_json import save_design

    out = Path(args.output)
    if out.exists() and not args.force:
        print(f"Error: {out} exists (use --force to overwrite)", file=sys.stderr)
        return 1
    save_design(out, get_config().default_design(), name=args.name)
    print(f"Wrote {out}")
    return 0


def cmd_summary(args):
    """Print bowl size and ring bounds."""
    loaded = _load(args)
    if loaded is None:
        return 1
    result = _calc(loaded.design)

    print(f"Height: {result.height:.2f} mm")
    print(f"Radius: {result.radius:.2f} mm")
    print(f"Rings:  {result.usedrings} used of {len(result.rings)}")
    for idx, ring in enumerate(result.used):
        label = "Base" if idx == 0 else f"{idx:>4}"
        print(f"  {label}: height {ring.height:.2f}, segs {ring.segs}, "
              f"inner {ring.xvals.min:.2f}, outer {ring.xvals.max:.2f}")
    return 0


def cmd_cutlist(args):
    """Print the cut list."""
    from segbowl.report import cut_list

    loaded = _load(args)
    if loaded is None:
        return 1
    sawkerf = args.sawkerf
    if sawkerf is None:
        sawkerf = float(loaded.settings.get("sawkerf", get_config().sawkerf))

    for row in cut_list(_calc(loaded.design)):
        print(f"Ring {row.label}: diameter {row.diameter:.1f}, thickness {row.thickness:.1f}, "
              f"rotation {row.rotation:.2f} deg")
        for group in row.groups:
            print(f"    {group.count} x {group.wood} ({group.color}): "
                  f"angle {group.cut_angle:.2f} deg, "
                  f"outside {group.outside_length:.1f}, inside {group.inside_length:.1f}, "
                  f"width {group.width:.1f}, strip {group.total_strip_length(sawkerf):.1f}")
    return 0


def cmd_dxf(args):
    """Export a ring template or the profile to DXF."""
    from segbowl.io.dxf import write_profile_dxf, write_ring_dxf

    loaded = _load(args)
    if loaded is None:
        return 1
    result = _calc(loaded.design)

    if args.profile:
        path = write_profile_dxf(loaded.design, args.output, result,
                                 lead_in=get_config().lead_in)
    else:
        if not 0 <= args.ring < result.usedrings:
            print(f"Error: ring {args.ring} out of range (0..{result.usedrings - 1})",
                  file=sys.stderr)
            return 1
        path = write_ring_dxf(result.rings[args.ring], args.output,
                              rotate=not args.flat, index=args.ring)
    print(f"Wrote {path}")
    return 0


def main(argv=None):
    parser = argparse.ArgumentParser(
        prog='python -m segbowl',
        description='Segmented bowl geometry tools',
    )
    parser.add_argument('-v', '--verbose', action='store_true', help='Debug logging')
    parser.add_argument('--log-file', metavar='FILE', help='Also write the log to FILE')
    parser.add_argument('-c', '--config', metavar='FILE', help='Extra YAML config file')

    subparsers = parser.add_subparsers(dest='action', required=True)

    new_parser = subparsers.add_parser('new', help='Write the default design')
    new_parser.add_argument('output', help='Design file to create')
    new_parser.add_argument('--name', help='Design name')
    new_parser.add_argument('-f', '--force', action='store_true',
                            help='Overwrite existing output')

    summary_parser = subparsers.add_parser('summary', help='Show bowl and ring sizes')
    summary_parser.add_argument('file', help='Design file')

    cut_parser = subparsers.add_parser('cutlist', help='Show the cut list')
    cut_parser.add_argument('file', help='Design file')
    cut_parser.add_argument('--sawkerf', type=float, metavar='MM',
                            help='Saw kerf added per cut (default from settings/config)')

    dxf_parser = subparsers.add_parser('dxf', help='Export DXF drawings')
    dxf_parser.add_argument('file', help='Design file')
    target = dxf_parser.add_mutually_exclusive_group(required=True)
    target.add_argument('--ring', type=int, metavar='N', help='Ring index (0 = base)')
    target.add_argument('--profile', action='store_true', help='Bowl cross-section')
    dxf_parser.add_argument('--flat', action='store_true',
                            help='Lay ring segments along the x axis instead of around the ring')
    dxf_parser.add_argument('-o', '--output', required=True, metavar='FILE',
                            help='Output DXF file')

    args = parser.parse_args(argv)
    setup_logging(logging.DEBUG if args.verbose else logging.WARNING, args.log_file)

    handlers = {
        'new': cmd_new,
        'summary': cmd_summary,
        'cutlist': cmd_cutlist,
        'dxf': cmd_dxf,
    }
    try:
        if args.config:
            config = use_config_file(Path(args.config))
            logger.debug("Using config layers %s", config.source_paths)
        return handlers[args.action](args)
    except (BowlGeometryError, FileNotFoundError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == '__main__':
    sys.exit(main())
