# -*- coding: utf-8 -*-
"""
Command line entry point.

    distribute -f files.txt -n nodes.txt [-o result.txt] [-r reports/] [-v]

Reads both record files, distributes the files over the nodes and prints
one `<file> <node>` line per file (or writes them to -o).
"""

from __future__ import annotations
import argparse
import sys
from typing import List, Optional

from distributor.business_objects.errors import ConfigurationError, SchemaError, StateValidationError
from distributor.planning.allocator import Allocator
from distributor.planning.policy import DEFAULT_UNASSIGNED_LABEL, Policy
from distributor.planning.tracker import Tracker
from distributor.utils.logs import init_logger
from distributor.utils.read_records import read_containers_txt, read_items_txt
from distributor.utils.write_results import write_assignments


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='distribute',
        description='Distribute files over capacity-bounded nodes, balancing the load.',
    )
    parser.add_argument('-f', '--files', dest='files', required=True,
                        help='Input file for files (required). e.g. -f files.txt')
    parser.add_argument('-n', '--nodes', dest='nodes', required=True,
                        help='Input file for nodes (required). e.g. -n nodes.txt')
    parser.add_argument('-o', '--output', dest='output', default=None,
                        help='Output file (optional). Results printed on console if not given.')
    parser.add_argument('-r', '--report-dir', dest='report_dir', default=None,
                        help='Directory for CSV run artifacts (attempt log, per-node loads, summary).')
    parser.add_argument('--null-label', dest='null_label', default=DEFAULT_UNASSIGNED_LABEL,
                        help=f'Token printed for files that could not be placed (default: {DEFAULT_UNASSIGNED_LABEL}).')
    parser.add_argument('--exact-mean', dest='exact_mean', action='store_true',
                        help='Use the exact mean load instead of the floored one for retry decisions.')
    parser.add_argument('-v', '--verbose', dest='verbose', action='count', default=0,
                        help='Print helpful statements while running')
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logger = init_logger(args.verbose, 'distributor')

    try:
        policy = Policy(integer_mean=not args.exact_mean, unassigned_label=args.null_label)
        tracker = Tracker(out_dir=args.report_dir) if args.report_dir else None
        allocator = Allocator(policy=policy, tracker=tracker)

        for item in read_items_txt(args.files):
            allocator.add_item(item.id, item.size)
        for spec in read_containers_txt(args.nodes):
            allocator.add_container(spec.id, spec.capacity)

        matchings = allocator.allocate()
    except (SchemaError, StateValidationError, ConfigurationError) as err:
        logger.error(str(err))
        return 1

    write_assignments(matchings, out=args.output, unassigned_label=policy.unassigned_label)
    if args.output:
        logger.info('Matchings written to %s', args.output)
    if tracker is not None:
        logger.info('Run artifacts written to %s', tracker.out_dir)
    return 0


if __name__ == '__main__':
    sys.exit(main())
