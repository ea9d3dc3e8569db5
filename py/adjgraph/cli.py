#!/usr/bin/env python3
"""Command-line entry point for the interactive graph menu."""

import argparse
import logging
import os
import sys
from typing import List, Optional, TextIO

from .graph import Graph, seed_graph
from .menu import run_menu

LOG_LEVELS = ['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']
TRUTHY = ('1', 'y', 'yes', 'true', 'on')


def env_flag(name: str) -> Optional[bool]:
    """Read a yes/no environment variable; None when unset or blank."""
    value = os.environ.get(name, '').strip().lower()
    if not value:
        return None
    return value in TRUTHY


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='adjgraph',
        description='Interactive adjacency-list graph explorer')
    orientation = parser.add_mutually_exclusive_group()
    orientation.add_argument('--directed', dest='directed', action='store_true', default=None,
                             help='Create a directed graph (default: from ADJGRAPH_DIRECTED env or prompt)')
    orientation.add_argument('--undirected', dest='directed', action='store_false',
                             help='Create an undirected graph')
    parser.set_defaults(directed=None)
    parser.add_argument('--no-seed', action='store_true', default=None,
                        help='Start empty instead of with the starter edges '
                             '(default: from ADJGRAPH_NO_SEED env)')
    parser.add_argument('--log-level', type=str.upper, choices=LOG_LEVELS, default=None,
                        help='Logging level (default: from ADJGRAPH_LOG_LEVEL env or WARNING)')
    return parser


def prompt_directed(stdin: TextIO, stdout: TextIO) -> bool:
    """Ask whether to build a directed graph; any answer starting with y means yes."""
    stdout.write("Create directed graph? (y/n): ")
    stdout.flush()
    return stdin.readline().strip().lower().startswith('y')


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the graph menu."""
    args = build_parser().parse_args(argv)

    log_level = args.log_level or os.environ.get('ADJGRAPH_LOG_LEVEL', 'WARNING').upper()
    if log_level not in LOG_LEVELS:
        log_level = 'WARNING'
    logging.basicConfig(
        level=log_level,
        stream=sys.stderr,
        format='%(asctime)s %(levelname)s %(name)s: %(message)s')

    no_seed = args.no_seed
    if no_seed is None:
        no_seed = bool(env_flag('ADJGRAPH_NO_SEED'))

    try:
        directed = args.directed
        if directed is None:
            directed = env_flag('ADJGRAPH_DIRECTED')
        if directed is None:
            directed = prompt_directed(sys.stdin, sys.stdout)

        graph = Graph(directed=directed)
        if not no_seed:
            seed_graph(graph)
        logging.getLogger(__name__).debug(
            "graph ready", extra={"directed": directed, "vertices": graph.vertex_count()})

        run_menu(graph)
    except KeyboardInterrupt:
        print()
        return 130
    return 0


if __name__ == '__main__':
    sys.exit(main())
