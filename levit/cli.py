import argparse
import logging
import sys

from levit.errors import LevitError
from levit.matrix import NO_ARC, load_edge_list, load_matrix
from levit.reference import cross_check
from levit.solver import INF, ShortestPathSolver

logger = logging.getLogger(__name__)


def _configure_logging(level):
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        stream=sys.stderr,
    )


def build_parser():
    parser = argparse.ArgumentParser(
        prog="levit",
        description="Single-source shortest paths with Levit's algorithm.",
    )
    parser.add_argument('graph_file', nargs='?', default='matrix.txt',
                        help='Path to the adjacency matrix (default: matrix.txt)')
    parser.add_argument('--no-arc', default=NO_ARC,
                        help='Matrix token meaning "no arc" (default: %(default)s)')
    parser.add_argument('--edge-list', action='store_true',
                        help='Read graph_file as "src dst [weight]" lines instead of a matrix')
    parser.add_argument('--start', type=int,
                        help='Start vertex, 1-based; prompted for when omitted')
    parser.add_argument('--max-steps', type=int,
                        help='Give up with an error after this many vertex dequeues')
    parser.add_argument('--check', action='store_true',
                        help='Verify the distances against a GraphBLAS Bellman-Ford run')
    parser.add_argument('--log-level', default='WARNING',
                        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'])
    return parser


def run(args):
    if args.edge_list:
        graph = load_edge_list(args.graph_file)
    else:
        graph = load_matrix(args.graph_file, no_arc=args.no_arc)
    logger.info("loaded %r from %s", graph, args.graph_file)

    start = args.start
    if start is None:
        print(f"Enter the start vertex (1 to {graph.vertex_count}):")
        start = int(input())

    distances = ShortestPathSolver(graph, max_steps=args.max_steps).solve(start - 1)
    if args.check:
        cross_check(graph, start - 1, distances)
        logger.info("distances match Bellman-Ford")

    print(f"\nShortest distances from vertex {start}:")
    for vertex, distance in enumerate(distances.tolist(), start=1):
        print(f"to {vertex}: " + ("no path" if distance == INF else str(distance)))


def main(argv=None):
    args = build_parser().parse_args(argv)
    _configure_logging(args.log_level)

    try:
        run(args)
    except (LevitError, OSError, ValueError, EOFError) as e:
        logger.debug("run failed", exc_info=True)
        print(f"Error: {e}")
        return 1
    return 0


if __name__ == '__main__':
    sys.exit(main())
