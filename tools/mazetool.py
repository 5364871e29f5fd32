#!/usr/bin/env python3
import argparse, logging, os, sys
from glyphmaze.mapgen.generator import generate_maze
from glyphmaze.engine.movement import reachable_cells, solve
from glyphmaze.codec.share import serialize_generated
from glyphmaze.codec.zk import generate_prover_input, generate_prover_toml, serialize_for_zk, validate_path
from glyphmaze.font import filter_to_valid_chars
from glyphmaze.render.ascii import render_generated

logger = logging.getLogger("mazetool")


def _generate(args):
    seed = filter_to_valid_chars(args.seed)
    if seed != args.seed:
        logger.warning("dropped unsupported characters: %r -> %r", args.seed, seed)
    return generate_maze(seed)


def cmd_emit(args):
    g = _generate(args)
    print(serialize_generated(g))


def cmd_ascii(args):
    g = _generate(args)
    print(render_generated(g))
    print(f"{g.maze.width}x{g.maze.height}  king={tuple(g.king_pos)} key={tuple(g.key_pos)} goal={tuple(g.goal_pos)}")


def cmd_png(args):
    from glyphmaze.render.png import render_png
    g = _generate(args)
    render_png(g, args.out, cell=args.cell)
    print(f"Wrote {args.out}")


def cmd_prover(args):
    g = _generate(args)
    moves = solve(g)
    check = validate_path(g.maze, g.king_pos, g.key_pos, g.goal_pos, moves)
    if not check.valid:
        raise ValueError(f"solver produced an invalid path: {check.error}")
    zk = serialize_for_zk(g.maze, g.king_pos, g.key_pos, g.goal_pos)
    toml = generate_prover_toml(generate_prover_input(zk, moves))
    parent = os.path.dirname(args.out)
    if parent:
        os.makedirs(parent, exist_ok=True)
    with open(args.out, "w", encoding="utf-8") as f:
        f.write(toml + "\n")
    print(f"Wrote {args.out} ({len(moves)} moves)")


def cmd_check(args):
    g = _generate(args)
    total = g.maze.width * g.maze.height
    seen = len(reachable_cells(g.maze, g.king_pos))
    print(f"{seen}/{total} cells reachable from king")
    if seen != total:
        sys.exit(2)


def main():
    p = argparse.ArgumentParser(description="Generate text-embedded toroidal mazes")
    p.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    sub = p.add_subparsers(dest='cmd', required=True)
    p1 = sub.add_parser('emit', help="print the share hex string")
    p1.add_argument('seed')
    p1.set_defaults(func=cmd_emit)
    p2 = sub.add_parser('ascii', help="print a terminal preview")
    p2.add_argument('seed')
    p2.set_defaults(func=cmd_ascii)
    p3 = sub.add_parser('png', help="render a PNG (needs Pillow)")
    p3.add_argument('seed')
    p3.add_argument('--out', type=str, required=True)
    p3.add_argument('--cell', type=int, default=12)
    p3.set_defaults(func=cmd_png)
    p4 = sub.add_parser('prover', help="write Prover.toml for a BFS solution")
    p4.add_argument('seed')
    p4.add_argument('--out', type=str, default=os.path.join("circuit", "Prover.toml"))
    p4.set_defaults(func=cmd_prover)
    p5 = sub.add_parser('check', help="report reachability from the king")
    p5.add_argument('seed')
    p5.set_defaults(func=cmd_check)
    args = p.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )
    try:
        args.func(args)
    except (ValueError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

if __name__ == '__main__':
    main()
