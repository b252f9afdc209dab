from __future__ import annotations
import argparse, json, logging, sys
from .core.cursor import create_cursor
from .io.load import LoadError, load_collection
from .models.options import CursorOptions
from .viz import plot_values

log = logging.getLogger(__name__)

def _echo(value, key, cursor, *params):
    print(f"key: {key} value: {json.dumps(value)}")
    return value

def _options_from_args(args) -> CursorOptions:
    return CursorOptions(
        increment=args.increment,
        start_at=args.start_at,
        keys=args.keys,
        reverse=args.reverse,
    )

def _walk(args, controller):
    data = load_collection(args.input)
    cur = create_cursor(data, controller, _options_from_args(args))
    if args.back:
        # start past the far end so previous() has somewhere to go
        cur.reverse(reset=True).reverse()
    if args.single:
        res = cur.previous() if args.back else cur.next()
        log.info("single step -> key=%r", res.key)
    elif args.back:
        cur.run_back(args.count)
    else:
        cur.run(args.count)
    return cur

def cmd_info(args):
    data = load_collection(args.input)
    cur = create_cursor(data)
    st = cur.status()
    print(json.dumps({
        "kind": "object" if isinstance(data, dict) else "array",
        "count": st.end + 1,
        "first_key": st.keys[0] if st.keys else None,
        "last_key": st.keys[-1] if st.keys else None,
    }, indent=2))

def cmd_walk(args):
    cur = _walk(args, _echo)
    if args.status:
        print(json.dumps(cur.status().model_dump(mode="json"), indent=2))

def cmd_plot(args):
    cur = _walk(args, None)
    plot_values(cur)

def _add_walk_args(sp):
    sp.add_argument("input", help="Path to a JSON array or object")
    sp.add_argument("--increment", type=int, default=1, help="Step size")
    sp.add_argument("--start-at", type=int, default=0, help="First position to visit")
    sp.add_argument("--reverse", action="store_true", help="Traverse from the end")
    sp.add_argument("--keys", nargs="+", default=None, help="Explicit key order (object input)")
    sp.add_argument("--count", type=int, default=None, help="Stop after N visits")
    sp.add_argument("--back", action="store_true", help="Move with previous() instead of next()")
    sp.add_argument("--single", action="store_true", help="Take one step only")

def build_parser():
    p = argparse.ArgumentParser(prog="controlled-loop", description="Walk JSON collections with a controlled cursor")
    p.add_argument("-v", "--verbose", action="count", default=0, help="-v for INFO, -vv for DEBUG")
    sub = p.add_subparsers(dest="cmd", required=True)

    sp = sub.add_parser("info", help="print key count and first/last keys")
    sp.add_argument("input")
    sp.set_defaults(func=cmd_info)

    sp = sub.add_parser("walk", help="visit keys and print each key/value")
    _add_walk_args(sp)
    sp.add_argument("--status", action="store_true", help="Print the final cursor status as JSON")
    sp.set_defaults(func=cmd_walk)

    sp = sub.add_parser("plot", help="plot recorded numeric values by position")
    _add_walk_args(sp)
    sp.set_defaults(func=cmd_plot)

    return p

def _configure_logging(verbose: int) -> None:
    level = logging.WARNING if verbose <= 0 else logging.INFO if verbose == 1 else logging.DEBUG
    logging.basicConfig(level=level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

def main(argv=None):
    p = build_parser()
    ns = p.parse_args(argv)
    _configure_logging(ns.verbose)
    try:
        ns.func(ns)
    except LoadError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
