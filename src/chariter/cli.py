from __future__ import annotations
import argparse, itertools, json, logging, sys
from .models.window import CharWindow

logger = logging.getLogger(__name__)

def parse_scalar(text: str) -> int:
    """Single character, U+XXXX, 0xXXXX, or a decimal codepoint."""
    if len(text) == 1:
        return ord(text)
    t = text.strip()
    if t[:2].upper() == "U+":
        return int(t[2:], 16)
    if t[:2].lower() == "0x":
        return int(t[2:], 16)
    return int(t, 10)

def _window(args) -> CharWindow:
    w = CharWindow(start=parse_scalar(args.start), end=parse_scalar(args.end))
    logger.debug("window %s..%s (%d values)", w.start_hex, w.end_hex, w.count)
    return w

def _fmt(c: str, mode: str) -> str:
    if mode == "hex":
        return f"U+{ord(c):04X}"
    if mode == "int":
        return str(ord(c))
    return c

def cmd_list(args):
    it = _window(args).iter()
    src = reversed(it) if args.reverse else it
    for c in itertools.islice(src, args.limit):
        print(_fmt(c, args.format))
    if len(it):
        logger.debug("stopped at --limit %d, %d values left", args.limit, len(it))
    return 0

def cmd_count(args):
    print(_window(args).count)
    return 0

def cmd_split(args):
    parts = _window(args).split(args.parts)
    if len(parts) < args.parts:
        print(f"Warning: only {len(parts)} values, produced {len(parts)} windows (requested: {args.parts})", file=sys.stderr)
    print(json.dumps([p.model_dump(mode="json") for p in parts], indent=2))
    return 0

def build_parser():
    p = argparse.ArgumentParser(prog="chariter", description="Iterate inclusive ranges of Unicode scalar values")
    p.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    sub = p.add_subparsers(dest="cmd", required=True)

    sp = sub.add_parser("list", help="print every scalar value in START..END")
    sp.add_argument("start", help="Single character (taken literally), U+XXXX, 0xXXXX or decimal codepoint")
    sp.add_argument("end", help="Single character (taken literally), U+XXXX, 0xXXXX or decimal codepoint")
    sp.add_argument("--reverse", action="store_true", help="Print from END down to START")
    sp.add_argument("--format", default="char", choices=["char", "hex", "int"])
    sp.add_argument("--limit", type=int, default=None, help="Stop after N values")
    sp.set_defaults(func=cmd_list)

    sp = sub.add_parser("count", help="print how many scalar values START..END holds")
    sp.add_argument("start")
    sp.add_argument("end")
    sp.set_defaults(func=cmd_count)

    sp = sub.add_parser("split", help="split START..END into PARTS disjoint windows (JSON)")
    sp.add_argument("start")
    sp.add_argument("end")
    sp.add_argument("parts", type=int)
    sp.set_defaults(func=cmd_split)

    return p

def main(argv=None):
    p = build_parser()
    ns = p.parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if ns.verbose else logging.WARNING)
    try:
        return ns.func(ns)
    except ValueError as e:  # pydantic ValidationError and CharIterError included
        print(f"error: {e}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    raise SystemExit(main())
