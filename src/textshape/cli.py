# src/textshape/cli.py
import argparse
import json
import logging
import sys

from .arrays import find_best_match, match, sort
from .strings import match_substrings
from .utils import debug, enabled_topics, load_config


def _load_list(name):
    """Read a JSON array from the data directory."""
    return list(load_config(name, mode="list"))


def _collect(values, config_name, what):
    items = list(values or [])
    if config_name:
        items.extend(_load_list(config_name))
    debug(f"{what}: {len(items)} item(s)")
    return items


def _cmd_sort(args):
    return sort(_collect(args.items, args.from_config, "sort items"))


def _cmd_best_match(args):
    candidates = _collect(args.candidates, args.from_config, "candidates")
    best = find_best_match(args.text, candidates, debug=args.debug)
    return {"match": best.match, "score": best.score}


def _cmd_match(args):
    inputs = _collect(args.inputs, args.inputs_config, "inputs")
    candidates = _collect(args.candidates, args.candidates_config, "candidates")
    mapping = match(inputs, candidates)
    # JSON objects need string keys; keep pairs so non-string inputs survive
    return [[k, v] for k, v in mapping.items()]


def _cmd_substrings(args):
    if args.raw:
        return match_substrings(args.first, args.second, delimiters="")
    return match_substrings(args.first, args.second)


def build_parser():
    parser = argparse.ArgumentParser(
        prog="textshape",
        description="Natural sorting, best-match lookup and substring overlap.",
    )
    parser.add_argument("--debug", action="store_true", help="Verbose debug logs")
    sub = parser.add_subparsers(dest="command", required=True)

    p_sort = sub.add_parser("sort", help="Sort items in natural order")
    p_sort.add_argument("items", nargs="*", help="Items to sort (e.g. file10 file2 file1)")
    p_sort.add_argument("--from-config", dest="from_config", help="JSON list in the data dir")
    p_sort.set_defaults(handler=_cmd_sort)

    p_best = sub.add_parser("best-match", help="Find the best-matching candidate for TEXT")
    p_best.add_argument("text")
    p_best.add_argument("candidates", nargs="*")
    p_best.add_argument("--from-config", dest="from_config", help="JSON list of candidates")
    p_best.set_defaults(handler=_cmd_best_match)

    p_match = sub.add_parser("match", help="Map every input to its best candidate")
    p_match.add_argument("--inputs", nargs="*", default=[])
    p_match.add_argument("--candidates", nargs="*", default=[])
    p_match.add_argument("--inputs-config", dest="inputs_config")
    p_match.add_argument("--candidates-config", dest="candidates_config")
    p_match.set_defaults(handler=_cmd_match)

    p_sub = sub.add_parser("substrings", help="Greedy common substrings of FIRST found in SECOND")
    p_sub.add_argument("first")
    p_sub.add_argument("second")
    p_sub.add_argument("--raw", action="store_true", help="Do not split runs on whitespace")
    p_sub.set_defaults(handler=_cmd_substrings)

    return parser


def main(argv=None):
    """CLI: run one textshape operation and print its result as JSON."""
    parser = build_parser()
    args = parser.parse_args(argv)

    pkg_log = logging.getLogger("textshape")
    old_level = pkg_log.level
    topics = ("textshape",) if args.debug else ()
    if args.debug:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")
        pkg_log.setLevel(logging.DEBUG)

    try:
        with enabled_topics(*topics):
            result = args.handler(args)
    except (OSError, ValueError, TypeError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    finally:
        pkg_log.setLevel(old_level)

    print(json.dumps(result, indent=2, ensure_ascii=False))
    return 0


if __name__ == "__main__":
    sys.exit(main())
