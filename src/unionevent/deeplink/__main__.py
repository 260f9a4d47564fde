"""
Command line for deep links.

    python -m unionevent.deeplink build com.example.app Children -q index=1
    python -m unionevent.deeplink parse "com.example.app:///Children?index=1"
"""

import argparse
import json
import sys
from typing import Dict, List, Optional

from ..errors import DeepLinkError
from .url import build_url, parse_url


def _key_value(text: str) -> tuple:
    key, sep, value = text.partition("=")
    if not sep:
        raise argparse.ArgumentTypeError(f"Expected key=value, got {text!r}")
    return key, value


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="python -m unionevent.deeplink", description="Build or parse application deep links")
    sub = parser.add_subparsers(dest="command", required=True)

    build = sub.add_parser("build", help="Build a deep link")
    build.add_argument("scheme", help="URL scheme, usually the bundle id")
    build.add_argument("path", nargs="*", help="Path segments")
    build.add_argument("-q", "--query", type=_key_value, action="append", default=[], metavar="KEY=VALUE", help="Query value (repeatable)")

    parse = sub.add_parser("parse", help="Parse a deep link into JSON")
    parse.add_argument("url")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    if args.command == "build":
        key_values: Dict[str, str] = dict(args.query)
        print(build_url(args.scheme, args.path, key_values))
        return 0

    try:
        link = parse_url(args.url)
    except DeepLinkError as e:
        print(str(e), file=sys.stderr)
        return 2
    print(json.dumps(link.model_dump(), ensure_ascii=False, indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
