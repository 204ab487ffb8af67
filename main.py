"""Command-line entrypoint.

Usage:
  python main.py                 # interactive console menu
  python main.py serve --port 8000
"""

from __future__ import annotations

import argparse
import sys


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Numbers lottery machine")
    sub = parser.add_subparsers(dest="command")
    sub.add_parser("console", help="Run the interactive menu (default)")
    serve = sub.add_parser("serve", help="Run the JSON API on the Flask development server")
    serve.add_argument("--host", default="127.0.0.1")
    serve.add_argument("--port", type=int, default=8000)
    args = parser.parse_args(argv)

    if args.command == "serve":
        from lottery import create_app

        create_app().run(host=args.host, port=args.port, debug=False)
        return 0

    from lottery.console import main as console_main

    return console_main()


if __name__ == "__main__":
    sys.exit(main())
