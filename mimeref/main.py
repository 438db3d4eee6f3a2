"""CLI entry point — dispatches mimeref subcommands."""
import argparse
import sys

from mimeref.commands import get_version


def _add_lookup_args(p: argparse.ArgumentParser) -> None:
    p.add_argument("--json", action="store_true", help="Print results as JSON")
    p.add_argument("--no-config", dest="no_config", action="store_true",
                   help="Ignore [override] entries from ~/.mimeref.config")
    p.add_argument("--remote", action="store_true",
                   help="Ask the configured mimeref server instead of resolving locally")


def main() -> None:
    parser = argparse.ArgumentParser(
        prog="mimeref",
        description="Resolve file paths and MIME types against mime-db",
    )
    parser.add_argument("--version", action="version", version=f"mimeref {get_version()}")
    sub = parser.add_subparsers(dest="command", metavar="COMMAND")

    # mimeref type
    p_type = sub.add_parser("type", help="Look up MIME type strings")
    p_type.add_argument("queries", nargs="+", metavar="TYPE",
                        help='Type string, parameters allowed (e.g. "text/html; charset=utf-8")')
    _add_lookup_args(p_type)

    # mimeref path
    p_path = sub.add_parser("path", help="Look up file paths by extension")
    p_path.add_argument("queries", nargs="+", metavar="PATH", help="File path or name")
    _add_lookup_args(p_path)

    # mimeref server
    p_server = sub.add_parser("server", help="Start the mimeref lookup server")
    p_server.add_argument("--host", default="127.0.0.1", help="Bind address (default: 127.0.0.1)")
    p_server.add_argument("--port", type=int, default=8766, help="Port (default: 8766)")
    p_server.add_argument("--reload", action="store_true", help="Enable auto-reload (dev only)")

    args = parser.parse_args()

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    try:
        if args.command == "type":
            from mimeref.commands.lookup import cmd_type
            cmd_type(args)
        elif args.command == "path":
            from mimeref.commands.lookup import cmd_path
            cmd_path(args)
        elif args.command == "server":
            from mimeref.commands.server import cmd_server
            cmd_server(args)
        else:
            parser.print_help()
            sys.exit(1)
    except KeyboardInterrupt:
        sys.stderr.write("\n")
        sys.exit(130)


if __name__ == "__main__":
    main()
