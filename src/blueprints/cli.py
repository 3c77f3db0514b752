"""CLI entrypoint for the blueprints service."""

import argparse
import json
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

from blueprints.api.blueprints_api import BlueprintsApi
from blueprints.api.models import ApiResponse
from blueprints.config.loader import DEFAULT_CONFIG_PATH, default_config, load_config
from blueprints.filters import FILTERS
from blueprints.services import build_service
from blueprints.utils.logging import configure_logging, get_logger

logger = get_logger(__name__)


def _parse_point(value: str) -> Dict[str, int]:
    """Parse 'X,Y' into a point dict."""
    try:
        x, y = value.split(",")
        return {"x": int(x), "y": int(y)}
    except ValueError:
        raise argparse.ArgumentTypeError(f"Invalid point '{value}' (expected X,Y)") from None


def _resolve_config(args: argparse.Namespace) -> Dict[str, Any]:
    if args.config:
        config = load_config(Path(args.config))
    elif DEFAULT_CONFIG_PATH.exists():
        config = load_config(DEFAULT_CONFIG_PATH)
    else:
        config = default_config()
    if args.filter:
        config["filter"] = args.filter
    return config


def _emit(response: ApiResponse) -> int:
    print(json.dumps(response.to_dict(), indent=2))
    return 0 if response.code < 400 else 1


def cmd_list(api: BlueprintsApi, args: argparse.Namespace) -> ApiResponse:
    """List all blueprints, or one author's."""
    if args.author:
        return api.list_by_author(args.author)
    return api.list_blueprints()


def cmd_show(api: BlueprintsApi, args: argparse.Namespace) -> ApiResponse:
    """Show one blueprint."""
    return api.get_blueprint(args.author, args.name)


def cmd_create(api: BlueprintsApi, args: argparse.Namespace) -> ApiResponse:
    """Create a blueprint."""
    return api.create_blueprint({
        "author": args.author,
        "name": args.name,
        "points": args.points or [],
    })


def cmd_add_point(api: BlueprintsApi, args: argparse.Namespace) -> ApiResponse:
    """Append a point to a blueprint."""
    return api.add_point(args.author, args.name, args.x, args.y)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="blueprints",
        description="Manage authored blueprints of 2-D points",
    )
    parser.add_argument(
        "--config",
        type=str,
        help=f"Path to YAML config (default: {DEFAULT_CONFIG_PATH} if present)",
    )
    parser.add_argument(
        "--filter",
        type=str,
        choices=sorted(FILTERS),
        help="Override the configured read filter",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # list command
    list_parser = subparsers.add_parser("list", help="List blueprints")
    list_parser.add_argument("--author", type=str, help="Only this author's blueprints")
    list_parser.set_defaults(func=cmd_list)

    # show command
    show_parser = subparsers.add_parser("show", help="Show a blueprint")
    show_parser.add_argument("author")
    show_parser.add_argument("name")
    show_parser.set_defaults(func=cmd_show)

    # create command
    create_parser = subparsers.add_parser("create", help="Create a blueprint")
    create_parser.add_argument("author")
    create_parser.add_argument("name")
    create_parser.add_argument(
        "--point",
        dest="points",
        action="append",
        type=_parse_point,
        metavar="X,Y",
        help="Point to add, in order (repeatable)",
    )
    create_parser.set_defaults(func=cmd_create)

    # add-point command
    add_point_parser = subparsers.add_parser("add-point", help="Append a point to a blueprint")
    add_point_parser.add_argument("author")
    add_point_parser.add_argument("name")
    add_point_parser.add_argument("x", type=int)
    add_point_parser.add_argument("y", type=int)
    add_point_parser.set_defaults(func=cmd_add_point)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entrypoint."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 0

    try:
        config = _resolve_config(args)
    except (FileNotFoundError, ValueError) as e:
        logger.error(str(e))
        return 2
    configure_logging(config["logging"].get("level", "INFO"))

    try:
        api = BlueprintsApi(build_service(config))
        return _emit(args.func(api, args))
    except Exception as e:
        logger.error(f"Error running command '{args.command}': {e}", exc_info=True)
        raise


if __name__ == "__main__":
    sys.exit(main())
