"""pagenav CLI: render page navigation for a URL from the command line.

Usage:
    pagenav links --url "https://example.com/posts?page=4of10" --total 100
    pagenav pager --url "https://example.com/posts" --total 35 --framework uikit
"""

from __future__ import annotations

import argparse
import logging
import sys

from .core.config import PaginationConfig, get_config
from .exceptions import InvalidArgumentError
from .pagination import Pagination
from .styles import Framework

logger = logging.getLogger(__name__)


def _paginate(args: argparse.Namespace) -> Pagination:
    pagination = Pagination(args.framework)
    known = pagination.initialize(args.key, args.per_page, args.url)
    if args.total is not None:
        pagination.set_total_count(args.total)
    elif not known:
        logger.info("No --total given; assuming a single page")
    return pagination


def cmd_links(args: argparse.Namespace) -> int:
    """Print numbered page links."""
    print(_paginate(args).links(args.pad))
    return 0


def cmd_pager(args: argparse.Namespace) -> int:
    """Print previous/next pager links."""
    print(_paginate(args).pager(args.previous, args.next))
    return 0


def cmd_info(args: argparse.Namespace) -> int:
    """Print the computed pagination state."""
    pagination = _paginate(args)
    print(f"current_page: {pagination.current_page}")
    print(f"number_pages: {pagination.number_pages}")
    print(f"offset: {pagination.offset}")
    print(f"length: {pagination.length}")
    print(f"last_page: {pagination.last_page}")
    print(f"previous_url: {pagination.previous_url}")
    print(f"next_url: {pagination.next_url}")
    return 0


def _add_common(parser: argparse.ArgumentParser, cfg: PaginationConfig) -> None:
    parser.add_argument("--url", required=True, help="URL of the page being paginated")
    parser.add_argument("--total", type=int, default=None, help="Total number of records")
    parser.add_argument("--key", default=cfg.query_key, help="Query parameter holding the page")
    parser.add_argument("--per-page", type=int, default=cfg.page_size, help="Records per page")
    parser.add_argument(
        "--framework",
        choices=[member.value for member in Framework],
        default=cfg.framework,
        help="CSS framework preset",
    )


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    cfg = get_config()
    parser = argparse.ArgumentParser(
        prog="pagenav",
        description="Render pagination links for a URL",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command", required=True)

    # links command
    links_parser = subparsers.add_parser("links", help="Render numbered page links")
    _add_common(links_parser, cfg)
    links_parser.add_argument("--pad", type=int, default=cfg.pad, help="Links on each side of the current page")
    links_parser.set_defaults(func=cmd_links)

    # pager command
    pager_parser = subparsers.add_parser("pager", help="Render previous/next links")
    _add_common(pager_parser, cfg)
    pager_parser.add_argument("--previous", default=cfg.previous_label, help="Previous link label")
    pager_parser.add_argument("--next", default=cfg.next_label, help="Next link label")
    pager_parser.set_defaults(func=cmd_pager)

    # info command
    info_parser = subparsers.add_parser("info", help="Show offset, page count and neighbour URLs")
    _add_common(info_parser, cfg)
    info_parser.set_defaults(func=cmd_info)

    args = parser.parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")
    try:
        return args.func(args)
    except InvalidArgumentError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
