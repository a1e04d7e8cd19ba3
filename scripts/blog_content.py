#!/usr/bin/env python3
"""
Blog content CLI: inspect the markdown posts the site will serve.

Loads the content directory the same way the site does, so a broken
frontmatter block shows up here before it shows up in a build.
"""

import sys
import argparse
import logging
from pathlib import Path
from typing import List, Optional

project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from blog.config import Settings
from blog.errors import ContentError
from blog.loaders import ContentLoader
from blog.models import BlogPost
from blog.services import build_listing, find_related, format_post_date, next_visible_count
from pydantic import ValidationError
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.markdown import Markdown
from rich.markup import escape


def _posts_table(posts: List[BlogPost], title: str) -> Table:
    table = Table(title=title)
    table.add_column("Key", style="cyan", no_wrap=True)
    table.add_column("Date")
    table.add_column("Title", style="bold")
    table.add_column("Categories")
    table.add_column("Read time", justify="right")
    for post in posts:
        table.add_row(
            post.key,
            format_post_date(post.published_at),
            post.title,
            ", ".join(post.categories) or "-",
            post.read_time,
        )
    return table


def cmd_list(console: Console, loader: ContentLoader, args: argparse.Namespace) -> int:
    posts = loader.load_all()
    query = args.query or ""
    listing = build_listing(posts, query=query, category=args.category, visible=args.visible)
    if args.load_more and listing.has_more:
        visible = listing.visible
        for _ in range(args.load_more):
            visible = next_visible_count(visible, listing.total, args.load_more_step)
        listing = build_listing(posts, query=query, category=args.category, visible=visible)
    if listing.is_empty:
        console.print("[yellow]No posts match.[/yellow]")
        return 0
    if listing.featured is not None:
        console.print(Panel(
            f"[bold]{listing.featured.title}[/bold]\n{listing.featured.excerpt}",
            title=f"Featured · {format_post_date(listing.featured.published_at)}",
            border_style="blue",
        ))
    console.print(_posts_table(listing.posts, f"Posts ({listing.visible} of {listing.total})"))
    if listing.has_more:
        console.print(f"[dim]{listing.total - listing.visible} more; use --load-more or raise --visible to see them.[/dim]")
    return 0


def cmd_show(console: Console, loader: ContentLoader, args: argparse.Namespace) -> int:
    post = loader.load_by_key(args.key)
    if post is None:
        console.print(f"[red]No post with key '{args.key}'[/red]")
        return 1
    console.print(f"[bold]{post.title}[/bold]")
    console.print(
        f"[dim]{format_post_date(post.published_at)} · {post.read_time} · "
        f"{', '.join(post.categories) or 'uncategorised'} · cover {post.cover_image}[/dim]\n"
    )
    console.print(Panel(Markdown(post.body), border_style="dim"))
    return 0


def cmd_categories(console: Console, loader: ContentLoader, args: argparse.Namespace) -> int:
    categories = loader.list_categories()
    if not categories:
        console.print("[dim]No categories.[/dim]")
    for name in categories:
        console.print(f"  • {name}")
    return 0


def cmd_related(console: Console, loader: ContentLoader, args: argparse.Namespace) -> int:
    posts = loader.load_all()
    post = next((p for p in posts if p.key == args.key), None)
    if post is None:
        console.print(f"[red]No post with key '{args.key}'[/red]")
        return 1
    related = find_related(post, posts, args.limit)
    if not related:
        console.print("[dim]No related posts.[/dim]")
        return 0
    console.print(_posts_table(related, f"Related to {post.key}"))
    return 0


def _non_negative_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not an integer: {value!r}")
    if number < 0:
        raise argparse.ArgumentTypeError(f"must be >= 0, got {number}")
    return number


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Inspect the blog's markdown content directory.")
    parser.add_argument("--content-dir", "-d", type=Path, help="Content directory (default from BLOG_CONTENT_DIR)")
    parser.add_argument("--verbose", "-v", action="store_true", help="Verbose logging")
    sub = parser.add_subparsers(dest="command", required=True)

    p_list = sub.add_parser("list", help="List posts, newest first")
    p_list.add_argument("--query", "-q", help="Search title, excerpt and categories")
    p_list.add_argument("--category", "-c", help="Only posts in this category")
    p_list.add_argument("--visible", type=_non_negative_int, default=None, help="Posts to reveal (default BLOG_INITIAL_VISIBLE)")
    p_list.add_argument(
        "--load-more", type=_non_negative_int, default=0,
        help="Reveal BLOG_LOAD_MORE_STEP more posts this many times",
    )
    p_list.set_defaults(func=cmd_list)

    p_show = sub.add_parser("show", help="Show one post by key")
    p_show.add_argument("key")
    p_show.set_defaults(func=cmd_show)

    p_cat = sub.add_parser("categories", help="List all categories")
    p_cat.set_defaults(func=cmd_categories)

    p_rel = sub.add_parser("related", help="Posts sharing a category with KEY")
    p_rel.add_argument("key")
    p_rel.add_argument("--limit", type=_non_negative_int, default=3, help="Maximum related posts (default 3)")
    p_rel.set_defaults(func=cmd_related)
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING, format="%(message)s")

    console = Console()
    try:
        settings = Settings.from_env()
    except ValidationError as e:
        console.print(f"[red]Invalid configuration: {escape(str(e))}[/red]")
        return 1
    if args.content_dir is not None:
        settings = settings.model_copy(update={"content_dir": args.content_dir})
    if getattr(args, "visible", 0) is None:
        args.visible = settings.initial_visible
    args.load_more_step = settings.load_more_step

    try:
        loader = ContentLoader.from_settings(settings)
        return args.func(console, loader, args)
    except (ContentError, ValueError) as e:
        console.print(f"[red]{escape(str(e))}[/red]")
        return 1


if __name__ == "__main__":
    sys.exit(main())
