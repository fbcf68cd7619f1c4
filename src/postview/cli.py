"""Typer-based CLI entry point."""

from __future__ import annotations

import functools
import logging
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from .appctx import AppContext
from .config import NO_OWNERS_MESSAGE, NO_POSTS_MESSAGE
from .domain.models import OwnerSortKey
from .errors import PostViewError, SettingsError
from .infrastructure.repositories import InMemoryPostRepository
from .utils.console_logger import ensure_console_logger

app = typer.Typer(help="Browse, search and delete an owner's remote posts")
console = Console()


def _handle_errors(func):
    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except SettingsError as exc:
            typer.echo(f"Settings error: {exc}", err=True)
            raise typer.Exit(1) from exc
        except PostViewError as exc:
            typer.echo(f"Error: {exc}", err=True)
            raise typer.Exit(1) from exc

    return wrapper


@app.callback()
def main(
    ctx: typer.Context,
    base_url: Optional[str] = typer.Option(None, "--base-url", help="Backend address (overrides settings)"),
    demo: bool = typer.Option(False, "--demo", help="Use built-in demo data instead of the backend"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log debug output to stderr"),
) -> None:
    """Shared options for every command."""

    ctx.obj = {"base_url": base_url, "demo": demo, "verbose": verbose}


def _context(ctx: typer.Context) -> AppContext:
    options = ctx.obj or {}
    repository = InMemoryPostRepository.with_demo_data() if options.get("demo") else None
    context = AppContext(repository=repository, base_url=options.get("base_url"))
    level = logging.DEBUG if options.get("verbose") else context.log_level
    ensure_console_logger(logging.getLogger("postview"), "postview-cli", level=level)
    ctx.call_on_close(context.close)
    return context


@app.command()
@_handle_errors
def owners(
    ctx: typer.Context,
    sort: OwnerSortKey = typer.Option(OwnerSortKey.NAME, "--sort", help="Sort column"),
    desc: bool = typer.Option(False, "--desc", help="Sort descending"),
    page: int = typer.Option(0, "--page", min=0, help="Zero-based page"),
    page_size: Optional[int] = typer.Option(None, "--page-size", min=1, help="Rows per page"),
) -> None:
    """List owners, sorted and paginated."""

    context = _context(ctx)
    vm = context.create_owner_list()
    vm.load()
    if vm.error.value:
        typer.echo(vm.error.value, err=True)
        raise typer.Exit(1)
    if vm.sort_key.value is not sort:
        vm.sort_by(sort)
    if desc:
        vm.sort_by(sort)
    if page_size is not None:
        vm.change_page_size(page_size)
    vm.change_page(page)

    table = Table(title=f"Owners (page {page + 1} of {max(vm.page_count.value, 1)})")
    table.add_column("ID", justify="right")
    table.add_column(f"Name {vm.sort_indicator(OwnerSortKey.NAME)}".rstrip())
    table.add_column(f"Email {vm.sort_indicator(OwnerSortKey.EMAIL)}".rstrip())
    table.add_column("Address")
    for owner in vm.owners.value:
        table.add_row(str(owner.id), owner.name, owner.email, owner.address.one_line())
    if not vm.owners.value:
        table.add_row("", NO_OWNERS_MESSAGE, "", "")
    console.print(table)
    console.print(f"{vm.total_count.value} owners")


@app.command()
@_handle_errors
def posts(
    ctx: typer.Context,
    owner_id: int = typer.Argument(..., help="Owner whose posts to show"),
    page: int = typer.Option(0, "--page", min=0, help="Zero-based page"),
    page_size: Optional[int] = typer.Option(None, "--page-size", min=1, help="Rows per page"),
    search: str = typer.Option("", "--search", "-s", help="Filter fetched posts by title"),
) -> None:
    """Show one page of an owner's posts."""

    context = _context(ctx)
    vm = context.create_post_list(owner_id)
    if page_size is not None:
        vm.page_size.value = page_size
    vm.mount()
    # Walk forward page by page like the table's "next" button so the
    # cache fills in server order.
    for target in range(1, page + 1):
        if vm.error.value:
            break
        vm.change_page(target)
    if vm.error.value:
        typer.echo(vm.error.value, err=True)
        raise typer.Exit(1)
    vm.set_search_text(search)

    if vm.search_active:
        title = f"Posts of owner {owner_id} matching {search!r} (fetched pages only)"
    else:
        title = f"Posts of owner {owner_id} (page {vm.page.value + 1} of {max(vm.page_count.value, 1)})"
    table = Table(title=title)
    table.add_column("ID", justify="right")
    table.add_column("Title")
    table.add_column("Body")
    for post in vm.posts.value:
        table.add_row(str(post.id), post.title, post.body)
    if not vm.posts.value:
        table.add_row("", NO_POSTS_MESSAGE, "")
    console.print(table)
    console.print(f"{vm.total_count.value} posts")


@app.command()
@_handle_errors
def delete(
    ctx: typer.Context,
    post_id: int = typer.Argument(..., help="Post to delete"),
) -> None:
    """Delete a single post on the backend."""

    context = _context(ctx)
    context.repository.delete_post(post_id)
    console.print(f"[green]Deleted post {post_id}")


@app.command()
def gui(ctx: typer.Context) -> None:
    """Launch the desktop viewer."""

    from .gui.main import main as gui_main

    options = ctx.obj or {}
    raise typer.Exit(gui_main(
        demo=bool(options.get("demo")),
        base_url=options.get("base_url"),
        verbose=bool(options.get("verbose")),
    ))


if __name__ == "__main__":  # pragma: no cover
    app()
