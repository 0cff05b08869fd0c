"""CLI entry point for discourse-api."""

import json
import logging
from pathlib import Path

import click

from discourse_api.client import Client
from discourse_api.config import load_settings
from discourse_api.errors import DiscourseError
from discourse_api.types.base import DiscourseModel


def _client(ctx: click.Context) -> Client:
    settings = load_settings(ctx.obj["config"])
    return Client.from_settings(settings)


def _render(models: DiscourseModel | list[DiscourseModel], fmt: str, columns: list[str]) -> str:
    """Render one model or a list of models as JSON or as a text table."""
    if fmt == "json":
        if isinstance(models, list):
            return json.dumps([m.to_dict() for m in models], indent=2)
        return models.to_json(indent=2)

    if not isinstance(models, list):
        models = [models]
    if not models:
        return "(no results)"

    rows = []
    for m in models:
        cells = dict(zip(type(m).table_headers(), m.table_row()))
        rows.append([cells.get(c, "") for c in columns])

    widths = [max(len(c), *(len(r[i]) for r in rows)) for i, c in enumerate(columns)]
    lines = ["  ".join(c.ljust(w) for c, w in zip(columns, widths)).rstrip()]
    lines.append("  ".join("-" * w for w in widths))
    for r in rows:
        lines.append("  ".join(cell.ljust(w) for cell, w in zip(r, widths)).rstrip())
    return "\n".join(lines)


def _run(ctx: click.Context, fetch, columns: list[str], pick=None):
    """Fetch with a fresh client and echo the result; API errors become CLI errors."""
    fmt = ctx.obj["format"]
    try:
        result = fetch(_client(ctx))
    except DiscourseError as e:
        raise click.ClickException(str(e)) from e
    if fmt == "table" and pick is not None:
        result = pick(result)
    click.echo(_render(result, fmt, columns))


@click.group()
@click.option("--config", "config_path", default=None, type=click.Path(exists=True, dir_okay=False, path_type=Path), help="YAML file with token and host.")
@click.option("--format", "fmt", default="json", type=click.Choice(["json", "table"]), help="Output format.")
@click.option("-v", "--verbose", is_flag=True, help="Log every HTTP request.")
@click.pass_context
def main(ctx: click.Context, config_path: Path | None, fmt: str, verbose: bool):
    """discourse-api: query a Discourse forum from the command line."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG)
    ctx.obj = {"config": config_path, "format": fmt}


@main.command()
@click.pass_context
def site_info(ctx: click.Context):
    """Show the site title, description and locale."""
    _run(ctx, lambda c: c.site().get_basic_info(), ["title", "description", "locale", "login_required"])


@main.command()
@click.option("--per-page", default=None, type=int, help="Topics per page.")
@click.option("--order", default=None, help="Sort column, e.g. created or views.")
@click.pass_context
def latest(ctx: click.Context, per_page: int | None, order: str | None):
    """List the latest topics."""
    _run(
        ctx,
        lambda c: c.topics().list_latest(order=order, per_page=per_page),
        ["id", "title", "posts_count", "views", "last_poster_username"],
        pick=lambda r: r.topic_list.topics,
    )


@main.command()
@click.argument("topic_id")
@click.pass_context
def topic(ctx: click.Context, topic_id: str):
    """Show a topic; as a table, list its posts."""
    _run(
        ctx,
        lambda c: c.topics().get(topic_id),
        ["id", "post_number", "username", "created_at"],
        pick=lambda r: r.post_stream.posts,
    )


@main.command()
@click.argument("username")
@click.pass_context
def user(ctx: click.Context, username: str):
    """Show a user profile."""
    _run(
        ctx,
        lambda c: c.users().get(username),
        ["id", "username", "name", "trust_level", "created_at", "last_seen_at"],
        pick=lambda r: r.user,
    )


@main.command()
@click.argument("query")
@click.option("--page", default=None, type=int, help="Result page, starting at 1.")
@click.pass_context
def search(ctx: click.Context, query: str, page: int | None):
    """Full-text search; as a table, list matching posts."""
    _run(
        ctx,
        lambda c: c.search().search(page=page, q=query),
        ["id", "topic_id", "username", "blurb"],
        pick=lambda r: r.posts,
    )


@main.command()
@click.option("--include-subcategories", is_flag=True, help="Also list subcategories.")
@click.pass_context
def categories(ctx: click.Context, include_subcategories: bool):
    """List categories."""
    _run(
        ctx,
        lambda c: c.categories().list(include_subcategories=include_subcategories or None),
        ["id", "name", "slug", "topic_count", "post_count"],
        pick=lambda r: r.category_list.categories,
    )
