"""Command line entry point: ``python -m fetchcache`` or ``fetchcache``.

``get`` goes through the disk cache; ``request`` sends a single request via
the request helper and prints the result object as JSON.
"""

from __future__ import annotations

import asyncio
import json

import typer

from fetchcache import __version__
from fetchcache.cache import DiskCache
from fetchcache.client import ApiClient
from fetchcache.config import Settings
from fetchcache.errors import FetchCacheError
from fetchcache.fetcher import HttpFetcher, build_http_client
from fetchcache.logging_config import configure_logging
from fetchcache.models.request import MethodType, RequestResult

app = typer.Typer(
    name="fetchcache",
    help="Fetch URLs through a disk cache, or send one-off JSON requests.",
    no_args_is_help=True,
    add_completion=False,
)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"fetchcache {__version__}")
        raise typer.Exit()


@app.callback()
def main_callback(
    ctx: typer.Context,
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
) -> None:
    settings = Settings()
    configure_logging(settings.logging)
    ctx.obj = settings


def _parse_headers(raw: list[str]) -> dict[str, str]:
    headers: dict[str, str] = {}
    for item in raw:
        name, sep, value = item.partition(":")
        if not sep or not name.strip():
            raise typer.BadParameter(f"expected 'Name: value', got {item!r}", param_hint="--header")
        headers[name.strip()] = value.strip()
    return headers


async def _cached_get(settings: Settings, url: str, cache_dir: str, ttl: int) -> str:
    async with build_http_client(settings.http) as client:
        cache = DiskCache(HttpFetcher(client), cache_dir=cache_dir, ttl=ttl)
        return await cache.fetch(url)


async def _send(
    settings: Settings,
    method: MethodType,
    url: str,
    body: str | None,
    headers: dict[str, str],
) -> RequestResult:
    async with build_http_client(settings.http) as client:
        result = await ApiClient(client).request(method, url, body, headers)
    return result


@app.command("get")
def get_command(
    ctx: typer.Context,
    url: str = typer.Argument(..., help="URL to fetch."),
    cache_dir: str | None = typer.Option(
        None, "--cache-dir", help="Cache directory (default from config)."
    ),
    ttl: int | None = typer.Option(
        None, "--ttl", min=0, help="Freshness window in seconds (default from config)."
    ),
) -> None:
    """Print the body of URL, served from the cache while fresh."""
    settings: Settings = ctx.obj
    try:
        body = asyncio.run(
            _cached_get(
                settings,
                url,
                cache_dir if cache_dir is not None else settings.cache.cache_dir,
                ttl if ttl is not None else settings.cache.ttl_seconds,
            )
        )
    except FetchCacheError as exc:
        typer.echo(exc.message, err=True)
        raise typer.Exit(code=1) from exc
    typer.echo(body, nl=False)


@app.command("request")
def request_command(
    ctx: typer.Context,
    method: MethodType = typer.Argument(..., help="HTTP method.", case_sensitive=False),
    url: str = typer.Argument(..., help="Absolute URL, or a path when http.base_url is set."),
    data: str | None = typer.Option(None, "--data", "-d", help="Raw request body."),
    header: list[str] = typer.Option([], "--header", "-H", help="Extra header 'Name: value'."),
) -> None:
    """Send one request and print the result object as JSON."""
    settings: Settings = ctx.obj
    headers = _parse_headers(header)
    result = asyncio.run(_send(settings, method, url, data, headers))
    typer.echo(json.dumps(result.to_dict()))
    if result.error is not None:
        raise typer.Exit(code=1)


def main() -> None:
    app()


if __name__ == "__main__":
    main()
