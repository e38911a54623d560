"""CLI interface using typer."""

import asyncio
import json
import logging

import typer
from pydantic import TypeAdapter

from .config import settings
from .core import HttpTransport
from .errors import InvalidURLError
from .loader import Loader
from .methods import Get, Post
from .models import RESOURCES
from .resource import Resource
from .result import Result, Success

app = typer.Typer(
    name="webservice",
    help="Load typed JSON resources over HTTP",
    no_args_is_help=True,
)


def _parse_params(params: list[str]) -> dict[str, str]:
    parsed = {}
    for item in params:
        key, sep, value = item.partition("=")
        if not sep:
            raise typer.BadParameter(f"expected key=value, got {item!r}")
        parsed[key] = value
    return parsed


async def _load(resource: Resource) -> Result:
    """Dispatch resource and wait for its completion callback."""
    done: asyncio.Future = asyncio.get_running_loop().create_future()

    async with HttpTransport(
        timeout=settings.timeout,
        user_agent=settings.user_agent,
        follow_redirects=settings.follow_redirects,
    ) as transport:
        loader = Loader(transport=transport)
        loader.dispatch(resource, done.set_result)
        return await done


@app.command()
def load(
    model: str = typer.Argument(..., help=f"Model to load: {', '.join(RESOURCES)}"),
    url: str = typer.Option(None, "-u", "--url", help="Override the model's default URL"),
    params: list[str] = typer.Option([], "-p", "--param", help="GET query parameter key=value"),
    post: str = typer.Option(None, "--post", help="Send a POST with this JSON body"),
    verbose: bool = typer.Option(False, "-v", "--verbose", help="Show debug logging"),
):
    """Load a resource and print the decoded model as JSON."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG)

    if model not in RESOURCES:
        raise typer.BadParameter(f"unknown model {model!r}", param_hint="MODEL")
    model_type, default_url = RESOURCES[model]

    if post is not None and params:
        raise typer.BadParameter("--param cannot be combined with --post", param_hint="--param")
    if post is not None:
        try:
            method = Post(json.loads(post))
        except json.JSONDecodeError as exc:
            raise typer.BadParameter(str(exc), param_hint="--post") from exc
    else:
        method = Get(_parse_params(params))

    try:
        resource = Resource.build(url or default_url, method, model_type)
    except InvalidURLError as exc:
        raise typer.BadParameter(str(exc), param_hint="--url") from exc
    result = asyncio.run(_load(resource))

    if isinstance(result, Success):
        typer.echo(TypeAdapter(model_type).dump_json(result.value, indent=2).decode())
    else:
        typer.echo(f"Error: {result.error}", err=True)
        raise typer.Exit(code=1)


@app.command()
def version():
    """Show version."""
    from . import __version__

    typer.echo(f"webservice {__version__}")


if __name__ == "__main__":
    app()
