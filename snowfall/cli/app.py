import logging

import typer

from snowfall.generator import Generator
from snowfall.lib import config, layout

from . import output
from .errors import error_feedback

app = typer.Typer(no_args_is_help=True, add_completion=False)


def _node_option(node_id: str | None):
    if node_id is not None:
        return config.parse_node_id(node_id)
    return config.node_id()


@app.callback()
def common_options_callback(
    ctx: typer.Context,
    json_output: bool = typer.Option(False, "--json", "-j", help="Output in JSON format."),
    quiet_output: bool = typer.Option(False, "--quiet", "-q", help="Suppress non-essential output."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
):
    """Distributed 64-bit id generator.

    Ids pack a 42-bit timestamp, a 10-bit node id and a 12-bit sequence."""
    output.init_context(ctx, json_output, quiet_output)
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="[snowfall] %(name)s: %(message)s")


@app.command("next")
@error_feedback
def next_ids(
    ctx: typer.Context,
    count: int = typer.Option(1, "--count", "-n", help="Number of ids to generate."),
    node_id: str = typer.Option(None, "--node-id", help="Node id (0-1023) or 'auto'."),
):
    """Generate fresh ids."""
    generator = Generator(_node_option(node_id))
    ids = generator.generate_many(count)
    if output.echo_json({"node_id": generator.node_id, "ids": ids}, ctx):
        return
    for identifier in ids:
        typer.echo(str(identifier))


@app.command()
@error_feedback
def decode(
    ctx: typer.Context,
    ids: list[str] = typer.Argument(..., help="Ids to decode."),
):
    """Show the timestamp, node id and sequence packed into ids."""
    parts = []
    for raw in ids:
        try:
            value = int(raw, 0)
        except ValueError as e:
            raise ValueError(f"Not an integer id: {raw!r}") from e
        parts.append(layout.unpack(value))

    if output.echo_json([p.to_dict() for p in parts], ctx):
        return
    for p in parts:
        typer.echo(
            f"{p.id}  created={p.created_at.isoformat()} ts={p.timestamp} node={p.node_id} seq={p.sequence}"
        )


@app.command()
@error_feedback
def node(
    ctx: typer.Context,
    node_id: str = typer.Option(None, "--node-id", help="Node id (0-1023) or 'auto'."),
):
    """Show the node id this host resolves to."""
    generator = Generator(_node_option(node_id))
    if output.echo_json({"node_id": generator.node_id}, ctx):
        return
    typer.echo(str(generator.node_id))


@app.command()
@error_feedback
def init(ctx: typer.Context):
    """Write the default config to ~/.snowfall/config.yaml if missing."""
    path = config.init_config()
    output.echo_text(f"Config: {path}", ctx)


def main() -> None:
    """Entry point for snowfall command."""
    try:
        app()
    except SystemExit:
        raise
    except BaseException as e:
        raise SystemExit(1) from e
