"""CLI error handling: wrap commands to report errors instead of tracebacks."""

from functools import wraps

import typer
from click.exceptions import Exit

from snowfall.errors import ClockRegressionError, InvalidConfigurationError


def error_feedback(f):
    """Wrap command to catch exceptions and report them before exiting.

    Echoes the error to stderr and raises typer.Exit(1).
    """

    @wraps(f)
    def wrapper(*args, **kwargs):
        try:
            return f(*args, **kwargs)
        except (SystemExit, Exit):
            raise
        except InvalidConfigurationError as e:
            typer.echo(f"Invalid configuration: {e}", err=True)
            raise typer.Exit(1) from e
        except ClockRegressionError as e:
            typer.echo(f"Clock error: {e}", err=True)
            raise typer.Exit(1) from e
        except (ValueError, KeyError, TypeError) as e:
            typer.echo(f"Invalid input: {e}", err=True)
            raise typer.Exit(1) from e
        except OSError as e:
            typer.echo(f"File error: {e}", err=True)
            raise typer.Exit(1) from e
        except Exception as e:
            typer.echo(f"Error: {e}", err=True)
            raise typer.Exit(1) from e

    return wrapper
