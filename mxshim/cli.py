import json as _json

import click
import numpy as np
from rich.console import Console

from . import __version__
from . import config as _cfg
from .dialect import current
from .errors import IllegalArgumentError
from .utils.logging import set_level

console = Console()


def _info_summary() -> str:
    try:
        current()
        from .arrays import DIALECT, FLOAT64_DTYPE, INT64_DTYPE, OBJECT_DTYPE
    except IllegalArgumentError as e:
        raise click.ClickException(str(e)) from e

    lines = [
        f"mxshim: {__version__}",
        f"NumPy: {np.__version__}",
        f"Dialect: {DIALECT}",
        f"Object dtype: {OBJECT_DTYPE}",
        f"Long dtype: {INT64_DTYPE}",
        f"Double dtype: {FLOAT64_DTYPE}",
    ]
    return "\n".join(lines)


@click.group()
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"], case_sensitive=False),
    default=None,
    help="Override MXSHIM_LOG_LEVEL for this invocation.",
)
def main(log_level):
    """mxshim CLI — array compatibility helpers."""
    if log_level:
        set_level(log_level)


@main.command()
def info():
    """Display the active dialect and cached array type handles."""
    summary = _info_summary()
    console.print("[bold cyan]mxshim Report[/bold cyan]")
    console.print(summary, markup=False)


@main.group()
def config():
    """Inspect MXSHIM_* environment configuration."""
    pass


@config.command("list")
@click.option(
    "--json",
    "as_json",
    is_flag=True,
    help="Emit machine-readable JSON.",
)
def config_list(as_json: bool):
    rows = _cfg.describe()
    if as_json:
        click.echo(_json.dumps(rows, indent=2, default=str))
        return
    for row in rows:
        choices = f" choices={','.join(row['choices'])}" if row["choices"] else ""
        flag = "" if row["valid"] else "  INVALID"
        console.print(
            f"- {row['name']} [{row['category']}]: current={row['current']!r} "
            f"({row['source']}) default={row['default']!r}{choices}{flag}",
            markup=False,
        )
        console.print(f"    {row['description']}", markup=False)


if __name__ == "__main__":
    main()
