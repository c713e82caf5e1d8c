import typer

from ... import __version__
from .commands import check as check_cmd

app = typer.Typer(help="Zotero coverage CLI: find bibliography entries never cited in a document")

app.command(name="check")(check_cmd.check)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"zotero-coverage {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        False,
        "--version",
        "-V",
        callback=_version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
) -> None:
    """Check citation coverage of markdown documents against a Zotero library."""


if __name__ == "__main__":
    app()
