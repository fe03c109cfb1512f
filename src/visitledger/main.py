from collections.abc import Sequence
from sys import exit
from typing import Annotated, Any, final

import typer
from typing_extensions import override
from typer.core import TyperGroup

from visitledger.exceptions import VisitLedgerError


@final
class ErrorHandlingGroup(TyperGroup):
    @override
    def main(  # pyright: ignore[reportAny]
        self,
        args: Sequence[str] | None = None,
        prog_name: str | None = None,
        complete_var: str | None = None,
        standalone_mode: bool = True,
        windows_expand_args: bool = True,
        **extra: Any,  # pyright: ignore[reportAny, reportExplicitAny]
    ) -> Any:  # pyright: ignore[reportExplicitAny]
        try:
            return super().main(args, prog_name, complete_var, standalone_mode, windows_expand_args, **extra)  #  pyright: ignore[reportAny]
        except VisitLedgerError as e:
            typer.secho(f"Error: {e.message}", err=True, fg=typer.colors.RED)
            exit(e.exit_code)
        except Exception as e:
            typer.secho("Unexpected Internal Error", err=True, fg=typer.colors.RED)
            typer.echo(str(e), err=True)
            exit(1)


app = typer.Typer(cls=ErrorHandlingGroup, no_args_is_help=True)


@app.callback()
def main(
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Log store and index operations to stderr.",
        ),
    ] = False,
) -> None:
    """
    Append-only visit records for registered subjects, kept in a key-value store.
    """
    from visitledger.console import configure_logging

    configure_logging(verbose)


@app.command("init")
def init() -> None:
    """
    Initialize a new store in the current directory.
    """
    from visitledger.commands import init

    init.init()


@app.command("register")
def register(
    subject_id: Annotated[str, typer.Argument(help="Identifier of the subject to register.")],
    name: Annotated[str, typer.Option("--name", "-n", help="Display name of the subject.")] = "",
    category: Annotated[str, typer.Option("--category", "-c", help="Free-form category.")] = "",
    description: Annotated[str, typer.Option("--description", "-d", help="Free-form description.")] = "",
    force: Annotated[
        bool,
        typer.Option(
            "--force",
            help="Overwrite an existing subject. This discards its record list.",
        ),
    ] = False,
) -> None:
    """
    Register a subject so records can be appended to it.
    """
    from visitledger.commands import register

    register.register(subject_id, name, category, description, force)


@app.command("append")
def append(
    subject_id: Annotated[str, typer.Argument(help="Identifier of a registered subject.")],
    payload: Annotated[str | None, typer.Argument(help="Record text. Read from stdin when omitted.")] = None,
) -> None:
    """
    Append a record to a subject's history and print its key.
    """
    from visitledger.commands import append

    append.append(subject_id, payload)


@app.command("history")
def history(
    subject_id: Annotated[str, typer.Argument(help="Identifier of a registered subject.")],
    json_output: Annotated[
        bool,
        typer.Option(
            "--json",
            help="Output the records as JSON.",
        ),
    ] = False,
) -> None:
    """
    Print the full record history of a subject, oldest first.
    """
    from visitledger.commands import history

    history.history(subject_id, json_output)


@app.command("log")
def log(
    subject_id: Annotated[str, typer.Argument(help="Identifier of a registered subject.")],
) -> None:
    """
    Display a subject's records as a table.
    """
    from visitledger.commands import log

    log.log(subject_id)


@app.command("show")
def show(
    subject_id: Annotated[str, typer.Argument(help="Identifier of a registered subject.")],
    json_output: Annotated[
        bool,
        typer.Option(
            "--json",
            help="Output the subject as JSON.",
        ),
    ] = False,
) -> None:
    """
    Show a subject's profile and record count.
    """
    from visitledger.commands import show

    show.show(subject_id, json_output)


@app.command("invoke", context_settings={"ignore_unknown_options": True})
def invoke(
    function: Annotated[
        str,
        typer.Argument(help="Function name: registerSubject, appendRecord or reconstructHistory."),
    ],
    args: Annotated[list[str] | None, typer.Argument(help="Positional arguments for the function.")] = None,
) -> None:
    """
    [Plumbing] Run a named ledger function with positional arguments.
    """
    from visitledger.commands import invoke

    invoke.invoke(function, args or [])


if __name__ == "__main__":
    app()
