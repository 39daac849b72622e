"""Query Typer app factory."""

import typer

from mdref.api.query._constants import QUERY_KIND_BLOCK, QUERY_KIND_ENTITY
from mdref.api.query.cmd_parse import cmd_parse
from mdref.cli._handle_stage_result import handle_stage_result


def query() -> typer.Typer:
    """Create and configure the query Typer app."""
    app = typer.Typer(
        name="query",
        help="Reference query parsing",
        pretty_exceptions_show_locals=False,
        pretty_exceptions_enable=False,
        context_settings={"help_option_names": ["-h", "--help"]},
        invoke_without_command=True,
    )

    @app.callback(invoke_without_command=True)
    def callback(ctx: typer.Context) -> None:
        if ctx.invoked_subcommand is None:
            typer.echo(ctx.get_help(), err=True)
            raise typer.Exit()

    @app.command(name="entity")
    def entity_cmd(
        ctx: typer.Context,
        path: str = typer.Argument(..., help="Note path (absolute or relative to the vault)"),
        line: int = typer.Argument(..., min=0, help="Zero-indexed line number"),
        character: int = typer.Argument(..., min=0, help="Zero-indexed cursor offset"),
    ) -> None:
        """Parse a note reference ([[file#heading]], [text](file)) at the cursor."""
        handle_stage_result(cmd_parse, ctx)(path, line, character, kind=QUERY_KIND_ENTITY)

    @app.command(name="block")
    def block_cmd(
        ctx: typer.Context,
        path: str = typer.Argument(..., help="Note path (absolute or relative to the vault)"),
        line: int = typer.Argument(..., min=0, help="Zero-indexed line number"),
        character: int = typer.Argument(..., min=0, help="Zero-indexed cursor offset"),
    ) -> None:
        """Parse a block search ([[ search text]]) at the cursor."""
        handle_stage_result(cmd_parse, ctx)(path, line, character, kind=QUERY_KIND_BLOCK)

    return app
