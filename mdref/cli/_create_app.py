"""Create the main Typer CLI app."""

import typer

from mdref.cli.query import query


def _create_app() -> typer.Typer:
    """Create and configure the main CLI Typer app."""
    app = typer.Typer(
        pretty_exceptions_show_locals=False,
        pretty_exceptions_enable=False,
        help="mdref CLI",
        context_settings={"help_option_names": ["-h", "--help"]},
        invoke_without_command=True,
    )

    app.add_typer(query(), name="query")

    @app.callback(invoke_without_command=True)
    def main_callback(
        ctx: typer.Context,
        display: str = typer.Option("yaml", "--display", "-d", help="Output format: json or yaml"),
    ) -> None:
        if display not in ("json", "yaml"):
            typer.echo(f"Error: --display must be 'json' or 'yaml', got '{display}'", err=True)
            raise typer.Exit(1)

        ctx.ensure_object(dict)
        ctx.obj["display_format"] = display

        _setup_logging()

        if ctx.invoked_subcommand is None:
            typer.echo(ctx.get_help())
            raise typer.Exit()

    return app


def _setup_logging() -> None:
    """Attach the file log handler using the configured level, if a config exists."""
    from mdref.api.config.MdrefConfig import MdrefConfig
    from mdref.utils.configure_logging import configure_logging

    try:
        config = MdrefConfig.load()
    except ValueError:
        # Commands report config problems themselves
        return
    configure_logging(MdrefConfig.get_home_dir(), config.log.level_number())
