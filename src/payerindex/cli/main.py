"""Main CLI entry point."""

import logging

import click
from payerindex.database.factories import create_sqlite_database

# Import and register all commands at module level
from payerindex.cli.commands import (
    event,
    replay,
    debt,
    changes,
)

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


@click.group()
@click.option(
    "--db-path",
    type=click.Path(),
    help="Path to database file (overrides PAYERINDEX_DB_PATH environment variable)",
    envvar="PAYERINDEX_DB_PATH",
)
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default="WARNING",
    show_default=True,
    help="Logging level",
    envvar="PAYERINDEX_LOG_LEVEL",
)
@click.pass_context
def cli(ctx, db_path: str | None, log_level: str):
    """Payerindex - Payer contract debt indexer.

    Applies RegisteredDebt and PaidBackDebt events to a running debt balance
    per account and keeps an append-only log of every balance change.
    """
    ctx.ensure_object(dict)
    logging.basicConfig(level=log_level.upper(), format=LOG_FORMAT)

    # Initialize database connection only when actually running a command
    # (not when showing help)
    if ctx.invoked_subcommand is not None:
        db = create_sqlite_database(database_path=db_path)
        db.connect()
        db.initialize_schema()
        ctx.obj["db"] = db
        ctx.call_on_close(db.disconnect)


# Register all commands
event.register_commands(cli)
replay.register_commands(cli)
debt.register_commands(cli)
changes.register_commands(cli)


def main():
    """Main entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
