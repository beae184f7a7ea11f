"""DebtChange log commands."""

from datetime import datetime, UTC

import click
from payerindex.cli.error_handling import handle_domain_error
from payerindex.domain.debt import DebtService
from payerindex.domain.errors import DomainError


def _format_timestamp(timestamp: int) -> str:
    """Render a block timestamp as UTC, or the raw seconds if out of datetime range."""
    try:
        return datetime.fromtimestamp(timestamp, UTC).strftime("%Y-%m-%d %H:%M:%S")
    except (ValueError, OverflowError, OSError):
        return str(timestamp)


@click.group()
def changes_group():
    """Show the debt change log."""
    pass


@changes_group.command("list")
@click.option("--account", help="Only show changes of this account")
@click.pass_context
def list_changes(ctx, account: str | None):
    """List debt changes in the order they were indexed.

    Examples:
        payerindex changes list
        payerindex changes list --account 0x0000000000000000000000000000000000000001
    """
    db = ctx.obj["db"]
    service = DebtService(db)

    try:
        changes = service.list_changes(account)
    except DomainError as e:
        handle_domain_error(ctx, e)

    if not changes:
        click.echo("No debt changes found.")
        return

    click.echo(f"\nDebt changes ({len(changes)}):")
    click.echo("-" * 80)
    for change in changes:
        when = _format_timestamp(change.block_timestamp)
        click.echo(f"{change.id}")
        click.echo(f"    {when} | {change.address} | {change.amount:+d}")


def register_commands(cli):
    """Register changes commands with main CLI."""
    cli.add_command(changes_group, name="changes")
