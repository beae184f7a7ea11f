"""Debt query commands."""

import click
from payerindex.cli.error_handling import handle_domain_error
from payerindex.domain.debt import DebtService
from payerindex.domain.errors import DomainError


@click.group()
def debt_group():
    """Show indexed debts."""
    pass


@debt_group.command("show")
@click.argument("account", metavar="ACCOUNT")
@click.pass_context
def show_debt(ctx, account: str):
    """Show the debt of one account.

    Examples:
        payerindex debt show 0x0000000000000000000000000000000000000001
    """
    db = ctx.obj["db"]
    service = DebtService(db)

    try:
        debt = service.require_debt(account)
    except DomainError as e:
        handle_domain_error(ctx, e)

    changes = service.list_changes(debt.address)
    click.echo(f"Account: {debt.address}")
    click.echo(f"Debt: {debt.amount}")
    click.echo(f"Changes: {len(changes)}")


@debt_group.command("list")
@click.option("--outstanding", is_flag=True, help="Only show accounts with a non-zero balance")
@click.pass_context
def list_debts(ctx, outstanding: bool):
    """List the debt of every account."""
    db = ctx.obj["db"]
    service = DebtService(db)

    debts = service.list_debts(outstanding_only=outstanding)
    if not debts:
        click.echo("No debts found.")
        return

    click.echo("\nDebts:")
    click.echo("-" * 80)
    for debt in debts:
        click.echo(f"{debt.address} | {debt.amount:>30d}")
    click.echo("-" * 80)
    click.echo(f"Total: {service.total_outstanding()}")


def register_commands(cli):
    """Register debt commands with main CLI."""
    cli.add_command(debt_group, name="debt")
