"""Manual event commands."""

import click
from payerindex.cli.error_handling import handle_domain_error
from payerindex.domain.errors import DomainError, debt_not_found
from payerindex.domain.events import EventMetadata, PaidBackDebt, RegisteredDebt
from payerindex.domain.payer import PayerEventHandler
from payerindex.utils.address import normalize_address, normalize_transaction_hash
from payerindex.utils.amount_parser import parse_amount
from payerindex.utils.timestamp_parser import parse_timestamp


def _event_options(command):
    """Attach the ambient transaction options shared by both event commands."""
    command = click.option(
        "--block-number", type=int, help="Number of the block containing the event"
    )(command)
    command = click.option(
        "--timestamp",
        default="now",
        show_default=True,
        help="Block timestamp (epoch seconds or a date like '2024-01-15 12:00')",
    )(command)
    command = click.option(
        "--log-index", required=True, type=int, help="Log index of the event in its transaction"
    )(command)
    command = click.option(
        "--tx-hash", required=True, help="Hash of the transaction that emitted the event"
    )(command)
    return command


def _parse_event_input(ctx, account, amount, tx_hash, log_index, timestamp, block_number):
    """Normalise command-line input, exiting on invalid values."""
    try:
        account = normalize_address(account)
        tx_hash = normalize_transaction_hash(tx_hash)
    except DomainError as e:
        handle_domain_error(ctx, e)

    try:
        amount_value = parse_amount(amount)
    except ValueError as e:
        click.echo(f"Error: Invalid amount format: {e}", err=True)
        ctx.exit(1)

    try:
        block_timestamp = parse_timestamp(timestamp)
    except ValueError as e:
        click.echo(f"Error: Invalid timestamp format: {e}", err=True)
        ctx.exit(1)

    metadata = EventMetadata(
        transaction_hash=tx_hash,
        log_index=log_index,
        block_timestamp=block_timestamp,
        block_number=block_number,
    )
    return account, amount_value, metadata


@click.command("register")
@click.argument("account", metavar="ACCOUNT")
@click.argument("amount", metavar="AMOUNT")
@_event_options
@click.pass_context
def register_debt(
    ctx,
    account: str,
    amount: str,
    tx_hash: str,
    log_index: int,
    timestamp: str,
    block_number: int | None,
):
    """Apply a RegisteredDebt event by hand.

    AMOUNT is in token base units (e.g., 1000000000000 or 1_000_000e6).

    Examples:
        payerindex register 0x0000000000000000000000000000000000000001 1_000_000e6 --tx-hash 0xa16...81 --log-index 1
    """
    db = ctx.obj["db"]
    handler = PayerEventHandler(db)
    account, amount_value, metadata = _parse_event_input(
        ctx, account, amount, tx_hash, log_index, timestamp, block_number
    )

    try:
        change = handler.handle_registered_debt(
            RegisteredDebt(account=account, amount=amount_value, metadata=metadata)
        )
    except DomainError as e:
        handle_domain_error(ctx, e)

    debt = db.get_debt(account)
    click.echo(f"Recorded DebtChange {change.id}")
    click.echo(f"  Account: {account}")
    click.echo(f"  Amount: +{amount_value}")
    click.echo(f"  Debt: {debt.amount}")


@click.command("repay")
@click.argument("account", metavar="ACCOUNT")
@click.argument("amount", metavar="AMOUNT")
@_event_options
@click.option(
    "--remaining", default="0", show_default=True, help="remainingDebt reported by the contract"
)
@click.pass_context
def repay_debt(
    ctx,
    account: str,
    amount: str,
    tx_hash: str,
    log_index: int,
    timestamp: str,
    block_number: int | None,
    remaining: str,
):
    """Apply a PaidBackDebt event by hand.

    The account must already have a registered debt; otherwise the event is
    dropped and nothing is recorded.

    Examples:
        payerindex repay 0x0000000000000000000000000000000000000001 300_000e6 --tx-hash 0xa16...81 --log-index 2
    """
    db = ctx.obj["db"]
    handler = PayerEventHandler(db)
    account, amount_value, metadata = _parse_event_input(
        ctx, account, amount, tx_hash, log_index, timestamp, block_number
    )

    try:
        remaining_debt = parse_amount(remaining)
    except ValueError as e:
        click.echo(f"Error: Invalid remaining debt format: {e}", err=True)
        ctx.exit(1)

    try:
        change = handler.handle_paid_back_debt(
            PaidBackDebt(
                account=account,
                amount=amount_value,
                remaining_debt=remaining_debt,
                metadata=metadata,
            )
        )
    except DomainError as e:
        handle_domain_error(ctx, e)

    if change is None:
        click.echo(f"Error: {debt_not_found(account)}. Event dropped.", err=True)
        ctx.exit(1)

    debt = db.get_debt(account)
    click.echo(f"Recorded DebtChange {change.id}")
    click.echo(f"  Account: {account}")
    click.echo(f"  Amount: {change.amount}")
    click.echo(f"  Debt: {debt.amount}")


def register_commands(cli):
    """Register event commands with main CLI."""
    cli.add_command(register_debt)
    cli.add_command(repay_debt)
