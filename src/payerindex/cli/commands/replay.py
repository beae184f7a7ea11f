"""Event feed replay command."""

import click
from payerindex.domain.errors import DomainError
from payerindex.domain.replay import ReplayService


@click.command("replay")
@click.argument("events_file", type=click.Path(exists=True))
@click.option(
    "--payer-address",
    help="Only apply raw logs emitted by this contract",
    envvar="PAYERINDEX_PAYER_ADDRESS",
)
@click.pass_context
def replay_events(ctx, events_file: str, payer_address: str | None):
    """Apply events from a JSON-lines file in file order.

    Each line is either a raw log (with "topics" and "data") or a decoded
    record such as:

        {"event": "RegisteredDebt", "account": "0x...01", "amount": "1000000000000",
         "transactionHash": "0x...", "logIndex": 1, "blockTimestamp": 1700000000}
    """
    db = ctx.obj["db"]
    service = ReplayService(db)

    try:
        result = service.replay_file(events_file, payer_address=payer_address)
        click.echo(f"\nReplay complete:")
        click.echo(f"  Applied: {result['applied']} events")
        click.echo(f"  Dropped: {result['dropped']} repayments without debt")
        if payer_address is not None:
            click.echo(f"  Skipped: {result['skipped']} logs from other contracts")
        if result["errors"]:
            click.echo(f"  Errors: {len(result['errors'])}")
            for error in result["errors"]:
                click.echo(f"    {error}", err=True)
    except (DomainError, FileNotFoundError) as e:
        click.echo(f"Error: {e}", err=True)
        ctx.exit(1)


def register_commands(cli):
    """Register replay command with main CLI."""
    cli.add_command(replay_events)
