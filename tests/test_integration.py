"""Integration tests for end-to-end workflows."""

from payerindex.cli.main import cli

USER1 = "0x0000000000000000000000000000000000000001"
USER2 = "0x0000000000000000000000000000000000000002"


def test_full_workflow(cli_runner, temp_db, fixtures_dir):
    """Test complete workflow: replay → manual event → debt list → change log."""
    # Step 1: Replay the recorded feed
    result = cli_runner.invoke(
        cli, ["--db-path", temp_db.database_path, "replay", str(fixtures_dir / "events.jsonl")]
    )
    assert result.exit_code == 0
    assert "Applied: 3 events" in result.output
    assert "Dropped: 1 repayments without debt" in result.output
    assert "Errors: 2" in result.output

    # Step 2: Register more debt by hand
    result = cli_runner.invoke(
        cli,
        [
            "--db-path",
            temp_db.database_path,
            "register",
            USER2,
            "250000000000",
            "--tx-hash",
            "0x" + "77" * 32,
            "--log-index",
            "3",
            "--timestamp",
            "1700000100",
        ],
    )
    assert result.exit_code == 0
    assert "Debt: 750000000000" in result.output

    # Step 3: Balances
    result = cli_runner.invoke(cli, ["--db-path", temp_db.database_path, "debt", "list"])
    assert result.exit_code == 0
    assert USER1 in result.output
    assert USER2 in result.output
    assert "Total: 1450000000000" in result.output

    # Step 4: Change log of one account
    result = cli_runner.invoke(
        cli, ["--db-path", temp_db.database_path, "changes", "list", "--account", USER1]
    )
    assert result.exit_code == 0
    assert "Debt changes (2)" in result.output
    assert "+1000000000000" in result.output
    assert "-300000000000" in result.output


def test_replay_with_payer_address_from_environment(cli_runner, temp_db, fixtures_dir, monkeypatch):
    """Test PAYERINDEX_PAYER_ADDRESS configures the contract filter."""
    monkeypatch.setenv("PAYERINDEX_PAYER_ADDRESS", "0x00000000000000000000000000000000000000aa")

    result = cli_runner.invoke(
        cli, ["--db-path", temp_db.database_path, "replay", str(fixtures_dir / "events.jsonl")]
    )

    assert result.exit_code == 0
    assert "Skipped: 0 logs from other contracts" in result.output


def test_replay_invalid_payer_address(cli_runner, temp_db, fixtures_dir):
    """Test an invalid contract filter fails the command."""
    result = cli_runner.invoke(
        cli,
        [
            "--db-path",
            temp_db.database_path,
            "replay",
            str(fixtures_dir / "events.jsonl"),
            "--payer-address",
            "0x12",
        ],
    )

    assert result.exit_code == 1
    assert "Invalid address" in result.output


def test_db_path_from_environment(cli_runner, temp_db, monkeypatch):
    """Test PAYERINDEX_DB_PATH selects the database."""
    monkeypatch.setenv("PAYERINDEX_DB_PATH", temp_db.database_path)

    result = cli_runner.invoke(cli, ["debt", "list"])

    assert result.exit_code == 0
    assert "No debts found" in result.output
