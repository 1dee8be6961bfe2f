"""Tests for the CLI command tree."""

import json
from unittest.mock import MagicMock, patch

from azure.core.exceptions import ServiceRequestError
import pytest

from docdb_explorer.cli import main
from docdb_explorer.cli_app.commands.system import obfuscate_config_for_display
from docdb_explorer.cli_app.registry import build_parser
from docdb_explorer.config import reset_config
from docdb_explorer.utils.errors import RemoteOperationError


@pytest.fixture(autouse=True)
def cli_env(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("COSMOS_ENDPOINT", "https://acct.documents.azure.com:443/")
    monkeypatch.setenv("COSMOS_KEY", "supersecretkey")
    monkeypatch.delenv("COSMOS_IS_EMULATOR", raising=False)
    monkeypatch.delenv("COSMOS_PAGE_SIZE", raising=False)
    reset_config()
    with patch("docdb_explorer.cli.initialize_logging"):
        yield
    reset_config()


@pytest.fixture
def cli_client(mock_client, collection_meta):
    mock_client.read_collection.return_value = collection_meta
    factory = MagicMock(return_value=mock_client)
    with patch("docdb_explorer.cli_app.common.get_document_client", factory):
        yield mock_client


def test_parser_has_command_groups():
    parser = build_parser()

    args = parser.parse_args(
        ["documents", "list", "--database", "shop", "--collection", "orders"]
    )

    assert args.command == "documents"
    assert args.subcommand == "list"
    assert args.pages == 1


def test_no_command_prints_help(capsys):
    assert main([]) == 0
    assert "documents" in capsys.readouterr().out


def test_documents_list_all_pages(cli_client, capsys):
    exit_code = main(
        [
            "documents",
            "list",
            "--database",
            "shop",
            "--collection",
            "orders",
            "--pages",
            "0",
            "--page-size",
            "3",
            "--output",
            "json",
        ]
    )

    payload = json.loads(capsys.readouterr().out)
    assert exit_code == 0
    assert payload["count"] == 5
    assert payload["has_more"] is False
    assert payload["documents"][0] == "doc0"
    cli_client.read_collection.assert_awaited_once_with("dbs/shop/colls/orders")


def test_documents_list_first_page(cli_client, capsys):
    exit_code = main(
        ["documents", "list", "--database", "shop", "--collection", "orders", "--output", "json"]
    )

    payload = json.loads(capsys.readouterr().out)
    assert exit_code == 0
    assert payload["count"] == 3
    assert payload["has_more"] is True


def test_documents_create_with_id(cli_client, capsys):
    cli_client.create_document.return_value = {"id": "abc"}

    exit_code = main(
        [
            "documents",
            "create",
            "--database",
            "shop",
            "--collection",
            "orders",
            "--id",
            " abc ",
        ]
    )

    assert exit_code == 0
    cli_client.create_document.assert_awaited_once_with(
        "dbs/shop/colls/orders/", {"id": "abc"}
    )
    assert "created: abc" in capsys.readouterr().out


def test_documents_create_prompt_dismissed(cli_client, monkeypatch, capsys):
    def dismissed(prompt):
        raise EOFError

    monkeypatch.setattr("builtins.input", dismissed)

    exit_code = main(
        ["documents", "create", "--database", "shop", "--collection", "orders"]
    )

    assert exit_code == 130
    cli_client.create_document.assert_not_called()
    assert "Cancelled." in capsys.readouterr().out


def test_collections_delete_declined(cli_client, monkeypatch):
    monkeypatch.setattr("builtins.input", lambda prompt: "cancel")

    exit_code = main(
        ["collections", "delete", "--database", "shop", "--collection", "orders"]
    )

    assert exit_code == 130
    cli_client.delete_collection.assert_not_called()


def test_collections_delete_with_yes(cli_client):
    exit_code = main(
        ["collections", "delete", "--database", "shop", "--collection", "orders", "--yes"]
    )

    assert exit_code == 0
    cli_client.delete_collection.assert_awaited_once_with("dbs/shop/colls/orders/")


def test_remote_failure_exit_code(cli_client, capsys):
    cli_client.delete_collection.side_effect = RemoteOperationError(
        "Failed to delete collection", status_code=404
    )

    exit_code = main(
        ["collections", "delete", "--database", "shop", "--collection", "orders", "--yes"]
    )

    assert exit_code == 1
    assert "Resource not found" in capsys.readouterr().out


def test_missing_credentials(monkeypatch, capsys):
    monkeypatch.delenv("COSMOS_ENDPOINT")
    monkeypatch.delenv("COSMOS_KEY")
    reset_config()

    exit_code = main(
        ["documents", "list", "--database", "shop", "--collection", "orders"]
    )

    assert exit_code == 1
    assert "COSMOS_ENDPOINT" in capsys.readouterr().out


def test_config_show_obfuscates_key(capsys):
    assert main(["config", "show", "--output", "json"]) == 0

    payload = json.loads(capsys.readouterr().out)
    assert payload["cosmos_key"] == "supe**********"
    assert payload["has_credentials"] is True


def test_obfuscate_config_for_display():
    shown = obfuscate_config_for_display({"cosmos_key": "abc", "page_size": 50})

    assert shown == {"cosmos_key": "***", "page_size": 50}


@pytest.mark.parametrize("page_size", ["0", "5000", "ten"])
def test_documents_list_rejects_page_size_out_of_range(cli_client, page_size, capsys):
    with pytest.raises(SystemExit) as exc_info:
        main(
            [
                "documents",
                "list",
                "--database",
                "shop",
                "--collection",
                "orders",
                "--page-size",
                page_size,
            ]
        )

    assert exc_info.value.code == 2
    assert "--page-size" in capsys.readouterr().err
    cli_client.read_collection.assert_not_called()


def test_documents_list_rejects_negative_pages(cli_client, capsys):
    with pytest.raises(SystemExit) as exc_info:
        main(
            ["documents", "list", "--database", "shop", "--collection", "orders", "--pages", "-1"]
        )

    assert exc_info.value.code == 2
    assert "must not be negative" in capsys.readouterr().err
    cli_client.read_collection.assert_not_called()


@pytest.mark.parametrize("value", ["abc", "5000"])
def test_invalid_page_size_setting_exits_with_error(monkeypatch, capsys, value):
    monkeypatch.setenv("COSMOS_PAGE_SIZE", value)
    reset_config()

    exit_code = main(
        ["documents", "list", "--database", "shop", "--collection", "orders"]
    )

    assert exit_code == 1
    assert "COSMOS_PAGE_SIZE" in capsys.readouterr().out


def test_unreachable_account_exits_with_error(capsys):
    with patch(
        "docdb_explorer.clients.cosmos_client.CosmosClient",
        side_effect=ServiceRequestError("Connection refused"),
    ):
        exit_code = main(
            ["collections", "delete", "--database", "shop", "--collection", "orders", "--yes"]
        )

    assert exit_code == 1
    assert "Connection refused" in capsys.readouterr().out


def test_interrupt_during_command_counts_as_cancelled(cli_client, capsys):
    cli_client.delete_collection.side_effect = KeyboardInterrupt

    exit_code = main(
        ["collections", "delete", "--database", "shop", "--collection", "orders", "--yes"]
    )

    assert exit_code == 130
    assert "Cancelled." in capsys.readouterr().out
