"""
Tests for the command line entry point
"""

import json
import pytest
from unittest.mock import Mock, patch

import nuban.__main__ as cli
from nuban.config import NubanConfig
from nuban.providers import NubanClient, PaymentProvider


@pytest.fixture(autouse=True)
def quiet_logging(monkeypatch):
    """Keep CLI runs from reconfiguring the package logger"""
    monkeypatch.setattr(cli, "setup_logging", lambda *args, **kwargs: None)


def _run(capsys, argv):
    exit_code = cli.main(argv)
    return exit_code, json.loads(capsys.readouterr().out)


class TestOfflineCommands:
    """Test commands that never touch the network"""

    def test_check_digit(self, capsys):
        exit_code, output = _run(capsys, ["check-digit", "123456789", "000014"])

        assert exit_code == 0
        assert output == {"serial": "123456789", "bank_code": "000014", "check_digit": 3}

    def test_check_digit_serial_too_long(self, capsys):
        exit_code, output = _run(capsys, ["check-digit", "1234567890", "000014"])

        assert exit_code == 1
        assert "should not be more than 9 digits" in output["error"]

    def test_check_digit_non_numeric_serial(self, capsys):
        exit_code, output = _run(capsys, ["check-digit", "12345678a", "000014"])

        assert exit_code == 1
        assert output["error"] == "Serial should contain digits only"

    def test_check_digit_short_bank_code(self, capsys):
        exit_code, output = _run(capsys, ["check-digit", "123456789", "14"])

        assert exit_code == 1
        assert output["error"] == "Bank code should be exactly 6 digits"

    def test_possible_banks_weighted(self, capsys):
        exit_code, output = _run(capsys, ["possible-banks", "0123456789", "--weighted"])

        assert exit_code == 0
        assert [bank["name"] for bank in output] == [
            "MAINSTREET MICROFINANCE BANK", "UNITED BANK FOR AFRICA", "ZENITH BANK"
        ]

    def test_possible_banks_full_registry(self, capsys):
        exit_code, output = _run(capsys, ["possible-banks", "0123456789"])

        assert exit_code == 0
        assert "ZENITH BANK" in [bank["name"] for bank in output]
        assert len(output) > 3

    def test_possible_banks_invalid_account(self, capsys):
        exit_code, output = _run(capsys, ["possible-banks", "12345"])

        assert exit_code == 1
        assert output["error"] == "Invalid account number, digits should be exactly 10"

    def test_lookup_by_code(self, capsys):
        exit_code, output = _run(capsys, ["lookup", "000013"])

        assert exit_code == 0
        assert output["name"] == "GUARANTY TRUST BANK"

    def test_lookup_by_old_code(self, capsys):
        exit_code, output = _run(capsys, ["lookup", "058", "--by", "old-code"])

        assert exit_code == 0
        assert output["code"] == "000013"
        assert output["old_code"] == "058"

    def test_lookup_not_found(self, capsys):
        exit_code, output = _run(capsys, ["lookup", "no_such_bank", "--by", "slug"])

        assert exit_code == 1
        assert "No bank found" in output["error"]


class TestProviderCommands:
    """Test commands backed by the payment provider"""

    @patch('httpx.Client.get')
    def test_validate(self, mock_get, capsys, monkeypatch):
        monkeypatch.setattr(cli, "create_client",
                            lambda: NubanClient("sk_test_123", PaymentProvider.PAYSTACK))
        response = Mock()
        response.status_code = 200
        response.json.return_value = {
            "status": True,
            "message": "Account number resolved",
            "data": {"account_number": "0123456789", "account_name": "JOHN DOE"}
        }
        mock_get.return_value = response

        exit_code, output = _run(capsys, ["validate", "0123456789", "057"])

        assert exit_code == 0
        assert output["data"]["account_name"] == "JOHN DOE"

    @patch('httpx.Client.get')
    def test_validate_failure_exit_code(self, mock_get, capsys, monkeypatch):
        monkeypatch.setattr(cli, "create_client",
                            lambda: NubanClient("sk_test_123", PaymentProvider.PAYSTACK))

        exit_code, output = _run(capsys, ["validate", "0123456789", "000015"])

        assert exit_code == 1
        assert output["status"] is False
        mock_get.assert_not_called()

    def test_validate_without_api_key(self, capsys, monkeypatch):
        monkeypatch.setattr("nuban.providers.get_config", lambda: NubanConfig(api_key=None))

        exit_code, output = _run(capsys, ["validate", "0123456789", "057"])

        assert exit_code == 1
        assert output["error"] == "API Key and Payment Provider are required"

    @patch('httpx.Client.get')
    def test_bin(self, mock_get, capsys, monkeypatch):
        monkeypatch.setattr(cli, "create_client",
                            lambda: NubanClient("FLWSECK_TEST-123", PaymentProvider.FLUTTERWAVE))
        response = Mock()
        response.status_code = 200
        response.json.return_value = {
            "status": "success",
            "message": "completed",
            "data": {
                "issuing_country": "NIGERIA NG",
                "bin": "123456",
                "card_type": "DEBIT",
                "issuer_info": "VERVE First Bank"
            }
        }
        mock_get.return_value = response

        exit_code, output = _run(capsys, ["bin", "123456"])

        assert exit_code == 0
        assert output["data"]["brand"] == "VERVE"
        assert output["data"]["bank"] == "First Bank"
