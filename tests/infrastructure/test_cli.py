"""CLI tests using click's CliRunner with a fake gateway."""

import pytest
from click.testing import CliRunner

from cupcake.domain.exceptions import SubmissionError
from cupcake.infrastructure.cli.main import cli
from tests.fakes import FakeOrderGateway


class _ClosingFakeGateway(FakeOrderGateway):

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        return None


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def gateway(monkeypatch):
    fake = _ClosingFakeGateway()
    monkeypatch.setattr(
        "cupcake.infrastructure.cli.order_commands.order_gateway", lambda: fake
    )
    return fake


_ADDRESS = ["--name", "Taylor", "--street", "1 Main St", "--city", "Springfield", "--zip", "12345"]


class TestFlavorsCommand:

    def test_lists_every_flavor(self, runner):
        result = runner.invoke(cli, ["flavors"])
        assert result.exit_code == 0
        assert "Rainbow" in result.output


class TestQuoteCommand:

    def test_quote(self, runner):
        result = runner.invoke(
            cli,
            ["order", "quote", "--flavor", "chocolate", "--quantity", "10", "--extra-frosting", "--sprinkles"],
        )
        assert result.exit_code == 0, result.output
        assert "Your total is $36.00" in result.output

    def test_quote_by_index(self, runner):
        result = runner.invoke(cli, ["order", "quote", "--flavor", "1"])
        assert result.exit_code == 0, result.output
        assert "3x Strawberry" in result.output

    def test_quote_rejects_quantity(self, runner):
        result = runner.invoke(cli, ["order", "quote", "--quantity", "25"])
        assert result.exit_code != 0
        assert "Quantity must be between 3 and 20" in result.output

    def test_quote_rejects_unknown_flavor(self, runner):
        result = runner.invoke(cli, ["order", "quote", "--flavor", "lemon"])
        assert result.exit_code != 0
        assert "Unknown flavor" in result.output

    def test_superscript_digit_is_not_an_index(self, runner):
        result = runner.invoke(cli, ["order", "quote", "--flavor", "²"])
        assert result.exit_code == 1
        assert "Unknown flavor" in result.output


class TestPlaceCommand:

    def test_place(self, runner, gateway):
        result = runner.invoke(cli, ["order", "place", "--flavor", "strawberry", "--quantity", "5", *_ADDRESS])
        assert result.exit_code == 0, result.output
        assert "Your order for 5x strawberry cupcakes is on its way!" in result.output
        assert len(gateway.submitted) == 1
        assert gateway.submitted[0].city == "Springfield"

    def test_place_blank_address(self, runner, gateway):
        result = runner.invoke(
            cli,
            ["order", "place", "--name", " ", "--street", "1 Main St", "--city", "Springfield", "--zip", "12345"],
        )
        assert result.exit_code != 0
        assert "are all required" in result.output
        assert gateway.submitted == []

    def test_place_failure_is_reported(self, runner, gateway):
        gateway.error = SubmissionError("Could not reach the order endpoint")
        result = runner.invoke(cli, ["order", "place", *_ADDRESS])
        assert result.exit_code == 1
        assert "Could not reach the order endpoint" in result.output
