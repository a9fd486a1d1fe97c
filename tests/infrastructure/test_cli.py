"""Tests for the click command-line interface."""

from click.testing import CliRunner

from shopcart.infrastructure.cli.main import cli

ADDRESS_ARGS = [
    "--street", "Main Street 10",
    "--city", "Almaty",
    "--zip", "050000",
    "--country", "Kazakhstan",
]


def _run(*args: str):
    return CliRunner().invoke(cli, list(args))


class TestDemo:

    def test_scripted_session(self):
        result = _run("demo")
        assert result.exit_code == 0, result.output
        assert "Subtotal: $2490.00" in result.output
        assert "Item count: 4" in result.output
        assert "Total with discount: $2241.00" in result.output
        assert "After removing book, items left: 2" in result.output
        assert "After external modification, item count: 3" in result.output
        assert "item1 quantity: 1, item2 quantity: 5" in result.output
        assert "Order items count: 3" in result.output
        assert "Cart items count: 0" in result.output
        assert "Kazakhstan" in result.output


class TestCheckout:

    def test_prints_order(self):
        result = _run(
            "checkout",
            "--item", "MacBook Air:1200:2",
            "--item", "Swift Programming:45:2:books",
            "--code", "SAVE10",
            *ADDRESS_ARGS,
        )
        assert result.exit_code == 0, result.output
        assert "MacBook Air" in result.output
        assert "$2490.00" in result.output
        assert "-$249.00" in result.output
        assert "$2241.00" in result.output
        assert "Almaty, 050000" in result.output

    def test_bad_item_format(self):
        result = _run("checkout", "--item", "Laptop", *ADDRESS_ARGS)
        assert result.exit_code != 0
        assert "Invalid item format" in result.output

    def test_bad_quantity(self):
        result = _run("checkout", "--item", "Laptop:1200:two", *ADDRESS_ARGS)
        assert result.exit_code != 0
        assert "Invalid quantity" in result.output

    def test_domain_error_reported(self):
        result = _run("checkout", "--item", "Laptop:0:1", *ADDRESS_ARGS)
        assert result.exit_code == 1
        assert "greater than zero" in result.output

    def test_unknown_category_reported(self):
        result = _run("checkout", "--item", "Laptop:10:1:toys", *ADDRESS_ARGS)
        assert result.exit_code == 1
        assert "Unknown category" in result.output


class TestCodes:

    def test_lists_default_codes(self):
        result = _run("codes")
        assert result.exit_code == 0
        assert "SAVE10" in result.output
        assert "10%" in result.output
        assert "20%" in result.output
