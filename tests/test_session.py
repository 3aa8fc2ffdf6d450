"""
==============================================================================
Session Tests
==============================================================================

End-to-end tests for the interactive session, driven in-process.

==============================================================================
"""

import io

import pytest

from product_lookup.catalog import Product, ProductCatalog
from product_lookup.console import InputReader
from product_lookup.core.exceptions import AppException
from product_lookup.services import ProductSession


PROMPTS = (
    "Please enter the name of the product:\n"
    "Please enter the weight of the product:\n"
    "Please enter the unit of the product:\n"
)


def result_line(stdout: str) -> str:
    return stdout.rstrip("\n").splitlines()[-1]


class TestSessionScenarios:
    """Tests for complete runs of the session script."""

    def test_happy_path_exact_match(self, run_app):
        """Test full output for an exact-name search."""
        result = run_app(["Apple", "0.2", "kg", "Apple"])
        assert result.exit_code == 0
        assert result.stdout == (
            PROMPTS
            + "\n"
            + "Current Products:\n"
            + "Apple, 0.2 kg\n"
            + "\n"
            + "Enter product name to search:\n"
            + "Found: 0.2 kg\n"
        )
        assert result.stderr == ""

    def test_case_insensitive_hit(self, run_app):
        """Test a lower-case search finds a capitalized name."""
        result = run_app(["Banana", "1.5", "lb", "banana"])
        assert result.exit_code == 0
        assert result_line(result.stdout) == "Found: 1.5 lb"

    def test_miss(self, run_app):
        """Test an unknown name reports not found."""
        result = run_app(["Cherry", "10", "ea", "Grape"])
        assert result.exit_code == 0
        assert "Cherry, 10 ea\n" in result.stdout
        assert result_line(result.stdout) == "Product not found."

    def test_query_whitespace_trimmed(self, run_app):
        """Test surrounding whitespace on the search name is ignored."""
        result = run_app(["Date", "3.14", "kg", "   Date   "])
        assert result_line(result.stdout) == "Found: 3.14 kg"

    def test_malformed_weight(self, run_app):
        """Test a bad weight aborts before anything is printed."""
        result = run_app(["Egg", "not-a-number", "ea", "Egg"])
        assert result.exit_code != 0
        assert result.stderr == "Invalid number for weight.\n"
        assert "Current Products:" not in result.stdout
        assert "Found:" not in result.stdout
        assert "Product not found." not in result.stdout

    def test_negative_weight_rejected(self, run_app):
        """Test a negative weight is treated as invalid."""
        result = run_app(["Egg", "-1", "ea", "Egg"])
        assert result.exit_code != 0
        assert result.stderr == "Invalid number for weight.\n"

    @pytest.mark.parametrize("weight", ["1_5", "١٢", "0x10"])
    def test_non_decimal_weight_literals_rejected(self, run_app, weight):
        """Test digit separators, non-ASCII digits and hex are not weights."""
        result = run_app(["Egg", weight, "ea", "Egg"])
        assert result.exit_code != 0
        assert result.stderr == "Invalid number for weight.\n"
        assert "Current Products:" not in result.stdout
        assert "Found:" not in result.stdout

    def test_non_ascii_wrong_case(self, run_app):
        """Test non-ASCII letters are not case folded."""
        result = run_app(["Éclair", "0.1", "kg", "éclair"])
        assert result.exit_code == 0
        assert "Éclair, 0.1 kg\n" in result.stdout
        assert result_line(result.stdout) == "Product not found."

    @pytest.mark.parametrize("lines", [[], ["Apple"], ["Apple", "0.2"], ["Apple", "0.2", "kg"]])
    def test_input_ends_early(self, run_app, lines):
        """Test end-of-file at any prompt is a read failure."""
        result = run_app(lines)
        assert result.exit_code != 0
        assert result.stderr == "Failed to read input.\n"
        assert "Found:" not in result.stdout


class TestProductSession:
    """Tests for ProductSession with injected collaborators."""

    def make_session(self, lines, catalog=None):
        stdin = io.StringIO("".join(f"{line}\n" for line in lines))
        output = io.StringIO()
        session = ProductSession(InputReader(stdin, output), catalog=catalog, output=output)
        return session, output

    def test_run_returns_lookup_result(self):
        """Test run returns the ProductInfo for a hit."""
        session, _ = self.make_session(["Apple", "0.2", "kg", "APPLE"])
        info = session.run()
        assert info is not None
        assert info.unit == "kg"
        assert len(session.catalog) == 1

    def test_run_returns_none_on_miss(self):
        """Test run returns None for a miss."""
        session, _ = self.make_session(["Apple", "0.2", "kg", "Pear"])
        assert session.run() is None

    def test_first_match_across_existing_records(self):
        """Test a record already in the catalog wins over the new one."""
        catalog = ProductCatalog()
        catalog.append(Product(name="apple", weight=1, unit="lb"))
        session, output = self.make_session(["Apple", "0.2", "kg", "APPLE"], catalog=catalog)

        info = session.run()

        assert info.as_tuple() == (1.0, "lb")
        text = output.getvalue()
        assert text.index("apple, 1 lb") < text.index("Apple, 0.2 kg")

    def test_empty_name_is_accepted(self):
        """Test a blank name line becomes an empty-name record."""
        session, output = self.make_session(["", "2", "kg", ""])
        info = session.run()
        assert info.as_tuple() == (2.0, "kg")
        assert "\n, 2 kg\n" in output.getvalue()

    def test_errors_propagate(self):
        """Test fatal errors leave the session as AppException."""
        session, _ = self.make_session(["Egg", "abc"])
        with pytest.raises(AppException) as exc_info:
            session.run()
        assert exc_info.value.code == "INVALID_WEIGHT"
        assert len(session.catalog) == 0

    def test_negative_weight_error_keeps_typed_text(self):
        """Test the weight error carries the operator's text unchanged."""
        session, _ = self.make_session(["Egg", "-2.50"])
        with pytest.raises(AppException) as exc_info:
            session.run()
        assert exc_info.value.code == "INVALID_WEIGHT"
        assert exc_info.value.details == {"value": "-2.50"}
        assert len(session.catalog) == 0
