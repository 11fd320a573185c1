"""
Unit tests for the generate_authors CLI.

The history query is patched so the command runs without a repository.
"""

import pytest
from unittest.mock import patch

from click.testing import CliRunner

from generate_authors import display_error_message, generate_authors
from services.author_list.errors import HistoryUnavailable


@pytest.fixture
def runner():
    """Create a Click test runner."""
    return CliRunner()


@pytest.fixture(autouse=True)
def no_logging_setup():
    """Keep the CLI from reconfiguring root logging during tests."""
    with patch("generate_authors.configure_logging") as mock_configure:
        yield mock_configure


class TestGenerateAuthorsCommand:
    """Test cases for the generate_authors command."""

    @patch("generate_authors.fetch_author_history")
    def test_prints_generated_source(self, mock_fetch, runner):
        """Test the generated source goes to stdout unchanged."""
        mock_fetch.return_value = "brl  -  b@x.com\nSandy  -  s@y.com\n"

        result = runner.invoke(generate_authors, [])

        assert result.exit_code == 0
        assert result.stdout == (
            "package gui\n"
            "\n"
            "func authors() []string {\n"
            "    return []string{\n"
            "        \"Adam Langley\",\n"
            "        \"Bruce Leidl  -  b@x.com\",\n"
            "        \"Sandy Acurio  -  s@y.com\",\n"
            "\n"
            "    }\n"
            "}\n"
        )

    @patch("generate_authors.fetch_author_history")
    def test_default_repo_path(self, mock_fetch, runner):
        """Test the repository defaults to the current directory."""
        mock_fetch.return_value = ""

        result = runner.invoke(generate_authors, [])

        assert result.exit_code == 0
        mock_fetch.assert_called_once_with(".")

    @patch("generate_authors.fetch_author_history")
    def test_repo_path_option(self, mock_fetch, runner, tmp_path):
        """Test --repo-path selects the repository to read."""
        mock_fetch.return_value = ""

        result = runner.invoke(generate_authors, ["--repo-path", str(tmp_path)])

        assert result.exit_code == 0
        mock_fetch.assert_called_once_with(str(tmp_path))

    @patch("generate_authors.fetch_author_history")
    def test_verbose_enables_debug_logging(self, mock_fetch, runner, no_logging_setup):
        """Test -v switches logging to DEBUG."""
        mock_fetch.return_value = ""

        result = runner.invoke(generate_authors, ["-v"])

        assert result.exit_code == 0
        no_logging_setup.assert_called_once_with("DEBUG")

    @patch("generate_authors.fetch_author_history")
    def test_default_logging_level(self, mock_fetch, runner, no_logging_setup):
        """Test logging uses the configured level without -v."""
        mock_fetch.return_value = ""

        runner.invoke(generate_authors, [])

        no_logging_setup.assert_called_once_with(None)

    @patch("generate_authors.fetch_author_history")
    def test_history_unavailable(self, mock_fetch, runner):
        """Test a failed history query exits non-zero without source output."""
        mock_fetch.side_effect = HistoryUnavailable("/tmp/nowhere", "not a Git repository")

        result = runner.invoke(generate_authors, [])

        assert result.exit_code == 1
        assert "package gui" not in result.output
        assert "not a Git repository" in result.output

    @patch("generate_authors.fetch_author_history")
    def test_malformed_history(self, mock_fetch, runner):
        """Test a malformed history line exits non-zero without source output."""
        mock_fetch.return_value = "brl  -  b@x.com\nno delimiter here\n"

        result = runner.invoke(generate_authors, [])

        assert result.exit_code == 1
        assert "package gui" not in result.output
        assert "Malformed history line" in result.output


class TestDisplayErrorMessage:
    """Test cases for error display."""

    @patch("generate_authors.console")
    def test_display_error_with_suggestion(self, mock_console):
        """Test the error panel is printed once."""
        display_error_message("boom", "try again")

        mock_console.print.assert_called_once()

    @patch("generate_authors.console")
    def test_display_error_without_suggestion(self, mock_console):
        """Test the error panel without a suggestion."""
        display_error_message("boom")

        mock_console.print.assert_called_once()
