# tests/integration/test_cli_actions.py
# Integration tests for `inkwell actions`

from typer.testing import CliRunner

from inkwell.cli.app import app

runner = CliRunner()


# * Test the actions listing
class TestActionsCommand:

    # * Verify built-in actions & aliases are listed
    def test_lists_actions(self):
        result = runner.invoke(app, ["actions"])
        assert result.exit_code == 0, result.output
        for name in ("rewrite", "shorter", "longer", "formal", "casual", "fix_grammar"):
            assert name in result.output
        assert "shorten" in result.output
        assert "free-form" in result.output
