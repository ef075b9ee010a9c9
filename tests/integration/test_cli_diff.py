# tests/integration/test_cli_diff.py
# Integration tests for `inkwell diff`

import json

from typer.testing import CliRunner

from inkwell.cli.app import app

runner = CliRunner()


def _write(tmp_path, name, text):
    path = tmp_path / name
    path.write_text(text, encoding="utf-8")
    return path


# * Test the diff command
class TestDiffCommand:

    # * Verify JSON output lists paragraph-aligned chunks
    def test_json_output(self, tmp_path):
        original = _write(tmp_path, "a.txt", "Intro.")
        suggestion = _write(tmp_path, "b.txt", "Intro.\n\nMore.\n\nEnd.")
        result = runner.invoke(app, ["diff", str(original), str(suggestion), "--json"])

        assert result.exit_code == 0, result.output
        chunks = json.loads(result.stdout)
        assert [(c["kind"], c["text"]) for c in chunks] == [
            ("equal", "Intro."),
            ("insertion", "\n\nMore."),
            ("insertion", "\n\nEnd."),
        ]
        assert [c["status"] for c in chunks] == ["accepted", "pending", "pending"]
        assert [c["id"] for c in chunks] == ["chunk-0", "chunk-1", "chunk-2"]

    # * Verify word granularity from the command line
    def test_word_granularity(self, tmp_path):
        original = _write(tmp_path, "a.txt", "the cart sat")
        suggestion = _write(tmp_path, "b.txt", "the card sat")
        result = runner.invoke(
            app, ["diff", str(original), str(suggestion), "--json", "--granularity", "word"]
        )
        chunks = json.loads(result.stdout)
        assert [c["text"] for c in chunks if c["kind"] != "equal"] == ["cart", "card"]

    # * Verify table output summarises edits
    def test_table_output(self, tmp_path):
        original = _write(tmp_path, "a.txt", "The quick fox.")
        suggestion = _write(tmp_path, "b.txt", "The slow fox.")
        result = runner.invoke(app, ["diff", str(original), str(suggestion)])

        assert result.exit_code == 0, result.output
        assert "2 edit(s): 1 insertion(s), 1 deletion(s)" in result.output

    # * Verify identical documents are reported
    def test_identical(self, tmp_path):
        original = _write(tmp_path, "a.md", "Same.")
        suggestion = _write(tmp_path, "b.md", "Same.")
        result = runner.invoke(app, ["diff", str(original), str(suggestion)])
        assert result.exit_code == 0
        assert "Documents are identical" in result.output

    # * Verify missing files are a usage error
    def test_missing_file(self, tmp_path):
        original = _write(tmp_path, "a.txt", "x")
        result = runner.invoke(app, ["diff", str(original), str(tmp_path / "nope.txt")])
        assert result.exit_code == 2
