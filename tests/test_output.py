"""Tests for reporters and the command-line interface."""

import io
import json

import pytest
from proofreader.cli import EXIT_CONFIG_ERROR, EXIT_OK, EXIT_SUGGESTIONS, create_parser, main
from proofreader.models.results import FileResult, ProofreadResult, SpellingSuggestion, StyleSuggestion
from proofreader.output import ConsoleReporter, JsonReporter
from proofreader.sources import Source
from rich.console import Console


@pytest.fixture
def file_results():
    flagged = ProofreadResult(
        text="Teh cake was eaten.",
        index=1,
        spelling=(SpellingSuggestion(word="Teh", suggestions=("The", "Tea"), offset=0),),
        write_good=(StyleSuggestion(reason='"was eaten" may be passive voice', index=9, offset=9, rule="passive"),),
    )
    clean = ProofreadResult(text="All good.", index=0)
    return [FileResult(file="post.html", results=[clean, flagged])]


class TestJsonReporter:
    """Tests for JsonReporter."""

    def test_only_flagged_units(self, file_results):
        """Test clean units are left out."""
        data = JsonReporter().to_data(file_results)

        assert data == [
            {
                "file": "post.html",
                "results": [
                    {
                        "text": "Teh cake was eaten.",
                        "suggestions": {
                            "spelling": [{"word": "Teh", "suggestions": ["The", "Tea"], "offset": 0}],
                            "writeGood": [{"index": 9, "offset": 9, "reason": '"was eaten" may be passive voice'}],
                        },
                    }
                ],
            }
        ]

    def test_writes_file(self, file_results, tmp_path):
        """Test the results file is replaced on every run."""
        path = tmp_path / "results.json"
        path.write_text("stale", encoding="utf-8")

        JsonReporter(path).report(file_results)
        assert json.loads(path.read_text(encoding="utf-8"))[0]["file"] == "post.html"

    def test_degraded_unit_kept(self):
        """Test failed units are reported with their error."""
        results = [FileResult(file="a.html", results=[ProofreadResult(text="x", error="boom")])]
        data = JsonReporter().to_data(results)
        assert data[0]["results"][0]["error"] == "boom"


class TestConsoleReporter:
    """Tests for ConsoleReporter."""

    def test_report(self, file_results):
        """Test the printed layout."""
        out = io.StringIO()
        ConsoleReporter(Console(file=out, color_system=None, width=200)).report(file_results)
        lines = out.getvalue().splitlines()

        assert lines[0] == "### Results for post.html ###"
        assert "Teh cake was eaten." in lines
        assert ' - "was eaten" may be passive voice' in lines
        assert ' - "Teh" -> The,Tea' in lines
        assert "All good." not in lines

    def test_failed_sources(self):
        """Test load failures are printed."""
        out = io.StringIO()
        reporter = ConsoleReporter(Console(file=out, color_system=None, width=200))
        reporter.report([], failed=[Source(path="gone.md", error="No such file")])

        assert "### Proofreader failed to load gone.md ###" in out.getvalue()
        assert "No such file" in out.getvalue()


class TestCli:
    """Tests for the command-line interface."""

    @pytest.fixture
    def config_file(self, english_files, tmp_path):
        path = tmp_path / "settings.json"
        path.write_text(
            json.dumps(
                {
                    "selectors": {"whitelist": "p", "blacklist": "code"},
                    "dictionaries": {"build-in": ["test_EN"], "search_paths": ["."]},
                }
            ),
            encoding="utf-8",
        )
        return path

    def test_source_required(self):
        """Test one of -u/-f/-l is required."""
        with pytest.raises(SystemExit):
            create_parser().parse_args([])

    def test_sources_exclusive(self):
        """Test only one source option may be given."""
        with pytest.raises(SystemExit):
            create_parser().parse_args(["-f", "a.md", "-u", "https://example.com/"])

    def test_clean_file(self, config_file, tmp_path):
        """Test a clean document exits 0."""
        doc = tmp_path / "clean.md"
        doc.write_text("The cat sat on the mat.\n\n`xyzzy`\n", encoding="utf-8")

        assert main(["-f", str(doc), "-c", str(config_file)]) == EXIT_OK

    def test_suggestions_exit_code(self, config_file, tmp_path, capsys):
        """Test documents with suggestions exit 1 and are printed."""
        doc = tmp_path / "post.html"
        doc.write_text("<p>Teh cat sat.</p>", encoding="utf-8")

        assert main(["-f", str(doc), "-c", str(config_file)]) == EXIT_SUGGESTIONS
        assert '"Teh" -> The' in capsys.readouterr().out

    def test_json_output(self, config_file, tmp_path):
        """Test JSON output mode."""
        listing = tmp_path / "files.txt"
        (tmp_path / "a.html").write_text("<p>Teh cat.</p>", encoding="utf-8")
        listing.write_text(f"{tmp_path / 'a.html'}\n{tmp_path / 'missing.html'}\n", encoding="utf-8")
        output = tmp_path / "out.json"

        code = main(["-l", str(listing), "-c", str(config_file), "-o", "json", "--output-file", str(output)])

        assert code == EXIT_SUGGESTIONS
        data = json.loads(output.read_text(encoding="utf-8"))
        assert [f["file"] for f in data] == [str(tmp_path / "a.html")]

    def test_bad_config(self, tmp_path):
        """Test configuration errors exit 2."""
        config = tmp_path / "bad.json"
        config.write_text('{"selectors": {}}', encoding="utf-8")

        assert main(["-f", "x.md", "-c", str(config)]) == EXIT_CONFIG_ERROR

    def test_missing_dictionary(self, tmp_path):
        """Test an unknown built-in dictionary exits 2."""
        config = tmp_path / "settings.json"
        config.write_text(
            json.dumps({"selectors": {"whitelist": "p"}, "dictionaries": {"build-in": ["zz_ZZ"]}}),
            encoding="utf-8",
        )

        assert main(["-f", "x.md", "-c", str(config)]) == EXIT_CONFIG_ERROR
