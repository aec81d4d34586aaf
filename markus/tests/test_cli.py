"""Tests for the markus CLI commands."""

import json

import yaml

from markus.cli import app

SAMPLE = """# Introduction

Some **bold** text.

## Details

More details.
"""


class TestFormats:
    """Tests for 'markus formats', 'markus targets' and 'markus path'."""

    def test_formats_json(self, runner):
        """Test listing built-in formats as JSON."""
        result = runner.invoke(app, ["formats", "--format", "json"])

        assert result.exit_code == 0
        formats = json.loads(result.stdout)
        assert [f["name"] for f in formats] == [
            "markdown",
            "plaintext",
            "outline",
            "document",
            "html",
        ]
        assert formats[0]["targets"] == ["outline", "plaintext", "document"]
        assert formats[2]["file_format"] == "json"

    def test_formats_table(self, runner):
        """Test the default table output."""
        result = runner.invoke(app, ["formats"])

        assert result.exit_code == 0
        assert "markdown" in result.stdout
        assert "outline" in result.stdout

    def test_targets(self, runner):
        """Test listing direct targets of a format."""
        result = runner.invoke(app, ["targets", "markdown"])

        assert result.exit_code == 0
        assert result.stdout.split() == ["outline", "plaintext", "document"]

    def test_targets_unknown_format(self, runner):
        """Test that an unknown format exits with an error."""
        result = runner.invoke(app, ["targets", "nope"])

        assert result.exit_code == 1
        assert "Unknown format: nope" in result.stdout

    def test_path(self, runner):
        """Test printing a multi-hop route."""
        result = runner.invoke(app, ["path", "html", "outline"])

        assert result.exit_code == 0
        assert result.stdout.strip() == "html -> markdown -> outline"

    def test_path_json(self, runner):
        """Test printing a route as JSON."""
        result = runner.invoke(app, ["path", "document", "plaintext", "--format", "json"])

        assert result.exit_code == 0
        assert json.loads(result.stdout) == ["document", "markdown", "plaintext"]

    def test_no_path(self, runner):
        """Test that unreachable formats exit with an error."""
        result = runner.invoke(app, ["path", "outline", "html"])

        assert result.exit_code == 1
        assert "No transformation path from outline to html" in result.stdout


class TestTransform:
    """Tests for 'markus transform'."""

    def test_stdin_to_stdout(self, runner):
        """Test converting markdown from stdin to plaintext."""
        result = runner.invoke(app, ["transform", "--to", "plaintext"], input=SAMPLE)

        assert result.exit_code == 0
        assert result.stdout == "Introduction\n\nSome bold text.\n\nDetails\n\nMore details.\n\n"

    def test_json_output(self, runner, tmp_path):
        """Test that json formats are printed as JSON."""
        source = tmp_path / "doc.md"
        source.write_text(SAMPLE)

        result = runner.invoke(app, ["transform", "--input", str(source), "--to", "outline"])

        assert result.exit_code == 0
        outline = json.loads(result.stdout)
        assert outline["sections"][0]["title"] == "Introduction"
        assert outline["sections"][0]["children"][0]["title"] == "Details"

    def test_json_input(self, runner):
        """Test that json formats are parsed on input."""
        result = runner.invoke(
            app,
            ["transform", "--from", "document", "--to", "markdown"],
            input=json.dumps({"content": "# Hi"}),
        )

        assert result.exit_code == 0
        assert result.stdout == "# Hi\n"

    def test_invalid_json_input(self, runner):
        """Test that malformed json input exits with an error."""
        result = runner.invoke(
            app, ["transform", "--from", "outline", "--to", "markdown"], input="not json"
        )

        assert result.exit_code == 1
        assert "Transform failed" in result.stdout

    def test_roundtrip_to_file(self, runner, tmp_path):
        """Test that --roundtrip converts back to the source format."""
        source = tmp_path / "doc.md"
        source.write_text(SAMPLE)
        target = tmp_path / "out" / "doc.md"

        result = runner.invoke(
            app,
            [
                "transform",
                "--input",
                str(source),
                "--to",
                "outline",
                "--roundtrip",
                "--output",
                str(target),
            ],
        )

        assert result.exit_code == 0
        assert target.read_text() == SAMPLE

    def test_parameters(self, runner):
        """Test passing key=value parameters to edges."""
        result = runner.invoke(
            app,
            [
                "transform",
                "--to",
                "document",
                "--param",
                "title=Given",
                "--param",
                "metadata={author: sam}",
            ],
            input="no heading",
        )

        assert result.exit_code == 0
        assert json.loads(result.stdout) == {
            "content": "no heading",
            "title": "Given",
            "metadata": {"author": "sam"},
        }

    def test_invalid_parameter(self, runner):
        """Test that a parameter without '=' is rejected."""
        result = runner.invoke(app, ["transform", "--to", "document", "-p", "title"], input="x")

        assert result.exit_code == 1
        assert "Invalid parameter" in result.stdout

    def test_unknown_destination(self, runner):
        """Test that an unknown destination exits with an error."""
        result = runner.invoke(app, ["transform", "--to", "pdf"], input="x")

        assert result.exit_code == 1
        assert "Unknown format: pdf" in result.stdout

    def test_verbose_traces_each_hop(self, runner):
        """Test that --verbose prints intermediate results."""
        result = runner.invoke(
            app,
            ["transform", "--from", "html", "--to", "plaintext", "--verbose"],
            input="<p><strong>hi</strong></p>",
        )

        assert result.exit_code == 0
        assert "Converted from html to markdown. Result:" in result.output
        assert "Converted from markdown to plaintext. Result:" in result.output


class TestExtensions:
    """Tests for registering extensions from the command line and config."""

    def test_extension_option(self, runner, extension_module):
        """Test routing to a format added by --extension."""
        result = runner.invoke(
            app,
            ["transform", "--to", "wordcount", "--extension", extension_module],
            input="the quick fox",
        )

        assert result.exit_code == 0
        assert result.stdout == "3\n"

    def test_extension_from_config(self, runner, extension_module, config_path):
        """Test that configured extensions are registered on startup."""
        config_path.parent.mkdir(parents=True)
        config_path.write_text(yaml.dump({"extensions": [extension_module]}))

        result = runner.invoke(app, ["path", "markdown", "wordcount"])

        assert result.exit_code == 0
        assert result.stdout.strip() == "markdown -> plaintext -> wordcount"

    def test_bad_extension(self, runner):
        """Test that an unresolvable extension exits with an error."""
        result = runner.invoke(app, ["formats", "-e", "no_such_module_xyz:ext"])

        assert result.exit_code == 1
        assert "Cannot import extension module" in result.stdout

    def test_parameters_from_config(self, runner, config_path):
        """Test that configured parameters are passed to edges."""
        config_path.parent.mkdir(parents=True)
        config_path.write_text(yaml.dump({"parameters": {"title": "From Config"}}))

        result = runner.invoke(app, ["transform", "--to", "document"], input="text")

        assert result.exit_code == 0
        assert json.loads(result.stdout)["title"] == "From Config"


class TestDiagram:
    """Tests for 'markus diagram'."""

    def test_plantuml(self, runner):
        """Test the default PlantUML output."""
        result = runner.invoke(app, ["diagram"])

        assert result.exit_code == 0
        assert result.stdout.startswith("@startuml\nhide empty description\n")
        assert "html --> markdown" in result.stdout
        assert result.stdout.endswith("@enduml\n")

    def test_mermaid_to_file(self, runner, tmp_path):
        """Test writing a Mermaid diagram to a file."""
        target = tmp_path / "graph.mmd"

        result = runner.invoke(
            app, ["diagram", "--diagram-format", "mermaid", "--output", str(target)]
        )

        assert result.exit_code == 0
        content = target.read_text()
        assert content.startswith("stateDiagram-v2\n")
        assert "    markdown --> outline" in content
