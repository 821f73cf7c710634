"""Tests for the CLI commands."""

import hashlib
import json
from pathlib import Path

import pytest
from typer.testing import CliRunner

from swmanifest.cli import app


runner = CliRunner()


@pytest.fixture
def project(tmp_path: Path) -> Path:
    """A project with a build output directory and a configuration."""
    dist = tmp_path / "dist"
    (dist / "assets").mkdir(parents=True)
    (dist / "index.html").write_text("<html></html>")
    (dist / "main.js").write_text("console.log('main')")
    (dist / "readme.md").write_text("# readme")
    (dist / "assets" / "logo.svg").write_text("<svg/>")

    config = {
        "index": "/index.html",
        "assetGroups": [
            {
                "name": "app",
                "installMode": "prefetch",
                "resources": {"files": ["/index.html", "/*.js"]},
            },
            {
                "name": "assets",
                "installMode": "lazy",
                "resources": {"files": ["/assets/**"]},
            },
        ],
        "dataGroups": [
            {
                "name": "api",
                "urls": ["/api/**"],
                "cacheConfig": {"maxSize": 100, "maxAge": "3d12h", "timeout": "5s"},
            }
        ],
    }
    (tmp_path / "sw-config.json").write_text(json.dumps(config))
    return tmp_path


@pytest.mark.cli
@pytest.mark.tier(1)
class TestGenerate:
    """Tests for the generate command."""

    def test_writes_manifest_into_dist(self, project: Path) -> None:
        result = runner.invoke(
            app, ["generate", str(project / "dist"), str(project / "sw-config.json")]
        )

        assert result.exit_code == 0, f"Failed with: {result.output}"
        manifest = json.loads((project / "dist" / "sw-manifest.json").read_text())
        assert manifest["configVersion"] == 1
        assert manifest["assetGroups"][0]["urls"] == ["/index.html", "/main.js"]
        assert manifest["assetGroups"][1]["updateMode"] == "lazy"
        assert manifest["dataGroups"][0]["maxAge"] == 302_400_000
        assert manifest["dataGroups"][0]["timeoutMs"] == 5_000
        assert "/readme.md" not in manifest["hashTable"]
        assert manifest["hashTable"]["/main.js"] == hashlib.sha1(
            b"console.log('main')"
        ).hexdigest()
        assert "Wrote" in result.output
        assert "3 hashed files" in result.output

    def test_summary_table_lists_groups(self, project: Path) -> None:
        result = runner.invoke(
            app, ["generate", str(project / "dist"), str(project / "sw-config.json")]
        )

        assert "Asset groups" in result.output
        assert "app" in result.output
        assert "assets" in result.output

    def test_stdout_prints_manifest_without_writing(self, project: Path) -> None:
        result = runner.invoke(
            app,
            [
                "generate",
                str(project / "dist"),
                str(project / "sw-config.json"),
                "--stdout",
                "--base-href",
                "/app/",
            ],
        )

        assert result.exit_code == 0, f"Failed with: {result.output}"
        manifest = json.loads(result.stdout)
        assert manifest["index"] == "/app/index.html"
        assert "/app/main.js" in manifest["hashTable"]
        assert not (project / "dist" / "sw-manifest.json").exists()

    def test_custom_output_name(self, project: Path) -> None:
        result = runner.invoke(
            app,
            [
                "generate",
                str(project / "dist"),
                str(project / "sw-config.json"),
                "-o",
                "ngsw.json",
            ],
        )

        assert result.exit_code == 0, f"Failed with: {result.output}"
        assert (project / "dist" / "ngsw.json").exists()

    def test_workers_give_same_manifest(self, project: Path) -> None:
        args = ["generate", str(project / "dist"), str(project / "sw-config.json")]

        sequential = runner.invoke(app, [*args, "--stdout"])
        parallel = runner.invoke(app, [*args, "--stdout", "--workers", "4"])

        assert parallel.exit_code == 0, f"Failed with: {parallel.output}"
        assert json.loads(parallel.stdout) == json.loads(sequential.stdout)

    def test_discovers_config_from_project_root(
        self, project: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.chdir(project)

        result = runner.invoke(app, ["generate", "dist"])

        assert result.exit_code == 0, f"Failed with: {result.output}"
        assert (project / "dist" / "sw-manifest.json").exists()

    def test_missing_config_exits_with_hint(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        (tmp_path / ".git").mkdir()
        (tmp_path / "dist").mkdir()
        monkeypatch.chdir(tmp_path)

        result = runner.invoke(app, ["generate", "dist"])

        assert result.exit_code == 1
        assert "No sw-config.json found" in result.output
        assert "Hint:" in result.output

    def test_malformed_duration_exits_with_error(self, project: Path) -> None:
        config_path = project / "sw-config.json"
        config = json.loads(config_path.read_text())
        config["dataGroups"][0]["cacheConfig"]["maxAge"] = "5x"
        config_path.write_text(json.dumps(config))

        result = runner.invoke(app, ["generate", str(project / "dist"), str(config_path)])

        assert result.exit_code == 1
        assert "Error:" in result.output
        assert "data group 'api'" in result.output
        assert not (project / "dist" / "sw-manifest.json").exists()

    def test_invalid_json_exits_with_line_hint(self, project: Path) -> None:
        config_path = project / "sw-config.json"
        config_path.write_text('{\n  "index": \n}')

        result = runner.invoke(app, ["generate", str(project / "dist"), str(config_path)])

        assert result.exit_code == 1
        assert "Hint: Check sw-config.json at line" in result.output

    def test_versioned_files_warning_is_printed(self, project: Path) -> None:
        config_path = project / "sw-config.json"
        config = json.loads(config_path.read_text())
        config["assetGroups"][1]["resources"] = {"versionedFiles": ["/assets/**"]}
        config_path.write_text(json.dumps(config))

        result = runner.invoke(app, ["generate", str(project / "dist"), str(config_path)])

        assert result.exit_code == 0, f"Failed with: {result.output}"
        assert "Warning:" in result.output
        assert "versionedFiles" in result.output


@pytest.mark.cli
@pytest.mark.tier(0)
class TestMatch:
    """Tests for the match command."""

    def test_matching_path(self) -> None:
        result = runner.invoke(app, ["match", "/assets/**/*.png", "/assets/a/b.png"])

        assert result.exit_code == 0
        assert r"Regex: ^\/assets\/(?:.+\/)?[^/]*\.png$" in result.output
        assert "/assets/a/b.png: match" in result.output

    def test_non_matching_path_exits_one(self) -> None:
        result = runner.invoke(app, ["match", "/*.js", "/lib/a.js"])

        assert result.exit_code == 1
        assert "/lib/a.js: no match" in result.output

    def test_invalid_regex_reports_error(self) -> None:
        """Unbalanced metacharacters exit 1 with an error, not a traceback."""
        result = runner.invoke(app, ["match", "[x", "x"])

        assert result.exit_code == 1
        assert "Error: Glob '[x' compiles to an invalid regex" in result.output
        assert "Hint:" in result.output
        assert result.exception is None or isinstance(result.exception, SystemExit)

    def test_literal_question_mark(self) -> None:
        result = runner.invoke(app, ["match", "-q", "/data?x=1", "/data?x=1"])

        assert result.exit_code == 0
        assert "match" in result.output


@pytest.mark.cli
@pytest.mark.tier(0)
class TestDuration:
    """Tests for the duration command."""

    def test_prints_milliseconds(self) -> None:
        result = runner.invoke(app, ["duration", "1h30m"])

        assert result.exit_code == 0
        assert result.output.strip() == "5400000"

    def test_malformed_duration(self) -> None:
        result = runner.invoke(app, ["duration", "5x"])

        assert result.exit_code == 1
        assert "Error: Not a valid duration" in result.output
        assert "Hint:" in result.output


@pytest.mark.cli
@pytest.mark.tier(0)
def test_no_args_shows_help() -> None:
    result = runner.invoke(app, [])

    assert "generate" in result.output
