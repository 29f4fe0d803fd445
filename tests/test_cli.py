import pytest
import typer

import cli
from conftest import FakeRepo, RecordingClient


@pytest.fixture
def wiring(monkeypatch):
    repo = FakeRepo(
        tags=["v1.0.0", "v1.2.3"],
        commits={"v1.2.3": ["fix: typo"], "v1.0.0": ["fix: typo", "feat: search"]},
    )
    client = RecordingClient()
    monkeypatch.setattr(cli, "GitRepository", lambda path=None: repo)
    monkeypatch.setattr("summit.release.OpenAIClient", lambda **kwargs: client)
    monkeypatch.setenv("OPENAI_API_KEY", "sk-test")
    for var in ("SUMMIT_CHANGELOG", "SUMMIT_OUTPUT", "OPENAI_MODEL"):
        monkeypatch.delenv(var, raising=False)
    return repo, client


def test_cli_writes_outputs(wiring, tmp_path, capsys):
    repo, client = wiring
    output = tmp_path / "current_release.md"
    changelog = tmp_path / "CHANGELOG.md"
    changelog.write_text("# Changelog\n## [Unreleased]\n", encoding="utf-8")

    cli.main(
        [
            "--bump",
            "minor",
            "--output",
            str(output),
            "--changelog",
            str(changelog),
            "--summary",
            "--fun",
        ]
    )

    assert output.read_text(encoding="utf-8") == client.reply
    assert changelog.read_text(encoding="utf-8") == (
        "# Changelog\n## [Unreleased]\n\n" + client.reply + "\n"
    )
    out = capsys.readouterr().out
    assert "v1.2.3 => v1.3.0" in out
    assert "All done!" in out


def test_cli_since_tag(wiring, capsys):
    repo, client = wiring
    cli.main(["--bump", "patch", "--since-tag", "v1.0.0", "--dry-run"])
    assert ("commit_messages", "v1.0.0") in repo.calls
    out = capsys.readouterr().out
    assert "v1.0.0 => v1.2.4" in out
    assert "feat: search" in client.requests[0][0][0]["content"]


def test_cli_dry_run_prints_notes(wiring, tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    repo, client = wiring
    cli.main(["--bump", "patch", "--output", "notes.md", "--dry-run"])
    assert not (tmp_path / "notes.md").exists()
    assert client.reply in capsys.readouterr().out


def test_cli_missing_api_key(wiring, monkeypatch):
    repo, client = wiring
    monkeypatch.delenv("OPENAI_API_KEY")
    with pytest.raises(SystemExit) as excinfo:
        cli.main(["--bump", "patch"])
    assert "OPENAI_API_KEY" in str(excinfo.value)
    assert repo.calls == []
    assert client.requests == []


def test_cli_unknown_tag_fails(wiring, tmp_path):
    output = tmp_path / "notes.md"
    with pytest.raises(SystemExit) as excinfo:
        cli.main(["--bump", "patch", "--since-tag", "v9.9.9", "--output", str(output)])
    assert "Tag not found: v9.9.9" in str(excinfo.value)
    assert not output.exists()


def test_cli_config_file_paths(wiring, tmp_path):
    repo, client = wiring
    cfg = tmp_path / "summit.yml"
    output = tmp_path / "from_config.md"
    cfg.write_text(f"output: {output}\nopenai_model: gpt-4o\n", encoding="utf-8")
    cli.main(["--bump", "major", "--config", str(cfg)])
    assert output.read_text(encoding="utf-8") == client.reply
    assert client.requests[0][1] == "gpt-4o"


def test_cli_rejects_unknown_bump(wiring):
    with pytest.raises(typer.BadParameter):
        cli.main(["--bump", "huge"])
    assert wiring[0].calls == []


def test_cli_malformed_config(wiring, tmp_path):
    cfg = tmp_path / "summit.yml"
    cfg.write_text("output: [unclosed\n", encoding="utf-8")
    with pytest.raises(SystemExit) as excinfo:
        cli.main(["--bump", "patch", "--config", str(cfg)])
    assert "Invalid configuration" in str(excinfo.value)
    assert wiring[0].calls == []


def test_cli_undecodable_changelog(wiring, tmp_path):
    changelog = tmp_path / "CHANGELOG.md"
    changelog.write_bytes(b"\xff\xfe## [Unreleased]\n")
    with pytest.raises(SystemExit) as excinfo:
        cli.main(["--bump", "patch", "--changelog", str(changelog)])
    assert "Could not update changelog" in str(excinfo.value)
