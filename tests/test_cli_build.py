import pytest
from typer.testing import CliRunner

from mpgblog import cli
from mpgblog.api import IndexNowResult
from mpgblog.config import settings


def test_cli_build_generates_site(runner: CliRunner, sample_site: dict) -> None:
    result = runner.invoke(cli.app, ["build", "--config", str(sample_site["path"])])
    assert result.exit_code == 0, result.output

    web_root = sample_site["web_root"]
    assert (web_root / "blog" / "road-trips" / "route-66" / "index.html").exists()
    assert (web_root / "sitemap.xml").exists()
    assert "Site built." in result.output


def test_cli_build_dry_run_writes_nothing(runner: CliRunner, sample_site: dict) -> None:
    result = runner.invoke(cli.app, ["build", "--config", str(sample_site["path"]), "--dry-run"])
    assert result.exit_code == 0, result.output
    assert "Dry run complete." in result.output
    assert not sample_site["web_root"].exists()


def test_cli_reports_config_errors(runner: CliRunner, tmp_path) -> None:
    path = tmp_path / "site.toml"
    path.write_text('surprise = "yes"\n', encoding="utf-8")

    result = runner.invoke(cli.app, ["build", "--config", str(path)])

    assert result.exit_code == 1
    assert "Configuration error" in result.output


def test_cli_config_hash(runner: CliRunner, sample_site: dict) -> None:
    first = runner.invoke(cli.app, ["config-hash", "--config", str(sample_site["path"])])
    second = runner.invoke(cli.app, ["config-hash", "--config", str(sample_site["path"])])
    assert first.exit_code == 0, first.output
    assert first.output == second.output


def test_cli_toc(runner: CliRunner, sample_site: dict) -> None:
    article = sample_site["content_dir"] / "road-trips" / "route-66.md"
    result = runner.invoke(cli.app, ["toc", str(article)])

    assert result.exit_code == 0, result.output
    assert "#fuel" in result.output
    assert "#booking-tips" in result.output


def test_cli_share_links(runner: CliRunner) -> None:
    result = runner.invoke(
        cli.app,
        ["share-links", "--url", "/blog/x", "--title", "T", "--origin", "https://example.com"],
    )

    assert result.exit_code == 0, result.output
    assert "https://example.com/blog/x" in result.output
    assert "LinkedIn" in result.output


def test_cli_share_links_requires_relative_url(runner: CliRunner) -> None:
    result = runner.invoke(cli.app, ["share-links", "--url", "blog/x", "--title", "T"])
    assert result.exit_code != 0


def test_cli_indexnow_dry_run(runner: CliRunner) -> None:
    result = runner.invoke(cli.app, ["indexnow", "--url", "https://mpgcalculator.net/blog", "--dry-run"])
    assert result.exit_code == 0, result.output
    assert "1 URL(s) would be submitted" in result.output


def test_cli_indexnow_submits_sitemap(
    runner: CliRunner,
    sample_site: dict,
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    monkeypatch.setenv("SITE_URL", "https://example.com")
    monkeypatch.setenv("INDEXNOW_KEY", "abc123")
    settings.get_settings.cache_clear()
    build = runner.invoke(cli.app, ["build", "--config", str(sample_site["path"])])
    assert build.exit_code == 0, build.output

    captured = {}

    def fake_submit(urls, *, host, key, **_kwargs):
        captured.update(urls=list(urls), host=host, key=key)
        return IndexNowResult(submitted=list(urls), status_code=200)

    monkeypatch.setattr(cli, "submit_urls", fake_submit)
    result = runner.invoke(cli.app, ["indexnow", "--config", str(sample_site["path"])])

    assert result.exit_code == 0, result.output
    assert captured["host"] == "example.com"
    assert captured["key"] == "abc123"
    assert "https://example.com/blog/road-trips/route-66" in captured["urls"]


def test_cli_indexnow_requires_key(runner: CliRunner) -> None:
    result = runner.invoke(cli.app, ["indexnow", "--url", "https://mpgcalculator.net/blog"])
    assert result.exit_code == 1
    assert "INDEXNOW_KEY" in result.output
