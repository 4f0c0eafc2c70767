"""Tests for the `url-scraper` CLI."""

import json

import httpx
import respx
from typer.testing import CliRunner

from cli.main import app

runner = CliRunner()

_HTML = '<a href="/x">X</a><a href="?q=1">skip</a><a href="https://other.com/y"><b>Y</b></a>'


def test_links_from_html_file(tmp_path):
    page = tmp_path / "page.html"
    page.write_text(_HTML, encoding="utf-8")

    result = runner.invoke(app, ["links", "https://example.com/dir/", "--html-file", str(page)])
    assert result.exit_code == 0
    assert result.stdout.splitlines() == [
        "X: https://example.com/x",
        "<b>Y</b>: https://other.com/y",
    ]


def test_links_json_output(tmp_path):
    page = tmp_path / "page.html"
    page.write_text(_HTML, encoding="utf-8")

    result = runner.invoke(
        app, ["links", "https://example.com/", "--html-file", str(page), "--json"]
    )
    assert result.exit_code == 0
    assert json.loads(result.stdout) == [
        {"text": "X", "url": "https://example.com/x"},
        {"text": "<b>Y</b>", "url": "https://other.com/y"},
    ]


def test_links_fetches_url():
    with respx.mock:
        respx.get("https://example.com/").mock(return_value=httpx.Response(200, text=_HTML))
        result = runner.invoke(app, ["links", "https://example.com/"])

    assert result.exit_code == 0
    assert "X: https://example.com/x" in result.stdout


def test_invalid_url_exits_nonzero(tmp_path):
    page = tmp_path / "page.html"
    page.write_text(_HTML, encoding="utf-8")

    result = runner.invoke(app, ["links", "not a url", "--html-file", str(page)])
    assert result.exit_code == 1
    assert "failed to parse URL" in result.output


def test_request_failure_exits_nonzero():
    with respx.mock:
        respx.get("https://example.com/").mock(side_effect=httpx.ConnectError("refused"))
        result = runner.invoke(app, ["links", "https://example.com/"])

    assert result.exit_code == 1
    assert "failure in request" in result.output
