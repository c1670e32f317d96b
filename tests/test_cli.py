from typer.testing import CliRunner

from joti import cli
from joti.core import database
from joti.schemas.page import PageDraft
from joti.services.page_service import create_page

runner = CliRunner()


def test_init_creates_db(tmp_path):
    path = tmp_path / "new.db"
    result = runner.invoke(cli.app, ["init", str(path)])
    assert result.exit_code == 0
    assert path.exists()


def test_init_refuses_existing(tmp_path):
    path = tmp_path / "new.db"
    runner.invoke(cli.app, ["init", str(path)])
    result = runner.invoke(cli.app, ["init", str(path)])
    assert result.exit_code == 1
    assert "exists" in result.output


def test_serve_missing_dbfile(tmp_path):
    result = runner.invoke(cli.app, ["serve", str(tmp_path / "missing.db")])
    assert result.exit_code == 1
    assert "doesn't exist" in result.output


def test_sweep(tmp_path, db, monkeypatch):
    # on reste sur la DB de test
    monkeypatch.setattr(database, "configure", lambda url: None)
    path = tmp_path / "x.db"
    path.write_text("")
    create_page(db, PageDraft(title="t", content="c"))

    result = runner.invoke(cli.app, ["sweep", str(path), "--days", "1"])
    assert result.exit_code == 0
    assert "Deleted 0 page(s)" in result.output
