"""
Integration tests for the command-line entry point.
"""

import json
import logging

import pytest

from mushaf import cli, config


@pytest.fixture(autouse=True)
def reset_settings(monkeypatch):
    monkeypatch.setattr(config, "_default_settings", None)
    yield
    root = logging.getLogger()
    for handler in list(root.handlers):
        if handler.get_name() == "mushaf":
            root.removeHandler(handler)


@pytest.mark.integration
class TestCheckCommand:

    def test_valid_corpus(self, corpus_file, capsys):
        code = cli.main(["--corpus", str(corpus_file), "--log-format", "text", "check"])

        out = capsys.readouterr().out
        assert code == 0
        assert "Surahs: 114" in out
        assert "Ayahs:  6236" in out
        assert "Juz:    30" in out
        assert "Pages:  604" in out

    def test_invalid_corpus(self, tmp_path, corpus_document, capsys):
        corpus_document["surahs"] = corpus_document["surahs"][:5]
        path = tmp_path / "short.json"
        path.write_text(json.dumps(corpus_document), encoding="utf-8")

        code = cli.main(["--corpus", str(path), "check"])

        assert code == 1
        assert "Expected 114 surahs" in capsys.readouterr().err

    def test_undecodable_corpus(self, tmp_path, capsys):
        path = tmp_path / "latin.json"
        path.write_bytes(b'{"surahs": ["\xff\xfe"]}')

        code = cli.main(["--corpus", str(path), "check"])

        assert code == 1
        assert "not valid UTF-8" in capsys.readouterr().err

    def test_overrides_become_default_settings(self, corpus_file):
        cli.main(["--corpus", str(corpus_file), "--log-level", "debug", "check"])

        settings = config.get_settings()
        assert settings.corpus_path == corpus_file
        assert settings.log_level == "DEBUG"


@pytest.mark.integration
class TestServeCommand:

    def test_serve_refuses_invalid_corpus(self, tmp_path, monkeypatch):
        import uvicorn

        def fail_run(*args, **kwargs):
            raise AssertionError("server must not start")

        monkeypatch.setattr(uvicorn, "run", fail_run)

        code = cli.main(["--corpus", str(tmp_path / "absent.json"), "serve"])

        assert code == 1

    def test_serve_runs_uvicorn(self, corpus_file, monkeypatch):
        import uvicorn

        calls = {}

        def fake_run(app, host, port, **kwargs):
            calls.update(app=app, host=host, port=port)

        monkeypatch.setattr(uvicorn, "run", fake_run)

        code = cli.main(["--corpus", str(corpus_file), "serve", "--host", "127.0.0.1", "--port", "8123"])

        assert code == 0
        assert calls["host"] == "127.0.0.1"
        assert calls["port"] == 8123
        assert calls["app"].state.resolver.store.verse_count == 6236
