"""Tests for the get-private-key command line."""

import base64

import pytest

from get_private_key.cli import EXIT_ERROR, EXIT_NOT_FOUND, EXIT_OK, format_key, main
from get_private_key.core.normalizer import normalize_private_key

from conftest import PRIVATE_KEY_PKCS1, PRIVATE_KEY_PKCS8


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    monkeypatch.delenv("PRIVATE_KEY", raising=False)
    monkeypatch.delenv("PRIVATE_KEY_PATH", raising=False)


class TestFormatKey:
    """Output formats feed back into PRIVATE_KEY."""

    def test_pem(self):
        assert format_key(PRIVATE_KEY_PKCS1, "pem") == PRIVATE_KEY_PKCS1

    def test_escaped(self):
        escaped = format_key(PRIVATE_KEY_PKCS1, "escaped")

        assert "\n" not in escaped
        assert normalize_private_key(escaped) == PRIVATE_KEY_PKCS1

    def test_base64(self):
        encoded = format_key(PRIVATE_KEY_PKCS8, "base64")

        assert base64.b64decode(encoded).decode("utf-8") == PRIVATE_KEY_PKCS8
        assert normalize_private_key(encoded) == PRIVATE_KEY_PKCS8


class TestMain:
    """Exit codes and output of main()."""

    def test_filepath(self, tmp_path, capsys):
        (tmp_path / "app.pem").write_text(PRIVATE_KEY_PKCS1 + "\n")

        code = main(["--filepath", "app.pem", "--cwd", str(tmp_path), "-q"])

        assert code == EXIT_OK
        assert capsys.readouterr().out == PRIVATE_KEY_PKCS1 + "\n"

    def test_env_private_key_escaped_output(self, tmp_path, capsys, monkeypatch):
        monkeypatch.setenv("PRIVATE_KEY", PRIVATE_KEY_PKCS8.replace("\n", " "))

        code = main(["--cwd", str(tmp_path), "--output", "escaped"])

        assert code == EXIT_OK
        assert capsys.readouterr().out == PRIVATE_KEY_PKCS8.replace("\n", "\\n") + "\n"

    def test_not_found(self, tmp_path, capsys):
        code = main(["--cwd", str(tmp_path)])

        assert code == EXIT_NOT_FOUND
        assert capsys.readouterr().out == ""

    def test_ambiguous(self, tmp_path, capsys):
        (tmp_path / "a.pem").write_text("a")
        (tmp_path / "b.pem").write_text("b")

        code = main(["--cwd", str(tmp_path)])

        assert code == EXIT_ERROR
        assert capsys.readouterr().out == ""

    def test_invalid_private_key(self, tmp_path, monkeypatch, caplog):
        monkeypatch.setenv("PRIVATE_KEY", "invalid")

        code = main(["--cwd", str(tmp_path)])

        assert code == EXIT_ERROR
        assert "INVALID_KEY" in caplog.text

    def test_unreadable_filepath(self, tmp_path):
        assert main(["--filepath", "missing.pem", "--cwd", str(tmp_path)]) == EXIT_ERROR

    def test_undecodable_pem_file(self, tmp_path):
        (tmp_path / "k.pem").write_bytes(b"\x30\x82\xff\xfe")

        assert main(["--cwd", str(tmp_path), "-q"]) == EXIT_ERROR

    def test_version(self, capsys):
        from get_private_key import __version__

        with pytest.raises(SystemExit) as exc_info:
            main(["--version"])

        assert exc_info.value.code == 0
        assert __version__ in capsys.readouterr().out
