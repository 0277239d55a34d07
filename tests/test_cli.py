from __future__ import annotations

import io
import subprocess
import sys
from pathlib import Path

import pytest

import charlockholmes
from charlockholmes.cli import main


def test_cli_minimal(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    path = tmp_path / "ascii.txt"
    path.write_bytes(b"Hello, plain world.\n")
    main(["--minimal", str(path)])
    assert capsys.readouterr().out.strip() == "ASCII"


def test_cli_full_output(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    path = tmp_path / "sjis.txt"
    path.write_bytes("これはテストです。日本語のテキスト。".encode("shift_jis"))
    main([str(path)])
    out = capsys.readouterr().out.strip()
    assert out.startswith(f"{path}: Shift_JIS with confidence ")
    assert out.endswith("(ja)")


def test_cli_all(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    path = tmp_path / "ascii.txt"
    path.write_bytes(b"hello")
    main(["--all", "--minimal", str(path)])
    assert capsys.readouterr().out.split() == ["ASCII", "UTF-8"]


def test_cli_binary(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    path = tmp_path / "blob.bin"
    path.write_bytes(b"\x00\x01\x02\x03binary")
    main(["--minimal", str(path)])
    assert capsys.readouterr().out.strip() == "binary"


def test_cli_empty_file(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    path = tmp_path / "empty.txt"
    path.write_bytes(b"")
    main([str(path)])
    assert capsys.readouterr().out.strip() == f"{path}: no encoding detected"


def test_cli_hint(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    path = tmp_path / "latin.txt"
    path.write_bytes("Die Größe des Gebäudes überraschte die Besucher.".encode("cp1252"))
    main(["--minimal", "--hint", "windows-1252", str(path)])
    assert capsys.readouterr().out.strip() == "windows-1252"


def test_cli_missing_file(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    path = tmp_path / "present.txt"
    path.write_bytes(b"hello")
    missing = tmp_path / "missing.txt"
    main(["--minimal", str(missing), str(path)])
    captured = capsys.readouterr()
    assert f"charlockholmes: {missing}:" in captured.err
    assert captured.out.strip() == "ASCII"


def test_cli_stdin(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    monkeypatch.setattr(sys, "stdin", io.TextIOWrapper(io.BytesIO(b"hello world")))
    main([])
    assert capsys.readouterr().out.startswith("stdin: ASCII with confidence 100")


def test_cli_list_encodings(capsys: pytest.CaptureFixture[str]) -> None:
    main(["--list-encodings"])
    names = capsys.readouterr().out.split()
    assert tuple(names) == charlockholmes.get_supported_encodings()


def test_cli_rejects_bad_min_confidence(capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit) as excinfo:
        main(["--min-confidence", "200"])
    assert excinfo.value.code == 2
    assert "min_confidence" in capsys.readouterr().err


def test_cli_version(capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit) as excinfo:
        main(["--version"])
    assert excinfo.value.code == 0
    assert charlockholmes.__version__ in capsys.readouterr().out


def test_cli_as_module(tmp_path: Path) -> None:
    path = tmp_path / "ascii.txt"
    path.write_bytes(b"hello")
    result = subprocess.run(
        [sys.executable, "-m", "charlockholmes.cli", "--minimal", str(path)],
        capture_output=True,
        text=True,
        check=True,
    )
    assert result.stdout.strip() == "ASCII"
