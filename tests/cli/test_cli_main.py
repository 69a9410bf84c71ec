"""Tests for CLI parser and main behavior."""

from __future__ import annotations

from pathlib import Path

import pytest

from casktoken.cli.main import build_parser, main


def test_build_parser_accepts_flags(tmp_path: Path) -> None:
    parser = build_parser()

    args = parser.parse_args(["--debug", "--root", str(tmp_path), "Google Chrome.app"])

    assert args.name == "Google Chrome.app"
    assert args.debug is True
    assert args.root == tmp_path
    assert args.config is None


@pytest.mark.parametrize(
    ("short_args", "long_args"),
    [
        pytest.param(["-d", "Foo"], ["--debug", "Foo"], id="debug"),
        pytest.param(["-r", ".", "Foo"], ["--root", ".", "Foo"], id="root"),
        pytest.param(["-c", "casktoken.yaml", "Foo"], ["--config", "casktoken.yaml", "Foo"], id="config"),
    ],
)
def test_short_flags_match_long_flags(short_args: list[str], long_args: list[str]) -> None:
    parser = build_parser()

    assert vars(parser.parse_args(short_args)) == vars(parser.parse_args(long_args))


def test_help_exits_zero(capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit) as exc_info:
        main(["--help"])

    assert exc_info.value.code == 0
    assert "usage:" in capsys.readouterr().out


def test_missing_name_is_usage_error() -> None:
    with pytest.raises(SystemExit) as exc_info:
        main([])

    assert exc_info.value.code == 2


def test_main_prints_file_name_and_declaration(cask_repo: Path, capsys: pytest.CaptureFixture[str]) -> None:
    exit_code = main(["--root", str(cask_repo), "Google Chrome.app"])

    captured = capsys.readouterr()
    assert exit_code == 0
    assert captured.out.splitlines() == [
        "File name: Casks/google-chrome.rb",
        "Declaration: class GoogleChrome < Cask",
    ]
    assert captured.err == ""


def test_main_debug_prints_canonical_name(cask_repo: Path, capsys: pytest.CaptureFixture[str]) -> None:
    exit_code = main(["--debug", "--root", str(cask_repo), "MyTool 3.2.1 for Mac"])

    lines = capsys.readouterr().out.splitlines()
    assert exit_code == 0
    assert lines == [
        "Canonical name: MyTool",
        "File name: Casks/mytool.rb",
        "Declaration: class Mytool < Cask",
    ]


def test_main_exception_override(cask_repo: Path, capsys: pytest.CaptureFixture[str]) -> None:
    exit_code = main(["--root", str(cask_repo), "iTerm"])

    out = capsys.readouterr().out
    assert exit_code == 0
    assert "File name: Casks/iterm2.rb" in out
    assert "Declaration: class Iterm2 < Cask" in out


def test_main_duplicate_warns_and_fails(cask_repo: Path, capsys: pytest.CaptureFixture[str]) -> None:
    (cask_repo / "Casks" / "google-chrome.rb").write_text("", encoding="utf-8")

    exit_code = main(["--root", str(cask_repo), "Google Chrome.app"])

    captured = capsys.readouterr()
    assert exit_code == 1
    assert "File name: Casks/google-chrome.rb" in captured.out
    assert "Warning: the file 'google-chrome.rb' already exists" in captured.err


def test_main_digit_warning_fails(cask_repo: Path, capsys: pytest.CaptureFixture[str]) -> None:
    exit_code = main(["--root", str(cask_repo), "Transmit4"])

    captured = capsys.readouterr()
    assert exit_code == 1
    assert "File name: Casks/transmit4.rb" in captured.out
    assert "contains digits" in captured.err


def test_main_naming_error(cask_repo: Path, capsys: pytest.CaptureFixture[str]) -> None:
    exit_code = main(["--root", str(cask_repo), "!!!"])

    captured = capsys.readouterr()
    assert exit_code == 1
    assert captured.out == ""
    assert "could not determine a name" in captured.err


def test_main_missing_config_is_configuration_error(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    exit_code = main(["--root", str(tmp_path), "--config", str(tmp_path / "missing.yaml"), "Foo"])

    assert exit_code == 2
    assert "Configuration error" in capsys.readouterr().err


def test_main_uses_configured_definitions_dir(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    (tmp_path / "casktoken.yaml").write_text("definitions_dir: Formulae\n", encoding="utf-8")
    (tmp_path / "Formulae").mkdir()
    (tmp_path / "Formulae" / "foo.rb").write_text("", encoding="utf-8")

    exit_code = main(["--root", str(tmp_path), "Foo"])

    captured = capsys.readouterr()
    assert exit_code == 1
    assert "File name: Formulae/foo.rb" in captured.out
    assert "already exists" in captured.err
