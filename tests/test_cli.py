"""Tests for the command line entry point."""

import pytest

from notemancy_lsp import __version__
from notemancy_lsp.cli import build_parser


def test_version_module():
    """Version is a MAJOR.MINOR.PATCH string."""
    assert isinstance(__version__, str)
    assert len(__version__.split(".")) >= 2


def test_version_flag(capsys):
    with pytest.raises(SystemExit) as exc:
        build_parser().parse_args(["--version"])
    assert exc.value.code == 0
    assert __version__ in capsys.readouterr().out


def test_defaults():
    args = build_parser().parse_args([])
    assert args.config is None
    assert args.vault is None
    assert args.tcp is False
    assert (args.host, args.port) == ("127.0.0.1", 2087)
    assert args.log_level == "WARNING"


def test_overrides():
    args = build_parser().parse_args(
        ["--vault", "~/notes", "--tcp", "--port", "9000", "--log-level", "DEBUG"]
    )
    assert str(args.vault) == "~/notes"
    assert args.tcp is True
    assert args.port == 9000
    assert args.log_level == "DEBUG"


def test_rejects_unknown_log_level():
    with pytest.raises(SystemExit):
        build_parser().parse_args(["--log-level", "LOUD"])
