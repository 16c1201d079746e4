"""Tests for the argv preprocessor."""

from hu.cli.argv import preprocess_argv


class TestVersionRewrite:
    """--version / -V → version subcommand."""

    def test_double_dash_version(self) -> None:
        assert preprocess_argv(["--version"]) == ["version"]

    def test_short_version_flag(self) -> None:
        assert preprocess_argv(["-V"]) == ["version"]

    def test_version_flag_not_rewritten_after_subcommand(self) -> None:
        result = preprocess_argv(["read", "--version"])
        assert result == ["read", "--version"]


class TestGlobalFlagHoisting:
    """--debug is moved in front of the subcommand."""

    def test_trailing_debug(self) -> None:
        assert preprocess_argv(["read", "x.py", "--debug"]) == ["--debug", "read", "x.py"]

    def test_debug_between_subcommands(self) -> None:
        assert preprocess_argv(["utils", "--debug", "grep", "fn"]) == [
            "--debug",
            "utils",
            "grep",
            "fn",
        ]

    def test_already_first(self) -> None:
        assert preprocess_argv(["--debug", "version"]) == ["--debug", "version"]


class TestPassthrough:
    """Arguments without special handling are unchanged."""

    def test_empty(self) -> None:
        assert preprocess_argv([]) == []

    def test_plain_command(self) -> None:
        assert preprocess_argv(["utils", "grep", "-i", "todo", "src"]) == [
            "utils",
            "grep",
            "-i",
            "todo",
            "src",
        ]


class TestDoubleDash:
    """Tokens after -- are never treated as global flags."""

    def test_debug_after_double_dash_kept(self) -> None:
        assert preprocess_argv(["utils", "grep", "--", "--debug"]) == [
            "utils",
            "grep",
            "--",
            "--debug",
        ]

    def test_debug_before_double_dash_hoisted(self) -> None:
        assert preprocess_argv(["utils", "grep", "--debug", "--", "--debug", "src"]) == [
            "--debug",
            "utils",
            "grep",
            "--",
            "--debug",
            "src",
        ]
