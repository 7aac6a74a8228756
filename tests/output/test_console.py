"""Tests for Rich Console factory and theme."""

from io import StringIO

from postctl.output.console import POST_THEME, create_console, get_output


class TestCreateConsole:
    def test_returns_console_with_stringio(self) -> None:
        console = create_console()
        assert isinstance(console.file, StringIO)

    def test_no_color_disables_ansi(self) -> None:
        console = create_console(no_color=True)
        console.print("[post.error]broken[/post.error]")
        output = get_output(console)
        assert "\x1b" not in output
        assert "broken" in output

    def test_widths(self) -> None:
        assert create_console().width == 120
        assert create_console(width=80).width == 80


class TestGetOutput:
    def test_empty_console(self) -> None:
        assert get_output(create_console()) == ""


class TestTheme:
    def test_post_styles_registered(self) -> None:
        for name in ("post.ok", "post.error", "post.warning", "post.title", "post.draft"):
            assert name in POST_THEME.styles
