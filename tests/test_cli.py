"""End-to-end tests for the interactive loop."""
import io

from txkv.cli import BANNER, EXIT_INTERRUPTED, EXIT_OK, main, repl
from txkv.commands import HELP_LINES
from txkv.processor import CommandProcessor


def test_session():
    """A scripted session prints the banner and one line per result."""
    stdin = io.StringIO(
        "SET a 10\n"
        "GET a\n"
        "BEGIN\n"
        "DELETE a\n"
        "GET a\n"
        "ROLLBACK\n"
        "GET a\n"
        "COMMIT\n"
        "COUNT 10\n"
    )
    stdout = io.StringIO()
    assert main([], stdin, stdout) == EXIT_OK
    assert stdout.getvalue().splitlines() == [
        *BANNER,
        "=> 10",
        "=> ",
        "=> 10",
        "=> no transaction",
        "=> 1",
    ]


def test_no_banner_and_help():
    """--no-banner suppresses the banner; h prints the reference."""
    stdout = io.StringIO()
    assert main(["--no-banner"], io.StringIO("h\n"), stdout) == EXIT_OK
    assert stdout.getvalue().splitlines() == list(HELP_LINES)


def test_empty_input():
    """End of input right away exits cleanly."""
    stdout = io.StringIO()
    assert main(["--no-banner"], io.StringIO(""), stdout) == EXIT_OK
    assert stdout.getvalue() == ""


def test_last_line_without_newline():
    """The final line is handled even without a trailing newline."""
    stdout = io.StringIO()
    main(["--no-banner"], io.StringIO("SET k v\nGET k"), stdout)
    assert stdout.getvalue() == "=> v\n"


def test_strict_delete_flag():
    """--strict-delete reaches the processor."""
    stdout = io.StringIO()
    main(["--no-banner", "--strict-delete"], io.StringIO("DELETE k\n"), stdout)
    assert stdout.getvalue() == "=> key not set\n"


def test_interrupt():
    """Ctrl-C ends the loop with exit code 130."""

    def lines():
        yield "SET k v\n"
        yield "GET k\n"
        raise KeyboardInterrupt

    stdout = io.StringIO()
    assert repl(CommandProcessor(), lines(), stdout) == EXIT_INTERRUPTED
    assert stdout.getvalue() == "=> v\n"
