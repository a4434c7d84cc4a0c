from io import StringIO

from rich.console import Console

from flagparse import Flag, Parser, UsageFormatter


def make_parser(description=""):
    flags = [
        Flag("h", "help", "Show this help message."),
        Flag("n", "name", "Who to greet.", required=True, takes_value=True),
        Flag("s", "say", "Something to say.", takes_value=True),
    ]
    return Parser([], flags, "app", description)


def test_usage():
    parser = make_parser()
    assert parser.usage() == "app [-h|--help] [-s|--say <value>] -n|--name <value>"


def test_flag_usage_wraps_every_third_entry():
    flags = [Flag(letter, letter * 2) for letter in "abcdefg"]
    parser = Parser([], flags, "app")
    assert parser.flag_usage() == "[-a|--aa] [-b|--bb] [-c|--cc]\n[-d|--dd] [-e|--ee] [-f|--ff]\n[-g|--gg]"


def test_flag_usage_no_trailing_line_break():
    flags = [Flag(letter, letter * 2) for letter in "abcdef"]
    parser = Parser([], flags, "app")
    assert parser.flag_usage() == "[-a|--aa] [-b|--bb] [-c|--cc]\n[-d|--dd] [-e|--ee] [-f|--ff]"


def test_flag_usage_single_flag():
    assert Parser([], [Flag("v", "verbose")], "app").flag_usage() == "[-v|--verbose]"


def test_empty_flag_set():
    parser = Parser([], [], "app")
    assert parser.flag_usage() == ""
    assert parser.usage() == "app"
    assert parser.help() == "app\n\nArguments:"


def test_usage_with_wrapped_flags():
    flags = [Flag(letter, letter * 2) for letter in "abcd"]
    assert Parser([], flags, "app").usage() == "app [-a|--aa] [-b|--bb] [-c|--cc]\n[-d|--dd]"


def test_help_without_description():
    parser = make_parser()
    assert parser.help() == (
        "app [-h|--help] [-s|--say <value>] -n|--name <value>\n"
        "\n"
        "Arguments:\n"
        "  -h  --help  Show this help message.\n"
        "  -s  --say  Something to say.\n"
        "  -n  --name  Who to greet."
    )


def test_help_with_description():
    parser = make_parser("Greets people.")
    indent = " " * len("usage: app ")
    assert parser.help() == (
        "app [-h|--help] [-s|--say <value>] -n|--name <value>\n"
        "\n"
        f"{indent}Greets people.\n"
        "\n"
        "Arguments:\n"
        "  -h  --help  Show this help message.\n"
        "  -s  --say  Something to say.\n"
        "  -n  --name  Who to greet."
    )


def test_help_columns_are_not_aligned():
    flags = [Flag("", "verbose", "Talk more."), Flag("q", "", "Talk less.")]
    help_text = Parser([], flags, "app").help()
    assert help_text.splitlines()[-2:] == ["  --verbose  Talk more.", "  -q  --  Talk less."]


def test_help_is_trimmed():
    flags = [Flag("h", "help")]
    help_text = Parser([], flags, "app").help()
    assert help_text == "app [-h|--help]\n\nArguments:\n  -h  --help"


def test_formatter_directly():
    formatter = UsageFormatter([Flag("x", "xyz", required=True)], "tool", "Does x.")
    assert formatter.usage() == "tool -x|--xyz"
    assert formatter.help().startswith("tool -x|--xyz\n\n            Does x.\n")


def test_render_help_matches_plain_help():
    buffer = StringIO()
    console = Console(file=buffer, width=200, color_system=None)
    parser = make_parser("Greets people.")
    parser.render_help(console)
    assert buffer.getvalue().strip() == parser.help()


def test_short_only_flag_usage_and_help():
    parser = Parser([], [Flag("q", "", "Quiet.")], "app")
    assert parser.usage() == "app [-q|--]"
    assert parser.help() == "app [-q|--]\n\nArguments:\n  -q  --  Quiet."
