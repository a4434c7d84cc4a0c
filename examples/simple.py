import sys

from flagparse import Flag, ParseError, Parser
from flagparse.utils import setup_logging

setup_logging()

help_flag = Flag("h", "help", "Show this help message.")
say = Flag("s", "say", "Say something.", takes_value=True)
name = Flag("n", "name", "Who to greet.", required=True, takes_value=True)

parser = Parser(sys.argv[1:], [help_flag, say, name], "simple", "Greets someone.")

# Entry point
if __name__ == "__main__":
    try:
        table, leftovers = parser.parse()
    except ParseError as error:
        print(f"error: {error}")
        print(f"usage: {parser.usage()}")
        sys.exit(2)

    if table.has_flag(help_flag):
        print(parser.help())
        sys.exit(0)

    present, text = table.try_get_flag(say)
    print(f"Hello, {table[name].value}!")
    if present:
        print(text)
    if leftovers:
        print("leftovers:", " ".join(leftovers))
