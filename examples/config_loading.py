"""config_loading.py"""
import sys

from flagparse.config import loader

parser = loader("flagparse.yaml").to_parser(sys.argv[1:])

if __name__ == "__main__":
    table, leftovers = parser.parse()
    if table.has_flag("hhelp"):
        parser.render_help()
    else:
        for key, outcome in table.items():
            print(key, outcome)
