"""CS01 - repository initialization command line."""

import importlib
import sys


# Map commands to modules
COMMANDS = {
    'init': 'init',
}


def main(argv=None):
    if argv is None:
        argv = sys.argv[1:]

    if not argv:
        print("usage: cs01 <command> [<args>]", file=sys.stderr)
        return 1

    command = argv[0]
    args = argv[1:]

    if command not in COMMANDS:
        print(f"cs01: '{command}' is not a cs01 command", file=sys.stderr)
        return 1

    module = importlib.import_module(f'cs01.commands.{COMMANDS[command]}')
    try:
        return module.run(args)
    except Exception as e:
        print(f"error: {e}", file=sys.stderr)
        return 1


if __name__ == '__main__':
    sys.exit(main())
