"""Entry point for kanadrill CLI client."""

import argparse
import sys

from cli.api_client import DrillAPIClient
from cli.console import ConsoleUI


def main():
    parser = argparse.ArgumentParser(description='Kanadrill - adaptive kana practice')
    parser.add_argument(
        '--server',
        default='http://localhost:8000',
        help='Server URL (default: http://localhost:8000)'
    )
    parser.add_argument(
        '--user',
        default='default',
        help='User ID (default: default)'
    )
    parser.add_argument(
        '--groups',
        nargs='*',
        type=int,
        default=[],
        help='Kana group indices to drill (omit to list groups)'
    )
    args = parser.parse_args()

    client = DrillAPIClient(base_url=args.server, user_id=args.user)
    ui = ConsoleUI(client)

    try:
        ui.run(args.groups)
    except KeyboardInterrupt:
        ui.close()
        print('\nGoodbye!')
        sys.exit(0)


if __name__ == '__main__':
    main()
