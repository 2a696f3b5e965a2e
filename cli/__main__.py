"""Entry point for the quiz arcade CLI client."""

import argparse
import sys

from cli.api_client import QuizAPIClient
from cli.console import ConsoleUI


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description='Quiz Arcade - geography, history, science and word games')
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
        '--game',
        help='Play this game directly instead of choosing from the menu, e.g. history-heroes'
    )
    parser.add_argument(
        '--seed',
        type=int,
        help='Seed for question order, for repeatable rounds'
    )
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)

    client = QuizAPIClient(base_url=args.server, user_id=args.user)
    ui = ConsoleUI(client, game=args.game, seed=args.seed)

    try:
        ui.run()
    except KeyboardInterrupt:
        print('\nGoodbye!')
        sys.exit(0)


if __name__ == '__main__':
    main()
