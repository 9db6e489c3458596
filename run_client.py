#!/usr/bin/env python3
"""
Console client for the game platform.

Usage:
    python run_client.py [--url URL] [--cookies FILE]

Commands:
    start            Start a new session
    name <name>      Choose your name
    restart          Clear the session
    quit             Exit
"""
import argparse
import sys

from gameplatform.config import get_settings
from gameplatform.client import (
    CookieStore, PlayerAPI, Dispatcher, load_state, render_text,
    StartGame, SubmitName, RestartGame
)
from gameplatform.utils.logging_setup import configure_logging


def parse_command(line: str):
    """
    Parse a console command into an action.

    Returns:
        The action, "quit", or None if the command is unknown
    """
    command, _, rest = line.strip().partition(' ')
    command = command.lower()
    if command == 'start':
        return StartGame()
    if command == 'name':
        return SubmitName(rest)
    if command == 'restart':
        return RestartGame()
    if command in ('quit', 'exit'):
        return 'quit'
    return None


def main():
    settings = get_settings()

    parser = argparse.ArgumentParser(description="Play on the game platform from the console")
    parser.add_argument(
        "--url",
        type=str,
        default=settings.server_url,
        help=f"Server URL (default: {settings.server_url})"
    )
    parser.add_argument(
        "--cookies",
        type=str,
        default=".gameplatform_cookies.json",
        help="File that keeps the session between runs"
    )
    args = parser.parse_args()
    configure_logging(settings.log_level)

    store = CookieStore(path=args.cookies)
    api = PlayerAPI.connect(args.url, timeout=settings.timeout)
    dispatcher = Dispatcher(api, store)
    state = load_state(store)

    try:
        while True:
            print()
            print(render_text(state))
            try:
                line = input("> ")
            except EOFError:
                break

            action = parse_command(line)
            if action == 'quit':
                break
            if action is None:
                print("Unknown command. Use start, name <name>, restart or quit.")
                continue
            state = dispatcher.dispatch(state, action)
    finally:
        api.close()

    return 0


if __name__ == "__main__":
    sys.exit(main())
