#!/usr/bin/env python3
"""
Wordlink - word-categorization puzzle server core
Configuration, logging and a terminal front-end for playing puzzles from the
bundled game files.
"""

import argparse
import json
import logging
import os
import random
import sys
from typing import Dict, List, Optional

from colorama import init, Fore, Style
from dotenv import load_dotenv

from app.services import GameNotFoundError, GameStore, PuzzleService, UnknownWordError

# Initialize colorama for cross-platform colored terminal output
init(autoreset=True)

load_dotenv()

# ---------------------------------------------------------------------------
# Logging setup
# ---------------------------------------------------------------------------

def setup_logging(level: str = 'WARNING') -> logging.Logger:
    """Configure the root Wordlink logger.

    Args:
        level: Log level string (DEBUG, INFO, WARNING, ERROR, CRITICAL).
               Defaults to WARNING so normal use is quiet.

    Returns:
        Configured logger instance.
    """
    numeric = getattr(logging, str(level).upper(), logging.WARNING)
    logger = logging.getLogger('wordlink')
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter('[%(levelname)s] %(name)s: %(message)s'))
        logger.addHandler(handler)
    logger.setLevel(numeric)
    return logger


# Module-level logger used throughout wordlink.py
logger = setup_logging()


# ---------------------------------------------------------------------------
# Configuration
# ---------------------------------------------------------------------------

DEFAULT_CONFIG: Dict = {
    'games_dir': 'games',
    'public_dir': 'public',
    'host': '127.0.0.1',
    'port': 3000,
    'log_level': 'WARNING',
    'words_per_category': 4,
}

# config key -> environment variable that overrides it
_ENV_OVERRIDES = {
    'games_dir': 'WORDLINK_GAMES_DIR',
    'public_dir': 'WORDLINK_PUBLIC_DIR',
    'host': 'WORDLINK_HOST',
    'port': 'PORT',
    'log_level': 'WORDLINK_LOG_LEVEL',
}


def load_config(config_path: str = 'config.json') -> Dict:
    """Load configuration from JSON file with environment variable support

    Missing files fall back to :data:`DEFAULT_CONFIG`.  Environment variables
    take precedence over config file values:
    - WORDLINK_GAMES_DIR overrides games_dir
    - WORDLINK_PUBLIC_DIR overrides public_dir
    - WORDLINK_HOST overrides host
    - PORT overrides port
    - WORDLINK_LOG_LEVEL overrides log_level
    """
    config = dict(DEFAULT_CONFIG)
    if config_path and os.path.exists(config_path):
        try:
            with open(config_path, 'r') as f:
                config.update(json.load(f))
        except json.JSONDecodeError as e:
            print(f"{Fore.RED}Error parsing config file: {e}")
            sys.exit(1)

    for key, env_var in _ENV_OVERRIDES.items():
        if os.getenv(env_var):
            config[key] = os.getenv(env_var)

    try:
        config['port'] = int(config['port'])
        config['words_per_category'] = int(config['words_per_category'])
    except (TypeError, ValueError):
        print(f"{Fore.RED}Error: port and words_per_category must be integers")
        sys.exit(1)
    if config['words_per_category'] < 1:
        print(f"{Fore.RED}Error: words_per_category must be at least 1")
        sys.exit(1)
    return config


def build_puzzle_service(config: Dict,
                         rng: Optional[random.Random] = None) -> PuzzleService:
    """Load the game store named by *config* and wrap it in a PuzzleService."""
    rng = rng or random.Random()
    store = GameStore.from_directory(config['games_dir'], rng=rng).load()
    return PuzzleService.from_store(store, rng=rng,
                                    words_per_category=config['words_per_category'])


# ---------------------------------------------------------------------------
# Request parsing helpers (shared by the CLI and the web layer)
# ---------------------------------------------------------------------------

_TRUTHY = {'true', '1', 'yes'}


def parse_bool(value: Optional[str]) -> bool:
    """Interpret a query-string flag; only true/1/yes (any case) are true."""
    if value is None:
        return False
    return str(value).strip().lower() in _TRUTHY


def parse_word_list(value: Optional[str]) -> List[str]:
    """Split a comma-separated word list, dropping blank entries."""
    if not value:
        return []
    return [w.strip() for w in value.split(',') if w.strip()]


# ---------------------------------------------------------------------------
# Terminal output
# ---------------------------------------------------------------------------

def display_game_list(game_ids: List[str], kid_mode: bool) -> None:
    """Print the available game ids for an audience."""
    audience = 'kid' if kid_mode else 'regular'
    if not game_ids:
        print(f"{Fore.YELLOW}No {audience} games available.")
        return
    print(f"{Fore.CYAN}{Style.BRIGHT}{len(game_ids)} {audience} game(s):")
    for game_id in sorted(game_ids):
        print(f"  {Fore.WHITE}{game_id}")


def display_puzzle(puzzle: Dict, show_answers: bool = True) -> None:
    """Print the shuffled board and, optionally, the category answers."""
    print(f"\n{Fore.GREEN}{'='*60}")
    print(f"{Fore.CYAN}{Style.BRIGHT}Puzzle {puzzle['id']}"
          f"{' (kid mode)' if puzzle['kidMode'] else ''}")
    print(f"{Fore.GREEN}{'='*60}")

    words = [w['text'] for w in puzzle['words']]
    for i in range(0, len(words), 4):
        print('  ' + '  '.join(f"{Fore.WHITE}{w:<14}" for w in words[i:i + 4]))

    if show_answers:
        print(f"\n{Fore.YELLOW}Answers:")
        for cat in puzzle['categories']:
            members = ', '.join(
                w['text'] if isinstance(w, dict) else str(w) for w in cat['words']
            )
            print(f"  {Fore.MAGENTA}[{cat['difficulty']}] {cat['name']}: {Fore.WHITE}{members}")
    print(f"{Fore.GREEN}{'='*60}\n")


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------

def main(argv: Optional[List[str]] = None):
    """Main entry point"""
    parser = argparse.ArgumentParser(
        description='Wordlink - word-categorization puzzles in the terminal',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python3 wordlink.py --list                 # List regular game ids
  python3 wordlink.py --list --kid           # List kid-mode game ids
  python3 wordlink.py --play                 # Play a random puzzle
  python3 wordlink.py --play --id animals-1  # Play a specific puzzle
  python3 wordlink.py --play --id animals-1 --words cat,dog,owl
        """
    )
    parser.add_argument(
        '--config', '-c',
        default='config.json',
        help='Path to config file (default: config.json)'
    )
    parser.add_argument(
        '--list', '-l',
        action='store_true',
        help='List available game ids and exit'
    )
    parser.add_argument(
        '--play', '-p',
        action='store_true',
        help='Print a puzzle and exit'
    )
    parser.add_argument(
        '--kid', '-k',
        action='store_true',
        help='Use the kid-mode game pool'
    )
    parser.add_argument(
        '--id',
        type=str,
        metavar='GAME_ID',
        help='Game id to play (default: random)'
    )
    parser.add_argument(
        '--words',
        type=str,
        metavar='CSV',
        help='Comma-separated words to show instead of a random sample'
    )
    parser.add_argument(
        '--hide-answers',
        action='store_true',
        help='Do not print the category answers'
    )
    parser.add_argument(
        '--log-level',
        type=str,
        help='Override the configured log level (e.g. DEBUG)'
    )

    args = parser.parse_args(argv)

    config = load_config(args.config)
    setup_logging(args.log_level or config.get('log_level', 'WARNING'))

    if not args.list and not args.play:
        parser.print_help()
        return 0

    service = build_puzzle_service(config)

    if args.list:
        display_game_list(service.list_games(args.kid), args.kid)
        return 0

    try:
        puzzle = service.new_game(args.kid, game_id=args.id,
                                  words=parse_word_list(args.words))
    except (GameNotFoundError, UnknownWordError) as e:
        print(f"{Fore.RED}Error: {e}")
        sys.exit(1)

    display_puzzle(puzzle, show_answers=not args.hide_answers)
    return 0


if __name__ == "__main__":
    main()
