import argparse
import logging
import sys
from typing import Callable, List, Optional

from terminal_wordle import __version__
from terminal_wordle.wordle_core import (
    GameConfig, GuessValidationError, RoundResult, Verdict, WordleGame, validate_guess,
)
from terminal_wordle.words import WordListError, choose_random_word, load_words

logger = logging.getLogger(__name__)

COLORS = {
    Verdict.CORRECT: '\033[92m',
    Verdict.MISPLACED: '\033[93m',
    Verdict.ABSENT: '\033[90m',
}
RESET = '\033[0m'

def stderr_print(msg: str):
    print(msg, file=sys.stderr)


class TooManyIOFailuresError(RuntimeError):
    def __init__(self, max_failures: int):
        self.max_failures = max_failures
        super().__init__(f"Input could not be read {max_failures} times in a row, giving up.")


def colorize(guess: str, verdicts: List[Verdict]) -> str:
    """
    Colorize the result of a guess:
    Green = correct position,
    Yellow = present but wrong position,
    Gray = not in word.
    """
    return ''.join(f"{COLORS[v]}{ch}{RESET}" for ch, v in zip(guess, verdicts))


def render_board(history: List[RoundResult], max_rounds: int, word_length: int) -> str:
    rows = [colorize(rr.guess, rr.verdicts) for rr in history]
    rows += ['-' * word_length] * (max_rounds - len(history))
    return '\n'.join(rows)


def read_guess(read_line: Callable[[], str], expected_length: int, max_io_failures: int,
               report: Callable[[str], None] = stderr_print) -> str:
    """
    Ask for lines until one is a valid guess.
    Invalid guesses are reported and asked again without limit. After
    max_io_failures read errors in a row TooManyIOFailuresError is raised.
    """
    failures = 0
    while failures < max_io_failures:
        try:
            raw = read_line()
        except (OSError, EOFError) as e:
            failures += 1
            logger.warning("Error while reading input (%d/%d): %r", failures, max_io_failures, e)
            report(f'⚠️ Error while reading your guess: {e!r}')
            continue
        failures = 0
        try:
            return validate_guess(raw, expected_length)
        except GuessValidationError as e:
            report(f'⚠️ Error: {e}')

    raise TooManyIOFailuresError(max_io_failures)


def _stdin_line() -> str:
    return input('Please input a new guess: ')


def play_game(game: WordleGame, read_line: Callable[[], str] = _stdin_line,
              out: Callable[[str], None] = print,
              report: Callable[[str], None] = stderr_print) -> bool:
    """Run the game until a win or until the tries run out. Returns True on a win."""
    cfg = game.cfg
    while not game.over:
        guess = read_guess(read_line, len(game.answer), cfg.max_io_failures, report)
        rr = game.guess_word(guess)

        out('Current tries:')
        out(render_board(game.history, cfg.max_rounds, len(game.answer)))
        out(f'(remaining attempts: {rr.remaining})')

        if rr.won:
            return True
    return False


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog='terminal-wordle', description='A word guessing game.')
    ap.add_argument('-f', '--words-file', required=True,
                    help='file with one alphabetic word per line')
    ap.add_argument('-n', '--guess-length', type=int, default=GameConfig.word_length,
                    help='length of the word to guess')
    ap.add_argument('-t', '--tries', type=int, default=GameConfig.max_rounds,
                    help='number of guesses allowed')
    ap.add_argument('-v', '--verbose', action='store_true', help='show debug logs')
    ap.add_argument('--version', action='version', version=f'%(prog)s {__version__}')
    return ap


def main(argv: Optional[List[str]] = None, read_line: Callable[[], str] = _stdin_line) -> int:
    ap = build_parser()
    args = ap.parse_args(argv)
    if args.tries < 1 or args.guess_length < 1:
        ap.error('--tries and --guess-length must be positive')
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format='[%(levelname)s] %(message)s')

    cfg = GameConfig(max_rounds=args.tries, word_length=args.guess_length)
    try:
        logger.info('Loading words.')
        words = load_words(args.words_file)
        logger.info('Choosing random word.')
        answer = choose_random_word(words, cfg.word_length)
    except (OSError, WordListError) as e:
        logger.error('%s', e)
        return 1

    game = WordleGame(answer, cfg)
    print(f"🔢 You have {cfg.max_rounds} chances to guess a {cfg.word_length}-letter word!")
    try:
        won = play_game(game, read_line)
    except TooManyIOFailuresError as e:
        logger.error('%s', e)
        print(f'💀 Game aborted. The word was {answer}.')
        return 1

    if won:
        print(f'🏆 Congratulations, the word was {answer}, you won!')
    else:
        print(f'💀 You lost, the word was {answer}.')
    return 0


if __name__ == '__main__':
    sys.exit(main())
