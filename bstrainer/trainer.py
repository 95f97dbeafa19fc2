"""Interactive drills for pair splitting, soft totals and hard totals."""

from __future__ import annotations

import argparse
import random
import sys
from dataclasses import dataclass
from typing import Callable, Optional, Protocol

from .settings import SETTINGS_FILE, Settings, load_settings, settings_menu
from .strategy import card_label, hard_total_answer, pair_split_answer, soft_total_answer

Ask = Callable[[str], str]
Write = Callable[[str], object]


class _RandInt(Protocol):
    def randint(self, a: int, b: int) -> int: ...


@dataclass
class Score:
    """Running tally of answered hands."""

    correct: int = 0
    total: int = 0

    def record(self, correct: bool) -> None:
        """Count one answered hand, and one correct answer if ``correct``."""
        self.total += 1
        if correct:
            self.correct += 1

    def accuracy(self) -> float:
        """Percentage of correct answers, 0.0 when nothing was answered."""
        if self.total == 0:
            return 0.0
        return self.correct / self.total * 100


def _stdout_write(text: str) -> None:
    sys.stdout.write(text)


def _read_choice(ask: Ask, prompt: str) -> str:
    text = ask(prompt).strip()
    while not text:
        text = ask("").strip()
    return text[0].upper()


def _grade(score: Score, answer: str, correct: str, write: Write, wrong_prefix: str) -> None:
    is_right = answer == correct
    score.record(is_right)
    if is_right:
        write("Correct!\n")
    else:
        write(f"{wrong_prefix} Correct answer was {correct}\n")


def pair_splitting_round(
    score: Score,
    settings: Settings,
    rng: _RandInt,
    ask: Ask = input,
    write: Write = _stdout_write,
) -> bool:
    """Ask about one random pair; return False when the user quits."""
    upcard = rng.randint(1, 10)
    pair = rng.randint(1, 10)
    write(f"You have a pair of {card_label(pair)}'s!\n")
    write(f"Dealer's up card is {card_label(upcard)}\n")
    answer = _read_choice(ask, "Do you split? (Y)es,(N)o, or (Q)uit: ")
    if answer == "Q":
        return False
    _grade(score, answer, pair_split_answer(pair, upcard, settings), write, "Incorrect!")
    return True


def soft_total_round(
    score: Score,
    settings: Settings,
    rng: _RandInt,
    ask: Ask = input,
    write: Write = _stdout_write,
) -> bool:
    """Ask about one random soft hand; return False when the user quits."""
    upcard = rng.randint(1, 9)
    second_card = rng.randint(2, 9)
    write(f"You have A,{second_card}\n")
    write(f"Dealer's up card is {card_label(upcard)}\n")
    answer = _read_choice(ask, "Do you (H)it, (D)ouble, (S)tand, or (Q)uit?: ")
    if answer == "Q":
        return False
    _grade(score, answer, soft_total_answer(second_card, upcard, settings), write, "Incorrect!")
    return True


def hard_total_round(
    score: Score,
    settings: Settings,
    rng: _RandInt,
    ask: Ask = input,
    write: Write = _stdout_write,
) -> bool:
    """Ask about one random hard total; return False when the user quits."""
    upcard = rng.randint(1, 10)
    total = rng.randint(8, 17)
    write(f"You have a total of {total}!\n")
    write(f"Dealer's up card is {card_label(upcard)}!\n")
    if settings.surrender:
        prompt = "Do you (H)it, (D)ouble, (S)tand, (R)esign, or (Q)uit?: "
    else:
        prompt = "Do you (H)it, (D)ouble, (S)tand, or (Q)uit?: "
    answer = _read_choice(ask, prompt)
    if answer == "Q":
        return False
    _grade(score, answer, hard_total_answer(total, upcard, settings), write, "Incorrect!,")
    return True


RoundFunc = Callable[[Score, Settings, _RandInt, Ask, Write], bool]


def run_trainer(
    round_func: RoundFunc,
    settings: Settings,
    rng: Optional[_RandInt] = None,
    ask: Ask = input,
    write: Write = _stdout_write,
) -> Score:
    """Play rounds until the user quits, reporting the score after each one."""
    if rng is None:
        rng = random.Random()
    score = Score()
    while round_func(score, settings, rng, ask, write):
        if score.total > 0:
            write("\n--- Results ---\n")
            write(f"Score: {score.correct} / {score.total}\n")
            write(f"Accuracy: {score.accuracy():.1f}%\n\n")
    return score


_TRAINERS = {
    "1": pair_splitting_round,
    "2": soft_total_round,
    "3": hard_total_round,
}


def main(argv: Optional[list[str]] = None) -> int:
    """Run the interactive main menu."""
    parser = argparse.ArgumentParser(description="Practise blackjack basic strategy.")
    parser.parse_args(argv)
    write = _stdout_write

    try:
        settings = load_settings(SETTINGS_FILE)
    except FileNotFoundError:
        write("No settings file found, using defaults.\n")
        settings = Settings()

    write("\n==Basic==Strategy==Trainer==\n")
    try:
        while True:
            write("\n--- Main Menu ---\n")
            write("1. To Split or Not to Split\n")
            write("2. Are You Soft Right Now Step-Bro?\n")
            write("3. Nah, I'm Hard AF\n")
            write("4. Settings\n")
            write("0. Exit\n")
            write("\n\n")
            option = _read_choice(input, "Please enter an option from the main menu: ")
            if option in _TRAINERS:
                run_trainer(_TRAINERS[option], settings, random.Random(), input, write)
            elif option == "4":
                settings_menu(settings, input, write, SETTINGS_FILE)
            elif option == "0":
                break
            else:
                write("invalid input")
    except EOFError:
        pass
    return 0


if __name__ == "__main__":
    sys.exit(main())