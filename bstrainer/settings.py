"""Table rules for the trainer, stored as a small key=value file."""

from __future__ import annotations

import re
import sys
from dataclasses import dataclass
from typing import Callable

SETTINGS_FILE = "bj_settings.cfg"

# Keys in the order they appear in the file, paired with the attribute they fill.
_FILE_KEYS = (
    ("h17", "h17"),
    ("das", "das"),
    ("rsa", "rsa"),
    ("surrender", "surrender"),
    ("numDecks", "num_decks"),
)

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")

_YES_NO = {True: "Yes", False: "No"}


@dataclass
class Settings:
    """Table rules that decide which basic strategy chart applies."""

    h17: bool = True
    s17: bool = False
    das: bool = True
    rsa: bool = True
    surrender: bool = True
    num_decks: int = 6


def load_settings(path: str = SETTINGS_FILE) -> Settings:
    """Read settings from ``path``.

    Keys are read in their fixed order; reading stops at the first line that
    does not match, and anything not read is zero. Raises FileNotFoundError
    when the file does not exist.
    """
    values: dict[str, int] = {}
    with open(path, encoding="utf-8") as handle:
        lines = (line.strip() for line in handle if line.strip())
        for (key, field), line in zip(_FILE_KEYS, lines):
            name, sep, raw = line.partition("=")
            match = _LEADING_INT.match(raw)
            if not sep or name.strip() != key or match is None:
                break
            values[field] = int(match.group(1))
    return Settings(
        h17=bool(values.get("h17", 0)),
        s17=False,
        das=bool(values.get("das", 0)),
        rsa=bool(values.get("rsa", 0)),
        surrender=bool(values.get("surrender", 0)),
        num_decks=values.get("num_decks", 0),
    )


def save_settings(settings: Settings, path: str = SETTINGS_FILE) -> None:
    """Write ``settings`` to ``path``; raises OSError if it cannot be written."""
    with open(path, "w", encoding="utf-8") as handle:
        handle.write(f"h17={int(settings.h17)}\n")
        handle.write(f"das={int(settings.das)}\n")
        handle.write(f"rsa={int(settings.rsa)}\n")
        handle.write(f"surrender={int(settings.surrender)}\n")
        handle.write(f"numDecks={settings.num_decks}\n")


def describe_settings(settings: Settings) -> str:
    """Return a human-readable summary of ``settings``."""
    soft17 = "Hit (H17)" if settings.h17 else "Stand (S17)"
    return (
        "Current Settings:\n"
        f"  Dealer Soft 17 : {soft17}\n"
        f"  Double after split : {_YES_NO[bool(settings.das)]}\n"
        f"  Resplit Aces : {_YES_NO[bool(settings.rsa)]}\n"
        f"  Late surrender : {_YES_NO[bool(settings.surrender)]}\n"
        f"  Number of decks : {settings.num_decks}\n"
    )


def _read_choice(ask: Callable[[str], str], prompt: str) -> str:
    text = ask(prompt).strip()
    while not text:
        text = ask("").strip()
    return text[0]


def _stdout_write(text: str) -> None:
    sys.stdout.write(text)


def settings_menu(
    settings: Settings,
    ask: Callable[[str], str] = input,
    write: Callable[[str], object] = _stdout_write,
    path: str = SETTINGS_FILE,
) -> Settings:
    """Let the user change ``settings`` in place until they save or quit."""
    while True:
        write("\n--- Settings ---\n")
        write(describe_settings(settings))
        write("\n")
        write("1. Toggle H17/S17\n")
        write("2. Toggle Double After Split (DAS)\n")
        write("3. Toggle Resplit Aces (RSA)\n")
        write("4. Toggle Late Surrender\n")
        write("5. Set Number of Decks\n")
        write("0. Save Settings\n")
        option = _read_choice(ask, "Option: ")

        if option == "1":
            settings.h17 = not settings.h17
        elif option == "2":
            settings.das = not settings.das
        elif option == "3":
            settings.rsa = not settings.rsa
        elif option == "4":
            settings.surrender = not settings.surrender
        elif option == "5":
            match = _LEADING_INT.match(ask("Enter the number of decks (1, 2, 6, 8): "))
            if match is not None:
                settings.num_decks = int(match.group(1))
        elif option == "0":
            try:
                save_settings(settings, path)
            except OSError:
                write("Warning: could not save settings.\n")
            write("\nSettings saved.\n")
            return settings
        elif option in ("Q", "q"):
            return settings
        else:
            write("Invalid option.\n")