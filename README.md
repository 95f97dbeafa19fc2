# bstrainer

A terminal quiz for drilling blackjack basic strategy. Each round shows you a
hand and the dealer's up card. You type your play and the trainer tells you
whether it was right. If it was wrong, it also tells you the correct play.
After each answer it shows your running score and accuracy.

## Installation

```
pip install .
```

Only the standard library is needed. To run the tests, install the `test`
extra (`pip install .[test]`) and run `pytest`.

## Usage

```
bstrainer
```

The main menu offers:

1. **To Split or Not to Split**: you hold a pair from A,A to 10,10. Answer `Y` to split or `N` not to split.
2. **Are You Soft Right Now Step-Bro?**: you hold a soft hand from A,2 to A,9. The dealer shows A to 9. Answer `H` (hit), `D` (double) or `S` (stand).
3. **Nah, I'm Hard AF**: you hold a hard total from 8 to 17. Answer `H`, `D` or `S`. When late surrender is on, the prompt also offers `R` (resign), and `R` is the correct answer for the hands the surrender chart covers.
4. **Settings**: change the table rules.
0. **Exit**

Answers are not case sensitive, and only the first character you type counts.
In any drill, answer `Q` to go back to the main menu.

## Settings

The settings menu toggles or sets each rule:

| Option | Rule | Effect on the drills |
|---|---|---|
| 1 | Dealer hits soft 17 (H17) or stands (S17) | Selects the hard total, soft total and surrender charts |
| 2 | Double after split (DAS) | Splits marked "split if DAS" in the pair chart become `Y` |
| 3 | Resplit aces (RSA) | Stored only; does not change any answer |
| 4 | Late surrender | Enables `R` in the hard total drill |
| 5 | Number of decks | Stored only; does not change any answer |

In the settings menu, `0` writes the settings to `bj_settings.cfg` in the
current directory and goes back to the main menu. `Q` goes back without saving.

At start-up the trainer reads `bj_settings.cfg` if it exists. If the file is
missing, the trainer uses the defaults: H17, DAS on, RSA on, late surrender
on, six decks. The file holds the keys `h17`, `das`, `rsa`, `surrender` and
`numDecks`, one `key=value` line each, in that order. The trainer reads the
keys in that order and stops at the first line that does not match. Any key it
did not read counts as 0.

## Library use

The modules can also be used on their own:

```python
from bstrainer.settings import Settings, describe_settings
from bstrainer.strategy import hard_total_answer, pair_split_answer, soft_total_answer

rules = Settings()                        # H17, DAS, late surrender, 6 decks
print(hard_total_answer(16, 10, rules))   # R
print(pair_split_answer(8, 1, rules))     # Y
print(soft_total_answer(7, 2, rules))     # D
print(describe_settings(rules))
```

- `bstrainer.strategy` holds the charts and the `Action` enum. Its functions
  `hard_total_answer`, `soft_total_answer` and `pair_split_answer` return the
  correct play as a letter. `card_label` turns a rank from 1 to 10 into its
  printed label. Each function raises `ValueError` for a value out of range.
- `bstrainer.settings` provides the `Settings` dataclass and the functions
  `load_settings`, `save_settings`, `describe_settings` and `settings_menu`.
- `bstrainer.trainer` provides `Score`, the round functions
  `pair_splitting_round`, `soft_total_round` and `hard_total_round`, and the
  functions `run_trainer` and `main`. The round functions and `run_trainer`
  take an `rng` object with a `randint` method, plus `ask` and `write`
  callables. This lets you drive a drill from code instead of the terminal.

## What it does not do

The trainer quizzes single decisions from fixed charts. It does not deal from a
shoe, play out whole hands or count cards. The deck count and the resplit-aces
setting are stored, but no answer depends on them.