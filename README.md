# coursekit

A collection of small programs and helpers:

- **arrays** – swapping, summing, searching, sortedness checks, grid traversals,
  bubble sort and quick sort, and sorting a grid by rows or by columns.
- **students** – average grades, the top student, sorting by average and
  counting students above a threshold.
- **text** – sorting words by length, counting divisible numbers, unique and
  most frequent words, bracket balancing and linked-list cycle detection.
- **wordle** – a console word-guessing game with a word of the day.
- **vector2d** – a two-dimensional vector with arithmetic and length.
- **dynarray** – growable arrays: `IntArray`, which discards its contents on
  resize, and `DynamicArray`, which keeps a capacity that doubles when full.
- **roster** – players, weapons and the Dire and Radiant teams managed from a
  console menu, plus a small `Rectangle` class.
- **breakout** – a brick-breaker arcade game built on pygame.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Commands

| Command              | What it does                                              |
|----------------------|-----------------------------------------------------------|
| `coursekit-students` | Enter five students with four grades each, then query them from a menu |
| `coursekit-wordle`   | Play the word-guessing game                               |
| `coursekit-vector`   | Read a vector `x y` and show sum, difference and length against `{1.2; 5.6}` |
| `coursekit-dynarray` | Demonstrate the growable arrays                           |
| `coursekit-roster`   | Print three rectangles, then manage the two teams         |
| `coursekit-breakout` | Start the brick-breaker game                              |

### Word game

`coursekit-wordle` reads its words from `word_database.txt`, a comma-separated
list, and remembers whether the word of the day has been guessed in
`word_of_the_day_status.txt`, both in the current directory. Other files can
be given with `--words` and `--status`. Each guess is answered with a line
where a correct letter in the right place is shown in upper case, a letter
that is in the word elsewhere in lower case, and the rest as `*`. Enter `0`
to leave a round; at the menu, any choice other than 1 or 2 exits.

### Team roster

`coursekit-roster` adds players (name, health, class and an optional weapon
with damage of at least 1 and range of at least 2) to the Dire or Radiant
team, removes them, and prints both teams. A team holds at most ten players.

### Brick breaker

`coursekit-breakout` opens a 720×960 window. Press Enter to start, move the
paddle with the mouse and press Escape to pause. Bricks take one to five hits
depending on their colour; breaking one sometimes sets the ball on fire for
ten seconds, so that each hit counts three times. Clearing all bricks starts
a new level with a faster ball. The best score and level are kept in
`best_results.txt` in the current directory, or the file given with
`--scores`.

The game reads its images, font and sounds from the `resources` directory,
or the one given with `--resources`. These files are not shipped with the
package; missing images load as empty, a missing font falls back to pygame's
default font, and missing sounds stay silent.

## Library use

```python
from coursekit.text import unique_words_count, is_balanced, count_divisible_by
from coursekit.vector2d import Vector2d

unique_words_count("a b a")                       # 2
is_balanced("{[()]}")                             # True
count_divisible_by([2, 4, 6, 8, 10, 12, 14, 16, 18, 20], 4)   # 5
Vector2d(3.0, 4.0)()                              # 5.0
```

## Not included

The package has no combat simulation: players in `roster` carry weapons with
damage and range, but there is nothing that resolves attacks between them.