# wordinvaders

An arcade shooter for spelling practice. A word from your exercise file is
shown in the middle of the screen with one letter replaced by `[ ]`, followed
by its meaning. Enemy ships fly in elliptical formations, and each one carries
a letter. Shoot a ship carrying the missing letter to clear the wave and move
on to the next word; shoot a wrong one and only that ship is destroyed, while
more enemies are allowed onto the screen (up to eight).

## Installing

```
pip install .
```

This installs the game and its only runtime dependency, pygame.

## Playing

```
wordinvaders
```

Controls:

- **Left / Right arrows**: move your ship
- **Space**: fire a pair of lasers, one from each wing

Enemies fire back at random moments. When your ship is hit it explodes, and a
new one appears after two seconds.

Command options:

| Option        | Default                     | Meaning                                   |
|---------------|-----------------------------|-------------------------------------------|
| `--exercise`  | `assets/exercise/unit3.txt` | exercise file to play                     |
| `--assets`    | `assets`                    | directory holding images, fonts and audio |
| `--width`     | `1920`                      | window width in pixels                    |
| `--height`    | `900`                       | window height in pixels                   |
| `--seed`      | none                        | seed for the random choices               |
| `--frames`    | none                        | stop after this many frames               |

## Assets

The game looks for these files under the assets directory:

- `player_a_01.png`, `laser_a_01.png`, `enemy_a_01.png`, `laser_b_01.png`:
  sprites for the player, its lasers, the enemies and their lasers
- `explo_a_sheet.png`: a 4×4 sheet of 64×64 explosion frames
- `fonts/fangsong.ttf`: font for the question and the letters
- `audios/<word>_1.mp3`: pronunciation clip for each word, with spaces in the
  word replaced by `_`; it is played when that word's question comes up

Missing images are drawn as plain coloured boxes, a missing explosion sheet as
shrinking circles, and a missing font falls back to pygame's default font.
Missing clips are simply not played.

## Exercise files

An exercise is a plain UTF-8 text file with one word per line, written as the
word, a colon and its meaning:

```
hello:a greeting
world:the earth and everything on it
```

The word is lower-cased. For each line one of its letters is chosen at random
as the answer, and four other distinct letters of the alphabet are added as
wrong options. A line without a colon has its last character dropped from the
word. Empty lines and words without any letter are rejected with `ValueError`.

Every two seconds the current question is shown and each enemy without a
letter is given one: the answer if the number of enemies plus one is a
multiple of five, otherwise a letter picked at random from the five options.

Exercises can be used from your own code:

```python
import random
from wordinvaders.exercise import load_exercise, parse_exercise

exercise = parse_exercise("hello:a greeting\nworld:the earth", random.Random(1))
question = exercise.current()
print(question.question)                 # e.g. "h[ ]llo :a greeting"
print(question.options)                  # five letters, one of them the answer
print(exercise.check(question.answer))   # True
exercise.advance()

exercise = load_exercise("my_words.txt")
```

## Running the game without a window

`wordinvaders.world.Game` holds the whole game state and can be driven
directly, for example in tests:

```python
from wordinvaders.components import WinSize
from wordinvaders.exercise import parse_exercise
from wordinvaders.world import Game

game = Game(WinSize(1920, 900), parse_exercise("hello:a greeting"))
game.update(delta=1 / 60, now=1 / 60)
game.fire()
```

## What it does not do

The game has no menus, score, lives counter or end screen: when the last word
of the exercise has been answered the enemies keep flying without letters
until the window is closed. It does not fetch pronunciation clips either; put
them in the assets directory yourself.

## Running the tests

```
pip install ".[test]"
pytest
```