# combokey

A small arcade reflex game. A row of keyboard keys appears in the middle of the
window, and you press them in order before the time bar runs out.

## Installing

```
pip install .
```

## Playing

```
combokey
```

The window opens on the title menu:

- Click **ENTER** to start a round.
- Click **BACKSPACE** to quit.
- Click **+** to raise the difficulty. Easy gives 4 seconds, medium 2.5 and
  hard 1 second. Each extra `+` that appears beside the button is one step up.
  Clicking any `+` at the hardest level goes back to easy.
- Click any letter of the *COMBO KEY* title to turn it into a random key.

During a round:

- Press the shown keys from left to right: letters `A`–`Z`, digits `0`–`9`,
  and the arrow keys. A blank key accepts any of them.
- Each correct key adds one second to the timer, up to the difficulty's limit.
- Finishing a sequence raises your combo count, and the next sequence is one
  key longer, up to eight keys. The first sequence of a round has between one
  and eight keys.
- A wrong key or an empty time bar ends the round.

On the game-over screen, press `ENTER` to play again, `ESC` to return to the
menu, or `BACKSPACE` to quit.

Images and sounds are loaded from an `assets/` directory relative to the
working directory. If an image is missing, its key is not drawn but keeps a
default size of 26 × 32 pixels per frame; if sounds or audio are unavailable,
the game runs silently.

## Using the game logic

The rules in `combokey.game` do not need a window, so you can drive them from
code:

```python
import random

from combokey.game import ComboGame, Difficulty, Outcome

game = ComboGame(rng=random.Random(1))
game.reset(Difficulty.EASY, 3)
while game.animating:
    game.advance_animation()
outcome = game.press(game.sequence[0])
assert outcome is Outcome.HIT
```

`ComboGame.tick(frame_time)` drains the time bar and returns
`Outcome.TIMEOUT` when it empties; `press` returns `Outcome.HIT`,
`Outcome.COMBO`, `Outcome.MISS` or `Outcome.NONE`. `time_fraction()` and
`time_bar_color()` describe the bar. `DifficultyMenu` handles the row of `+`
buttons and `FadeTransition` the black fade between screens.

`combokey.game_logic` provides `random_key`, `generate_random_sequence` and
`setup_game_keys`. `combokey.key_button.KeyButton` is the clickable
sprite-sheet key that the menu and the game use. `combokey.app.key_name_for`
maps a pygame key code to the game's key name.

## Running the tests

```
pip install ".[test]"
pytest
```