# circlearena

A small top-down arena survival game built on pygame. You are the blue
circle in the middle of a tiled arena. Red circles keep spawning and chase
you; whenever one touches you and its attack is ready, you lose health. Your
character fires automatically at the closest enemy a few times a second, and
every hit adds to your score. Health slowly regenerates over time. When it
runs out, the game is over.

## Installing

```
pip install .
```

This pulls in `pygame`, which the game uses for its window, input and drawing.

## Playing

```
circlearena
```

By default the game opens a borderless window the size of the desktop. To
play in an ordinary window of a chosen size instead, pass `--size`:

```
circlearena --size 1280x720
```

The game starts on the main menu, which has three buttons:

- **Start Game**: begin a new round.
- **Quit Game**: close the game.
- **Controls**: show the list of keys, with a **Return** button back to the
  main menu.

### Controls

| Action                     | Key          |
|----------------------------|--------------|
| move                       | wasd/arrows  |
| pause/unpause              | esc          |
| quit game (from main menu) | esc          |

While paused, you can **Resume** or go back to the **Main menu**. After you
die, the **GAME OVER** screen lets you **Restart** straight away or return to
the **Main menu**.

### What is on screen

- The arena: a ground of fixed size, centred on the window, that neither you
  nor the enemies can leave. The view follows you and stops near the arena's
  edges.
- A health bar in the top left corner: green for what you have left, red for
  what you have lost.
- Your score in the top right corner, one point for every enemy a shot hits.

## Using the game from code

`circlearena.app.Game` holds every screen and is driven one frame at a time:
`Game.step(delta, pressed, just_pressed, mouse_pos, mouse_down)` advances it
by `delta` seconds given the held keys, the keys pressed this frame and the
mouse, and returns whether the game keeps running; `Game.draw(surface)`
renders the current screen onto a pygame surface. The pieces it is built from
(`circlearena.world`, `circlearena.player`, `circlearena.enemies`,
`circlearena.projectiles`, `circlearena.states` and the menu modules) can be
used on their own as well.

## What it does not do

Everything is drawn as plain coloured shapes; the game has no sound, and
scores are not kept once a round ends.

## Running the tests

```
pip install ".[test]"
pytest
```