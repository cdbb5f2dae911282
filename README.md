# textadv

A small console text adventure. You start at a crossroad with four passages
leading to coloured rooms. Some of the rooms hold objects that you can look at,
pick up, carry around and put down somewhere else. You can save your progress
to a file and load it again later.

## Installing

```
pip install .
```

## Playing

```
textadv
```

The main menu first asks whether you want to start a new game (`S`) or load a
save file (`L`); only the first letter of the answer counts, in either case.
If you choose to load, enter the name of a save file. When the file cannot be
read, the reason is printed and a new game starts instead.

Type a command at the `>` prompt. Text is word-wrapped to the width of your
terminal, less two columns.

| Command              | Effect                                           |
|----------------------|--------------------------------------------------|
| `north` / `n`        | go north                                         |
| `south` / `s`        | go south                                         |
| `east` / `e`         | go east                                          |
| `west` / `w`         | go west                                          |
| `get <object>`       | pick up an object in the current room            |
| `drop <object>`      | put down an object you are carrying              |
| `examine <object>`   | describe an object here or in your inventory     |
| `inventory`          | list what you are carrying                       |
| `save`               | save the game to a file you name                 |
| `load`               | load the game from a file you name               |
| `quit`               | leave the game                                   |

Objects are named by their keyword, for example `get large cup` or
`examine silver spoon`. Anything else gets the reply "I don't understand that."

When you quit, or when input ends, the game is saved automatically to
`autosave.csv` in the current directory. To carry on from there, choose `L`
at the main menu and enter `autosave.csv`.

## Save files

A save file is plain text. The first line holds the name of the current room,
the second the keywords of the objects you carry, separated by commas. Each
line after that names a room followed by the keywords of the objects in it.
Every field is lightly scrambled by swapping each pair of adjacent characters.

When a file is loaded, the room contents it lists replace those in the game,
and keywords of objects the game does not know are ignored. A file that is
empty, cannot be read, or names a room that does not exist is rejected.

## Using it as a library

The pieces of the game can be put together in code:

- `textadv.world.build_world()` creates the map with its rooms and objects and
  returns a `textadv.room.World`.
- `textadv.room.Room` holds a name, a description, a list of objects and exits
  reached with `exit()` and `set_exit()` using `textadv.room.Direction`.
- `textadv.gameobject.GameObject` is an item with a name, keyword and
  description; objects compare by keyword.
- `textadv.state.State` holds the current room and the inventory.
- `textadv.wordwrap.WordWrapper` writes word-wrapped text to any stream;
  `textadv.wordwrap.console_width()` gives the width it uses by default.
- `textadv.game.Game` runs single commands with `handle()`, the main menu
  with `menu()`, or the whole session with `run()`. Input comes from the
  `input_func` it is given (by default `input`).
- `textadv.savefile.save_game()` and `textadv.savefile.load_game()` write and
  read save files, and raise `textadv.savefile.SaveFileError` when that fails.
  `encrypt()` and `decrypt()` scramble and unscramble single fields.

```python
import io
from textadv.game import Game
from textadv.world import build_world
from textadv.wordwrap import WordWrapper

out = io.StringIO()
game = Game(build_world(), wrapper=WordWrapper(width=60, stream=out))
game.handle("get large cup")
game.handle("inventory")
print(out.getvalue())
```

## Running the tests

```
pip install .[test]
pytest
```