# cubmap

Read and inspect `.cub` scene files. This is the small text format that
describes the wall textures, the floor and ceiling colours and the grid map
of a raycasting level.

A `.cub` file looks like this:

```
NO ./textures/north.xpm
SO ./textures/south.xpm
WE ./textures/west.xpm
EA ./textures/east.xpm

F 220,100,0
C 225,30,0

111111
100101
1000N1
111111
```

## Installation

```
pip install .
```

## Command line

```
cubmap maps/map01.cub
```

The command takes exactly one argument, the path of a scene file. It prints
these items in order:

1. the file as it was read;
2. the same text after each consumed element has been masked with `#`;
3. the lines `N Text:`, `S Text:`, `E Text:` and `O Text:`, which give the
   north, south, east and west texture paths;
4. `Ceiling color:` and `floor color:`, each a colour packed as a decimal
   `0xRRGGBB` integer;
5. `map:` followed by the map block. If no map was found, this shows
   `(null)`.

The command exits with status 1 and writes `Error` and a reason to standard
error in these cases:

- it is not given exactly one argument (`Invalid Arguments`);
- the path does not end in `.cub` or cannot be opened (`Invalid Map`);
- a colour component is above 255, the `F` or `C` element is missing, or any
  of the four texture elements is missing (`Invalid map`).

When the file was read before the problem was found, the file contents are
printed first.

## Library

```python
from cubmap.config import ConfigError, read_config

try:
    conf = read_config("maps/map01.cub")
except ConfigError as err:
    print(err.message)
else:
    print(conf.north, conf.south, conf.west, conf.east)
    print(hex(conf.floor), hex(conf.ceiling))
    print(conf.map)
```

`cubmap.config` provides the following:

- `read_config(path)` checks the `.cub` extension, reads the file and parses
  it.
- `parse_config(text)` does the same with text that is already in memory. It
  returns a frozen `MapConfig` with these fields:
  - `north`, `south`, `west`, `east`
  - `floor`, `ceiling`
  - `map`: everything after the last blank line, or `None`
  - `source`: the original text
  - `masked`: the text with the consumed elements replaced by `#`
- `ConfigError` is raised for every failure. Its `message` gives the reason.
  Its `text` holds the file contents when they were already read, and is
  `None` otherwise.
- The lower-level helpers each return a pair: the value found and the
  masked text. The value is `None` when the key is absent.
  - `get_texture(text, key)`
  - `get_color(text, key)`
  - `get_map(text)`
- `extract_color(text, start)` reads an `R,G,B` triple. It returns the packed
  colour and the index just past it.

`cubmap.textutils` holds small string helpers:

- `atoi` and `itoa`;
- `split`, which drops empty pieces;
- `strtrim`;
- `substr`;
- `strnstr`, which returns an index or `None`;
- `strncmp`;
- `strmapi`;
- `put_str`, `put_endl` and `put_nbr`, which write to a stream, by default
  standard output.

`cubmap.charclass` holds ASCII character tests and case conversion. Each
function accepts an integer code or a one-character string:

- `is_alpha`, `is_digit`, `is_alnum`, `is_ascii`, `is_print`;
- `to_upper`, `to_lower`.

## What it does not do

The package only reads the header settings and cuts out the map block. It
does not check the map grid itself: walls, the player start and allowed
characters are not validated. It also does not load textures or render
anything.

## Tests

```
pip install .[test]
pytest
```