# paperscore

A library for keeping score of softball and baseball games in plain text,
and for turning recorded play into run-expectancy and batting numbers.

## What it does

- Reads, validates and writes `.gm` game files: a block of `key: value`
  properties, a `---` line, then `visitorplays` and `homeplays` sections
  with one play per line (plate appearance, batter, pitch sequence, play
  code, runner advances and an optional comment).
- Reads the older YAML score layout into the same model.
- Writes a blank file for the next game of a series.
- Reads run-expectancy matrices from CSV, tallies observed run expectancy
  and run frequencies from play data, and samples runs from cumulative
  run-frequency tables.
- Parses a small language describing transition models between base/out
  states.
- Computes batting rates (AVG, OBP, SLG, OPS and others), keeps
  per-player batting, pitching and fielding totals, and groups games into
  tournaments.
- Splits game text into the sections an editor works on, and picks game
  files from a directory.

## Game files

```python
from paperscore.gamefile.parser import parse_file

game = parse_file("games/20220530-1.gm")
print(game.properties["visitor"], "at", game.properties["home"])
print(game.game_date())

with open("copy.gm", "w") as out:
    game.write(out)
```

`paperscore.gamefile.parser.parse_string(path, text)` does the same for
text already in memory and raises `ParseError` on text that does not
follow the format. `paperscore.gamefile.lexer.tokenize(filename, text)`
returns the tokens.

`paperscore.gamefile.yamlfile.parse_yaml_file(path)` (or
`parse_yaml_string(path, text)`) reads the YAML layout.

`paperscore.gamefile.newgame.write_new_game(game, next_day)` writes the
next game's file beside the current one and returns it. The date moves
on a day when `next_day` is true (and the game number restarts at 1);
otherwise the game number goes up by one. Team ids, tournament, league
and time limit are carried over; other properties are left blank.

## Run expectancy

```python
from paperscore.runexpectancy import read_re_matrix, run_expectancy_table

re = read_re_matrix("re.csv")
print(re.expected_runs(0, "__1"))
for row in run_expectancy_table(re):
    print(row)
```

The CSV has an optional `Runr` header row followed by one row per runner
arrangement (`___`, `__1`, `_2_`, …, `321`, read as third, second,
first) with expected runs for 0, 1 and 2 outs.
`expected_runs_change(...)` gives the change in expected runs over a
play, counting the runs that scored.

`paperscore.reanalysis.REAnalysis(re).run()` lists the change for a fixed
set of common situations (steals, walks, sacrifice bunts, outs), and
`biggest_re24(rows, n)` ranks rows by their `RE24` value and keeps the
top and bottom `n`.

Observed run expectancy is tallied from plays in order:

```python
from paperscore.stats.observed import ObservedRunExpectancy, PlayState

observed = ObservedRunExpectancy()
observed.read([
    PlayState(0, "__1"),
    PlayState(1, "_2_"),
    PlayState(1, "___", runs_scored=1),
    PlayState(3),
])
print(observed.expected_runs(0, "__1"))
rows = observed.run_frequency()
```

`paperscore.stats.observed.pivot_run_frequency(rows)` turns the frequency
rows into one row per state.

`paperscore.runfreq.load_run_frequency(path, rng)` reads a CSV of
cumulative run probabilities per runners and outs and raises
`RunFrequencyError` when data is missing or unsorted;
`RunFrequency.runs(outs, runners)` draws a number of runs.

## Transition model files

```python
from paperscore.expr.syntax import parse_string

model = parse_string("model.mat", "S = 0.45\n0xxx { S -> 0xx1 O -> 1xxx }")
for statement in model.statements:
    print(statement)
```

`parse_file(path)` reads a file; errors raise `ExprSyntaxError`.

## Statistics

`paperscore.stats.rates` computes rates from any mapping of counting
stats:

```python
from paperscore.stats.rates import avg, ops, thousands

row = {"AB": 4, "Hits": 2, "Singles": 1, "Doubles": 1}
print(avg(row))              # 0.5
print(thousands(ops)(row))
```

`paperscore.stats.players` holds `Batting`, `Pitching` and
`FieldingStats` totals; `paperscore.descriptions` names fielding
positions and field locations; `paperscore.tournament.group_by_tournament`
groups games whose dates are within a day of each other.

## Editor support

`paperscore.editor.document.GameDocument` splits game text into
properties, visitor plays and home plays (`from_text`), rebuilds it
(`game_text`), maps a line of the whole text back to its section
(`locate_line`) and swaps home and visitor (`swap_home_and_away`).
`paperscore.editor.chooser` lists the `.gm` files in a directory and
works out which file a selection stands for.

## Text helpers

```python
from paperscore.text import center, ordinal, wrap_indent

center("Hello", 8)   # ' Hello  '
ordinal(3)           # '3rd'
```

## What it does not do

- It has no command-line commands and no interactive editor screen; the
  editor modules only handle game text and file choice.
- It does not simulate innings and has no base/out state type; transition
  model files can be parsed but not run.
- It does not turn game files into box scores or play-by-play text.