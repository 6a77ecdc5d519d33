# demostats

A small tool for exploring regional demography data. It reads a CSV file of
yearly indicators for each region, computes the minimum, maximum and median of
a chosen column for one region, and plots the values over the years with those
three levels marked as dashed lines.

## Installing

```
pip install .
```

The package has no dependencies outside the standard library. The window is
built on Tkinter, which comes with most Python installations.

## The data file

The first line of the file is a header and is skipped. Each line after it
holds seven comma-separated fields:

| # | Field                      |
|---|----------------------------|
| 1 | year (integer)             |
| 2 | region                     |
| 3 | natural population growth  |
| 4 | birth rate                 |
| 5 | death rate                 |
| 6 | general demographic weight |
| 7 | urbanization               |

How lines are read:

- Empty fields (two commas in a row) are skipped, and only the first seven
  non-empty fields are used; anything after them is ignored. A line with fewer
  than seven non-empty fields is rejected.
- The year and the five rates are read from the start of their field, after any
  leading whitespace, so `2010abc` reads as `2010`. A field that does not begin
  with a number is rejected. Rates also accept exponents, hexadecimal floats,
  `inf` and `nan`.
- The region has whitespace trimmed from both ends and is cut to 127
  characters.
- A line of 1023 bytes or more without its newline is rejected, and the rest of
  it is read as further lines.

Rejected lines are counted but not kept.

## The application

```
demostats
```

The window has a file field, a region field, a column spin box (1 to 7), a
data table, the Min, Max and Median fields and the graph.

1. **Open file** chooses a CSV file.
2. **Load data** reads it and reports the total, valid and rejected row counts.
   The table then shows the valid records, only those of the entered region if
   one is entered. If the last data line of the file was rejected, an error is
   shown instead and the table is not refreshed, although the good rows are
   still loaded.
3. **Calculate** computes the minimum, maximum and median of the chosen column
   for the entered region, fills in the three fields and redraws the graph.

Column 2 holds the region name, so it has no numeric value; calculating on it
gives "Column number is out of range." A region with no records gives "No data
found for the specified region."

## Using it from Python

```python
from demostats.context import Context
from demostats.errors import DemographyError

ctx = Context()
try:
    ctx.load_data("demography.csv")
    print(ctx.total_rows, ctx.valid_rows, ctx.error_rows)
    summary = ctx.calculate_stats("Some Region", 4)   # birth rate
    print(summary.min, summary.max, summary.median)
    print(ctx.series.years, ctx.series.values)
except DemographyError as err:
    print(err.code.name, err)
```

`Context.load_data` keeps the rows that parsed and their counts even when it
raises because the last data line was bad. A failed call also leaves its code
and message in `ctx.error_code` and `ctx.error_message`. `Context.clear()`
returns the context to its fresh state.

The lower-level pieces:

- `demostats.csv_reader.read_demography_data(path)` returns a `LoadResult` with
  `records`, `total_rows`, `valid_rows`, `error_rows` and `status`, the outcome
  of the last data line. `parse_line(line)`, `split_line(line)` and
  `trim_whitespace(text)` handle single lines.
- `demostats.records.DemographyRecord` is one row of the file.
- `demostats.statistics.extract_series(records, region, column)` returns a
  `Series` of years and values, and `extract_value(record, column)` returns one
  value. `Column` names the column numbers.
- `demostats.statistics.calculate_statistics(records, region, column)` returns
  the series together with its `Summary`.
- `demostats.statistics.min_max(values)` and `demostats.statistics.median(values)`
  work on plain sequences of numbers. An even count gives the mean of the two
  middle values.
- `demostats.graph.build_layout(series, summary, width, height)` returns a
  `GraphLayout`, with `point`, `value_y`, `x_ticks` and `y_ticks`, or `None` for
  an empty series. The value range is widened by 10% on each side.
  `draw_graph(canvas, series, summary, width, height)` draws onto a Tk canvas.

Every failure raises `DemographyError`. Its `code` attribute is an `ErrorCode`,
such as `FILE_OPEN_ERROR`, `INVALID_DATA_ERROR`, `EMPTY_LIST_ERROR` or
`COLUMN_OUT_OF_RANGE_ERROR`.

## What it does not do

The `demostats` command only opens the window. It takes no file or region
arguments and prints no statistics to the terminal. For scripted use, call the
modules from Python as shown above. Results are not saved anywhere.