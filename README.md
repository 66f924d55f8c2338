# cpuutil

Print CPU utilization percentage over time, for all CPUs together and for
each CPU on its own. Figures are taken from `/proc/stat`, so this runs on
Linux.

## Installation

```
pip install .
```

## Usage

```
cpuutil [-ACh] [-s N]
```

| Option | Meaning |
|--------|---------|
| `-A`   | do not calculate and do not print average utilization |
| `-C`   | do not print current utilization |
| `-h`   | print the help message and exit |
| `-s N` | read interval in seconds, default 1.0 |

`-A` and `-C` cannot be given together.

The output starts with two header lines. The first names the columns: `ALL`
for the whole machine, then `CPU00`, `CPU01`, ... for each CPU. The second
marks each column as `CURR` (current) or `AVG` (running average), followed by
`STEP` and `TIME`. Every later line holds the percentages for one interval,
the step number and the time in seconds since the program started. The first
read from `/proc/stat` holds totals since boot, so it is only used as a
starting point and figures appear from the second step on.

If the counters of a CPU have not changed between two reads, its previous
value is kept and a warning is written to standard error suggesting a longer
interval.

The program runs until interrupted (exit status 130), or exits with status 1
if `/proc/stat` cannot be read or parsed. Invalid options print a message to
standard error and exit with status 1.

## Library use

The parts can be used on their own:

```python
from cpuutil.cpustat import CpuStat

before = CpuStat.from_line("cpu 100 0 50 850 0 0 0 0 0 0")
after = CpuStat.from_line("cpu 160 0 70 870 0 0 0 0 0 0")
print((after - before).utilization())  # 0.8
```

- `cpuutil.reader.CpuStatReader` reads all leading `cpu` lines from a stat
  file (by default `/proc/stat`) and raises `CpuStatReadError` on failure.
- `cpuutil.state.CpuUtilState` keeps current and average utilization per CPU.
- `cpuutil.printer.Printer` writes the table; `format_header` and
  `format_row` return its lines as strings.
- `cpuutil.parameters.parse_parameters` turns command-line arguments into
  `Parameters`, raising `ParameterError` on bad input.
- `cpuutil.app.run` is the sampling loop; it accepts a reader, printer,
  timer, sleep function and `max_steps` limit.

## Tests

```
pip install .[test]
pytest
```