# metricsfacade

A lightweight metrics facade. Libraries emit counters, gauges and histograms
through one small API. The application decides where those metrics go by
installing a single global recorder. Until a recorder is installed, every call
goes to a `NoopRecorder`, which discards it.

## Metric kinds

- **Counters**: unsigned integers that only go up. `counter()` accepts
  integers from 0 to 2**64 - 1. It raises `TypeError` for a value that is not
  an integer, and for `bool`. It raises `ValueError` for a value outside that
  range.
- **Gauges**: floating-point values that can be set, incremented or
  decremented. Each update reaches the recorder as a `GaugeValue`, which
  carries a `GaugeOp` and a float. `GaugeValue.update_value(current)` applies
  the update to a current value.
- **Histograms**: floating-point observations. A `datetime.timedelta` is
  converted to seconds, and any other object that defines `__float__` is
  converted with `float()`. Strings, bytes and `bool` raise `TypeError`. The
  conversion is available on its own as `metricsfacade.common.into_f64`.

## Registering and emitting

```python
from metricsfacade.common import Unit
from metricsfacade.emit import counter, gauge, histogram, increment_counter
from metricsfacade.register import register_counter, register_histogram

register_counter("bytes_sent", Unit.BYTES, "number of bytes sent")
register_histogram("svc.execution_time", Unit.MILLISECONDS, labels={"service": "web"})

increment_counter("requests_processed", [("request_type", "admin")])
counter("bytes_sent", 64, {"listener": "frontend"})
gauge("connection_count", 300.0)
histogram("svc.execution_time", 70.0, [("type", "users")])
```

The registration functions are `register_counter`, `register_gauge` and
`register_histogram`. Their `unit`, `description` and `labels` arguments are
all optional. `unit` must be a `Unit` or `None`, and `description` must be a
string or `None`; anything else raises `TypeError`.

The emission functions in `metricsfacade.emit` are `increment_counter`,
`counter`, `gauge`, `increment_gauge`, `decrement_gauge` and `histogram`.

A metric name can be given as a string, an iterable of name parts, or a
`NameParts`. Labels can be given in any of these forms, all handled by
`metricsfacade.label.into_labels`:

- `None`
- a single `Label`
- a mapping of keys to values
- an iterable of `Label` objects or `(key, value)` pairs

Label keys and values must be strings.

## Units

`Unit` lists the supported units. Each unit has these methods:

- `as_str()` returns its name, such as `"milliseconds"`.
- `canonical_label()` returns its short label, such as `"ms"`; for `Unit.COUNT`
  the label is empty.
- `Unit.from_string()` parses a name back into a unit and returns `None` for
  an unknown one.
- `is_time_based()`, `is_data_based()` and `is_data_rate_based()` classify the
  unit.

## Writing and installing a recorder

Subclass `Recorder` and implement its six methods, then install it once:

```python
from metricsfacade.recorder import Recorder, SetRecorderError, set_recorder

class LogRecorder(Recorder):
    def register_counter(self, key, unit, description): ...
    def register_gauge(self, key, unit, description): ...
    def register_histogram(self, key, unit, description): ...
    def increment_counter(self, key, value):
        print(f"counter {key} -> {value}")
    def update_gauge(self, key, value):
        print(f"gauge {key} -> {value}")
    def record_histogram(self, key, value):
        print(f"histogram {key} -> {value}")

try:
    set_recorder(LogRecorder())
except SetRecorderError as exc:
    print(exc)
```

Only one recorder can be installed at a time:

- A second `set_recorder()` raises `SetRecorderError`.
- Passing an object that is not a `Recorder` raises `TypeError`.
- `recorder()` returns the installed recorder, or a `NoopRecorder` if none is
  installed.
- `try_recorder()` returns `None` when none is installed.
- `clear_recorder()` removes the installed recorder, so that another can be
  set. This is mostly useful in tests.

## Keys

Every metric reaches the recorder identified by a `KeyData`, which holds the
metric's `NameParts` and its labels in insertion order.

- Two keys are equal, and hash alike, when their name parts and their labels,
  in order, are equal.
- Keys sort by name, then by labels.
- `append_name`, `prepend_name` and `with_extra_labels` return new keys.
- `KeyData.coerce` turns a string, a `NameParts` or a `(name, labels)` tuple
  into a key.

```python
from metricsfacade.key import KeyData
from metricsfacade.label import Label

key = KeyData.from_parts("foobar", [Label("system", "http")])
str(key)  # 'KeyData(foobar, [system = http])'
```

`str()` of a `NameParts` joins its parts with no separator, so
`NameParts.from_names(["part1", "part2"])` prints as `part1part2`.

## Demo

`metricsfacade.printrecorder.PrintRecorder` writes one line per registration
and update. It writes to standard output, or to a stream passed to its
constructor. Run the demonstration with:

```
metricsfacade-demo
metricsfacade-demo --server-name web07
```

The demonstration does the following:

1. Installs a `PrintRecorder`.
2. Makes every kind of registration and emission call. `--server-name`
   defaults to `web03` and sets the value of the `server` label.
3. Clears the recorder.

## What this package does not do

This package only defines the interface and routes calls to the installed
recorder. It does not store, aggregate or export metric values. It has no
counters or histograms held in memory, no quantile summaries, and no network
or file exporters. The only recorders included are `NoopRecorder` and
`PrintRecorder`. Anything else must be provided by your own `Recorder`
subclass.