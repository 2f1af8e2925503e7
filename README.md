# cncpath

A small, dependency-free model of CNC toolpaths. It describes machine
state, moves and segments, stock and work offsets, and checks that a
toolpath is sound before it goes anywhere near a machine.

## Install

    pip install cncpath

## Modules

- `cncpath.geometry`: frozen `Vec3` (with `length()`, `length_squared()`,
  `dot()`, `is_finite()` and arithmetic), `AABB` (`size()`, `center()`,
  `contains()`), `Quaternion` (`identity()`, `from_axis_angle()`,
  `conjugate()`, `normalized()`, `rotate()`, `is_identity()`), `Transform`
  (`identity()`, `transform_point()`, `inverse()`, `compose()`) and
  `arc_length(start, end, center)`, the length of the shorter arc.
- `cncpath.motion`: the `MotionType` and `MoveType` enums, with
  `is_cutting()`, `is_arc()` and `requires_feedrate()`; `MoveType` also
  has `is_control()` for tool change and spindle start/stop.
- `cncpath.state`: `ToolpathState`, an immutable snapshot of position,
  rotary axes (`a`, `b`, `c`), feed rate, spindle RPM, active tool,
  `CoolantState` and `CoordinateMode`. Negative feed rates and spindle
  speeds are clamped to 0.
- `cncpath.point`: `ToolpathPoint`, a tool position with an optional
  orientation (vertical when not given), optional feedrate and spindle
  speed overrides, and `PointFlags`.
- `cncpath.segment`: `ToolpathSegment` and `ArcPlane`. Segments are built
  with `rapid()`, `linear()`, `arc()`, `dwell()` and `tool_change()`, and
  give `length()`, `estimated_time()`, `is_valid()` and `is_zero_length()`.
- `cncpath.move`: `ToolpathMove`, one instruction between two states,
  built with `rapid()`, `linear()`, `arc()`, `dwell()`, `tool_change()`,
  `spindle_start()` and `spindle_stop()`. The tool change and spindle
  constructors keep the given state as the end state; they do not set the
  new tool or speed on it.
- `cncpath.toolpath`: `Toolpath`, an append-only sequence of moves
  (`append_move()`, `len()`, iteration, indexing) with `bounding_box()`,
  `total_length()`, `estimated_machining_time()`, `tool_usage_summary()`,
  `used_tool_ids()`, `first_state()`, `last_state()` and `is_valid()`.
- `cncpath.workpiece`: `StockType`, `StockDimensions` (non-positive sizes
  become 0), `WorkOffsetId` (G54 to G59_3), `WorkOffset` (with settable
  `translation` and `rotation`) and `Workpiece`, each converting points
  between workpiece and machine coordinates.
- `cncpath.validator`: `validate()` and `is_valid()`, plus the single
  checks `validate_move()`, `validate_arc()`, `validate_continuity()`,
  `validate_machine_limits()` and `validate_tool_consistency()`. Machine
  limits are given as `MachineLimits` with optional `AxisLimits` per axis
  and a spindle RPM range; axes left as `None` are not checked. A failed
  check raises `ValidationError`, a subclass of `ValueError`.

## Example

```python
from cncpath.geometry import Vec3
from cncpath.state import ToolpathState
from cncpath.move import ToolpathMove
from cncpath.toolpath import Toolpath
from cncpath.validator import AxisLimits, MachineLimits, validate, is_valid

start = ToolpathState(Vec3(0.0, 0.0, 10.0))
above = ToolpathState(Vec3(50.0, 0.0, 10.0))
cut_end = ToolpathState(Vec3(50.0, 0.0, 0.0), feed_rate=300.0, active_tool_id="T1")

path = Toolpath("job-1", "mill-1")
path.append_move(ToolpathMove.rapid(start, above))
path.append_move(ToolpathMove.linear(above, cut_end))

print(len(path), path.total_length())    # 2 60.0
print(path.estimated_machining_time())   # about 2.3 seconds
print(path.tool_usage_summary())         # {'T1': 1}

validate(path)          # raises ValidationError when something is wrong
print(is_valid(path))   # True

machine = MachineLimits(z=AxisLimits(-5.0, 5.0))
print(is_valid(path, machine))           # False: Z 10 is outside [-5, 5]
```

Times are in seconds; feed and rapid rates are in units per minute. The
default rapid rate is 10000, a tool change is estimated at 5 seconds and a
spindle start or stop at 0.1 seconds. Lengths use whatever unit you choose.

## What it does not do

This is a data model and checker only. It does not read or write G-code,
does not simulate material removal, does not draw anything and has no
command-line tool.

## Tests

    pip install -e ".[test]"
    pytest