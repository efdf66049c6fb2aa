# nblocks

A small kernel for frame-based dataflow graphs. You build a graph out of
nodes and connections. Each frame has two stages. First the workbench
propagates every connection, carrying pending output into its destination
node. Then it steps every node in the order the nodes were added.

## Install

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Modules

- `nblocks.workbench`: nodes, connections, messages and the workbench.
- `nblocks.fifo`: a fixed-capacity queue.

## Nodes and connections

### Node

`Node` is the base class for every node. Override any of these as needed:

- `output_available`
- `read_output_type`
- `read_output`
- `trigger_input`
- `step`

### SimpleNode

`SimpleNode(output_count)` keeps double-buffered outputs for you.

- Set `output[n]` and `available[n]`. Set `output_type[n]` if an output is not `OutputType.INT`, the default.
- Put your per-frame logic in `end_frame()`.
- On each `step()`, `end_frame()` runs first. The values you set are then copied to the buffers that connections read, and `available` is reset to zeros.
- A negative `output_count` raises `ValueError`.

### Connection

`Connection(src, output_number, dst, input_number)` links one output to one input.

If the source reports data on that output, `propagate()` builds a `Message` and passes it to `dst.trigger_input`. It then returns the message. If there is no data, it returns `None`.

The `Message` carries:

- `input_number`
- `data_type`
- `data_length`
- one value field, chosen by the output type:

| `OutputType` | Field set on the `Message` |
| --- | --- |
| `INT` | `int_value` |
| `STRING` | `string_value` |
| `ARRAY` | `pointer_value` |
| `FLOAT` | `float_value` |

Float outputs hold packed 32-bit patterns. The connection decodes them with `unpack_float`. Use `pack_float` to store a float on an output.

`MappedValue(index, value)` is a plain record that binds a value to a numeric index.

## Workbench

`Workbench` owns the nodes and connections.

- `add_node(node)` registers a node and returns it.
- `connect(src, output_number, dst, input_number)` creates a connection, registers it and returns it.
- `tick(count=1)` records elapsed frame periods. A negative count raises `ValueError`.
- `progress_nodes()` runs one frame for each pending tick and returns the number of frames it ran.
  - If there are no connections, it runs nothing and returns `0`. The pending ticks are kept for a later call.
  - The same applies if a frame is already in progress.

## Fifo

`Fifo(size=256)` is a queue with these methods:

- `put`
- `get`
- `peek`
- `available`
- `free`
- `len()`

Its limits:

- It holds at most `size - 1` items, given by the `capacity` property.
- `put` raises `FifoFull` when there is no room.
- `get` and `peek` raise `FifoEmpty` when the queue is empty.
- A `size` below 1 raises `ValueError`.

## Example

```python
from nblocks.workbench import Message, SimpleNode, Workbench


class Counter(SimpleNode):
    def __init__(self):
        super().__init__(1)
        self.count = 0

    def end_frame(self):
        self.count += 1
        self.output[0] = self.count
        self.available[0] = 1


class Sink(SimpleNode):
    def __init__(self):
        super().__init__(0)
        self.received = []

    def trigger_input(self, message: Message):
        self.received.append(message.int_value)


bench = Workbench()
counter = bench.add_node(Counter())
sink = bench.add_node(Sink())
bench.connect(counter, 0, sink, 0)

bench.tick(3)
print(bench.progress_nodes())  # 3
print(sink.received)           # [1, 2]
```

## What it does not do

The package has no clock of its own. Nothing calls `tick()` on a timer; your
code decides when frame periods have elapsed and must call `tick()` and then
`progress_nodes()` itself. It also provides no ready-made nodes and no
input/output to devices — every node's behaviour is supplied by your
subclasses.