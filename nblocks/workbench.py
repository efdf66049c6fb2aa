"""Frame-based dataflow kernel: nodes, connections and the workbench."""

from __future__ import annotations

import enum
import struct
from dataclasses import dataclass
from typing import Any, List, Optional


class OutputType(enum.IntEnum):
    """Kind of data a node output carries."""

    INT = 0
    STRING = 1
    FLOAT = 2
    ARRAY = 3


@dataclass
class Message:
    """Data delivered to a destination node's input."""

    input_number: int
    data_type: OutputType
    data_length: int
    int_value: int = 0
    float_value: float = 0.0
    string_value: str = ""
    pointer_value: Any = None


@dataclass
class MappedValue:
    """A value bound to a numeric index."""

    index: int
    value: int


def pack_float(value: float) -> int:
    """Return the raw IEEE-754 single-precision bits of ``value`` as an int."""
    return struct.unpack("<I", struct.pack("<f", value))[0]


def unpack_float(packed: int) -> float:
    """Reinterpret 32 raw bits as a single-precision float."""
    return struct.unpack("<f", struct.pack("<I", packed & 0xFFFFFFFF))[0]


class Node:
    """Base class for all nodes; subclasses override the hooks they need."""

    def output_available(self, output_number: int) -> int:
        """Amount of data ready on an output; zero means nothing."""
        return 0

    def read_output_type(self, output_number: int) -> OutputType:
        """Type of the data on an output."""
        return OutputType.INT

    def read_output(self, output_number: int) -> Any:
        """Value currently on an output."""
        return 0

    def trigger_input(self, message: Message) -> None:
        """Receive a message from a connection."""

    def step(self) -> None:
        """Advance the node to the next frame."""


class SimpleNode(Node):
    """Node with double-buffered outputs.

    User code writes ``output`` and ``available`` and implements
    :meth:`end_frame`. At each step those buffers are copied to the ones
    connections read, so outputs change only between frames.
    """

    def __init__(self, output_count: int) -> None:
        if output_count < 0:
            raise ValueError("output_count must not be negative")
        self.output: List[Any] = [0] * output_count
        self.available: List[int] = [0] * output_count
        self.output_type: List[OutputType] = [OutputType.INT] * output_count
        self._exposed_output: List[Any] = [0] * output_count
        self._exposed_available: List[int] = [0] * output_count

    def output_available(self, output_number: int) -> int:
        return self._exposed_available[output_number]

    def read_output_type(self, output_number: int) -> OutputType:
        return self.output_type[output_number]

    def read_output(self, output_number: int) -> Any:
        return self._exposed_output[output_number]

    def end_frame(self) -> None:
        """Hook run at the end of every frame, before outputs are exposed."""

    def step(self) -> None:
        self.end_frame()
        self._exposed_output = list(self.output)
        self._exposed_available = list(self.available)
        self.available = [0] * len(self.available)


class Connection:
    """Link from one output of a source node to one input of a destination."""

    def __init__(self, src: Node, output_number: int, dst: Node, input_number: int) -> None:
        self.src = src
        self.output_number = output_number
        self.dst = dst
        self.input_number = input_number

    def propagate(self) -> Optional[Message]:
        """Move pending data across; return the delivered message, if any."""
        data_available = self.src.output_available(self.output_number)
        if not data_available:
            return None
        data_type = OutputType(self.src.read_output_type(self.output_number))
        message = Message(
            input_number=self.input_number,
            data_type=data_type,
            data_length=data_available,
        )
        value = self.src.read_output(self.output_number)
        if data_type is OutputType.INT:
            message.int_value = value
        elif data_type is OutputType.STRING:
            message.string_value = value
        elif data_type is OutputType.ARRAY:
            message.pointer_value = value
        else:
            message.float_value = unpack_float(value)
        self.dst.trigger_input(message)
        return message


class Workbench:
    """Holds nodes and connections and runs them frame by frame.

    Each pending tick runs one frame: every connection propagates in the
    order it was made, then every node steps in the order it was added.
    """

    def __init__(self) -> None:
        self.nodes: List[Node] = []
        self.connections: List[Connection] = []
        self.pending_ticks = 0
        self._propagating = False

    def add_node(self, node: Node) -> Node:
        """Register ``node`` to be stepped each frame and return it."""
        self.nodes.append(node)
        return node

    def connect(self, src: Node, output_number: int, dst: Node, input_number: int) -> Connection:
        """Create and register a connection; return it."""
        connection = Connection(src, output_number, dst, input_number)
        self.connections.append(connection)
        return connection

    def tick(self, count: int = 1) -> None:
        """Record ``count`` elapsed frame periods."""
        if count < 0:
            raise ValueError("tick count must not be negative")
        self.pending_ticks += count

    def progress_nodes(self) -> int:
        """Run one frame per pending tick and return how many frames ran.

        Nothing runs while a frame is already in progress or while there
        are no connections; pending ticks are then kept for a later call.
        """
        if self._propagating or not self.connections:
            return 0
        frames = 0
        while self.pending_ticks > 0:
            self._propagating = True
            try:
                self.pending_ticks -= 1
                frames += 1
                for connection in self.connections:
                    connection.propagate()
                for node in self.nodes:
                    node.step()
            finally:
                self._propagating = False
        return frames