"""Frame-based dataflow kernel with nodes, connections and a fixed-capacity FIFO."""

__version__ = "0.1.0"
__all__ = ["fifo", "workbench"]