"""Sort integers on two stacks with a fixed set of operations, and check operation sequences."""

__version__ = "0.1.0"