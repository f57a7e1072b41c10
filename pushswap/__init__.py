"""Sort integers with two stacks and push, swap and rotate instructions."""

__version__ = "1.0.0"