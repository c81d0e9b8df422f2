"""Tower of Hanoi puzzle: game logic, solver, board layout, input controller and a pygame front end."""

__version__ = "0.1.0"
__all__ = ["logic", "layout", "controller", "app"]