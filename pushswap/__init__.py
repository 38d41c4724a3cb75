"""Two-stack integer sorting with a small instruction set, and a checker for it."""

__version__ = "1.0.0"
__all__ = ["stack", "parsing", "sorting", "push_swap", "checker"]