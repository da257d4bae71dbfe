"""Solutions to classic array, string and stack algorithm problems."""

__version__ = "0.1.0"
__all__ = ["dynamic_programming", "sliding_window", "stacks", "two_pointer"]