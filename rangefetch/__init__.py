"""Show a system summary beside an OS banner in the terminal."""

__version__ = "0.1.0"