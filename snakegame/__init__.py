"""The classic Snake arcade game: a toolkit-free engine and a Tk window."""

__version__ = "0.1.0"
__all__ = ["__version__"]