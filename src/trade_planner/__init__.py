"""Trade planning calculator: position size, exit levels and order tickets."""

__version__ = "0.1.0"
