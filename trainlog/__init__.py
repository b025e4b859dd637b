"""Console training diary with statistics, plus small number and word list tools."""

__version__ = "0.1.0"
__all__ = ["diary", "app", "reverse", "tail", "capitals", "zoo"]