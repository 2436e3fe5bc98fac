"""Small command-line utilities and the library functions behind them."""

__version__ = "0.1.0"