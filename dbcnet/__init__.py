"""Parse CAN database (DBC) files into a syntax tree and model messages and environment variables."""

__version__ = "0.1.0"
__all__ = ["environment_variable", "message", "parser", "scanner", "syntax"]