"""An interpreter for the Megaladon scripting language: lexer, parser, evaluator and command line."""

__version__ = "0.1.0"