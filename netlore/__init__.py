"""HTML tokenizer and DOM builder, with a CSS tokenizer and named colours."""

__version__ = "0.2.6"

__all__ = ["__version__"]