"""Tokenizer, parser, syntax tree and renderers for a memo-flavoured markdown dialect."""

__version__ = "0.1.0"