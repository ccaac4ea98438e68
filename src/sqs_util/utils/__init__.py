"""
Module: utils
Description: Package initialization for utility functions.

Current utilities:
- logger: Structured logging configuration and helpers
- options: Option-string and argument-list parsing
"""

from sqs_util.utils.options import format_options, parse_options, quote, tokenize, unquote

__all__ = ['format_options', 'parse_options', 'quote', 'tokenize', 'unquote']
