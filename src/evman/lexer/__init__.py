"""Argument tokenizer module.

Exports the ``ArgumentTokenizer`` class, the ``ArgumentMultimap`` it
produces, and the ``tokenize`` convenience function.
"""
from __future__ import annotations

from evman.lexer.tokenizer import ArgumentMultimap, ArgumentTokenizer, tokenize

__all__ = ["ArgumentTokenizer", "ArgumentMultimap", "tokenize"]
