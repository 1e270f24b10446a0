"""Tokens, syntax tree and parser for transition model files."""