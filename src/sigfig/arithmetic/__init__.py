"""Arithmetic Rule Engine — распространение точности для + - * /."""

from .rule_engine import InvalidOperandError, combine, resolve_operation

__all__ = [
    "InvalidOperandError",
    "combine",
    "resolve_operation",
]
