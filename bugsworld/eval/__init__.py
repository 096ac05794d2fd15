"""Evaluation module for statement-tree analyses."""

from .primitive_calls import (
    count_of_primitive_calls,
    count_of_primitive_calls_iterative,
)
from .metrics import (
    primitive_call_profile,
    primitive_call_vector,
    primitive_call_density,
    primitive_call_table,
)

__all__ = [
    'count_of_primitive_calls',
    'count_of_primitive_calls_iterative',
    'primitive_call_profile',
    'primitive_call_vector',
    'primitive_call_density',
    'primitive_call_table',
]
