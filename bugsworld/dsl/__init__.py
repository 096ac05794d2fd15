"""DSL module for BugsWorld statement trees."""

from .ast import (
    Statement,
    Kind,
    Condition,
    ContractViolation,
    PRIMITIVE_INSTRUCTIONS,
    PRIMITIVE_ORDER,
    is_primitive_instruction,
    statements_equal,
)
from .builders import call, block, if_, if_else, while_, instructions_to_block

__all__ = [
    'Statement', 'Kind', 'Condition', 'ContractViolation',
    'PRIMITIVE_INSTRUCTIONS', 'PRIMITIVE_ORDER', 'is_primitive_instruction', 'statements_equal',
    'call', 'block', 'if_', 'if_else', 'while_', 'instructions_to_block',
]
