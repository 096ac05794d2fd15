"""Helpers for building statement trees through the kernel operations."""

from typing import Sequence

from .ast import Condition, Statement


def call(name: str) -> Statement:
    stmt = Statement()
    stmt.assemble_call(name)
    return stmt


def block(*stmts: Statement) -> Statement:
    """
    Build a BLOCK holding `stmts` in order.

    The arguments are consumed: each one is moved into the block and left
    as an empty BLOCK.
    """
    result = Statement()
    for stmt in stmts:
        result.add_to_block(result.length_of_block(), stmt)
    return result


def if_(condition: Condition, body: Statement) -> Statement:
    stmt = Statement()
    stmt.assemble_if(condition, body)
    return stmt


def if_else(condition: Condition, then: Statement, else_: Statement) -> Statement:
    stmt = Statement()
    stmt.assemble_if_else(condition, then, else_)
    return stmt


def while_(condition: Condition, body: Statement) -> Statement:
    stmt = Statement()
    stmt.assemble_while(condition, body)
    return stmt


def instructions_to_block(names: Sequence[str]) -> Statement:
    """
    Convert a flat sequence of instruction names to a BLOCK of CALLs.

    Names are kept verbatim, so user-defined procedure names and
    misspelled primitives become ordinary calls.
    """
    return block(*(call(name) for name in names))
