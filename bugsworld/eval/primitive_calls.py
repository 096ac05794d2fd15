"""Counting calls to primitive instructions in statement trees."""

import logging

from bugsworld.dsl import Statement, Kind, ContractViolation, is_primitive_instruction


logger = logging.getLogger(__name__)


def count_of_primitive_calls(s: Statement) -> int:
    """
    Report the number of calls to primitive instructions (move, turnleft,
    turnright, infect, skip) in `s`.

    Works only through the statement kernel: each compound node is taken
    apart, its pieces counted, and the node put back together, so `s` is
    unchanged when this returns. Calls to any other name count 0; their
    definitions are never looked up.
    """
    kind = s.kind()
    count = 0

    if kind is Kind.BLOCK:
        for i in range(s.length_of_block()):
            child = s.remove_from_block(i)
            count += count_of_primitive_calls(child)
            s.add_to_block(i, child)

    elif kind is Kind.IF:
        body = s.new_instance()
        condition = s.disassemble_if(body)
        count = count_of_primitive_calls(body)
        s.assemble_if(condition, body)

    elif kind is Kind.IF_ELSE:
        then_body = s.new_instance()
        else_body = s.new_instance()
        condition = s.disassemble_if_else(then_body, else_body)
        count = count_of_primitive_calls(then_body) + count_of_primitive_calls(else_body)
        s.assemble_if_else(condition, then_body, else_body)

    elif kind is Kind.WHILE:
        body = s.new_instance()
        condition = s.disassemble_while(body)
        count = count_of_primitive_calls(body)
        s.assemble_while(condition, body)

    elif kind is Kind.CALL:
        name = s.disassemble_call()
        if is_primitive_instruction(name):
            count = 1
        s.assemble_call(name)

    else:
        raise ContractViolation(f"Unknown statement kind: {kind!r}")

    logger.debug("%s statement: %d primitive call(s)", kind.name, count)
    return count


def count_of_primitive_calls_iterative(s: Statement) -> int:
    """Same count as count_of_primitive_calls, walking read-only views with an explicit stack."""
    count = 0
    stack = [s]
    while stack:
        node = stack.pop()
        if node.kind() is Kind.CALL:
            if is_primitive_instruction(node.call_name):
                count += 1
        else:
            stack.extend(node.children)
    return count
