"""Statement trees for BugsWorld robot programs."""

from enum import Enum
from typing import List, Optional, Tuple


PRIMITIVE_ORDER = ('move', 'turnleft', 'turnright', 'infect', 'skip')
PRIMITIVE_INSTRUCTIONS = frozenset(PRIMITIVE_ORDER)


def is_primitive_instruction(name: str) -> bool:
    """True if `name` is exactly one of the five primitive instructions."""
    return name in PRIMITIVE_INSTRUCTIONS


class ContractViolation(Exception):
    pass


class Kind(Enum):
    BLOCK = 'BLOCK'
    IF = 'IF'
    IF_ELSE = 'IF_ELSE'
    WHILE = 'WHILE'
    CALL = 'CALL'


class Condition(Enum):
    NEXT_IS_EMPTY = 'next-is-empty'
    NEXT_IS_NOT_EMPTY = 'next-is-not-empty'
    NEXT_IS_WALL = 'next-is-wall'
    NEXT_IS_NOT_WALL = 'next-is-not-wall'
    NEXT_IS_FRIEND = 'next-is-friend'
    NEXT_IS_NOT_FRIEND = 'next-is-not-friend'
    NEXT_IS_ENEMY = 'next-is-enemy'
    NEXT_IS_NOT_ENEMY = 'next-is-not-enemy'
    RANDOM = 'random'
    TRUE = 'true'


class Statement:
    """
    A node of a BugsWorld statement tree.

    kind: BLOCK, IF, IF_ELSE, WHILE or CALL
    condition: test of an IF, IF_ELSE or WHILE
    name: instruction name of a CALL
    children: BLOCK members, or the body (bodies) of a compound statement

    A new Statement is an empty BLOCK. Structure changes only through the
    kernel operations below. Disassembling a compound statement hands its
    pieces to the caller and leaves the node unusable until the matching
    assemble call; assembling and inserting consume their statement
    arguments, which are left as empty blocks.
    """
    def __init__(self):
        self._kind = Kind.BLOCK
        self._condition: Optional[Condition] = None
        self._name: Optional[str] = None
        self._children: List['Statement'] = []
        self._disassembled: Optional[Kind] = None

    def _clear(self):
        self._kind = Kind.BLOCK
        self._condition = None
        self._name = None
        self._children = []
        self._disassembled = None

    def _transfer_from(self, source: 'Statement'):
        """Move the whole state of `source` into this node and clear `source`."""
        source._check_assembled()
        self._kind = source._kind
        self._condition = source._condition
        self._name = source._name
        self._children = source._children
        self._disassembled = None
        source._clear()

    def _check_insertable(self, stmt: 'Statement'):
        if not isinstance(stmt, Statement):
            raise ContractViolation(f"Expected a Statement, got {type(stmt).__name__}")
        if stmt is self:
            raise ContractViolation("A statement cannot contain itself")
        stmt._check_assembled()
        if stmt._reaches(self):
            raise ContractViolation("A statement cannot contain one of its ancestors")

    def _reaches(self, target: 'Statement') -> bool:
        """True if `target` is a node strictly below this one."""
        stack = list(self._children)
        while stack:
            node = stack.pop()
            if node is target:
                return True
            stack.extend(node._children)
        return False

    def _take_ownership(self, stmt: 'Statement') -> 'Statement':
        self._check_insertable(stmt)
        owned = Statement()
        owned._transfer_from(stmt)
        return owned

    def _check_assembled(self):
        if self._disassembled is not None:
            raise ContractViolation(
                f"Statement is disassembled (pending assemble for {self._disassembled.name})"
            )

    def _require(self, kind: Kind):
        self._check_assembled()
        if self._kind is not kind:
            raise ContractViolation(f"Expected a {kind.name} statement, got {self._kind.name}")

    @staticmethod
    def _require_empty_block(out: 'Statement'):
        if not isinstance(out, Statement):
            raise ContractViolation(f"Expected a Statement, got {type(out).__name__}")
        out._check_assembled()
        if out._kind is not Kind.BLOCK or out._children:
            raise ContractViolation("Output statement must be an empty BLOCK")

    def _begin_assemble(self, kind: Kind):
        if self._disassembled is not None and self._disassembled is not kind:
            raise ContractViolation(
                f"Cannot assemble {kind.name}: statement was disassembled from "
                f"{self._disassembled.name}"
            )

    @staticmethod
    def _require_condition(condition):
        if not isinstance(condition, Condition):
            raise ContractViolation(f"Expected a Condition, got {condition!r}")

    def _disassemble(self, kind: Kind, *outs: 'Statement') -> Condition:
        self._require(kind)
        for out in outs:
            self._require_empty_block(out)
        if len(set(map(id, outs))) != len(outs):
            raise ContractViolation("Output statements must be distinct")
        condition = self._condition
        for out, body in zip(outs, self._children):
            out._transfer_from(body)
        self._condition = None
        self._children = []
        self._disassembled = kind
        return condition

    def _assemble(self, kind: Kind, condition: Condition, *bodies: 'Statement'):
        self._begin_assemble(kind)
        self._require_condition(condition)
        for body in bodies:
            self._check_insertable(body)
        if len(set(map(id, bodies))) != len(bodies):
            raise ContractViolation("Body statements must be distinct")
        owned = [self._take_ownership(b) for b in bodies]
        self._clear()
        self._kind = kind
        self._condition = condition
        self._children = owned

    def kind(self) -> Kind:
        self._check_assembled()
        return self._kind

    def new_instance(self) -> 'Statement':
        return Statement()

    def length_of_block(self) -> int:
        self._require(Kind.BLOCK)
        return len(self._children)

    def remove_from_block(self, pos: int) -> 'Statement':
        """Detach and return the child at `pos`; later children shift down."""
        self._require(Kind.BLOCK)
        if not 0 <= pos < len(self._children):
            raise ContractViolation(
                f"Block index {pos} out of range for length {len(self._children)}"
            )
        return self._children.pop(pos)

    def add_to_block(self, pos: int, stmt: 'Statement'):
        """Insert the contents of `stmt` at `pos` (0..length); `stmt` is cleared."""
        self._require(Kind.BLOCK)
        if not 0 <= pos <= len(self._children):
            raise ContractViolation(
                f"Block index {pos} out of range for length {len(self._children)}"
            )
        self._children.insert(pos, self._take_ownership(stmt))

    def disassemble_if(self, block: 'Statement') -> Condition:
        return self._disassemble(Kind.IF, block)

    def assemble_if(self, condition: Condition, block: 'Statement'):
        self._assemble(Kind.IF, condition, block)

    def disassemble_if_else(self, block1: 'Statement', block2: 'Statement') -> Condition:
        return self._disassemble(Kind.IF_ELSE, block1, block2)

    def assemble_if_else(self, condition: Condition, block1: 'Statement', block2: 'Statement'):
        self._assemble(Kind.IF_ELSE, condition, block1, block2)

    def disassemble_while(self, block: 'Statement') -> Condition:
        return self._disassemble(Kind.WHILE, block)

    def assemble_while(self, condition: Condition, block: 'Statement'):
        self._assemble(Kind.WHILE, condition, block)

    def disassemble_call(self) -> str:
        self._require(Kind.CALL)
        name = self._name
        self._name = None
        self._disassembled = Kind.CALL
        return name

    def assemble_call(self, name: str):
        self._begin_assemble(Kind.CALL)
        if not isinstance(name, str):
            raise ContractViolation(f"Call name must be a str, got {name!r}")
        self._clear()
        self._kind = Kind.CALL
        self._name = name

    @property
    def children(self) -> Tuple['Statement', ...]:
        self._check_assembled()
        return tuple(self._children)

    @property
    def condition(self) -> Optional[Condition]:
        self._check_assembled()
        return self._condition

    @property
    def call_name(self) -> Optional[str]:
        self._check_assembled()
        return self._name

    def num_nodes(self) -> int:
        """Count total nodes in this subtree."""
        return 1 + sum(c.num_nodes() for c in self.children)

    def copy(self) -> 'Statement':
        """Deep copy of this statement and its subtree."""
        self._check_assembled()
        dup = Statement()
        dup._kind = self._kind
        dup._condition = self._condition
        dup._name = self._name
        dup._children = [c.copy() for c in self._children]
        return dup

    def __eq__(self, other):
        if not isinstance(other, Statement):
            return NotImplemented
        return statements_equal(self, other)

    __hash__ = None

    def __repr__(self):
        if self._disassembled is not None:
            return f"Statement(<disassembled {self._disassembled.name}>)"
        if self._kind is Kind.CALL:
            return f"Statement(CALL, {self._name!r})"
        children_repr = ', '.join(repr(c) for c in self._children)
        if self._kind is Kind.BLOCK:
            return f"Statement(BLOCK, [{children_repr}])"
        return f"Statement({self._kind.name}, {self._condition.name}, [{children_repr}])"


def statements_equal(s1: Statement, s2: Statement) -> bool:
    """
    Check if two statements are structurally equivalent.

    Same kind, condition and call name, and pairwise-equal children in order.
    """
    if s1.kind() is not s2.kind():
        return False
    if s1.condition is not s2.condition or s1.call_name != s2.call_name:
        return False
    if len(s1.children) != len(s2.children):
        return False
    return all(statements_equal(c1, c2) for c1, c2 in zip(s1.children, s2.children))
