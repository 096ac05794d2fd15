from collections import Counter
from typing import Mapping

import numpy as np
import pandas as pd

from bugsworld.dsl import Statement, Kind, PRIMITIVE_ORDER, is_primitive_instruction
from .primitive_calls import count_of_primitive_calls


def primitive_call_profile(s: Statement) -> Counter:
    """Count calls to each primitive instruction in `s`; absent primitives are omitted."""
    profile = Counter()

    def visit(node):
        if node.kind() is Kind.CALL:
            if is_primitive_instruction(node.call_name):
                profile[node.call_name] += 1
            return
        for child in node.children:
            visit(child)

    visit(s)
    return profile


def primitive_call_vector(s: Statement) -> np.ndarray:
    profile = primitive_call_profile(s)
    return np.array([profile[name] for name in PRIMITIVE_ORDER], dtype=int)


def primitive_call_density(s: Statement) -> float:
    """
    Compute the fraction of nodes that are primitive calls.

    Returns primitive_calls / total_nodes.
    """
    total = s.num_nodes()
    return count_of_primitive_calls(s) / float(total)


def primitive_call_table(programs: Mapping[str, Statement]) -> pd.DataFrame:
    """
    Tabulate primitive calls for several named statements.

    One row per entry, in mapping order, with a column per primitive
    instruction plus 'total', 'num_nodes' and 'density'.
    """
    columns = ['name', *PRIMITIVE_ORDER, 'total', 'num_nodes', 'density']
    rows = []
    for name, stmt in programs.items():
        vec = primitive_call_vector(stmt)
        total = count_of_primitive_calls(stmt)
        num_nodes = stmt.num_nodes()
        row = {'name': name}
        row.update({prim: int(v) for prim, v in zip(PRIMITIVE_ORDER, vec)})
        row['total'] = total
        row['num_nodes'] = num_nodes
        row['density'] = total / float(num_nodes)
        rows.append(row)
    return pd.DataFrame(rows, columns=columns)
