"""
Optimal String Alignment distance with traceback.

This module implements the edit distance used to rank spelling corrections.
OSA distance allows insertions, deletions, substitutions and transpositions of
two adjacent characters, with the restriction that a transposed pair is not
edited again. It is therefore weaker than true Damerau-Levenshtein distance:

    >>> osa_distance("ca", "abc")   # Damerau-Levenshtein gives 2
    3

Grid layout:
    Rows follow `target`, columns follow `source`; both grids are stored
    row-major in ScratchBuffers of (len(target) + 1) * (len(source) + 1)
    cells. Row 0 and column 0 hold the pure insertion/deletion costs.

    An INSERTION consumes a character of `source` (step left), a DELETION
    consumes a character of `target` (step up).

Tie-break:
    When characters differ, candidates are tried in the order transposition,
    insertion, substitution, deletion, and a later candidate only replaces an
    earlier one when it is strictly cheaper. The order only changes which
    operation is recorded, never the distance.

Incremental distance:
    smart_distance() treats the query as a prefix that is still being typed.
    Vocabulary characters past the end of the query show up as a leading run
    of insertions in the traceback and are not charged.

Usage:
    result = compute_distance("abcd", "abc", want_trace=True)
    result.distance  # 1
    result.trace     # (INSERTION, NONE, NONE, NONE)

    smart_distance("abcd", "abc", incremental=True)  # 0
"""

from enum import IntEnum
from itertools import takewhile
from typing import NamedTuple, Optional, Tuple

import numpy as np

from .errors import CorruptedTracebackError
from .scratch import ScratchBuffer
from .tokenizer import StringLike, as_text

DELETION_COST = 1
INSERTION_COST = 1
SUBSTITUTION_COST = 1
TRANSPOSITION_COST = 1

MIN_INCREMENTAL_LENGTH = 3


class EditOp(IntEnum):
    """Transition that produced a grid cell."""
    NONE = 0
    SUBSTITUTION = 1
    DELETION = 2
    INSERTION = 3
    TRANSPOSITION = 4


# Operation grid value for cells that were never written
UNSET = 0xFF

# (rows, columns) to step back for each operation
_STEPS = {
    EditOp.NONE: (1, 1),
    EditOp.SUBSTITUTION: (1, 1),
    EditOp.DELETION: (1, 0),
    EditOp.INSERTION: (0, 1),
    EditOp.TRANSPOSITION: (2, 2),
}


class Alignment(NamedTuple):
    """Distance between two strings and, when requested, its traceback."""
    distance: int
    trace: Optional[Tuple[EditOp, ...]] = None


def cell_index(row: int, column: int, width: int) -> int:
    return row * width + column


def compute_distance(source: StringLike, target: StringLike, want_trace: bool = False) -> Alignment:
    """
    Compute the OSA distance between two strings.

    Args:
        source: String laid along the columns
        target: String laid along the rows
        want_trace: Also reconstruct the sequence of edit operations

    Returns:
        Alignment with the distance and, if want_trace, the traceback ordered
        from the tail of the strings to the head

    Examples:
        >>> compute_distance("abc", "acb").distance
        1

        >>> compute_distance("abc", "acb", want_trace=True).trace
        (<EditOp.TRANSPOSITION: 4>, <EditOp.NONE: 0>)
    """
    source = as_text(source)
    target = as_text(target)

    width = len(source) + 1
    height = len(target) + 1

    distances = ScratchBuffer(width * height, dtype=np.int64)
    ops = ScratchBuffer(width * height, dtype=np.uint8, fill=UNSET) if want_trace else None

    # Row 0: 0, 1, 2, ..., len(source)
    distances.fill_range(0, np.arange(width))
    if ops is not None:
        ops[0] = EditOp.NONE
        ops.fill_range(1, np.full(width - 1, int(EditOp.INSERTION)))

    for i in range(1, height):
        row = cell_index(i, 0, width)
        prev_row = row - width

        distances[row] = i
        if ops is not None:
            ops[row] = EditOp.DELETION

        for j in range(1, width):
            if source[j - 1] == target[i - 1]:
                cost = distances[prev_row + j - 1]
                op = EditOp.NONE
            else:
                cost = None
                op = None

                if i > 1 and j > 1 and source[j - 1] == target[i - 2] and source[j - 2] == target[i - 1]:
                    cost = distances[prev_row - width + j - 2] + TRANSPOSITION_COST
                    op = EditOp.TRANSPOSITION

                candidates = (
                    (distances[row + j - 1] + INSERTION_COST, EditOp.INSERTION),
                    (distances[prev_row + j - 1] + SUBSTITUTION_COST, EditOp.SUBSTITUTION),
                    (distances[prev_row + j] + DELETION_COST, EditOp.DELETION),
                )
                for candidate_cost, candidate_op in candidates:
                    if cost is None or candidate_cost < cost:
                        cost = candidate_cost
                        op = candidate_op

            distances[row + j] = cost
            if ops is not None:
                ops[row + j] = op

    distance = distances[width * height - 1]
    trace = backtrace(ops, width, height) if ops is not None else None
    return Alignment(distance, trace)


def backtrace(ops: ScratchBuffer, width: int, height: int) -> Tuple[EditOp, ...]:
    """
    Walk the operation grid from the last cell back to the origin.

    Args:
        ops: Operation grid of width * height cells
        width: len(source) + 1
        height: len(target) + 1

    Returns:
        Visited operations; element 0 is the edit nearest the tail

    Raises:
        CorruptedTracebackError: If a cell does not hold an EditOp or a step
            leaves the grid
    """
    row, column = height - 1, width - 1
    trace = []

    while row > 0 or column > 0:
        value = ops[cell_index(row, column, width)]
        try:
            op = EditOp(value)
        except ValueError:
            raise CorruptedTracebackError(row, column, value) from None

        step_rows, step_columns = _STEPS[op]
        if step_rows > row or step_columns > column:
            raise CorruptedTracebackError(row, column, op)

        trace.append(op)
        row -= step_rows
        column -= step_columns

    return tuple(trace)


def osa_distance(source: StringLike, target: StringLike) -> int:
    """Plain OSA distance. Symmetric in its arguments."""
    return compute_distance(source, target).distance


def smart_distance(
    word: StringLike,
    query: StringLike,
    incremental: bool = False,
    min_prefix_length: int = MIN_INCREMENTAL_LENGTH,
) -> int:
    """
    Distance from a vocabulary word to a query, optionally treating the query
    as an unfinished prefix.

    With `incremental`, a query of at least `min_prefix_length` characters and
    a longer vocabulary word, the leading run of insertions in the traceback
    (word characters past the end of the query) is subtracted from the distance.
    Argument order matters: "abc" is a prefix of "abcd" but not the reverse.

    The discount only looks at the tail of the traceback. An extra query
    character earlier in the string still costs a deletion:

        >>> smart_distance("abcdefg", "xabc", incremental=True)
        1

    Args:
        word: Vocabulary word
        query: Text typed so far
        incremental: Apply the prefix discount
        min_prefix_length: Shortest query that gets the discount

    Returns:
        Distance, never negative
    """
    word = as_text(word)
    query = as_text(query)

    discounted = incremental and len(query) >= min_prefix_length and len(word) > len(query)
    alignment = compute_distance(word, query, want_trace=discounted)

    distance = alignment.distance
    if discounted:
        distance -= sum(1 for _ in takewhile(lambda op: op is EditOp.INSERTION, alignment.trace))
    return distance
