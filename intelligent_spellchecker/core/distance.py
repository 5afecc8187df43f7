# distance.py
# Damerau-Levenshtein edit distance used by the BK-tree and for ranking suggestions.
# Counts insertions, deletions, substitutions and adjacent transpositions (cost 1 each).
# The unrestricted form is used: unlike optimal string alignment it is a true metric,
# so the triangle inequality the BK-tree prunes with always holds.

from typing import Dict, List


def damerau_levenshtein(a: str, b: str) -> int:
    """
    Return the Damerau-Levenshtein distance between a and b.

    Fills a (len(a) + 2) x (len(b) + 2) table where cell (i + 1, j + 1) is the cost of
    turning a[:i] into b[:j]. Row/column 0 hold a sentinel larger than any real cost,
    row/column 1 the base cases cell(0, j) = j and cell(i, 0) = i.
    `last_row` remembers, per character, the last row of `a` it appeared in, which
    lets a transposition be costed against the table instead of re-scanning.
    """
    if a == b:
        return 0

    la, lb = len(a), len(b)
    if la == 0:
        return lb
    if lb == 0:
        return la

    sentinel = la + lb
    table: List[List[int]] = [[0] * (lb + 2) for _ in range(la + 2)]
    table[0][0] = sentinel
    for i in range(la + 1):
        table[i + 1][0] = sentinel
        table[i + 1][1] = i
    for j in range(lb + 1):
        table[0][j + 1] = sentinel
        table[1][j + 1] = j

    last_row: Dict[str, int] = {}

    for i in range(1, la + 1):
        ca = a[i - 1]
        last_match_col = 0
        for j in range(1, lb + 1):
            cb = b[j - 1]
            prev_i = last_row.get(cb, 0)
            prev_j = last_match_col
            if ca == cb:
                cost = 0
                last_match_col = j
            else:
                cost = 1

            substitute = table[i][j] + cost
            insert = table[i + 1][j] + 1
            delete = table[i][j + 1] + 1
            transpose = table[prev_i][prev_j] + (i - prev_i - 1) + 1 + (j - prev_j - 1)

            val = substitute if substitute < insert else insert
            if delete < val:
                val = delete
            if transpose < val:
                val = transpose
            table[i + 1][j + 1] = val
        last_row[ca] = i

    return table[la + 1][lb + 1]


# the metric the rest of the package is written against
distance = damerau_levenshtein
