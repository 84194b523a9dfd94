def hours_disjoint(s1: int, e1: int, s2: int, e2: int) -> bool:
    """True when [s1, e1] and [s2, e2] do not conflict.

    The four endpoints, sorted, must read either as s1, e1, s2, e2 (first window
    at or before the second) or as s2, e2, s1, e1. Equal values at the touching
    point still sort into place, so windows that only share an endpoint are
    disjoint. Any other ordering (partial overlap, containment, identical
    windows) is a conflict.
    """
    hours = sorted([s1, e1, s2, e2])
    return hours == [s1, e1, s2, e2] or hours == [s2, e2, s1, e1]


def hours_overlap(s1: int, e1: int, s2: int, e2: int) -> bool:
    return not hours_disjoint(s1, e1, s2, e2)
