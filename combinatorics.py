from typing import Iterator, List


def init_combinations(k: int) -> List[int]:
    return list(range(k))


def next_combination(vec: List[int], k: int, n: int) -> bool:
    """
    Lexicographic next combination (in-place). Returns False if at last combination.
    """
    for i in reversed(range(k)):
        if vec[i] != i + n - k:
            vec[i] += 1
            for j in range(i + 1, k):
                vec[j] = vec[j - 1] + 1
            return True
    return False


def iter_combinations(n: int, k: int) -> Iterator[List[int]]:
    """
    All k-subsets of range(n) as ascending lists, lexicographic order.
    """
    if k < 0 or k > n:
        return
    vec = init_combinations(k)
    while True:
        yield vec[:]
        if not next_combination(vec, k, n):
            return


def nCr(n: int, r: int) -> int:
    if r < 0 or r > n:
        return 0
    r = min(r, n - r)
    num = 1
    den = 1
    for i in range(1, r + 1):
        num *= n - r + i
        den *= i
    return num // den


def count_square_selections(n_rows: int, n_cols: int, size: int) -> int:
    return nCr(n_rows, size) * nCr(n_cols, size)
