"""Number-theoretic and dynamic-programming routines."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

__all__ = [
    "josephus",
    "fibonacci",
    "nth_root",
    "pascal_triangle",
    "primes_up_to",
    "power_mod",
    "matrix_chain_order",
    "knapsack",
]

MOD = 1_000_000_007
_ROOT_EPS = 1e-6

_Matrix = tuple[tuple[int, int], tuple[int, int]]
_IDENTITY: _Matrix = ((1, 0), (0, 1))
_FIB_STEP: _Matrix = ((1, 1), (1, 0))


def josephus(n: int, k: int) -> int:
    """1-based position of the survivor when every ``k``-th of ``n`` people leaves."""
    if n < 1:
        raise ValueError("josephus() needs at least one person")
    if k < 1:
        raise ValueError("josephus() needs a step of at least one")
    survivor = 1
    for size in range(2, n + 1):
        survivor = (survivor + k - 1) % size + 1
    return survivor


def _mat_mul(a: _Matrix, b: _Matrix) -> _Matrix:
    return (
        (
            (a[0][0] * b[0][0] + a[0][1] * b[1][0]) % MOD,
            (a[0][0] * b[0][1] + a[0][1] * b[1][1]) % MOD,
        ),
        (
            (a[1][0] * b[0][0] + a[1][1] * b[1][0]) % MOD,
            (a[1][0] * b[0][1] + a[1][1] * b[1][1]) % MOD,
        ),
    )


def _mat_pow(matrix: _Matrix, exponent: int) -> _Matrix:
    result = _IDENTITY
    while exponent:
        if exponent & 1:
            result = _mat_mul(result, matrix)
        matrix = _mat_mul(matrix, matrix)
        exponent >>= 1
    return result


def fibonacci(n: int) -> int:
    """The ``n``-th Fibonacci number modulo 1e9+7, by matrix exponentiation."""
    if n < 0:
        raise ValueError("fibonacci() is defined for non-negative n only")
    if n == 0:
        return 0
    return _mat_pow(_FIB_STEP, n - 1)[0][0]


def nth_root(n: int, m: float) -> float:
    """Approximate the ``n``-th root of ``m`` by bisection on ``[1, m]``.

    The lower end of the final interval is returned, so the result is within
    1e-6 below the true root. For ``m <= 1`` the search interval is empty and
    1.0 comes back.
    """
    if n < 1:
        raise ValueError("nth_root() needs a root degree of at least one")
    low, high = 1.0, float(m)
    while high - low > _ROOT_EPS:
        mid = (low + high) / 2.0
        if mid**n < m:
            low = mid
        else:
            high = mid
    return low


def pascal_triangle(rows: int) -> list[list[int]]:
    """The first ``rows`` rows of Pascal's triangle."""
    triangle: list[list[int]] = []
    for line in range(1, rows + 1):
        row: list[int] = []
        coefficient = 1
        for i in range(1, line + 1):
            row.append(coefficient)
            coefficient = coefficient * (line - i) // i
        triangle.append(row)
    return triangle


def primes_up_to(n: int) -> list[int]:
    """All primes ``p <= n``, by the sieve of Eratosthenes."""
    if n < 2:
        return []
    is_prime = bytearray([1]) * (n + 1)
    is_prime[0] = is_prime[1] = 0
    p = 2
    while p * p <= n:
        if is_prime[p]:
            is_prime[p * p :: p] = bytes(len(range(p * p, n + 1, p)))
        p += 1
    return [number for number, flag in enumerate(is_prime) if flag]


def power_mod(base: int, exponent: int) -> int:
    """``base ** exponent`` modulo 1e9+7; a non-positive exponent gives 1."""
    if exponent <= 0:
        return 1
    return pow(base, exponent, MOD)


def matrix_chain_order(dims: Sequence[int]) -> int:
    """Fewest scalar multiplications to multiply a chain of matrices.

    Matrix ``i`` has shape ``dims[i] x dims[i + 1]``.
    """
    count = len(dims) - 1
    if count < 1:
        raise ValueError("matrix_chain_order() needs at least two dimensions")
    cost = [[0] * count for _ in range(count)]
    for length in range(2, count + 1):
        for i in range(count - length + 1):
            j = i + length - 1
            cost[i][j] = min(
                cost[i][k] + cost[k + 1][j] + dims[i] * dims[k + 1] * dims[j + 1]
                for k in range(i, j)
            )
    return cost[0][count - 1]


def knapsack(weights: Iterable[int], values: Iterable[int], capacity: int) -> int:
    """Greatest total value of items whose weights fit in ``capacity`` (0/1 knapsack)."""
    weight_list = list(weights)
    value_list = list(values)
    if len(weight_list) != len(value_list):
        raise ValueError("knapsack() needs one value per weight")
    if capacity < 0:
        raise ValueError("knapsack() needs a non-negative capacity")
    if any(weight < 0 for weight in weight_list):
        raise ValueError("knapsack() needs non-negative weights")
    best = [0] * (capacity + 1)
    for weight, value in zip(weight_list, value_list):
        for room in range(capacity, weight - 1, -1):
            best[room] = max(best[room], best[room - weight] + value)
    return best[capacity]