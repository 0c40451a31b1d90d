"""Classic data-structure and algorithm routines in plain Python: primes, bits,
searching, arrays, linked lists, caches, trees, stacks, sorting, expressions,
strings, sliding windows, backtracking and puzzles."""

__version__ = "0.1.0"