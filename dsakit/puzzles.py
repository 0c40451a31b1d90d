"""Harder backtracking puzzles: operator insertion, N-Queens and Sudoku."""


def add_operators(num, target):
    """Return every way to put '+', '-' or '*' between the digits of num to reach target.

    Operands never have leading zeros; multiplication binds tighter than addition.
    """
    if not num:
        return []
    if not num.isdigit():
        raise ValueError("num must consist of decimal digits")
    results = []

    def search(index, expression, value, last):
        if index == len(num):
            if value == target:
                results.append(expression)
            return
        for end in range(index + 1, len(num) + 1):
            if end > index + 1 and num[index] == "0":
                break
            text = num[index:end]
            operand = int(text)
            if index == 0:
                search(end, text, operand, operand)
                continue
            search(end, f"{expression}+{text}", value + operand, operand)
            search(end, f"{expression}-{text}", value - operand, -operand)
            search(
                end,
                f"{expression}*{text}",
                value - last + last * operand,
                last * operand,
            )

    search(0, "", 0, 0)
    return results


def solve_n_queens(n):
    """Return every placement of n non-attacking queens as rows of 'Q' and '.'."""
    if n < 0:
        raise ValueError("n must be non-negative")
    results = []
    board = [["."] * n for _ in range(n)]
    columns, diagonals, anti_diagonals = set(), set(), set()

    def place(row):
        if row == n:
            results.append(["".join(line) for line in board])
            return
        for col in range(n):
            if col in columns or row - col in diagonals or row + col in anti_diagonals:
                continue
            board[row][col] = "Q"
            columns.add(col)
            diagonals.add(row - col)
            anti_diagonals.add(row + col)
            place(row + 1)
            board[row][col] = "."
            columns.discard(col)
            diagonals.discard(row - col)
            anti_diagonals.discard(row + col)

    place(0)
    return results


_DIGITS = "123456789"


def _box(row, col):
    return (row // 3) * 3 + col // 3


def solve_sudoku(board):
    """Return a solved copy of a 9x9 Sudoku grid whose empty cells are '.'.

    Raises ValueError if the grid is malformed or has no solution.
    """
    grid = [list(row) for row in board]
    if len(grid) != 9 or any(len(row) != 9 for row in grid):
        raise ValueError("board must be 9 rows of 9 cells")
    rows = [set() for _ in range(9)]
    cols = [set() for _ in range(9)]
    boxes = [set() for _ in range(9)]
    empty = []
    for r, row in enumerate(grid):
        for c, cell in enumerate(row):
            if cell == ".":
                empty.append((r, c))
            elif cell in _DIGITS:
                rows[r].add(cell)
                cols[c].add(cell)
                boxes[_box(r, c)].add(cell)
            else:
                raise ValueError(f"invalid cell {cell!r}")

    def fill(position):
        if position == len(empty):
            return True
        r, c = empty[position]
        b = _box(r, c)
        for digit in _DIGITS:
            if digit in rows[r] or digit in cols[c] or digit in boxes[b]:
                continue
            grid[r][c] = digit
            rows[r].add(digit)
            cols[c].add(digit)
            boxes[b].add(digit)
            if fill(position + 1):
                return True
            grid[r][c] = "."
            rows[r].discard(digit)
            cols[c].discard(digit)
            boxes[b].discard(digit)
        return False

    if not fill(0):
        raise ValueError("puzzle has no solution")
    return grid