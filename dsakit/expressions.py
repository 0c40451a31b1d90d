"""Conversions between infix, prefix and postfix expressions with one-character operands."""

_PRIORITY = {"^": 3, "*": 2, "/": 2, "+": 1, "-": 1, "(": 0, ")": 0}
_OPERATORS = frozenset("+-*/%^")


def _shunt(chars, open_char, close_char, pops_equal):
    operators = []
    out = []
    for char in chars:
        if char not in _PRIORITY:
            out.append(char)
        elif char == open_char:
            operators.append("(")
        elif char == close_char:
            while operators and operators[-1] != "(":
                out.append(operators.pop())
            if not operators:
                raise ValueError("unbalanced parentheses")
            operators.pop()
        else:
            while operators and (
                _PRIORITY[operators[-1]] > _PRIORITY[char]
                or (pops_equal and _PRIORITY[operators[-1]] == _PRIORITY[char])
            ):
                out.append(operators.pop())
            operators.append(char)
    out.extend(reversed(operators))
    return "".join(out)


def infix_to_postfix(expression):
    """Convert an infix expression to postfix; operators of equal priority pop left to right."""
    return _shunt(expression, "(", ")", pops_equal=True)


def infix_to_prefix(expression):
    """Convert an infix expression to prefix."""
    return _shunt(reversed(expression), ")", "(", pops_equal=False)[::-1]


def _fold(chars, combine):
    stack = []
    for char in chars:
        if char not in _OPERATORS:
            stack.append(char)
            continue
        if len(stack) < 2:
            raise ValueError(f"operator {char!r} is missing an operand")
        first = stack.pop()
        second = stack.pop()
        stack.append(combine(first, second, char))
    if not stack:
        raise ValueError("empty expression")
    return stack[-1]


def prefix_to_infix(expression):
    """Convert a prefix expression to a fully parenthesised infix expression."""
    return _fold(reversed(expression), lambda a, b, op: f"({a}{op}{b})")


def prefix_to_postfix(expression):
    """Convert a prefix expression to postfix."""
    return _fold(reversed(expression), lambda a, b, op: f"{a}{b}{op}")


def postfix_to_prefix(expression):
    """Convert a postfix expression to prefix."""
    return _fold(expression, lambda right, left, op: f"{op}{left}{right}")


def postfix_to_infix(expression):
    """Convert a postfix expression to a fully parenthesised infix expression."""
    return _fold(expression, lambda right, left, op: f"({left}{op}{right})")