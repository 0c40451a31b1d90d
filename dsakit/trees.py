"""Binary tree algorithms: BST checks and repair, path sums, serialisation, boundaries."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from itertools import pairwise

NULL_MARKER = -1


@dataclass
class TreeNode:
    """A binary tree node."""

    data: int
    left: TreeNode | None = None
    right: TreeNode | None = None


def _inorder_nodes(root):
    stack = []
    node = root
    while stack or node is not None:
        while node is not None:
            stack.append(node)
            node = node.left
        node = stack.pop()
        yield node
        node = node.right


def _is_leaf(node):
    return node.left is None and node.right is None


def inorder(root):
    """Return the node values in in-order."""
    return [node.data for node in _inorder_nodes(root)]


def is_bst(root):
    """Return whether the tree is a binary search tree with no duplicate keys."""
    values = (node.data for node in _inorder_nodes(root))
    return all(a < b for a, b in pairwise(values))


def recover_bst(root):
    """Swap back, in place, the values of the two nodes exchanged in a BST."""
    first = middle = last = prev = None
    for node in _inorder_nodes(root):
        if prev is not None and node.data < prev.data:
            if first is None:
                first, middle = prev, node
            else:
                last = node
        prev = node
    if first is not None and last is not None:
        first.data, last.data = last.data, first.data
    elif first is not None and middle is not None:
        first.data, middle.data = middle.data, first.data


def count_k_sum_paths(root, k):
    """Return how many downward paths have node values summing to k."""
    seen = Counter({0: 1})

    def walk(node, running):
        if node is None:
            return 0
        running += node.data
        found = seen[running - k]
        seen[running] += 1
        found += walk(node.left, running) + walk(node.right, running)
        seen[running] -= 1
        return found

    return walk(root, 0)


def max_path_sum(root):
    """Return the largest sum of a path between any two nodes of a non-empty tree."""
    if root is None:
        raise ValueError("tree must not be empty")
    best = root.data

    def gain(node):
        nonlocal best
        if node is None:
            return 0
        left = max(0, gain(node.left))
        right = max(0, gain(node.right))
        best = max(best, left + right + node.data)
        return node.data + max(left, right)

    gain(root)
    return best


def serialize(root):
    """Return the tree as a preorder list with -1 marking each missing child.

    Node values must not equal the marker.
    """
    order = []

    def visit(node):
        if node is None:
            order.append(NULL_MARKER)
            return
        if node.data == NULL_MARKER:
            raise ValueError(f"node value {NULL_MARKER} clashes with the null marker")
        order.append(node.data)
        visit(node.left)
        visit(node.right)

    visit(root)
    return order


def deserialize(values):
    """Rebuild a tree from the list produced by serialize."""
    items = iter(values)

    def build():
        try:
            value = next(items)
        except StopIteration:
            raise ValueError("serialised tree is truncated") from None
        if value == NULL_MARKER:
            return None
        node = TreeNode(value)
        node.left = build()
        node.right = build()
        return node

    return build()


def _leaves(root):
    stack = [root]
    while stack:
        node = stack.pop()
        if _is_leaf(node):
            yield node.data
            continue
        if node.right is not None:
            stack.append(node.right)
        if node.left is not None:
            stack.append(node.left)


def boundary_traversal(root):
    """Return the root, left boundary, leaves and reversed right boundary."""
    if root is None:
        return []
    if _is_leaf(root):
        return [root.data]
    result = [root.data]

    node = root.left
    while node is not None and not _is_leaf(node):
        result.append(node.data)
        node = node.left if node.left is not None else node.right

    result.extend(_leaves(root))

    right_side = []
    node = root.right
    while node is not None and not _is_leaf(node):
        right_side.append(node.data)
        node = node.right if node.right is not None else node.left
    result.extend(reversed(right_side))
    return result