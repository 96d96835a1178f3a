"""Binary trees and the classic queries on them."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from itertools import pairwise
from typing import Iterable, Iterator, Optional


@dataclass(eq=False)
class TreeNode:
    """One node of a binary tree."""

    val: int = 0
    left: Optional[TreeNode] = None
    right: Optional[TreeNode] = None


def tree_from_level_order(values: Iterable[Optional[int]]) -> Optional[TreeNode]:
    """Build a tree from level-order values, with None for a missing child."""
    items = iter(values)
    first = next(items, None)
    if first is None:
        return None
    root = TreeNode(first)
    queue: deque[TreeNode] = deque([root])

    def make(value: Optional[int]) -> Optional[TreeNode]:
        if value is None:
            return None
        node = TreeNode(value)
        queue.append(node)
        return node

    while queue:
        node = queue.popleft()
        node.left = make(next(items, None))
        node.right = make(next(items, None))
    return root


def _inorder(root: Optional[TreeNode]) -> Iterator[TreeNode]:
    stack: list[TreeNode] = []
    cur = root
    while stack or cur is not None:
        if cur is not None:
            stack.append(cur)
            cur = cur.left
        else:
            node = stack.pop()
            yield node
            cur = node.right


def inorder_traversal(root: Optional[TreeNode]) -> list[int]:
    """Return the values of the tree in in-order."""
    return [node.val for node in _inorder(root)]


def max_depth(root: Optional[TreeNode]) -> int:
    """Number of nodes on the longest root-to-leaf path."""
    if root is None:
        return 0
    return 1 + max(max_depth(root.left), max_depth(root.right))


def min_depth(root: Optional[TreeNode]) -> int:
    """Number of nodes on the shortest root-to-leaf path."""
    if root is None:
        return 0
    left = min_depth(root.left)
    right = min_depth(root.right)
    if not left and not right:
        return 1
    if not left:
        return right + 1
    if not right:
        return left + 1
    return min(left, right) + 1


def has_path_sum(root: Optional[TreeNode], total: int) -> bool:
    """Whether some root-to-leaf path adds up to ``total``."""
    if root is None:
        return False
    if root.left is None and root.right is None:
        return root.val == total
    rest = total - root.val
    return has_path_sum(root.left, rest) or has_path_sum(root.right, rest)


def is_same_tree(p: Optional[TreeNode], q: Optional[TreeNode]) -> bool:
    """Whether two trees have the same shape and values."""
    if p is None and q is None:
        return True
    if p is None or q is None or p.val != q.val:
        return False
    return is_same_tree(p.left, q.left) and is_same_tree(p.right, q.right)


def is_valid_bst(root: Optional[TreeNode]) -> bool:
    """Whether the in-order values are strictly increasing."""
    return all(a.val < b.val for a, b in pairwise(_inorder(root)))


def invert_tree(root: Optional[TreeNode]) -> Optional[TreeNode]:
    """Mirror the tree in place and return its root."""
    if root is not None:
        root.left, root.right = root.right, root.left
        invert_tree(root.left)
        invert_tree(root.right)
    return root


def _bst_path(root: Optional[TreeNode], target: TreeNode) -> list[TreeNode]:
    path: list[TreeNode] = []
    node = root
    while node is not None:
        path.append(node)
        if node.val == target.val:
            return path
        node = node.right if node.val < target.val else node.left
    raise ValueError(f"value {target.val} is not in the tree")


def lowest_common_ancestor(
    root: Optional[TreeNode], p: TreeNode, q: TreeNode
) -> TreeNode:
    """Lowest common ancestor of ``p`` and ``q`` in a binary search tree."""
    if root is None:
        raise ValueError("tree is empty")
    ancestor = root
    for a, b in zip(_bst_path(root, p), _bst_path(root, q)):
        if a.val == b.val:
            ancestor = a
    return ancestor