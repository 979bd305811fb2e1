"""
Balance primitives for the left-leaning Red-Black Tree.

Every function takes the root of a subtree and returns the (possibly new)
root of that subtree. None stands for an absent child and is always black.
"""

from llrb.models.sortedcontainers.node import Color, Node


def is_red(node: Node | None) -> bool:
    """Return True if node is present and red."""
    if node is None:
        return False
    return node.color == Color.RED


def _toggle(node: Node) -> None:
    node.color = Color.BLACK if node.color == Color.RED else Color.RED


def flip_color(node: Node) -> None:
    """Toggle the color of node and both of its children."""
    _toggle(node)
    _toggle(node.left)
    _toggle(node.right)


def rotate_left(node: Node) -> Node:
    """
    Promote node's right child into node's place.

    The promoted child inherits node's color; node becomes red.
    """
    x = node.right
    node.right = x.left
    x.left = node
    x.color = node.color
    node.color = Color.RED
    return x


def rotate_right(node: Node) -> Node:
    """Promote node's left child into node's place."""
    x = node.left
    node.left = x.right
    x.right = node
    x.color = node.color
    node.color = Color.RED
    return x


def move_red_left(node: Node) -> Node:
    """
    Borrow a red link from the right so descent can continue left.

    Expects node.left and node.left.left to be black.
    """
    flip_color(node)
    if is_red(node.right.left):
        node.right = rotate_right(node.right)
        node = rotate_left(node)
        flip_color(node)

        # Do not leave a right-leaning red link behind
        if is_red(node.right.right):
            node.right = rotate_left(node.right)
    return node


def move_red_right(node: Node) -> Node:
    """Borrow a red link from the left so descent can continue right."""
    flip_color(node)
    if is_red(node.left.left):
        node = rotate_right(node)
        flip_color(node)
    return node


def fix_up(node: Node) -> Node:
    """Restore the LLRB invariants at node after a change below it."""
    if is_red(node.right):
        # Right-leaning red link
        node = rotate_left(node)

    if is_red(node.left) and is_red(node.left.left):
        # Two reds in a row on the left spine
        node = rotate_right(node)

    if is_red(node.left) and is_red(node.right):
        # Split the 4-node
        flip_color(node)

    if node.left is not None and is_red(node.left.right) and not is_red(node.left.left):
        node.left = rotate_left(node.left)
        if is_red(node.left):
            node = rotate_right(node)

    return node


def delete_minimum(node: Node) -> Node | None:
    """
    Remove the smallest node under node.

    Returns:
        The new subtree root, or None if node itself was the minimum.
    """
    if node.left is None:
        return None

    if not is_red(node.left) and not is_red(node.left.left):
        node = move_red_left(node)

    node.left = delete_minimum(node.left)

    return fix_up(node)


def minimum_node(node: Node | None) -> Node | None:
    """Return the leftmost node under node."""
    if node is None:
        return None
    while node.left is not None:
        node = node.left
    return node


def maximum_node(node: Node | None) -> Node | None:
    """Return the rightmost node under node."""
    if node is None:
        return None
    while node.right is not None:
        node = node.right
    return node
