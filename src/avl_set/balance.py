from .tree import EMPTY, Node, Tree, diff, make_node


def rotate_left(t: Node) -> Node:
    pivot = t.right
    assert pivot is not EMPTY, "rotate_left needs a right child"

    return make_node(pivot.head, make_node(t.head, t.left, pivot.left), pivot.right)


def rotate_right(t: Node) -> Node:
    pivot = t.left
    assert pivot is not EMPTY, "rotate_right needs a left child"

    return make_node(pivot.head, pivot.left, make_node(t.head, pivot.right, t.right))


def balance(t: Tree) -> Tree:
    """Restore the AVL invariant at the root of ``t``.

    Children must already be balanced and the root may be off by at most one
    level, which is what a single insert below it can cause.
    """
    if t is EMPTY:
        return t

    d = diff(t)

    if d == -2 and diff(t.left) == 1:
        return rotate_right(make_node(t.head, rotate_left(t.left), t.right))

    if d < -1:
        return rotate_right(t)

    if d == 2 and diff(t.right) == -1:
        return rotate_left(make_node(t.head, t.left, rotate_right(t.right)))

    if d > 1:
        return rotate_left(t)

    return t
