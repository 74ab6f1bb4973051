import unittest

from avl_set.balance import balance, rotate_left, rotate_right
from avl_set.operations import to_list
from avl_set.tree import EMPTY, diff, height, make_node, singleton


def _right_chain(*values):
    t = EMPTY
    for v in reversed(values):
        t = make_node(v, EMPTY, t)
    return t


def _left_chain(*values):
    t = EMPTY
    for v in values:
        t = make_node(v, t, EMPTY)
    return t


class TestRotateLeft(unittest.TestCase):
    def test_right_child_becomes_root(self):
        t = _right_chain(1, 2, 3)
        rotated = rotate_left(t)
        self.assertEqual(rotated, make_node(2, singleton(1), singleton(3)))

    def test_old_root_inherits_pivot_left_subtree(self):
        t = make_node(2, singleton(1), make_node(4, singleton(3), singleton(5)))
        rotated = rotate_left(t)
        self.assertEqual(rotated.head, 4)
        self.assertEqual(rotated.left, make_node(2, singleton(1), singleton(3)))
        self.assertEqual(rotated.right, singleton(5))

    def test_preserves_in_order_sequence(self):
        t = make_node(2, singleton(1), make_node(4, singleton(3), singleton(5)))
        self.assertEqual(to_list(rotate_left(t)), [1, 2, 3, 4, 5])

    def test_reuses_untouched_subtrees(self):
        right_right = singleton(5)
        t = make_node(2, singleton(1), make_node(4, singleton(3), right_right))
        self.assertIs(rotate_left(t).right, right_right)

    def test_does_not_modify_input(self):
        t = _right_chain(1, 2, 3)
        rotate_left(t)
        self.assertEqual(t, _right_chain(1, 2, 3))

    def test_without_right_child_raises(self):
        with self.assertRaises(AssertionError):
            rotate_left(singleton(1))


class TestRotateRight(unittest.TestCase):
    def test_left_child_becomes_root(self):
        t = _left_chain(1, 2, 3)
        rotated = rotate_right(t)
        self.assertEqual(rotated, make_node(2, singleton(1), singleton(3)))

    def test_old_root_inherits_pivot_right_subtree(self):
        t = make_node(4, make_node(2, singleton(1), singleton(3)), singleton(5))
        rotated = rotate_right(t)
        self.assertEqual(rotated.head, 2)
        self.assertEqual(rotated.left, singleton(1))
        self.assertEqual(rotated.right, make_node(4, singleton(3), singleton(5)))

    def test_preserves_in_order_sequence(self):
        t = make_node(4, make_node(2, singleton(1), singleton(3)), singleton(5))
        self.assertEqual(to_list(rotate_right(t)), [1, 2, 3, 4, 5])

    def test_rotations_are_inverse(self):
        t = make_node(4, make_node(2, singleton(1), singleton(3)), singleton(5))
        self.assertEqual(rotate_left(rotate_right(t)), t)

    def test_without_left_child_raises(self):
        with self.assertRaises(AssertionError):
            rotate_right(singleton(1))


class TestBalance(unittest.TestCase):
    def test_empty_stays_empty(self):
        self.assertIs(balance(EMPTY), EMPTY)

    def test_balanced_node_returned_unchanged(self):
        t = make_node(2, singleton(1), singleton(3))
        self.assertIs(balance(t), t)

    def test_slightly_heavy_node_returned_unchanged(self):
        t = make_node(1, EMPTY, singleton(2))
        self.assertEqual(diff(t), 1)
        self.assertIs(balance(t), t)

    def test_left_left_case_rotates_right(self):
        t = _left_chain(1, 2, 3)
        self.assertEqual(diff(t), -2)
        self.assertEqual(balance(t), make_node(2, singleton(1), singleton(3)))

    def test_left_right_case_double_rotates(self):
        t = make_node(3, make_node(1, EMPTY, singleton(2)), EMPTY)
        self.assertEqual(diff(t), -2)
        self.assertEqual(diff(t.left), 1)
        self.assertEqual(balance(t), make_node(2, singleton(1), singleton(3)))

    def test_right_right_case_rotates_left(self):
        t = _right_chain(1, 2, 3)
        self.assertEqual(diff(t), 2)
        self.assertEqual(balance(t), make_node(2, singleton(1), singleton(3)))

    def test_right_left_case_double_rotates(self):
        t = make_node(1, EMPTY, make_node(3, singleton(2), EMPTY))
        self.assertEqual(diff(t), 2)
        self.assertEqual(diff(t.right), -1)
        self.assertEqual(balance(t), make_node(2, singleton(1), singleton(3)))

    def test_left_heavy_with_balanced_child_single_rotation(self):
        left = make_node(2, singleton(1), singleton(3))
        t = make_node(4, left, EMPTY)
        balanced = balance(t)
        self.assertEqual(balanced.head, 2)
        self.assertEqual(to_list(balanced), [1, 2, 3, 4])
        self.assertLessEqual(abs(diff(balanced)), 1)

    def test_rebalanced_heights_are_consistent(self):
        t = make_node(
            5,
            make_node(3, make_node(2, singleton(1), EMPTY), singleton(4)),
            singleton(6),
        )
        self.assertEqual(diff(t), -2)
        balanced = balance(t)
        self.assertEqual(balanced.head, 3)
        self.assertEqual(height(balanced), 3)
        self.assertEqual(to_list(balanced), [1, 2, 3, 4, 5, 6])


if __name__ == '__main__':
    unittest.main()
