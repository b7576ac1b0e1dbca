import unittest

from hofs import preconds
from hofs.preconds import IllegalArgumentException


class PrecondsTest(unittest.TestCase):

    def test_check_argument(self):
        check = preconds.check_argument
        with self.assertRaisesRegex(IllegalArgumentException, r'^$'):
            check(False)
        with self.assertRaisesRegex(IllegalArgumentException, r'^Message$'):
            check(False, 'Message')
        with self.assertRaisesRegex(IllegalArgumentException, r'^X Y$'):
            check(False, 'X %s', 'Y')

        check(True)
        check(True, 'Message')
        check(True, 'Message: %s', 'Hello world')

    def test_check_callable(self):
        self.assertIs(preconds.check_callable(len, 'f'), len)
        with self.assertRaisesRegex(
                IllegalArgumentException, r'^expect callable f, not 1$'):
            preconds.check_callable(1, 'f')
        with self.assertRaisesRegex(
                IllegalArgumentException, r"^expect callable g, not None$"):
            preconds.check_callable(None, 'g')


if __name__ == '__main__':
    unittest.main()
