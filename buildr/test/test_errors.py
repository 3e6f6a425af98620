"""
Tests for error types.
"""

import sys
import unittest
from unittest import TestCase

from buildr.errors import *
from buildr.util import cmd


class BuildrErrorTestCase(TestCase):

    def test_plain(self):
        e = BuildrError('nothing to format %s')
        self.assertEqual(str(e), 'nothing to format %s')
        self.assertEqual(repr(e), "BuildrError('nothing to format %s')")

    def test_args(self):
        e = FileSystemError('Cannot open %s: %s', 'a.c', 'denied')
        self.assertEqual(str(e), 'Cannot open a.c: denied')
        self.assertEqual(repr(e), "FileSystemError('Cannot open %s: %s', "
                                  "*('a.c', 'denied'))")

    def test_kwargs(self):
        e = BuildrError('%(name)s is %(what)s', name='a.c', what='missing')
        self.assertEqual(str(e), 'a.c is missing')
        self.assertTrue(repr(e).startswith(
            "BuildrError('%(name)s is %(what)s', **{"))

    def test_args_and_kwargs(self):
        with self.assertRaises(TypeError):
            BuildrError('%s', 1, name=2)

    def test_msg_must_be_string(self):
        with self.assertRaises(TypeError):
            BuildrError(42)

    def test_no_target_by_default(self):
        self.assertIsNone(BuildrError('x').target)

    def test_cycle_message(self):
        e = DependencyCycleError(['a', 'b', 'a'])
        self.assertEqual(e.chain, ('a', 'b', 'a'))
        self.assertEqual(str(e), 'Dependency cycle: a -> b -> a')


class CommandErrorTestCase(TestCase):

    def test_exit_status_message(self):
        with self.assertRaises(CommandError) as cm:
            cmd(sys.executable, '-c', 'raise SystemExit(4)')

        e = cm.exception
        self.assertEqual(e.returncode, 4)
        self.assertEqual(str(e), 'Command `{0} -c raise SystemExit(4)` '
                                 'exited with status 4'.format(sys.executable))

    def test_positional_has_no_returncode(self):
        e = CommandError('Cannot run `%s`: %s', 'cc', 'not found')
        self.assertIsNone(e.returncode)
        self.assertEqual(str(e), 'Cannot run `cc`: not found')


if __name__ == '__main__':
    unittest.main()
