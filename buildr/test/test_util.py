"""
Tests for action helpers.
"""

import os
import shutil
import sys
import tempfile
import unittest
from unittest import TestCase

from buildr.errors import CommandError
from buildr.errors import FileSystemError
from buildr.errors import HelperError
from buildr.target import File
from buildr.util import *


class FileSystemTestCase(TestCase):

    def setUp(self):
        self.tmpdir = tempfile.mkdtemp()
        self.addCleanup(shutil.rmtree, self.tmpdir)

    def path(self, name):
        return os.path.join(self.tmpdir, name)

    def read(self, name):
        with open(self.path(name)) as f:
            return f.read()

    def test_mkdir(self):
        self.assertTrue(mkdir(self.path('d')))
        self.assertTrue(exists(self.path('d')))

    def test_mkdir_existing(self):
        mkdir(self.path('d'))
        with self.assertRaises(FileSystemError):
            mkdir(self.path('d'))

    def test_exists(self):
        self.assertFalse(exists(self.path('f')))
        fill_file(self.path('f'), lambda f: True)
        self.assertTrue(exists(self.path('f')))

    def test_fill_file(self):
        self.assertTrue(fill_file(self.path('f'),
                                  lambda f: f.write('one') or True))
        self.assertTrue(fill_file(self.path('f'),
                                  lambda f: f.write('two') or True))
        self.assertEqual(self.read('f'), 'two')

    def test_fill_file_result(self):
        self.assertFalse(fill_file(self.path('f'), lambda f: False))

    def test_append_file(self):
        fill_file(self.path('f'), lambda f: f.write('one\n') or True)
        append_file(self.path('f'), lambda f: f.write('two\n') or True)
        self.assertEqual(self.read('f'), 'one\ntwo\n')

    def test_create_in_missing_dir(self):
        with self.assertRaises(FileSystemError):
            create_if_absent(self.path(os.path.join('no', 'such')))

    def test_in_dir(self):
        prev = os.getcwd()
        seen = []

        self.assertTrue(in_dir(self.tmpdir,
                               lambda: seen.append(os.getcwd()) or True))
        self.assertEqual(seen, [os.path.realpath(self.tmpdir)])
        self.assertEqual(os.getcwd(), prev)

    def test_in_dir_restores_on_error(self):
        prev = os.getcwd()

        def fail():
            raise CommandError('boom')

        with self.assertRaises(CommandError):
            in_dir(self.tmpdir, fail)
        self.assertEqual(os.getcwd(), prev)

    def test_in_missing_dir(self):
        with self.assertRaises(FileSystemError):
            in_dir(self.path('none'), lambda: True)


class CommandTestCase(TestCase):

    def test_success(self):
        self.assertTrue(cmd(sys.executable, '-c', 'pass'))

    def test_exit_status(self):
        with self.assertRaises(CommandError) as cm:
            cmd(sys.executable, '-c', 'import sys; sys.exit(3)')
        self.assertEqual(cm.exception.returncode, 3)

    def test_not_found(self):
        with self.assertRaises(HelperError):
            cmd('buildr-no-such-command')

    def test_command_action(self):
        tmpdir = tempfile.mkdtemp()
        self.addCleanup(shutil.rmtree, tmpdir)
        out = os.path.join(tmpdir, 'out')

        t = File(out).make(command(sys.executable, '-c',
                                   'open({0!r}, "w").close()'.format(out)))

        self.assertTrue(t.build())
        self.assertTrue(exists(out))

    def test_command_failure_escapes_build(self):
        t = File('out').make(command(sys.executable, '-c', 'raise SystemExit(1)'))
        with self.assertRaises(CommandError):
            t.build()


if __name__ == '__main__':
    unittest.main()
