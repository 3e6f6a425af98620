"""
Filesystem and shell command helpers for use inside target actions.

These never return a failure silently: anything that goes wrong raises a
`HelperError`, which is not handled by the build engine and reaches whoever
called `build()`.
"""

__all__ = [
    "exists",
    "mkdir",
    "create_if_absent",
    "fill_file",
    "append_file",
    "in_dir",
    "cmd",
    "command",
]


import os
import subprocess

from buildr.errors import CommandError
from buildr.errors import FileSystemError

import logging
logger = logging.getLogger(__name__)


def exists(path):
    return os.path.exists(path)


def mkdir(path):
    try:
        os.mkdir(path)
    except OSError as e:
        raise FileSystemError('Cannot create directory %s: %s', path,
                              e.strerror or e)
    return True


def _open(path, mode):
    try:
        return open(path, mode)
    except OSError as e:
        raise FileSystemError('Cannot open %s: %s', path, e.strerror or e)


def create_if_absent(path):
    """Opens a file for writing, creating it if necessary.

    An existing file is truncated.
    """
    return _open(path, 'w')


def fill_file(path, fill):
    """Calls 'fill' with a file object opened for writing at 'path'."""
    with create_if_absent(path) as f:
        return fill(f)


def append_file(path, fill):
    """Same as `fill_file`, but keeps the existing contents."""
    with _open(path, 'a') as f:
        return fill(f)


def in_dir(path, func):
    """Runs 'func' inside 'path' directory, then returns back."""
    prev = os.getcwd()
    try:
        os.chdir(path)
    except OSError as e:
        raise FileSystemError('Cannot change directory to %s: %s', path,
                              e.strerror or e)
    try:
        return func()
    finally:
        os.chdir(prev)


def cmd(*argv, **kwargs):
    """Runs an external command, waiting for it to finish.

    Keyword arguments are passed to `subprocess.run`.
    """
    cmdline = ' '.join(argv)
    logger.debug("Running %s", cmdline)
    try:
        subprocess.run(argv, check=True, **kwargs)
    except subprocess.CalledProcessError as e:
        raise CommandError('Command `%(cmdline)s` exited with status '
                           '%(returncode)d', cmdline=cmdline,
                           returncode=e.returncode)
    except OSError as e:
        raise CommandError('Cannot run `%s`: %s', cmdline, e.strerror or e)
    return True


def command(*argv, **kwargs):
    """Makes a target action which runs a command."""
    def action(*dependencies):
        return cmd(*argv, **kwargs)
    return action
