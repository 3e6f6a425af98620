"""
Command line entry point for build scripts.

A build script wires its targets and hands the root one over:

    from buildr import File, Glob
    from buildr.main import main
    from buildr.util import command

    app = File('app').depends(Glob('src/*.c')).make(command('make', 'app'))

    if __name__ == '__main__':
        main(app)

This is the only place where a failure terminates the process.
"""

import argparse
import logging
import os
import sys

from buildr.errors import BuildrError
from buildr.logs import init_logging
from buildr.target import short


def make_argparser(prog=None):
    argparser = argparse.ArgumentParser(prog,
            description='Build the given targets, or everything if none.')
    argparser.add_argument('targets', nargs='*', metavar='TARGET',
            help='name of a direct dependency of the root target')

    verbosity = argparser.add_mutually_exclusive_group()
    verbosity.add_argument('-v', '--verbose', action='store_true',
            help='explain why each target is rebuilt')
    verbosity.add_argument('-q', '--quiet', action='store_true',
            help='report problems only')

    argparser.add_argument('--log-file', metavar='FILE',
            help='write log messages to FILE instead of stderr')
    argparser.add_argument('-C', '--directory', metavar='DIR',
            help='change to DIR before building')
    return argparser


def build(root, names=()):
    """Builds the named direct dependencies of 'root', or 'root' itself.

    Returns the name of the first target which failed, or None.
    """
    if not names:
        return None if root.build() else root.name

    for name in names:
        if not root.build_target(name):
            return name
    return None


def main(root, argv=None):
    args = make_argparser().parse_args(argv)

    level = logging.INFO
    if args.verbose:
        level = logging.DEBUG
    elif args.quiet:
        level = logging.WARNING
    init_logging(args.log_file or sys.stderr, level=level)

    try:
        if args.directory:
            os.chdir(args.directory)
        failed = build(root, args.targets)
    except BuildrError as e:
        if e.target is not None:
            print('Build failed: `{0}`: {1}'.format(short(e.target), e),
                  file=sys.stderr)
        else:
            print('Error: {0}'.format(e), file=sys.stderr)
        sys.exit(1)
    except OSError as e:
        print('Error: {0}'.format(e), file=sys.stderr)
        sys.exit(1)

    if failed is not None:
        print('Build failed: `{0}`'.format(short(failed)), file=sys.stderr)
        sys.exit(1)

    sys.exit(0)
