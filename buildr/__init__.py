"""Embeddable build orchestration, a programmatic alternative to a Makefile.

A host program describes buildable units, called targets, and wires them into
a dependency graph. Building a target first builds everything it depends on,
then compares modification times of the backing files and runs the target's
action only if something has changed since the target was last produced.

Here is a high-level overview of the modules of the `buildr` package:

  * `buildr.target`: Target types backed by explicit file lists or glob
    patterns, and the incremental build algorithm shared by all of them.

  * `buildr.util`: Filesystem and shell command helpers to be used inside
    target actions.

  * `buildr.scaffold`: Merges newly generated routines into an existing
    source template, keeping the ones already present.

  * `buildr.main`: Command line entry point for build scripts.
"""

from buildr.errors import BuildrError
from buildr.target import Target
from buildr.target import FileTarget
from buildr.target import GlobTarget
from buildr.target import File
from buildr.target import Files
from buildr.target import Glob


__license__ = "MIT"
__version__ = "0.1"
