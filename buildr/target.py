"""
Build targets and the incremental build algorithm.

A target is backed by a set of files. Building a target first builds each of
its dependencies, in the order they were registered, and then checks whether
any of them has been modified after the newest of the target's own files. If
so (or if the target has no dependencies at all), the target's action is
invoked with the dependencies as arguments.

Files that cannot be inspected, and glob patterns matching nothing, are
always considered modified: a doubt is resolved by rebuilding.
"""

__all__ = [
    "EPOCH",
    "SHORT_NAME",
    "short",
    "DependencySet",
    "Target",
    "FileTarget",
    "GlobTarget",
    "File",
    "Files",
    "Glob",
]


import abc
import glob
import os

from collections import OrderedDict

from buildr.errors import BuildrError
from buildr.errors import DependencyCycleError

import logging
logger = logging.getLogger(__name__)


EPOCH = 0.0

SHORT_NAME = 50


def short(name):
    """Truncates a target name for display."""
    if len(name) <= SHORT_NAME:
        return name
    return name[:SHORT_NAME - 3] + '...'


def _noop(*dependencies):
    return True


class DependencySet(object):
    """Direct dependencies of a target, keyed by their names.

    Iteration follows registration order. Registering a target under a name
    that is already taken replaces the old one in place.
    """

    def __init__(self):
        super(DependencySet, self).__init__()
        self._targets = OrderedDict()  # {name: target}

    def add(self, target):
        name = target.name
        if name in self._targets and self._targets[name] is not target:
            logger.warning("Dependency `%s` registered twice, "
                           "the latter replaces the former", short(name))
        self._targets[name] = target

    def get(self, name):
        return self._targets.get(name)

    def __contains__(self, name):
        return name in self._targets

    def __iter__(self):
        return iter(self._targets.values())

    def __len__(self):
        return len(self._targets)

    def __repr__(self):
        return '%s(%r)' % (type(self).__name__, list(self._targets))


class Target(object, metaclass=abc.ABCMeta):
    """Base class for buildable units.

    Subclasses describe their backing resources by implementing `name`,
    `mod_time` and `stale_since`; the build logic is common to all of them.
    """

    def __init__(self):
        super(Target, self).__init__()
        self._deps = DependencySet()
        self._action = _noop

    @property
    @abc.abstractmethod
    def name(self):
        """Display name, also used as a key in dependency tables."""

    @abc.abstractmethod
    def mod_time(self):
        """The newest modification time of the backing files.

        EPOCH if there are no backing files or some of them can't be
        inspected.
        """

    @abc.abstractmethod
    def stale_since(self, tm):
        """Whether any of the backing files was modified after 'tm'."""

    @property
    def dependencies(self):
        return tuple(self._deps)

    def depends(self, *targets):
        for target in targets:
            self._deps.add(target)
        return self

    def make(self, action):
        """Sets a function to be called with the direct dependencies
        whenever the target needs to be rebuilt. It must return a true value
        on success."""
        if not callable(action):
            raise TypeError("Action must be callable, got {0!r}"
                            .format(action))
        self._action = action
        return self

    def build(self):
        """Builds the dependency closure of the target, running the actions
        of those which are out of date.

        Returns True on success. Stops at the first failed action.
        """
        return self._build([])

    def _build(self, chain):
        if self in chain:
            names = [target.name for target in chain[chain.index(self):]]
            logger.error("Dependency cycle at target `%s`", short(self.name))
            raise DependencyCycleError(names + [self.name])

        chain.append(self)
        try:
            return self._build_self(chain)
        finally:
            chain.pop()

    def _build_self(self, chain):
        tm = self.mod_time()
        deps = self.dependencies
        modified = not deps

        for dep in deps:
            if not dep._build(chain):
                return False
            if dep.stale_since(tm):
                logger.debug("`%s` is newer than `%s`",
                             short(dep.name), short(self.name))
                modified = True

        if not modified:
            logger.debug("Target `%s` is up to date", short(self.name))
            return True

        logger.info("Make target `%s`...", short(self.name))
        try:
            ok = bool(self._action(*deps))
        except BuildrError as e:
            logger.error("Failed to make target `%s`", short(self.name))
            if e.target is None:
                e.target = self.name
            raise

        if ok:
            logger.info("Done `%s`", short(self.name))
        else:
            logger.error("Failed to make target `%s`", short(self.name))
        return ok

    def build_target(self, name):
        """Builds a direct dependency given its name."""
        target = self._deps.get(name)
        if target is None:
            logger.error("Cannot find target `%s`", short(name))
            return False
        return target.build()

    def __repr__(self):
        return '%s(%r)' % (type(self).__name__, self.name)


class FilesTargetBase(Target):
    """Computes timestamps over a list of files returned by `_paths`."""

    @abc.abstractmethod
    def _paths(self):
        """Resolves backing files. May raise OSError."""

    def mod_time(self):
        try:
            paths = self._paths()
        except OSError as e:
            logger.warning("%s", e)
            return EPOCH

        tm = EPOCH
        for path in paths:
            try:
                tm = max(tm, os.stat(path).st_mtime)
            except OSError as e:
                logger.warning("%s", e)
                return EPOCH
        return tm

    def stale_since(self, tm):
        try:
            paths = self._paths()
        except OSError as e:
            logger.warning("%s", e)
            return True

        if not paths:
            return True

        for path in paths:
            try:
                if os.stat(path).st_mtime > tm:
                    return True
            except OSError as e:
                logger.warning("%s", e)
                return True
        return False


class FileTarget(FilesTargetBase):
    """A target backed by an explicit list of files."""

    def __init__(self, *paths):
        super(FileTarget, self).__init__()
        if not paths:
            raise ValueError('At least one path is required')
        self._files = tuple(paths)

    @property
    def files(self):
        return self._files

    @property
    def name(self):
        return ' '.join(self._files)

    def _paths(self):
        return self._files


class GlobTarget(FilesTargetBase):
    """A target backed by files matching a glob pattern.

    The pattern is expanded anew each time it is checked, so files created by
    a build are taken into account. Recursive `**` patterns are supported.
    Wildcards match hidden files too, so `*.stamp` finds `.foo.stamp`.
    """

    def __init__(self, mask):
        super(GlobTarget, self).__init__()
        self._mask = mask

    @property
    def mask(self):
        return self._mask

    @property
    def name(self):
        return self._mask

    def _paths(self):
        return sorted(glob.glob(self._mask, recursive=True,
                                include_hidden=True))


def File(path):
    return FileTarget(path)

def Files(*paths):
    return FileTarget(*paths)

def Glob(mask):
    return GlobTarget(mask)
