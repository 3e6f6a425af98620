"""
Exceptions for error handling.
"""

__all__ = [
    "BuildrError",
    "DependencyCycleError",
    "HelperError",
    "FileSystemError",
    "CommandError",
    "ScaffoldError",
]


class BuildrError(Exception):
    """Base class for errors providing a logging-like constructor."""

    target = None  # name of the target whose action failed

    def __init__(self, msg='', *args, **kwargs):
        if not isinstance(msg, str):
            raise TypeError("'msg' argument must be a string")
        if args and kwargs:
            raise TypeError('At most one of args or kwargs can be specified '
                            'at once, not both of them')

        super(BuildrError, self).__init__(msg, args or kwargs or None)

    def __str__(self):
        msg, fmt_args = self.args
        return msg % fmt_args if fmt_args else msg

    def __repr__(self):
        msg, fmt_args = self.args
        type_name = type(self).__name__

        if not fmt_args:
            return '%s(%r)' % (type_name, msg)

        return '%s(%r, %s%r)' % (type_name, msg,
                                 '**' if isinstance(fmt_args, dict) else '*',
                                 fmt_args)


class DependencyCycleError(BuildrError):
    """A target was reached again while it was still being built."""

    def __init__(self, chain):
        self.chain = tuple(chain)
        super(DependencyCycleError, self).__init__(
            'Dependency cycle: %s', ' -> '.join(self.chain))


class HelperError(BuildrError):
    """
    Raised by low-level helpers used from inside target actions. Unlike an
    action returning False, these are not meant to be handled by the build
    engine and propagate up to the entry point.
    """

class FileSystemError(HelperError):
    pass

class CommandError(HelperError):

    def __init__(self, msg='', *args, **kwargs):
        self.returncode = kwargs.get('returncode')
        super(CommandError, self).__init__(msg, *args, **kwargs)


class ScaffoldError(BuildrError):
    pass
