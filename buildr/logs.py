"""
Logging setup.
"""

import logging as _logging


logging_defaults = dict(
    level=_logging.INFO,
    format='%(levelname)-8s%(name)s:\t%(message)s',
)

def init_logging(filename_or_stream=None, **kwargs):
    init_dict = dict(logging_defaults, **kwargs)

    if isinstance(filename_or_stream, str):
        init_dict['filename'] = filename_or_stream
        init_dict.setdefault('filemode', 'w')
    elif filename_or_stream is not None:
        init_dict['stream'] = filename_or_stream

    _logging.basicConfig(**init_dict)
