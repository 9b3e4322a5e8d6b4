# -*- coding: utf-8 -*-
#
'''
Allows logging indented block messages with 'with', i.e.,

    with Message('hello world'):
        # do something
'''
import logging

log = logging.getLogger(__name__)

_indent = [0]


def info(string, *args):
    log.info('  ' * _indent[0] + string, *args)
    return


def debug(string, *args):
    log.debug('  ' * _indent[0] + string, *args)
    return


class Message(object):

    def __init__(self, string):
        self.string = string
        return

    def __enter__(self):
        info(self.string)
        _indent[0] += 1
        return

    def __exit__(self, tpe, value, traceback):
        _indent[0] -= 1
        if tpe is not None:
            log.error('%s failed: %s', self.string, value)
        return


def setup_logging(verbosity=0, stream=None):
    '''Routes the package log to stderr (or the given stream). Verbosity 0
    shows warnings only, 1 adds info, 2 and above adds debug output.
    '''
    if verbosity >= 2:
        level = logging.DEBUG
    elif verbosity == 1:
        level = logging.INFO
    else:
        level = logging.WARNING

    logger = logging.getLogger('sinedft')
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    handler = logging.StreamHandler(stream)
    handler.setFormatter(logging.Formatter('%(levelname)s: %(message)s'))
    logger.addHandler(handler)
    logger.setLevel(level)
    return logger
