'''
Indenting logger used across vcsrepo.

Copyright (c) 2015 - 2026 Rob "N3X15" Nelson <nexisentertainment@gmail.com>

Permission is hereby granted, free of charge, to any person obtaining a copy
of this software and associated documentation files (the "Software"), to deal
in the Software without restriction, including without limitation the rights
to use, copy, modify, merge, publish, distribute, sublicense, and/or sell
copies of the Software, and to permit persons to whom the Software is
furnished to do so, subject to the following conditions:

The above copyright notice and this permission notice shall be included in all
copies or substantial portions of the Software.

THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS OR
IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF MERCHANTABILITY,
FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT. IN NO EVENT SHALL THE
AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER
LIABILITY, WHETHER IN AN ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM,
OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE
SOFTWARE.

'''
import logging
import threading

LOGGER_NAME = 'vcsrepo'
LOG_FORMAT = '%(asctime)s [%(levelname)-8s]: %(message)s'
LOG_DATEFMT = '%m/%d/%Y %I:%M:%S %p'


class IndentLogger(object):
    '''
    Indents stuff.

    Every logging call returns the logger itself, so nested output reads as:

        with log.info('Cloning %s...', remote):
            log.info('$ git clone ...')
    '''

    def __init__(self, logger=None):
        self._local = threading.local()
        self.log = logger
        if self.log is None:
            self.log = logging.getLogger(LOGGER_NAME)

    @property
    def indent(self):
        # One nesting level per thread.
        return getattr(self._local, 'indent', 0)

    @indent.setter
    def indent(self, value):
        self._local.indent = value

    def __enter__(self):
        self.indent += 1
        return self

    def __exit__(self, type, value, traceback):
        self.indent -= 1
        return False

    def isEnabledFor(self, level):
        return self.log.isEnabledFor(level)

    def debug(self, msg, *args, **kwargs):
        """
        Log 'msg % args' with severity 'DEBUG'.
        """
        if self.log.isEnabledFor(logging.DEBUG):
            self._log(logging.DEBUG, msg, args, **kwargs)
        return self

    def info(self, msg, *args, **kwargs):
        """
        Log 'msg % args' with severity 'INFO'.
        """
        if self.log.isEnabledFor(logging.INFO):
            self._log(logging.INFO, msg, args, **kwargs)
        return self

    def warning(self, msg, *args, **kwargs):
        """
        Log 'msg % args' with severity 'WARNING'.
        """
        if self.log.isEnabledFor(logging.WARNING):
            self._log(logging.WARNING, msg, args, **kwargs)
        return self

    warn = warning

    def error(self, msg, *args, **kwargs):
        """
        Log 'msg % args' with severity 'ERROR'.

        To pass exception information, use the keyword argument exc_info with
        a true value, e.g.

        logger.error("Houston, we have a %s", "major problem", exc_info=1)
        """
        if self.log.isEnabledFor(logging.ERROR):
            self._log(logging.ERROR, msg, args, **kwargs)
        return self

    def critical(self, msg, *args, **kwargs):
        if self.log.isEnabledFor(logging.CRITICAL):
            self._log(logging.CRITICAL, msg, args, **kwargs)
        return self

    def _log(self, level, msg, args, exc_info=None, extra=None):
        if isinstance(msg, str):
            indent = self.indent * '  '
            self.log._log(level, indent + msg, args, exc_info, extra)
        else:
            self.log._log(level, msg, args, exc_info, extra)


# Libraries don't configure handlers; callers (or the CLI) do.
logging.getLogger(LOGGER_NAME).addHandler(logging.NullHandler())


def setupLogging(level=logging.INFO):
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO
    logging.basicConfig(
        format=LOG_FORMAT,
        datefmt=LOG_DATEFMT,
        level=level)
    logging.getLogger(LOGGER_NAME).setLevel(level)


log = IndentLogger()
