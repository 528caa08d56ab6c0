'''
Errors raised by vcsrepo.

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
import subprocess

from enum import Enum


class ErrorKind(Enum):
    CANNOT_DETECT_VCS = 'CannotDetectVCS'
    WRONG_VCS = 'WrongVCS'
    WRONG_REMOTE = 'WrongRemote'
    REVISION_UNAVAILABLE = 'RevisionUnavailable'
    COMMAND_FAILED = 'CommandFailed'


def _args2str(cmdline):
    return subprocess.list2cmdline([str(x) for x in cmdline])


class VCSError(Exception):
    '''
    Base class for everything vcsrepo raises.

    :param message: Human readable message.  Stable for a given error class.
    :param original: The underlying exception, if any.
    :param output: Raw output of the native command, if one was run.
    '''
    KIND = None
    MESSAGE = 'VCS error'

    def __init__(self, message=None, original=None, output=None):
        self.kind = self.KIND
        self.message = message or self.MESSAGE
        self.original = original
        self.output = output
        super(VCSError, self).__init__(self.message)

    def __str__(self):
        return self.message


class CannotDetectVCS(VCSError):
    KIND = ErrorKind.CANNOT_DETECT_VCS
    MESSAGE = 'Cannot detect VCS'


class WrongVCS(VCSError):
    KIND = ErrorKind.WRONG_VCS
    MESSAGE = 'Wrong VCS detected'

    def __init__(self, expected=None, found=None, message=None, original=None):
        self.expected = expected
        self.found = found
        if message is None and expected is not None and found is not None:
            message = f'{self.MESSAGE}: expected {expected}, found {found}'
        super(WrongVCS, self).__init__(message, original=original)


class WrongRemote(VCSError):
    KIND = ErrorKind.WRONG_REMOTE
    MESSAGE = 'The Remote does not match the VCS endpoint'

    def __init__(self, remote=None, local_remote=None, message=None, original=None):
        self.remote = remote
        self.local_remote = local_remote
        if message is None and remote is not None and local_remote is not None:
            message = f'{self.MESSAGE}: {remote!r} != {local_remote!r}'
        super(WrongRemote, self).__init__(message, original=original)


class RevisionUnavailable(VCSError):
    KIND = ErrorKind.REVISION_UNAVAILABLE
    MESSAGE = 'Revision unavailable'

    def __init__(self, revision=None, message=None, original=None, output=None):
        self.revision = revision
        if message is None and revision is not None:
            message = f'{self.MESSAGE}: {revision}'
        super(RevisionUnavailable, self).__init__(message, original=original, output=output)


class CommandFailed(VCSError):
    '''
    A native command could not be started or exited non-zero.

    ``output`` is stdout followed by stderr, exactly as the command printed them.
    '''
    KIND = ErrorKind.COMMAND_FAILED
    MESSAGE = 'Command failed'

    def __init__(self, cmdline=None, original=None, output='', returncode=None, message=None):
        self.cmdline = cmdline
        if isinstance(self.cmdline, (list, tuple)):
            self.cmdline = _args2str(self.cmdline)
        self.returncode = returncode
        super(CommandFailed, self).__init__(message, original=original, output=output)

    def __str__(self):
        if self.cmdline is None:
            return self.message
        return f'{self.message}: `{self.cmdline}` failed: {self.original}'


class GetError(CommandFailed):
    MESSAGE = 'Unable to get repository'


class UpdateError(CommandFailed):
    MESSAGE = 'Unable to update repository'


class VersionError(CommandFailed):
    MESSAGE = 'Unable to update checked out version'


class LocalError(CommandFailed):
    MESSAGE = 'Unable to retrieve local repo information'
