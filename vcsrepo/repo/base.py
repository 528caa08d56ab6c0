'''
Repository base class shared by every VCS.

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
import datetime
import os
import subprocess

from vcsrepo.error import CannotDetectVCS, CommandFailed, WrongRemote, WrongVCS
from vcsrepo.lookup.local import DetectLocal, HasMarker
from vcsrepo.os_utils import ENV, cmd_output, which
from vcsrepo.repo.policy import GetPolicy, RemotesMatch
from vcsrepo.vr_logging import log


class CommitInfo(object):
    '''Metadata about a single commit.'''

    def __init__(self, commit, author='', date=None, message=''):
        self.commit = commit
        self.author = author
        self.date = date
        self.message = message

    def __eq__(self, other):
        if not isinstance(other, CommitInfo):
            return NotImplemented
        return (self.commit, self.author, self.date, self.message) == (other.commit, other.author, other.date, other.message)

    def __repr__(self):
        return '<CommitInfo {} by {} at {}>'.format(self.commit, self.author, self.date)


class VersionInfo(object):
    '''A branch or tag and the revision it points at.'''

    def __init__(self, name, revision, is_branch=False):
        self.name = name
        self.revision = revision
        self.is_branch = is_branch

    def __eq__(self, other):
        if not isinstance(other, VersionInfo):
            return NotImplemented
        return (self.name, self.revision, self.is_branch) == (other.name, other.revision, other.is_branch)

    def __repr__(self):
        return '<VersionInfo {}{} at {}>'.format('branch ' if self.is_branch else '', self.name, self.revision)


class SCMRepository(object):
    '''
    Logical representation of a source code repository.

    Constructing one checks any checkout already sitting at ``local``: it must
    be of this class's VCS, and its configured remote must agree with
    ``remote``.  An empty ``remote`` is filled in from the checkout.

    :raises WrongVCS: ``local`` holds a checkout of another VCS.
    :raises WrongRemote: ``local`` is checked out from somewhere else.
    :raises LocalError: the checkout's remote couldn't be read.
    '''
    VCS = None
    COMMAND = None
    EXTRA_ENV = {}

    def __init__(self, remote, local, quiet=True):
        self.remote = remote or ''
        self._local = local
        self.quiet = quiet
        self._reconcile()

    @property
    def local(self):
        return self._local

    @property
    def vcs(self):
        return self.VCS

    def __repr__(self):
        return '<{} {!r} -> {!r}>'.format(type(self).__name__, self.remote, self.local)

    @classmethod
    def IsInstalled(cls):
        return which(cls.COMMAND) is not None

    def _reconcile(self):
        try:
            ltype = DetectLocal(self.local)
        except CannotDetectVCS:
            return
        if ltype != self.VCS:
            raise WrongVCS(self.VCS, ltype)
        if not self.CheckLocal():
            return

        local_remote = self.GetLocalRemote()
        if local_remote == '':
            return
        if self.remote == '':
            log.info('Using remote %s configured in %s.', local_remote, self.local)
            self.remote = local_remote
            return

        policy = GetPolicy(self.VCS)
        if not RemotesMatch(policy, self.remote, local_remote):
            raise WrongRemote(self.remote, local_remote)
        if self.remote != local_remote:
            log.warning('%s: %s is checked out from %s, accepted under the %s remote policy.',
                        self.VCS, self.local, local_remote, policy)

    def _env(self):
        env = dict(ENV.env)
        env.update(self.EXTRA_ENV)
        return env

    def _command(self, args):
        return [self.COMMAND] + list(args)

    def _run(self, args, error=CommandFailed, cwd=None, program=None):
        '''
        Run the native client and return its stdout.

        :raises CommandFailed: (or the given subclass) if it can't start or exits non-zero.
        '''
        command = [program] + list(args) if program else self._command(args)
        try:
            returncode, stdout, stderr = cmd_output(command, echo=not self.quiet, env=self._env(), cwd=cwd, critical=True)
        except OSError as e:
            raise error(command, original=e, output='')
        output = stdout + stderr
        if output.strip():
            with log:
                for line in output.splitlines():
                    log.debug('-> %s', line)
        if returncode != 0:
            original = subprocess.CalledProcessError(returncode, command, stdout, stderr)
            raise error(command, original=original, output=output, returncode=returncode)
        return stdout

    def _runFromDir(self, args, error=CommandFailed, program=None):
        return self._run(args, error=error, cwd=self.local, program=program)

    def _succeeds(self, args):
        try:
            self._runFromDir(args)
        except CommandFailed:
            return False
        return True

    @staticmethod
    def _lines(output):
        return [line.strip() for line in output.splitlines() if line.strip() != '']

    @classmethod
    def _firstColumn(cls, output):
        return [line.split()[0] for line in cls._lines(output)]

    def CheckLocal(self):
        return os.path.isdir(self.local) and HasMarker(self.local, self.VCS)

    def Get(self):
        raise NotImplementedError()

    def Update(self):
        raise NotImplementedError()

    def UpdateVersion(self, ref):
        raise NotImplementedError()

    def Version(self):
        raise NotImplementedError()

    def GetLocalRemote(self):
        raise NotImplementedError()

    def Date(self):
        raise NotImplementedError()

    def Branches(self):
        raise NotImplementedError()

    def Tags(self):
        raise NotImplementedError()

    def IsReference(self, ref):
        raise NotImplementedError()

    def IsDirty(self):
        raise NotImplementedError()

    def CommitInfo(self, rev):
        raise NotImplementedError()

    @staticmethod
    def _parseDate(value):
        '''2015-07-29 09:46:39 -0400 -> aware datetime.'''
        return datetime.datetime.strptime(value.strip(), '%Y-%m-%d %H:%M:%S %z')
