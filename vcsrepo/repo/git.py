'''
Git repositories.

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
from vcsrepo.error import CommandFailed, GetError, LocalError, RevisionUnavailable, UpdateError, VersionError
from vcsrepo.repo.base import CommitInfo, SCMRepository
from vcsrepo.vcstype import VcsType
from vcsrepo.vr_logging import log


class GitRepository(SCMRepository):
    '''Logical representation of a git repository.
    '''
    VCS = VcsType.GIT
    COMMAND = 'git'
    # Never stop to ask for credentials.
    EXTRA_ENV = {'GIT_TERMINAL_PROMPT': '0'}

    def __init__(self, remote, local, quiet=True, remote_location='origin'):
        self.remote_location = remote_location
        super(GitRepository, self).__init__(remote, local, quiet=quiet)

    def GetLocalRemote(self):
        '''
        $ git config --get remote.origin.url
        https://github.com/Masterminds/VCSTestRepo
        '''
        try:
            out = self._runFromDir(['config', '--get', 'remote.{}.url'.format(self.remote_location)], error=LocalError)
        except LocalError as e:
            # Exit code 1 is "key not set".
            if e.returncode == 1 and not e.output.strip():
                return ''
            raise
        return out.strip()

    def Get(self):
        with log.info('Cloning %s into %s...', self.remote, self.local):
            self._run(['clone', self.remote, self.local], error=GetError)

    def Update(self):
        with log.info('Updating %s...', self.local):
            self._runFromDir(['fetch', self.remote_location], error=UpdateError)
            if self._isDetachedHead():
                # Pinned to a commit or tag; nothing to merge into.
                log.info('%s is on a detached HEAD, skipping pull.', self.local)
                return
            self._runFromDir(['pull'], error=UpdateError)

    def _isDetachedHead(self):
        return not self._succeeds(['symbolic-ref', '-q', 'HEAD'])

    def UpdateVersion(self, ref):
        with log.info('Checking out %s in %s...', ref, self.local):
            self._runFromDir(['checkout', ref], error=VersionError)

    def Version(self):
        return self._runFromDir(['rev-parse', 'HEAD'], error=LocalError).strip()

    def Date(self):
        out = self._runFromDir(['log', '-1', '--date=iso', '--pretty=format:%cd'], error=LocalError)
        return self._parseDate(out)

    def Branches(self):
        out = self._runFromDir(['for-each-ref', '--format=%(refname:short)', 'refs/heads/'], error=LocalError)
        return self._lines(out)

    def Tags(self):
        out = self._runFromDir(['for-each-ref', '--format=%(refname:short)', 'refs/tags/'], error=LocalError)
        return self._lines(out)

    def IsReference(self, ref):
        if self._succeeds(['rev-parse', '--verify', '--quiet', ref + '^{commit}']):
            return True
        # A branch that only exists upstream so far.
        remote_ref = '{}/{}'.format(self.remote_location, ref)
        return self._succeeds(['rev-parse', '--verify', '--quiet', remote_ref + '^{commit}'])

    def IsDirty(self):
        out = self._runFromDir(['status', '--porcelain'], error=LocalError)
        return out.strip() != ''

    def CommitInfo(self, rev):
        try:
            out = self._runFromDir(['log', '-1', '--date=iso', '--format=%H%x00%an <%ae>%x00%ad%x00%B', rev, '--'])
        except CommandFailed as e:
            raise RevisionUnavailable(rev, original=e, output=e.output)
        fields = out.split('\x00', 3)
        if len(fields) != 4:
            raise RevisionUnavailable(rev, output=out)
        commit, author, date, message = fields
        return CommitInfo(commit.strip(), author, self._parseDate(date), message.strip())
