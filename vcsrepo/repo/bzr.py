'''
Bazaar branches.

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
import re

from vcsrepo.error import CommandFailed, GetError, LocalError, RevisionUnavailable, UpdateError, VersionError
from vcsrepo.repo.base import CommitInfo, SCMRepository
from vcsrepo.vcstype import VcsType
from vcsrepo.vr_logging import log

REG_PARENT_BRANCH = re.compile(r'^\s*parent branch: (?P<url>.+)$', re.MULTILINE)


class BzrRepository(SCMRepository):
    '''
    Logical representation of a bazaar branch.

    Launchpad rewrites the parent of a branch (https://launchpad.net/foo becomes
    http://bazaar.launchpad.net/~owner/foo/trunk/), so by default a supplied
    remote isn't compared against the checkout's.  See the ``remotes.bzr`` setting.
    '''
    VCS = VcsType.BZR
    COMMAND = 'bzr'

    def GetLocalRemote(self):
        '''
        $ bzr info
        Standalone tree (format: 2a)
        Location:
          branch root: .

        Related branches:
          parent branch: http://bazaar.launchpad.net/~mattfarina/govcstestbzrrepo/trunk/
        '''
        out = self._runFromDir(['info'], error=LocalError)
        m = REG_PARENT_BRANCH.search(out)
        if m is None:
            return ''
        return m.group('url').strip()

    def Get(self):
        with log.info('Branching %s into %s...', self.remote, self.local):
            self._run(['branch', self.remote, self.local], error=GetError)

    def Update(self):
        with log.info('Updating %s...', self.local):
            self._runFromDir(['pull'], error=UpdateError)
            self._runFromDir(['update'], error=UpdateError)

    def UpdateVersion(self, ref):
        with log.info('Updating %s to %s...', self.local, ref):
            self._runFromDir(['update', '-r', ref], error=VersionError)

    def Version(self):
        return self._runFromDir(['revno', '--tree'], error=LocalError).strip()

    def Date(self):
        out = self._runFromDir(['version-info', '--custom', '--template={date}'], error=LocalError)
        return self._parseDate(out)

    def Branches(self):
        # Every bzr branch is its own directory.
        return []

    def Tags(self):
        out = self._runFromDir(['tags'], error=LocalError)
        return self._firstColumn(out)

    def IsReference(self, ref):
        return self._succeeds(['revno', '-r', ref])

    def IsDirty(self):
        try:
            self._runFromDir(['diff'], error=LocalError)
        except LocalError as e:
            # bzr diff exits 1 when there are differences.
            if e.returncode == 1:
                return True
            raise
        return False

    def CommitInfo(self, rev):
        '''
        $ bzr log -r 1
        ------------------------------------------------------------
        revno: 1
        committer: Matt Farina <matt@mattfarina.com>
        branch nick: trunk
        timestamp: Fri 2015-07-31 09:51:37 -0400
        message:
          Initial commit
        '''
        try:
            out = self._runFromDir(['log', '-r', rev])
        except CommandFailed as e:
            raise RevisionUnavailable(rev, original=e, output=e.output)

        info = {}
        message = []
        in_message = False
        for line in out.splitlines():
            if in_message:
                message.append(line[2:] if line.startswith('  ') else line)
                continue
            if line.startswith('message:'):
                in_message = True
                continue
            if ':' in line:
                key, value = line.split(':', 1)
                info[key.strip()] = value.strip()

        if 'revno' not in info:
            raise RevisionUnavailable(rev, output=out)

        date = None
        if 'timestamp' in info:
            # Drop the weekday.
            date = self._parseDate(info['timestamp'].split(' ', 1)[1])
        return CommitInfo(info['revno'],
                          author=info.get('committer', ''),
                          date=date,
                          message='\n'.join(message).strip())
