'''
Subversion working copies.

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

from lxml import etree

from vcsrepo.error import CommandFailed, GetError, LocalError, RevisionUnavailable, UpdateError, VersionError
from vcsrepo.repo.base import CommitInfo, SCMRepository
from vcsrepo.vcstype import VcsType
from vcsrepo.vr_logging import log

SVN_DATE_FORMAT = '%Y-%m-%dT%H:%M:%S.%fZ'


def parseSvnDate(value):
    '''2015-07-29T13:46:20.000000Z -> aware datetime (UTC).'''
    return datetime.datetime.strptime(value.strip(), SVN_DATE_FORMAT).replace(tzinfo=datetime.timezone.utc)


class SvnRepository(SCMRepository):
    '''
    Logical representation of a Subversion working copy.

    SVN isn't distributed, so ``remote`` should name the branch too, e.g.
    https://svn.example.com/project/trunk rather than the repository root.
    '''
    VCS = VcsType.SVN
    COMMAND = 'svn'

    def _command(self, args):
        args = list(args)
        return [self.COMMAND] + args[:1] + ['--non-interactive'] + args[1:]

    def _info(self):
        out = self._runFromDir(['info', '--xml', '.'], error=LocalError)
        try:
            return etree.fromstring(out.encode('utf-8'))
        except etree.XMLSyntaxError as e:
            raise LocalError(['svn', 'info', '--xml', '.'], original=e, output=out)

    def GetLocalRemote(self):
        '''
        $ svn info --xml .
        <info><entry kind="dir" path="." revision="4">
          <url>https://svn.example.com/project/trunk</url>
          ...
        '''
        return (self._info().findtext('entry/url') or '').strip()

    def Get(self):
        with log.info('Checking out %s into %s...', self.remote, self.local):
            self._run(['checkout', self.remote, self.local], error=GetError)

    def Update(self):
        with log.info('Updating %s...', self.local):
            self._runFromDir(['update'], error=UpdateError)

    def UpdateVersion(self, ref):
        with log.info('Updating %s to r%s...', self.local, ref):
            self._runFromDir(['update', '-r', ref], error=VersionError)

    def Version(self):
        return self._runFromDir(['.'], error=LocalError, program='svnversion').strip()

    def Date(self):
        date = self._info().findtext('entry/commit/date')
        if not date:
            raise LocalError(message='No commit date in svn info output')
        return parseSvnDate(date)

    def Branches(self):
        # Branches are just directories; their layout is up to the repository.
        return []

    def Tags(self):
        return []

    def IsReference(self, ref):
        return self._succeeds(['log', '-r', ref])

    def IsDirty(self):
        out = self._runFromDir(['diff'], error=LocalError)
        return out.strip() != ''

    def CommitInfo(self, rev):
        '''
        $ svn log -r 2 --xml
        <log>
          <logentry revision="2">
            <author>matt</author>
            <date>2015-07-29T13:46:20.000000Z</date>
            <msg>Update README.md</msg>
          </logentry>
        </log>
        '''
        try:
            out = self._runFromDir(['log', '-r', rev, '--xml'])
        except CommandFailed as e:
            raise RevisionUnavailable(rev, original=e, output=e.output)
        try:
            root = etree.fromstring(out.encode('utf-8'))
        except etree.XMLSyntaxError as e:
            raise RevisionUnavailable(rev, original=e, output=out)
        entry = root.find('logentry')
        if entry is None:
            raise RevisionUnavailable(rev, output=out)

        date = entry.findtext('date')
        return CommitInfo(entry.get('revision'),
                          author=entry.findtext('author') or '',
                          date=parseSvnDate(date) if date else None,
                          message=entry.findtext('msg') or '')
