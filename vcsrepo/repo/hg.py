'''
Mercurial repositories.

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
from vcsrepo.repo.base import CommitInfo, SCMRepository, VersionInfo
from vcsrepo.vcstype import VcsType
from vcsrepo.vr_logging import log

NULL_REVISION = '0' * 40


class HgRepository(SCMRepository):

    '''Logical representation of a mercurial repository.'''
    VCS = VcsType.HG
    COMMAND = 'hg'
    # Stable, untranslated output regardless of the user's hgrc.
    EXTRA_ENV = {'HGPLAIN': '1'}

    def _command(self, args):
        return [self.COMMAND, '--encoding', 'UTF-8', '--noninteractive'] + list(args)

    def GetLocalRemote(self):
        '''
        $ hg paths default
        http://hg.limetech.org/projects/tf2items/tf2items_source/
        '''
        try:
            out = self._runFromDir(['paths', 'default'], error=LocalError)
        except LocalError as e:
            # "not found!" when no default path is configured.
            if e.returncode == 1:
                return ''
            raise
        for line in self._lines(out):
            return line
        return ''

    def Get(self):
        with log.info('Cloning %s into %s...', self.remote, self.local):
            self._run(['clone', self.remote, self.local], error=GetError)

    def Update(self):
        with log.info('Updating %s...', self.local):
            self._runFromDir(['pull'], error=UpdateError)
            self._runFromDir(['update'], error=UpdateError)

    def UpdateVersion(self, ref):
        # The revision may only exist upstream so far.
        with log.info('Updating %s to %s...', self.local, ref):
            self._runFromDir(['pull'], error=VersionError)
            self._runFromDir(['update', '-r', ref], error=VersionError)

    def Version(self):
        out = self._runFromDir(['identify', '-i'], error=LocalError)
        parts = out.strip().split(' ', 1)
        return parts[0].strip()

    def Date(self):
        out = self._runFromDir(['log', '-r', '.', '--template', '{date|isodatesec}'], error=LocalError)
        return self._parseDate(out)

    def Branches(self):
        out = self._runFromDir(['branches'], error=LocalError)
        return self._firstColumn(out)

    def Tags(self):
        out = self._runFromDir(['tags'], error=LocalError)
        return self._firstColumn(out)

    def CurrentVersionsWithRevs(self):
        '''
        Update the checkout, then list its tags and open branches with the
        revisions they point at.

        $ hg tags --debug --verbose
        tip                                2:b8c0b4db5d2c1fd9e00b2b1ed4e5b0e8eb2e8c9e
        1.0.0                              1:a5494ba2177ff9ef26feb3c155dfecc350b1a8ef
        wip                                2:b8c0b4db5d2c1fd9e00b2b1ed4e5b0e8eb2e8c9e local

        :returns: ``(versions, local_synced)``.  ``local_synced`` is True once
            the update went through.
        :raises UpdateError: if the update failed; nothing was listed.
        :raises LocalError: if listing tags or branches failed after the update.
            A partial list is never returned.
        '''
        self.Update()
        local_synced = True

        versions = []
        out = self._runFromDir(['tags', '--debug', '--verbose'], error=LocalError)
        for line in self._lines(out):
            if line.endswith(' local'):
                continue
            name, revision = self._splitVersionLine(line)
            # tip moves with every commit.
            if name == 'tip':
                continue
            # Tags on the null revision have been removed.
            if revision == NULL_REVISION:
                continue
            versions.append(VersionInfo(name, revision))

        out = self._runFromDir(['branches', '--debug', '--verbose'], error=LocalError)
        for line in self._lines(out):
            if line.endswith('(inactive)'):
                continue
            name, revision = self._splitVersionLine(line)
            versions.append(VersionInfo(name, revision, is_branch=True))
        return versions, local_synced

    @staticmethod
    def _splitVersionLine(line):
        '''"1.0.0     1:a5494ba2...[ flag]" -> ("1.0.0", "a5494ba2...")'''
        head, _, tail = line.rpartition(':')
        name = head.rsplit(None, 1)[0].strip()
        revision = tail.split()[0] if tail.strip() else ''
        return name, revision

    def IsReference(self, ref):
        return self._succeeds(['log', '-r', ref])

    def IsDirty(self):
        out = self._runFromDir(['diff'], error=LocalError)
        return out.strip() != ''

    def CommitInfo(self, rev):
        '''
        $ hg log -r 0 --style=xml
        <log>
        <logentry revision="0" node="a5494ba2177ff9ef26feb3c155dfecc350b1a8ef">
        <author email="matt@mattfarina.com">Matt Farina</author>
        <date>2015-07-30T16:14:08-04:00</date>
        <msg xml:space="preserve">Initial commit</msg>
        </logentry>
        </log>
        '''
        try:
            out = self._runFromDir(['log', '-r', rev, '--style=xml'])
        except CommandFailed as e:
            raise RevisionUnavailable(rev, original=e, output=e.output)
        try:
            root = etree.fromstring(out.encode('utf-8'))
        except etree.XMLSyntaxError as e:
            raise RevisionUnavailable(rev, original=e, output=out)
        entry = root.find('logentry')
        if entry is None:
            raise RevisionUnavailable(rev, output=out)

        author = entry.find('author')
        author_str = ''
        if author is not None:
            author_str = '{} <{}>'.format(author.text or '', author.get('email', ''))
        date = entry.findtext('date')
        return CommitInfo(entry.get('node'),
                          author=author_str,
                          date=datetime.datetime.fromisoformat(date) if date else None,
                          message=entry.findtext('msg') or '')
