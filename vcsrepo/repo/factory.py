'''
Picking and validating the right repository class for a (remote, local) pair.

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
from vcsrepo.error import CannotDetectVCS
from vcsrepo.lookup.local import DetectLocal
from vcsrepo.lookup.remote import DetectRemote
from vcsrepo.repo.bzr import BzrRepository
from vcsrepo.repo.git import GitRepository
from vcsrepo.repo.hg import HgRepository
from vcsrepo.repo.svn import SvnRepository
from vcsrepo.vcstype import VcsType
from vcsrepo.vr_logging import log

REPOSITORY_TYPES = {
    VcsType.GIT: GitRepository,
    VcsType.SVN: SvnRepository,
    VcsType.HG: HgRepository,
    VcsType.BZR: BzrRepository,
}


def DetectVCS(remote, local):
    '''
    What's checked out at ``local``, or failing that, what ``remote`` looks like.

    :raises CannotDetectVCS:
    '''
    try:
        return DetectLocal(local)
    except CannotDetectVCS as e:
        log.debug('%s', e)
    # May go out to the network.
    return DetectRemote(remote)


def ResolveRepository(remote, local, quiet=True):
    '''
    Build a repository handle for ``local``, detecting its VCS.

    The returned handle has been checked against any existing checkout at
    ``local`` and carries that checkout's remote if ``remote`` was empty.

        repo = ResolveRepository('https://github.com/Masterminds/VCSTestRepo', '/tmp/VCSTestRepo')
        repo.Get()
        repo.UpdateVersion('master')

    :raises CannotDetectVCS: neither ``local`` nor ``remote`` says which VCS to use.
    :raises WrongVCS:
    :raises WrongRemote:
    '''
    vcs = DetectVCS(remote, local)
    return REPOSITORY_TYPES[vcs](remote, local, quiet=quiet)
