__all__ = ['ResolveRepository', 'DetectLocal', 'DetectRemote', 'DetectVCS', 'VcsType',
           'GitRepository', 'SvnRepository', 'HgRepository', 'BzrRepository', 'SCMRepository', 'CommitInfo', 'VersionInfo',
           'VCSError', 'ErrorKind', 'CannotDetectVCS', 'WrongVCS', 'WrongRemote', 'RevisionUnavailable',
           'CommandFailed', 'GetError', 'UpdateError', 'VersionError', 'LocalError', 'log']

from vcsrepo.error import (CannotDetectVCS, CommandFailed, ErrorKind, GetError, LocalError, RevisionUnavailable,
                           UpdateError, VCSError, VersionError, WrongRemote, WrongVCS)
from vcsrepo.lookup import DetectLocal, DetectRemote
from vcsrepo.repo import (BzrRepository, CommitInfo, DetectVCS, GitRepository, HgRepository, ResolveRepository,
                          SCMRepository, SvnRepository, VersionInfo)
from vcsrepo.vcstype import VcsType
from vcsrepo.vr_logging import log
