from vcsrepo.repo.base import CommitInfo, SCMRepository, VersionInfo
from vcsrepo.repo.bzr import BzrRepository
from vcsrepo.repo.factory import REPOSITORY_TYPES, DetectVCS, ResolveRepository
from vcsrepo.repo.git import GitRepository
from vcsrepo.repo.hg import HgRepository
from vcsrepo.repo.svn import SvnRepository

__all__ = ['CommitInfo', 'VersionInfo', 'SCMRepository', 'BzrRepository', 'GitRepository', 'HgRepository', 'SvnRepository',
           'REPOSITORY_TYPES', 'DetectVCS', 'ResolveRepository']
