'''
Deciding whether two spellings of a remote point at the same repository.

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
from urllib.parse import urlsplit

from vcsrepo.config import GetSettings

POLICY_STRICT = 'strict'
POLICY_NORMALIZED = 'normalized'
POLICY_IGNORE = 'ignore'
POLICIES = (POLICY_STRICT, POLICY_NORMALIZED, POLICY_IGNORE)


def normalizeRemote(remote):
    '''
    https://User@SVN.example.com/repo/trunk/ -> svn.example.com/repo/trunk
    '''
    remote = remote.strip()
    parts = urlsplit(remote)
    if not parts.netloc:
        return remote.rstrip('/')
    host = parts.netloc.rpartition('@')[2].lower()
    return host + parts.path.rstrip('/')


def GetPolicy(vcs):
    policy = GetSettings().get('remotes.' + vcs.value, POLICY_STRICT)
    if policy not in POLICIES:
        raise ValueError(f'Unknown remote policy {policy!r} for {vcs}')
    return policy


def RemotesMatch(policy, remote, local_remote):
    '''
    :returns bool: True if ``remote`` may be used with a checkout of ``local_remote``.
    '''
    if policy == POLICY_IGNORE or remote == local_remote:
        return True
    if policy == POLICY_NORMALIZED:
        return normalizeRemote(remote) == normalizeRemote(local_remote)
    return False
