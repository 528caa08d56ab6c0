'''
Detect the VCS of a remote from its URL.

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

from enum import Enum
from urllib.parse import urlsplit

import requests

from vcsrepo import http
from vcsrepo.config import GetSettings
from vcsrepo.error import CannotDetectVCS
from vcsrepo.vcstype import VcsType
from vcsrepo.vr_logging import log


class Outcome(Enum):
    #: Rule is bound to another host.  Try the next one.
    SKIP = 'skip'
    #: Rule matched.
    MATCH = 'match'
    #: Host matched but the path didn't.  Stop looking.
    FAIL = 'fail'


class DetectionRule(object):
    '''
    One entry of the remote lookup table.

    :param pattern: Regex searched in ``host + path``.  Named groups are handed to ``check``.
    :param host: Exact host this rule is bound to.  Empty means any host.
    :param vcs: Fixed answer.  Short-circuits ``check``.
    :param check: Callable taking the named groups and returning a VcsType.
    '''

    def __init__(self, pattern, host='', vcs=None, check=None):
        if vcs is None and check is None:
            raise ValueError('DetectionRule needs either vcs or check')
        self.host = host
        self.pattern = pattern
        self.vcs = vcs
        self.check = check
        self.regex = re.compile(pattern)

    def evaluate(self, host, subject):
        '''
        :returns tuple: (Outcome, match object or None)
        '''
        if self.host and self.host != host:
            return Outcome.SKIP, None
        m = self.regex.search(subject)
        if m is None:
            return (Outcome.FAIL if self.host else Outcome.SKIP), None
        return Outcome.MATCH, m

    def resolve(self, m):
        if self.vcs is not None:
            return self.vcs
        return self.check(m.groupdict(default=''))

    def __repr__(self):
        return '<DetectionRule host={!r} pattern={!r}>'.format(self.host, self.pattern)


def expand(match, s):
    for k, v in match.items():
        s = s.replace('{' + k + '}', v)
    return s


def checkBitbucket(match):
    '''Bitbucket's API reports the repository's scm.'''
    url = expand(match, GetSettings().get('lookup.bitbucket_api'))
    data = http.FetchJSON(url)
    if not isinstance(data, dict) or not data.get('scm'):
        raise CannotDetectVCS(f'Cannot detect VCS: no scm field in {url}')
    return VcsType(data['scm'])


REG_GOOGLE_CHECKOUT = re.compile(rb'id="checkoutcmd">(hg|git|svn)')


def checkGoogle(match):
    '''
    Google Code only says which VCS a project uses on its checkout page.

    SVN is only reachable through <project>.googlecode.com, which has its own rule.
    '''
    url = expand(match, GetSettings().get('lookup.google_checkout'))
    body = http.FetchURL(url)
    m = REG_GOOGLE_CHECKOUT.search(body)
    if m is None:
        raise CannotDetectVCS(f'Cannot detect VCS: no checkout command on {url}')
    vcs = VcsType(m.group(1).decode('ascii'))
    if vcs == VcsType.SVN:
        raise CannotDetectVCS('Cannot detect VCS: code.google.com svn needs a googlecode.com URL')
    return vcs


def checkUrl(match):
    '''The type is spelled out in the URL itself.'''
    return VcsType(match['type'])


# Order matters: host-bound rules first, the generic extension rule last.
RULES = (
    DetectionRule(
        host='github.com',
        vcs=VcsType.GIT,
        pattern=r'^(github\.com/[A-Za-z0-9_.\-]+/[A-Za-z0-9_.\-]+)(/[A-Za-z0-9_.\-]+)*$'),
    DetectionRule(
        host='bitbucket.org',
        check=checkBitbucket,
        pattern=r'^(bitbucket\.org/(?P<name>[A-Za-z0-9_.\-]+/[A-Za-z0-9_.\-]+))(/[A-Za-z0-9_.\-]+)*$'),
    DetectionRule(
        host='launchpad.net',
        vcs=VcsType.BZR,
        pattern=r'^(launchpad\.net/(([A-Za-z0-9_.\-]+)(/[A-Za-z0-9_.\-]+)?|~[A-Za-z0-9_.\-]+/(\+junk|[A-Za-z0-9_.\-]+)/[A-Za-z0-9_.\-]+))(/[A-Za-z0-9_.\-]+)*$'),
    DetectionRule(
        host='git.launchpad.net',
        vcs=VcsType.GIT,
        pattern=r'^(git\.launchpad\.net/(([A-Za-z0-9_.\-]+)|~[A-Za-z0-9_.\-]+/(\+git|[A-Za-z0-9_.\-]+)/[A-Za-z0-9_.\-]+))$'),
    DetectionRule(
        host='go.googlesource.com',
        vcs=VcsType.GIT,
        pattern=r'^(go\.googlesource\.com/[A-Za-z0-9_.\-]+/?)$'),
    DetectionRule(
        host='code.google.com',
        check=checkGoogle,
        pattern=r'^(code\.google\.com/[pr]/(?P<project>[a-z0-9\-]+)(\.(?P<repo>[a-z0-9\-]+))?)(/[A-Za-z0-9_.\-]+)*$'),
    DetectionRule(
        check=checkUrl,
        pattern=r'^([a-z0-9_\-.]+)\.googlecode\.com/(?P<type>git|hg|svn)(/.*)?$'),
    DetectionRule(
        check=checkUrl,
        pattern=r'\.(?P<type>git|hg|svn|bzr)$'),
)


def _splitHost(url):
    try:
        parts = urlsplit(url)
    except ValueError as e:
        raise CannotDetectVCS(f'Cannot detect VCS: unparseable remote {url!r}', original=e)
    # Drop user:pass@, keep any port.
    host = parts.netloc.rpartition('@')[2].lower()
    return host, parts.path


def DetectRemote(url, rules=RULES):
    '''
    Work out the VCS of ``url`` from the rule table.

    Only URL-shaped remotes are handled; scp-style ``user@host:path`` has no
    host and fails straight away.  Some rules go out to the network.

    :returns VcsType:
    :raises CannotDetectVCS:
    '''
    if not url:
        raise CannotDetectVCS('Cannot detect VCS: no remote given')

    host, path = _splitHost(url)
    if host == '':
        raise CannotDetectVCS(f'Cannot detect VCS: {url!r} has no host')

    subject = host + path
    for rule in rules:
        outcome, m = rule.evaluate(host, subject)
        if outcome == Outcome.SKIP:
            continue
        if outcome == Outcome.FAIL:
            raise CannotDetectVCS(f'Cannot detect VCS: {url!r} is not a repository on {rule.host}')

        try:
            vcs = rule.resolve(m)
        except CannotDetectVCS:
            raise
        except (requests.RequestException, ValueError) as e:
            log.debug('Lookup for %s failed: %s', url, e)
            raise CannotDetectVCS(f'Cannot detect VCS: lookup for {url!r} failed', original=e)
        log.debug('%s looks like %s (%r)', url, vcs, rule)
        return vcs

    raise CannotDetectVCS(f'Cannot detect VCS from {url!r}')
