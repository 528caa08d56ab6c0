'''
Detect the VCS of an existing checkout from the files on disk.

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
import os

from vcsrepo.error import CannotDetectVCS
from vcsrepo.vcstype import DETECTION_ORDER


def HasMarker(path, vcs):
    return os.path.exists(os.path.join(path, vcs.marker))


def DetectLocal(path):
    '''
    Look for .git, .svn, .hg and .bzr (in that order) directly under ``path``.

    :returns VcsType: first marker found.
    :raises CannotDetectVCS: path doesn't exist yet, or carries no marker.
    '''
    if not path or not os.path.exists(path):
        raise CannotDetectVCS(f'Cannot detect VCS: {path!r} does not exist')

    for vcs in DETECTION_ORDER:
        if HasMarker(path, vcs):
            return vcs

    raise CannotDetectVCS(f'Cannot detect VCS: no VCS metadata in {path!r}')
