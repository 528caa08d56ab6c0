'''
HTTP stuff.

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
import requests

from vcsrepo.config import GetSettings
from vcsrepo.vr_logging import log


def _checkStatus(response):
    # Anything outside 2xx, including unfollowed 3xx, is a failure.
    if not 200 <= response.status_code < 300:
        raise requests.HTTPError('{} {} for url: {}'.format(response.status_code, response.reason, response.url), response=response)


def FetchURL(url, timeout=None):
    '''
    GET ``url`` and return the body as bytes.

    :raises requests.RequestException: on connection problems or any non-2xx status.
    '''
    settings = GetSettings()
    if timeout is None:
        timeout = settings.get('http.timeout', 10)
    headers = {'User-Agent': settings.get('http.user_agent', 'pyvcsrepo')}
    log.debug('GET %s', url)
    response = requests.get(url, timeout=timeout, headers=headers)
    _checkStatus(response)
    return response.content


def FetchJSON(url, timeout=None):
    '''
    :raises ValueError: if the body is not JSON.
    '''
    settings = GetSettings()
    if timeout is None:
        timeout = settings.get('http.timeout', 10)
    headers = {
        'User-Agent': settings.get('http.user_agent', 'pyvcsrepo'),
        'Accept': 'application/json',
    }
    log.debug('GET %s', url)
    response = requests.get(url, timeout=timeout, headers=headers)
    _checkStatus(response)
    return response.json()
