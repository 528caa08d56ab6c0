'''
Salty Configuration, rendered through Jinja2 and parsed as YAML or TOML.

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
import copy
import os

import jinja2
import toml
import yaml

from vcsrepo.vr_logging import log

CONFIG_ENV_VAR = 'VCSREPO_CONFIG'

DEFAULTS = {
    'http': {
        'timeout': 10,
        'user_agent': 'pyvcsrepo',
    },
    'lookup': {
        'bitbucket_api': 'https://api.bitbucket.org/2.0/repositories/{name}',
        'google_checkout': 'https://code.google.com/p/{project}/source/checkout?repo={repo}',
    },
    # strict, normalized or ignore.  See vcsrepo.repo.policy.
    'remotes': {
        'git': 'strict',
        'hg': 'strict',
        'svn': 'normalized',
        'bzr': 'ignore',
    },
    'logging': {
        'level': 'INFO',
    },
}


def dict_merge(a, b, path=None):
    "merges b into a"
    if path is None:
        path = []
    for key in b:
        if key in a:
            if isinstance(a[key], dict) and isinstance(b[key], dict):
                dict_merge(a[key], b[key], path + [str(key)])
            elif a[key] == b[key]:
                pass  # same leaf value
            else:
                a[key] = b[key]
        else:
            a[key] = b[key]
    return a


class BaseConfig(object):

    def __init__(self):
        self.cfg = {}

    def get(self, key, default=None, delim='.'):
        parts = key.split(delim)
        try:
            value = self.cfg[parts[0]]
            if len(parts) == 1:
                return value
            for part in parts[1:]:
                value = value[part]
            return value
        except (KeyError, TypeError):
            return default

    def set(self, key, value, delim='.'):
        parts = key.split(delim)
        L = self.cfg
        for part in parts[:-1]:
            L = L.setdefault(part, {})
        L[parts[-1]] = value


class ConfigFile(BaseConfig):
    '''
    A config file rendered as a Jinja2 template before parsing.

    Templates see the process environment as ``env``, plus anything passed
    in ``variables``.
    '''

    def __init__(self, filename, default=None, variables=None):
        self.environment = jinja2.Environment(undefined=jinja2.StrictUndefined)
        self.cfg = copy.deepcopy(default) if default is not None else {}
        if filename is not None:
            self.Load(filename, merge=True, variables=variables)

    def Load(self, filename, merge=False, variables=None):
        with log.debug("Loading %s...", filename):
            if not os.path.isfile(filename):
                log.warning('%s not found, using defaults.', filename)
                return False

            with open(filename, 'r') as f:
                template = f.read()

            context = {'env': dict(os.environ)}
            context.update(variables or {})
            rendered = self.environment.from_string(template).render(context)

            newcfg = self.load_from_string(rendered) or {}
            if merge:
                self.cfg = dict_merge(self.cfg, newcfg)
            else:
                self.cfg = newcfg
        return True

    def load_from_string(self, string):
        return {}


class YAMLConfig(ConfigFile):

    def load_from_string(self, string):
        return yaml.safe_load(string)


class TOMLConfig(ConfigFile):

    def load_from_string(self, string):
        return toml.loads(string)


def LoadConfig(filename=None, variables=None):
    '''
    Load settings from ``filename``, or from $VCSREPO_CONFIG when not given.

    Anything the file leaves out comes from DEFAULTS.
    '''
    if filename is None:
        filename = os.environ.get(CONFIG_ENV_VAR) or None
    if filename is not None and filename.lower().endswith('.toml'):
        return TOMLConfig(filename, default=DEFAULTS, variables=variables)
    return YAMLConfig(filename, default=DEFAULTS, variables=variables)


_settings = None


def GetSettings():
    global _settings
    if _settings is None:
        _settings = LoadConfig()
    return _settings


def SetSettings(cfg):
    '''Replace the process-wide settings.  None reloads them on next use.'''
    global _settings
    _settings = cfg
