'''
vcsrepo command line.

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
import argparse
import sys

import colorama
from colorama import Fore, Style

from vcsrepo.config import LoadConfig, SetSettings
from vcsrepo.error import VCSError
from vcsrepo.repo.factory import DetectVCS, ResolveRepository
from vcsrepo.vr_logging import setupLogging


def cmd_detect(args):
    print(DetectVCS(args.remote, args.local))


def cmd_get(args):
    repo = ResolveRepository(args.remote, args.local, quiet=not args.verbose)
    repo.Get()


def cmd_update(args):
    repo = ResolveRepository(args.remote, args.local, quiet=not args.verbose)
    repo.Update()


def cmd_checkout(args):
    repo = ResolveRepository(args.remote, args.local, quiet=not args.verbose)
    repo.UpdateVersion(args.ref)


def cmd_version(args):
    repo = ResolveRepository(args.remote, args.local, quiet=not args.verbose)
    print(repo.Version())


def build_argparser():
    argp = argparse.ArgumentParser(prog='vcsrepo', description='Fetch, update and pin repositories under git, svn, hg or bzr.')
    argp.add_argument('--config', default=None, help='YAML or TOML settings file. Defaults to $VCSREPO_CONFIG.')
    argp.add_argument('-v', '--verbose', action='store_true', default=False, help='Echo native commands and debug output.')

    subp = argp.add_subparsers(dest='command')
    subp.required = True

    p = subp.add_parser('detect', help='Print the VCS of a checkout or remote.')
    p.add_argument('remote', help='Remote URL. May be empty.')
    p.add_argument('local', nargs='?', default='', help='Local checkout.')
    p.set_defaults(func=cmd_detect)

    p = subp.add_parser('get', help='Clone or check out REMOTE into LOCAL.')
    p.add_argument('remote')
    p.add_argument('local')
    p.set_defaults(func=cmd_get)

    p = subp.add_parser('update', help='Bring LOCAL up to date with its upstream.')
    p.add_argument('local')
    p.add_argument('--remote', default='')
    p.set_defaults(func=cmd_update)

    p = subp.add_parser('checkout', help='Move LOCAL to REF (revision, branch or tag).')
    p.add_argument('local')
    p.add_argument('ref')
    p.add_argument('--remote', default='')
    p.set_defaults(func=cmd_checkout)

    p = subp.add_parser('version', help='Print the checked out revision of LOCAL.')
    p.add_argument('local')
    p.add_argument('--remote', default='')
    p.set_defaults(func=cmd_version)
    return argp


def _error(msg):
    if sys.stderr.isatty():
        msg = Fore.RED + msg + Style.RESET_ALL
    sys.stderr.write(msg + "\n")


def main(argv=None):
    if sys.stderr.isatty():
        colorama.init()
    args = build_argparser().parse_args(argv)

    settings = LoadConfig(args.config)
    SetSettings(settings)
    setupLogging('DEBUG' if args.verbose else settings.get('logging.level', 'INFO'))

    try:
        args.func(args)
    except VCSError as e:
        _error(str(e))
        if e.output:
            sys.stderr.write(e.output.rstrip() + '\n')
        return 1
    return 0


if __name__ == '__main__':
    sys.exit(main())
