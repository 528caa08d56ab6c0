'''
OS Utilities.

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
import sys
import subprocess

from vcsrepo.vr_logging import log


class BuildEnv(object):
    '''Base environment handed to every native command.'''

    def __init__(self, initial=None):
        if initial is not None:
            self.env = initial
        else:
            self.env = os.environ


def is_executable(fpath):
    if sys.platform == 'win32':
        if not fpath.endswith('.exe'):
            fpath += '.exe'
    return os.path.isfile(fpath) and os.access(fpath, os.X_OK)


def which(program):
    fpath, _ = os.path.split(program)
    if fpath:
        if is_executable(program):
            return program
    else:
        for path in os.environ.get("PATH", '').split(os.pathsep):
            path = path.strip('"')
            exe_file = os.path.join(path, program)
            if is_executable(exe_file):
                return exe_file

    return None


def _cmd_handle_env(env, cwd=None):
    if env is None:
        env = ENV.env

    # Fix a bug where env vars get some weird types.
    new_env = {}
    for k, v in env.items():
        k = str(k)
        v = str(v)
        new_env[k] = v
    # Some tools (hg) trust PWD over getcwd().
    if cwd is not None:
        new_env['PWD'] = os.path.abspath(cwd)
    return new_env


def _cmd_handle_args(command):
    return [str(arg) for arg in command]


def cmd_output(command, echo=False, env=None, cwd=None, critical=False):
    '''
    Run a command to completion and capture what it prints.

    The working directory is handed to the child process; the current
    directory of this process is never touched.

    :param cwd: Working directory of the command.  None means inherit ours.
    :param critical: Re-raise if the command can't be started at all.
    :returns List[3]: (returncode, stdout, stderr), or False if the command
        could not be started and critical is False.
    '''
    new_env = _cmd_handle_env(env, cwd)
    command = _cmd_handle_args(command)
    if echo:
        log.info('$ ' + subprocess.list2cmdline(command))
    else:
        log.debug('$ ' + subprocess.list2cmdline(command))

    try:
        proc = subprocess.Popen(command,
                                env=new_env,
                                cwd=cwd,
                                stdin=subprocess.DEVNULL,
                                stdout=subprocess.PIPE,
                                stderr=subprocess.PIPE,
                                universal_newlines=True,
                                errors='replace')
        stdout, stderr = proc.communicate()
        return (proc.returncode, stdout, stderr)
    except Exception as e:
        log.error(repr(command))
        if critical:
            raise e
        log.error(e)
    return False


ENV = BuildEnv()
