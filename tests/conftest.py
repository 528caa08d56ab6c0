import pytest

from vcsrepo.config import CONFIG_ENV_VAR, SetSettings


class FakeRunner(object):
    '''
    Stands in for os_utils.cmd_output.

    Responses are matched by a run of arguments appearing anywhere in the
    command line, first registered wins.  Anything unmatched succeeds silently.
    '''

    def __init__(self):
        self.responses = []
        self.calls = []

    def add(self, args, stdout='', stderr='', returncode=0, exc=None):
        self.responses.append((list(args), (returncode, stdout, stderr), exc))

    def __call__(self, command, echo=False, env=None, cwd=None, critical=False):
        command = list(command)
        self.calls.append((command, cwd, env))
        for args, result, exc in self.responses:
            if _contains(command, args):
                if exc is not None:
                    raise exc
                return result
        return (0, '', '')

    def commands(self):
        return [command for command, _, _ in self.calls]

    def ran(self, args):
        return any(_contains(command, list(args)) for command in self.commands())


def _contains(command, args):
    n = len(args)
    return any(command[i:i + n] == args for i in range(len(command) - n + 1))


@pytest.fixture(autouse=True)
def default_settings(monkeypatch):
    monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)
    SetSettings(None)
    yield
    SetSettings(None)


@pytest.fixture
def runner(monkeypatch):
    fake = FakeRunner()
    monkeypatch.setattr('vcsrepo.repo.base.cmd_output', fake)
    return fake


@pytest.fixture
def checkout(tmp_path):
    '''Returns a function making a directory that looks like a checkout.'''
    def _make(*markers, name='checkout'):
        path = tmp_path / name
        path.mkdir()
        for marker in markers:
            (path / marker).mkdir()
        return str(path)
    return _make
