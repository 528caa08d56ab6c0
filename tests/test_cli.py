import pytest

from vcsrepo import cli


def test_detect_from_remote(capsys):
    assert cli.main(['detect', 'https://example.com/foo/bar.hg']) == 0
    assert capsys.readouterr().out.strip() == 'hg'


def test_detect_from_local(checkout, capsys):
    assert cli.main(['detect', '', checkout('.bzr')]) == 0
    assert capsys.readouterr().out.strip() == 'bzr'


def test_detect_failure(tmp_path, capsys):
    assert cli.main(['detect', '', str(tmp_path)]) == 1
    assert 'Cannot detect VCS' in capsys.readouterr().err


def test_get(tmp_path, runner):
    local = str(tmp_path / 'widget')
    assert cli.main(['get', 'https://github.com/acme/widget', local]) == 0
    assert runner.commands() == [['git', 'clone', 'https://github.com/acme/widget', local]]


def test_get_failure_prints_output(tmp_path, runner, capsys):
    runner.add(['clone'], returncode=128, stderr='fatal: repository not found\n')
    assert cli.main(['get', 'https://github.com/acme/widget', str(tmp_path / 'widget')]) == 1
    err = capsys.readouterr().err
    assert 'Unable to get repository' in err
    assert 'fatal: repository not found' in err


def test_version(checkout, runner, capsys):
    local = checkout('.git')
    runner.add(['config', '--get'], stdout='https://github.com/acme/widget\n')
    runner.add(['rev-parse', 'HEAD'], stdout='806b07b08faa21cfbdae93027904f80174679402\n')
    assert cli.main(['version', local]) == 0
    assert capsys.readouterr().out.strip() == '806b07b08faa21cfbdae93027904f80174679402'


def test_checkout_wrong_remote(checkout, runner, capsys):
    local = checkout('.git')
    runner.add(['config', '--get'], stdout='https://github.com/acme/R1\n')
    assert cli.main(['checkout', local, 'v1.0.0', '--remote', 'https://github.com/acme/R2']) == 1
    assert 'does not match' in capsys.readouterr().err
    assert not runner.ran(['checkout'])


def test_update(checkout, runner):
    local = checkout('.hg')
    assert cli.main(['update', local]) == 0
    assert runner.ran(['pull'])
    assert runner.ran(['update'])


def test_command_required():
    with pytest.raises(SystemExit):
        cli.main([])
