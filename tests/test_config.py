import pytest

from vcsrepo.config import (CONFIG_ENV_VAR, DEFAULTS, BaseConfig, GetSettings, LoadConfig, TOMLConfig, YAMLConfig,
                            dict_merge)
from vcsrepo.repo.policy import GetPolicy
from vcsrepo.vcstype import VcsType


def test_defaults():
    cfg = LoadConfig()
    assert cfg.get('http.timeout') == 10
    assert cfg.get('remotes.svn') == 'normalized'
    assert cfg.get('no.such.key', 'fallback') == 'fallback'


def test_defaults_are_not_shared():
    cfg = LoadConfig()
    cfg.set('remotes.git', 'ignore')
    assert DEFAULTS['remotes']['git'] == 'strict'


def test_yaml_overrides_merge_with_defaults(tmp_path):
    path = tmp_path / 'vcsrepo.yml'
    path.write_text('http:\n  timeout: 3\nremotes:\n  bzr: normalized\n')
    cfg = LoadConfig(str(path))
    assert isinstance(cfg, YAMLConfig)
    assert cfg.get('http.timeout') == 3
    assert cfg.get('http.user_agent') == 'pyvcsrepo'
    assert cfg.get('remotes.bzr') == 'normalized'
    assert cfg.get('remotes.git') == 'strict'


def test_toml(tmp_path):
    path = tmp_path / 'vcsrepo.toml'
    path.write_text('[remotes]\nhg = "ignore"\n')
    cfg = LoadConfig(str(path))
    assert isinstance(cfg, TOMLConfig)
    assert cfg.get('remotes.hg') == 'ignore'


def test_jinja_rendering(tmp_path, monkeypatch):
    monkeypatch.setenv('VCSREPO_TEST_AGENT', 'my-agent')
    path = tmp_path / 'vcsrepo.yml'
    path.write_text("http:\n  user_agent: {{ env.VCSREPO_TEST_AGENT }}\n  timeout: {{ timeout }}\n")
    cfg = LoadConfig(str(path), variables={'timeout': 42})
    assert cfg.get('http.user_agent') == 'my-agent'
    assert cfg.get('http.timeout') == 42


def test_missing_file_uses_defaults(tmp_path):
    cfg = LoadConfig(str(tmp_path / 'missing.yml'))
    assert cfg.get('remotes.svn') == 'normalized'


def test_env_var_selects_file(tmp_path, monkeypatch):
    path = tmp_path / 'vcsrepo.yml'
    path.write_text('remotes:\n  git: normalized\n')
    monkeypatch.setenv(CONFIG_ENV_VAR, str(path))
    assert GetSettings().get('remotes.git') == 'normalized'
    assert GetPolicy(VcsType.GIT) == 'normalized'


def test_unknown_policy(tmp_path, monkeypatch):
    path = tmp_path / 'vcsrepo.yml'
    path.write_text('remotes:\n  git: fuzzy\n')
    monkeypatch.setenv(CONFIG_ENV_VAR, str(path))
    with pytest.raises(ValueError):
        GetPolicy(VcsType.GIT)


def test_dict_merge():
    a = {'x': {'y': 1, 'z': 2}, 'k': 'a'}
    dict_merge(a, {'x': {'y': 3}, 'n': 4})
    assert a == {'x': {'y': 3, 'z': 2}, 'k': 'a', 'n': 4}


def test_base_config_set_creates_tables():
    cfg = BaseConfig()
    cfg.set('a.b.c', 1)
    assert cfg.get('a') == {'b': {'c': 1}}
