import importlib

import pytest

from sharecheck.errors import ConfigurationError


def test_policy_env_overrides(monkeypatch):
    monkeypatch.setenv("SHARECHECK_MAX_SUBSETS", "500")
    monkeypatch.setenv("SHARECHECK_WORKERS", "4")
    monkeypatch.setenv("SHARECHECK_STRICT", "yes")
    monkeypatch.setenv("SHARECHECK_LOG_LEVEL", "debug")

    policy_module = importlib.import_module("sharecheck.policy")
    reloaded = importlib.reload(policy_module)

    try:
        policy = reloaded.policy
        assert policy.max_subsets == 500
        assert policy.workers == 4
        assert policy.strict is True
        assert policy.log_level == "DEBUG"
    finally:
        monkeypatch.delenv("SHARECHECK_MAX_SUBSETS", raising=False)
        monkeypatch.delenv("SHARECHECK_WORKERS", raising=False)
        monkeypatch.delenv("SHARECHECK_STRICT", raising=False)
        monkeypatch.delenv("SHARECHECK_LOG_LEVEL", raising=False)
        importlib.reload(policy_module)


def test_malformed_env_falls_back(monkeypatch):
    from sharecheck.policy import ResolverPolicy, load_policy

    monkeypatch.setenv("SHARECHECK_MAX_SUBSETS", "lots")
    monkeypatch.setenv("SHARECHECK_WORKERS", "0")
    monkeypatch.setenv("SHARECHECK_STRICT", "maybe")
    monkeypatch.setenv("SHARECHECK_LOG_LEVEL", "chatty")
    assert load_policy() == ResolverPolicy()


def test_yaml_file_overrides_env(tmp_path, monkeypatch):
    from sharecheck.policy import load_policy

    monkeypatch.setenv("SHARECHECK_WORKERS", "3")
    config = tmp_path / "policy.yaml"
    config.write_text("max_subsets: 42\nstrict: true\nlog_level: info\n", encoding="utf-8")

    policy = load_policy(config)
    assert policy.max_subsets == 42
    assert policy.strict is True
    assert policy.log_level == "INFO"
    assert policy.workers == 3


@pytest.mark.parametrize(
    "text",
    ["- just\n- a list\n", "colour: blue\n", "workers: many\n", "strict: 3\n", "max_subsets: 0\n", "key: [\n"],
)
def test_bad_yaml_rejected(tmp_path, text):
    from sharecheck.policy import load_policy

    config = tmp_path / "policy.yaml"
    config.write_text(text, encoding="utf-8")
    with pytest.raises(ConfigurationError):
        load_policy(config)


def test_empty_yaml_keeps_defaults(tmp_path):
    from sharecheck.policy import ResolverPolicy, load_policy

    config = tmp_path / "policy.yaml"
    config.write_text("", encoding="utf-8")
    assert load_policy(config) == ResolverPolicy()


def test_with_overrides_skips_none():
    from sharecheck.policy import ResolverPolicy

    base = ResolverPolicy(workers=2)
    updated = base.with_overrides(workers=None, strict=True)
    assert updated.workers == 2 and updated.strict is True
    assert base.strict is False


def test_unreadable_policy_file(tmp_path):
    from sharecheck.policy import load_policy

    latin = tmp_path / "latin.yaml"
    latin.write_bytes(b"log_level: \xe9\n")
    with pytest.raises(ConfigurationError):
        load_policy(latin)
    with pytest.raises(ConfigurationError):
        load_policy(tmp_path)
