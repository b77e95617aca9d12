import importlib


def test_policy_env_overrides(monkeypatch):
    monkeypatch.setenv("SHAMIR_RECOVER_MAX_WORKERS", "8")
    monkeypatch.setenv("SHAMIR_RECOVER_LOG_LEVEL", "debug")
    monkeypatch.setenv("SHAMIR_RECOVER_VERIFY", "yes")

    policy_module = importlib.import_module("shamir_recover.policy")
    reloaded = importlib.reload(policy_module)

    try:
        policy = reloaded.policy
        assert policy.max_workers == 8
        assert policy.log_level == "DEBUG"
        assert policy.verify_consistency is True
    finally:
        monkeypatch.delenv("SHAMIR_RECOVER_MAX_WORKERS", raising=False)
        monkeypatch.delenv("SHAMIR_RECOVER_LOG_LEVEL", raising=False)
        monkeypatch.delenv("SHAMIR_RECOVER_VERIFY", raising=False)
        importlib.reload(policy_module)


def test_policy_bad_values_fall_back(monkeypatch):
    monkeypatch.setenv("SHAMIR_RECOVER_MAX_WORKERS", "many")
    monkeypatch.setenv("SHAMIR_RECOVER_VERIFY", "maybe")
    from shamir_recover.policy import load_policy

    loaded = load_policy()
    assert loaded.max_workers == 1
    assert loaded.verify_consistency is False


def test_policy_workers_floor(monkeypatch):
    monkeypatch.setenv("SHAMIR_RECOVER_MAX_WORKERS", "-3")
    from shamir_recover.policy import load_policy

    assert load_policy().max_workers == 1
