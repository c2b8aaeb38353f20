from nexus_unlocks.utils import env


def test_settings_defaults(monkeypatch):
    for name in ('DATABASE_URL', 'NEXUS_WELCOME_CARD', 'LOG_LEVEL', 'NEXUS_USER_ID'):
        monkeypatch.delenv(name, raising=False)

    settings = env.load_settings()

    assert settings.database_url is None
    assert settings.welcome_card_id == 'card_ledger'
    assert settings.log_level == 'INFO'
    assert settings.user_id == 'default'


def test_settings_from_environment(monkeypatch):
    monkeypatch.setenv('DATABASE_URL', 'postgresql://db/nexus')
    monkeypatch.setenv('NEXUS_WELCOME_CARD', 'card_mint')
    monkeypatch.setenv('LOG_LEVEL', 'debug')
    monkeypatch.setenv('NEXUS_USER_ID', 'ana')

    settings = env.load_settings()

    assert settings.database_url == 'postgresql://db/nexus'
    assert settings.welcome_card_id == 'card_mint'
    assert settings.log_level == 'DEBUG'
    assert settings.user_id == 'ana'


def test_load_env_reads_named_file(tmp_path, monkeypatch):
    env_file = tmp_path / 'custom.env'
    env_file.write_text('NEXUS_USER_ID=from-file\n')
    monkeypatch.setenv('ENV_FILE', str(env_file))
    # registers NEXUS_USER_ID for cleanup after load_dotenv sets it
    monkeypatch.setenv('NEXUS_USER_ID', 'placeholder')
    monkeypatch.delenv('NEXUS_USER_ID')

    assert env.load_env() == env_file
    assert env.load_settings().user_id == 'from-file'


def test_load_env_without_files_returns_none(tmp_path, monkeypatch):
    monkeypatch.delenv('ENV_FILE', raising=False)
    monkeypatch.setattr(env, 'project_root', lambda: tmp_path)

    assert env.load_env() is None


def test_project_root_finds_marker(tmp_path):
    (tmp_path / 'pyproject.toml').write_text('')
    nested = tmp_path / 'a' / 'b'
    nested.mkdir(parents=True)

    assert env.project_root(nested) == tmp_path.resolve()
