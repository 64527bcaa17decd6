import pytest

from config import load_settings, DEFAULT_FILENAME, DEFAULT_MAX_RESULTS
from errors import ConfigurationError

ENV = {
    'JIRA_BASE_URL': 'https://example.atlassian.net/',
    'JIRA_EMAIL': 'dev@example.com',
    'JIRA_API_TOKEN': 'tok',
    'JIRA_PROJECT_KEY': 'PROJ',
}
ALL_VARS = list(ENV) + ['JIRA_ISSUE_TYPE', 'JIRA_MAX_RESULTS', 'JIRA_OUTPUT_DIR', 'JIRA_OUTPUT_FILE', 'JIRA_STORY_POINTS_FIELD']


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    # register every variable so values loaded from .env files are undone at teardown
    for name in ALL_VARS:
        monkeypatch.setenv(name, '')
        monkeypatch.delenv(name)
    # empty .env so python-dotenv never picks up a developer's real one
    env_file = tmp_path / '.env'
    env_file.write_text('', encoding='utf-8')
    return str(env_file)


def test_loads_from_environment(monkeypatch, clean_env):
    for name, value in ENV.items():
        monkeypatch.setenv(name, value)
    settings = load_settings(env_file=clean_env)
    assert settings.base_url == 'https://example.atlassian.net'
    assert settings.project_key == 'PROJ'
    assert settings.max_results == DEFAULT_MAX_RESULTS
    assert settings.filename == DEFAULT_FILENAME
    assert settings.api_url == 'https://example.atlassian.net/rest/api/3'


def test_overrides_take_precedence(monkeypatch, clean_env):
    for name, value in ENV.items():
        monkeypatch.setenv(name, value)
    monkeypatch.setenv('JIRA_MAX_RESULTS', '10')
    settings = load_settings(env_file=clean_env, project_key='OTHER', max_results=25, issue_type=None)
    assert settings.project_key == 'OTHER'
    assert settings.max_results == 25
    assert settings.issue_type == 'Story'


def test_reads_env_file(clean_env, tmp_path):
    env_file = tmp_path / 'custom.env'
    env_file.write_text('\n'.join(f'{k}={v}' for k, v in ENV.items()) + '\nJIRA_MAX_RESULTS=7\n', encoding='utf-8')
    settings = load_settings(env_file=str(env_file))
    assert settings.email == 'dev@example.com'
    assert settings.max_results == 7


def test_missing_values_listed(clean_env):
    with pytest.raises(ConfigurationError) as excinfo:
        load_settings(env_file=clean_env, base_url='https://example.atlassian.net')
    message = str(excinfo.value)
    assert 'JIRA_EMAIL' in message
    assert 'JIRA_API_TOKEN' in message
    assert 'JIRA_PROJECT_KEY' in message
    assert 'JIRA_BASE_URL' not in message


@pytest.mark.parametrize('value', ['abc', '0', '-3'])
def test_invalid_max_results(monkeypatch, clean_env, value):
    for name, env_value in ENV.items():
        monkeypatch.setenv(name, env_value)
    monkeypatch.setenv('JIRA_MAX_RESULTS', value)
    with pytest.raises(ConfigurationError):
        load_settings(env_file=clean_env)


def test_output_file_env_and_timeout_override(monkeypatch, clean_env):
    for name, value in ENV.items():
        monkeypatch.setenv(name, value)
    monkeypatch.setenv('JIRA_OUTPUT_FILE', 'stories.json')
    monkeypatch.setenv('JIRA_STORY_POINTS_FIELD', 'customfield_10028')
    settings = load_settings(env_file=clean_env, timeout=12.5)
    assert settings.filename == 'stories.json'
    assert settings.story_points_field == 'customfield_10028'
    assert settings.timeout == 12.5
    assert load_settings(env_file=clean_env).timeout is None
