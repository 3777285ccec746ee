import pytest
from gameshow.utils import conf
from gameshow.utils.exceptions import ConfError


def write_conf(tmp_path, content):
    path = tmp_path / 'conf.yaml'
    path.write_text(content)
    return str(path)


def test_load_conf_from_file_and_environment(tmp_path):
    path = write_conf(tmp_path, 'port: 8080\nverification_token: file\n')
    environ = {'VERIFICATION_TOKEN': 'env', 'BOT_USER_ACCESS_TOKEN': 'xoxb',
               'MAX_WORKERS': '2'}
    res = conf.load_conf(path, environ)
    assert res['verification_token'] == 'env'
    assert res['slack_token'] == 'xoxb'
    assert res['port'] == 8080
    assert res['max_workers'] == 2
    assert res['dispatch_mode'] == 'thread'
    assert res['slack_base_url'] == 'https://slack.com/api/'


def test_load_conf_without_file(tmp_path):
    environ = {'VERIFICATION_TOKEN': 'v', 'BOT_USER_ACCESS_TOKEN': 'b',
               'PORT': '5000'}
    res = conf.load_conf(str(tmp_path / 'missing.yaml'), environ)
    assert res['port'] == 5000


def test_load_conf_missing_secret(tmp_path):
    with pytest.raises(ConfError):
        conf.load_conf(None, {'VERIFICATION_TOKEN': 'v'})


def test_load_conf_bad_dispatch_mode():
    environ = {'VERIFICATION_TOKEN': 'v', 'BOT_USER_ACCESS_TOKEN': 'b',
               'DISPATCH_MODE': 'carrier_pigeon'}
    with pytest.raises(ConfError):
        conf.load_conf(None, environ)


def test_load_conf_pubsub_needs_project():
    environ = {'VERIFICATION_TOKEN': 'v', 'BOT_USER_ACCESS_TOKEN': 'b',
               'DISPATCH_MODE': 'pubsub'}
    with pytest.raises(ConfError):
        conf.load_conf(None, environ)
    environ['GOOGLE_CLOUD_PROJECT'] = 'project'
    assert conf.load_conf(None, environ)['project_id'] == 'project'
