import os
import yaml
from gameshow.utils.exceptions import ConfError

env_overrides = {
    'verification_token': 'VERIFICATION_TOKEN',
    'slack_token': 'BOT_USER_ACCESS_TOKEN',
    'slack_base_url': 'SLACK_BASE_URL',
    'project_id': 'GOOGLE_CLOUD_PROJECT',
    'dispatch_mode': 'DISPATCH_MODE',
    'action_topic': 'ACTION_TOPIC',
    'max_workers': 'MAX_WORKERS',
    'host': 'HOST',
    'port': 'PORT',
    'log_level': 'LOG_LEVEL',
}

defaults = {
    'slack_base_url': 'https://slack.com/api/',
    'dispatch_mode': 'thread',
    'action_topic': 'topic_handle_message_action',
    'max_workers': 8,
    'host': '0.0.0.0',
    'port': 3000,
    'log_level': 'INFO',
}

required_keys = ('verification_token', 'slack_token')
int_keys = ('max_workers', 'port')
dispatch_modes = ('thread', 'pubsub')


def load_conf(path, environ=None):
    if environ is None:
        environ = os.environ
    conf = dict(defaults)
    if path is not None and os.path.exists(path):
        with open(path) as f:
            conf.update(yaml.safe_load(f) or dict())
    for key, env_name in env_overrides.items():
        if environ.get(env_name):
            conf[key] = environ[env_name]
    for key in required_keys:
        if not conf.get(key):
            raise ConfError('missing configuration key: {}'.format(key))
    for key in int_keys:
        conf[key] = int(conf[key])
    if conf['dispatch_mode'] not in dispatch_modes:
        raise ConfError('bad dispatch_mode: {}'.format(conf['dispatch_mode']))
    if conf['dispatch_mode'] == 'pubsub' and not conf.get('project_id'):
        raise ConfError('pubsub dispatch_mode requires project_id')
    return conf
