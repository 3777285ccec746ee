import json
import logging
import pytest
from concurrent.futures import Future
from copy import deepcopy
from unittest.mock import Mock
from flask import Flask
from google.api_core.exceptions import AlreadyExists, NotFound
from gameshow import utils
from gameshow.game import Game

VERIFICATION_TOKEN = 'verification_token'


class FakeSnapshot:
    def __init__(self, data):
        self._data = deepcopy(data)

    @property
    def exists(self):
        return self._data is not None

    def to_dict(self):
        return deepcopy(self._data)


class FakeDocumentRef:
    def __init__(self, documents, path):
        self.documents = documents
        self.path = path

    def get(self, transaction=None):
        return FakeSnapshot(self.documents.get(self.path))

    def create(self, data):
        if self.path in self.documents:
            raise AlreadyExists(self.path)
        self.documents[self.path] = deepcopy(data)

    def update(self, fields):
        if self.path not in self.documents:
            raise NotFound(self.path)
        self.documents[self.path].update(deepcopy(fields))

    def delete(self):
        self.documents.pop(self.path, None)


class FakeCollectionRef:
    def __init__(self, documents, name):
        self.documents = documents
        self.name = name

    def document(self, document_id):
        return FakeDocumentRef(
            self.documents, '{}/{}'.format(self.name, document_id))


class FakeDb:
    def __init__(self):
        self.documents = dict()

    def collection(self, name):
        return FakeCollectionRef(self.documents, name)

    def game_dict(self, team_id):
        return self.documents.get('games/{}'.format(team_id))


class FakeSlackClient:
    def __init__(self):
        self.calls = []
        self.nb_posts = 0
        self.channel_members = []
        self.workspace_members = []

    def api_call(self, api_method, http_verb='POST', params=None, json=None):
        self.calls.append((api_method, params or json))
        if api_method == 'conversations.open':
            return {'ok': True, 'channel': {'id': 'D' + json['users']}}
        if api_method == 'chat.postMessage':
            self.nb_posts += 1
            return {'ok': True, 'channel': json['channel'],
                    'ts': '{}.000'.format(self.nb_posts)}
        if api_method == 'conversations.members':
            return {'ok': True, 'members': self.channel_members,
                    'response_metadata': {'next_cursor': ''}}
        if api_method == 'users.list':
            return {'ok': True, 'members': self.workspace_members}
        return {'ok': True}

    def calls_to(self, api_method):
        return [args for method, args in self.calls if method == api_method]


class SyncExecutor:
    def submit(self, fn, *args):
        future = Future()
        try:
            future.set_result(fn(*args))
        except Exception as e:
            future.set_exception(e)
        return future

    def map(self, fn, items):
        return map(fn, items)


def fake_claim_buzz(db, game_ref, user_id):
    game_dict = game_ref.get().to_dict() or dict()
    fields = utils.firestore.resolve_buzz(game_dict, user_id)
    if fields is None:
        return False, game_dict
    game_ref.update(fields)
    game_dict.update(fields)
    return True, game_dict


def build_message_action(
        action_name, user_id='UHOST', team_id='T1', selected_value=None,
        token=VERIFICATION_TOKEN):
    action = {'action_id': action_name, 'value': action_name}
    if selected_value is not None:
        action = {'action_id': action_name,
                  'selected_option': {'value': selected_value}}
    return {
        'token': token,
        'response_url': 'https://hooks.slack.com/actions/{}'.format(user_id),
        'team': {'id': team_id},
        'channel': {'id': 'C1'},
        'user': {'id': user_id},
        'actions': [action]
    }


def build_action_form(message_action):
    return {'payload': json.dumps(message_action)}


@pytest.fixture(autouse=True)
def app_context():
    with Flask('gameshow_tests').app_context():
        yield


@pytest.fixture
def logger():
    return logging.getLogger('gameshow_tests')


@pytest.fixture
def db(monkeypatch):
    monkeypatch.setattr(utils.firestore, 'claim_buzz', fake_claim_buzz)
    return FakeDb()


@pytest.fixture
def slack_client():
    return FakeSlackClient()


@pytest.fixture
def runner(logger):
    return utils.tasks.TaskRunner(SyncExecutor(), logger)


@pytest.fixture
def build_game(db, slack_client, runner, logger):
    def build_game_func(team_id):
        return Game(
            team_id=team_id,
            db=db,
            slack_client=slack_client,
            runner=runner,
            logger=logger)
    return build_game_func


@pytest.fixture(autouse=True)
def replies(monkeypatch):
    res = []

    class FakeWebhookClient:
        def __init__(self, url):
            self.url = url

        def send_dict(self, body):
            res.append((self.url, body))
            return Mock(status_code=200)

    monkeypatch.setattr(utils.slack, 'WebhookClient', FakeWebhookClient)
    return res


@pytest.fixture
def started_game(db):
    db.documents['games/T1'] = utils.firestore.build_game_dict(
        'T1', 'C1', 'UHOST', ['UA', 'UB'])
    return db
