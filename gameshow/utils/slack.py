from slack_sdk.errors import SlackApiError
from slack_sdk.webhook import WebhookClient
from gameshow import utils


def get_paginated_members(slack_client, api_method, params):
    res = []
    cursor = None
    while True:
        page_params = dict(params)
        if cursor:
            page_params['cursor'] = cursor
        resp = slack_client.api_call(
            api_method, http_verb='GET', params=page_params)
        res += resp['members']
        cursor = (resp.get('response_metadata') or {}).get('next_cursor')
        if not cursor:
            return res


def get_channel_members(slack_client, channel_id):
    return get_paginated_members(
        slack_client, 'conversations.members', {'channel': channel_id})


def get_workspace_members(slack_client):
    return get_paginated_members(slack_client, 'users.list', dict())


def get_contestants(slack_client, channel_id):
    channel_members = get_channel_members(slack_client, channel_id)
    workspace_members = get_workspace_members(slack_client)
    return utils.users.filter_human_members(
        channel_members, workspace_members)


def open_im(slack_client, user_id):
    return slack_client.api_call(
        'conversations.open',
        json={'users': user_id})['channel']['id']


def post_message(slack_client, channel_id, message):
    json_ = dict(message, channel=channel_id)
    resp = slack_client.api_call('chat.postMessage', json=json_)
    return {'channel': resp['channel'], 'ts': resp['ts']}


def post_ephemeral(slack_client, channel_id, user_id, message):
    json_ = dict(message, channel=channel_id, user=user_id)
    slack_client.api_call('chat.postEphemeral', json=json_)


def delete_message(slack_client, channel_id, ts):
    slack_client.api_call(
        'chat.delete',
        json={'channel': channel_id, 'ts': ts})


def reply(response_url, message):
    resp = WebhookClient(response_url).send_dict(message)
    return resp.status_code


class SlackOperator:
    def __init__(self, game):
        self.game = game

    @property
    def slack_client(self):
        return self.game.slack_client

    @property
    def logger(self):
        return self.game.logger

    def post_ephemeral(self, user_id, message):
        post_ephemeral(
            self.slack_client, self.game.channel_id, user_id, message)

    def notify_host(self, message):
        self.post_ephemeral(self.game.created_user_id, message)

    def reply(self, response_url, message):
        status_code = reply(response_url, message)
        if status_code != 200:
            self.logger.warning(
                'reply failed, status_code={}, team_id={}'.format(
                    status_code, self.game.team_id))

    def send_buzzer(self, user_id):
        try:
            channel_id = open_im(self.slack_client, user_id)
            return post_message(
                self.slack_client,
                channel_id,
                utils.messages.build_buzzer_message())
        except SlackApiError as e:
            self.logger.error(
                'buzzer not sent, user_id={}, team_id={}, error={}'.format(
                    user_id, self.game.team_id, e.response.get('error')))

    def delete_buzzer(self, buzzer_message_data):
        channel_id = buzzer_message_data['channel']
        ts = buzzer_message_data['ts']
        try:
            delete_message(self.slack_client, channel_id, ts)
        except SlackApiError as e:
            self.logger.error(
                'buzzer not deleted, channel_id={}, ts={}, error={}'.format(
                    channel_id, ts, e.response.get('error')))

    def send_buzzers(self):
        buzzer_messages_data = self.game.runner.fan_out(
            self.send_buzzer, self.game.contestants)
        return [d for d in buzzer_messages_data if d is not None]

    def delete_buzzers(self):
        self.game.runner.fan_out(
            self.delete_buzzer, self.game.buzzer_messages_data)
