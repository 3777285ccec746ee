import json
from flask import make_response
from gameshow import handlers
from gameshow import utils


def get_action_name(message_action):
    actions = message_action.get('actions') or []
    if not actions:
        return None
    action = actions[0]
    action_id = action.get('action_id')
    if action_id in handlers.action_handlers:
        return action_id
    value = action.get('value')
    if value in handlers.action_handlers:
        return value
    return None


def handle_message_actions(form, verification_token, dispatch_func, logger):
    message_action = json.loads(form['payload'])
    resp = utils.exceptions.check_token(
        message_action.get('token'), verification_token, logger)
    if resp:
        return resp
    action_name = get_action_name(message_action)
    if action_name is None:
        logger.info('message_action ignored, unknown action')
        return make_response('', 200)
    dispatch_func(action_name, message_action)
    logger.info('{} dispatched, team_id={}'.format(
        action_name, message_action['team']['id']))
    return make_response('', 200)


def build_thread_dispatch_func(runner, build_game_func):
    def dispatch(action_name, message_action):
        runner.submit(
            handlers.handle_action,
            action_name,
            message_action,
            build_game_func)
    return dispatch


def build_pubsub_dispatch_func(triggerer):
    def dispatch(action_name, message_action):
        triggerer.trigger_handle_message_action(action_name, message_action)
    return dispatch
