import os
import logging
import google.cloud.firestore
import google.cloud.pubsub_v1
from concurrent.futures import ThreadPoolExecutor
from slack_sdk import WebClient
from gameshow import handlers
from gameshow import message_actions as ma
from gameshow import slash_command as sc
from gameshow import utils as ut
from gameshow.game import Game
from gameshow.server import create_app

dir_path = os.path.realpath(os.path.dirname(__file__))
conf = ut.conf.load_conf(os.path.join(dir_path, 'conf.yaml'))

logging.basicConfig(
    format='%(asctime)s - %(levelname)s - %(message)s',
    level=conf['log_level'])
logger = logging.getLogger()

verification_token = conf['verification_token']
project_id = conf.get('project_id')
db = google.cloud.firestore.Client(project=project_id)
slack_client = WebClient(
    token=conf['slack_token'], base_url=conf['slack_base_url'])
runner = ut.tasks.TaskRunner(
    ThreadPoolExecutor(max_workers=conf['max_workers']), logger)
action_runner = ut.tasks.TaskRunner(
    ThreadPoolExecutor(max_workers=conf['max_workers']), logger)


def build_game(team_id):
    return Game(
        team_id=team_id,
        db=db,
        slack_client=slack_client,
        runner=runner,
        logger=logger)


if conf['dispatch_mode'] == 'pubsub':
    publisher = google.cloud.pubsub_v1.PublisherClient()
    triggerer = ut.pubsub.Triggerer(
        publisher, project_id, conf['action_topic'])
    dispatch = ma.build_pubsub_dispatch_func(triggerer)
else:
    dispatch = ma.build_thread_dispatch_func(action_runner, build_game)

app = create_app(verification_token, build_game, dispatch, logger)


def slash_command(request):
    return sc.handle_slash_command(
        request.form, verification_token, build_game, logger)


def message_actions(request):
    return ma.handle_message_actions(
        request.form, verification_token, dispatch, logger)


def handle_message_action(event, context):
    assert context == context
    action_name, message_action = ut.pubsub.event_to_message_action(event)
    handlers.handle_action(action_name, message_action, build_game)
    logger.info('{} handled, team_id={}'.format(
        action_name, message_action['team']['id']))


if __name__ == '__main__':
    logger.info('Gameshow app listening on port {}'.format(conf['port']))
    app.run(host=conf['host'], port=conf['port'])
