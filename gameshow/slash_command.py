from flask import make_response
from gameshow import utils


def resolve_contestants(game, channel_id, text):
    mentioned = utils.users.parse_mentions(text)
    if mentioned:
        return mentioned
    return utils.slack.get_contestants(game.slack_client, channel_id)


def reply_already_started(game, response_url):
    game.slack_operator.reply(
        response_url,
        utils.messages.build_game_already_started_message())
    game.logger.info('game already started, team_id={}'.format(
        game.team_id))


def start_game_intake(game, form):
    channel_id = form['channel_id']
    created_user_id = form['user_id']
    response_url = form['response_url']

    if game.exists:
        return reply_already_started(game, response_url)

    user_ids = resolve_contestants(game, channel_id, form.get('text'))
    if not user_ids:
        game.slack_operator.reply(
            response_url, utils.messages.build_no_contestants_message())
        game.logger.info('game not created, no contestants, team_id={}'
                         .format(game.team_id))
        return

    game_dict = utils.firestore.build_game_dict(
        game.team_id, channel_id, created_user_id, user_ids)
    try:
        game.firestore_editor.create_game(game_dict)
    except utils.exceptions.GameAlreadyStarted:
        return reply_already_started(game, response_url)
    game.slack_operator.reply(
        response_url, utils.messages.build_welcome_message())
    game.logger.info('game created, nb_contestants={}, team_id={}'.format(
        len(user_ids), game.team_id))


def handle_slash_command(form, verification_token, build_game_func, logger):
    resp = utils.exceptions.check_token(
        form.get('token'), verification_token, logger)
    if resp:
        return resp
    game = build_game_func(form['team_id'])
    start_game_intake(game, form)
    return make_response('', 200)
