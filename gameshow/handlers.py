from gameshow import utils


def get_response_url(message_action):
    return message_action['response_url']


def get_user_id(message_action):
    return message_action['user']['id']


def get_selected_points(message_action):
    action = message_action['actions'][0]
    selected_option = action.get('selected_option') or dict()
    try:
        points = int(selected_option.get('value'))
    except (TypeError, ValueError):
        return None
    if points < 0:
        return None
    return points


def log_no_game(game, action_name):
    game.logger.info('{} ignored, no game, team_id={}'.format(
        action_name, game.team_id))


def reset_round(game):
    game.slack_operator.delete_buzzers()
    buzzer_messages_data = game.slack_operator.send_buzzers()
    return {
        'buzzedUser': None,
        'buzzerMessagesData': buzzer_messages_data
    }


def start_game(game, message_action):
    if not game.exists:
        return log_no_game(game, 'startGame')
    game.slack_operator.delete_buzzers()
    buzzer_messages_data = game.slack_operator.send_buzzers()
    game.firestore_editor.update_game(
        {'buzzerMessagesData': buzzer_messages_data})
    game.slack_operator.reply(
        get_response_url(message_action),
        utils.blocks.build_score_sheet(game.scores, 'start'))
    game.logger.info('game started, nb_buzzers={}, team_id={}'.format(
        len(buzzer_messages_data), game.team_id))


def cancel_game(game, message_action):
    game.slack_operator.delete_buzzers()
    game.firestore_editor.delete_game()
    game.slack_operator.reply(
        get_response_url(message_action),
        utils.messages.build_cancel_game_message())
    game.logger.info('game cancelled, team_id={}'.format(game.team_id))


def continue_game(game, message_action):
    game.slack_operator.reply(
        get_response_url(message_action),
        utils.messages.build_game_continued_message())


def finish_game(game, message_action):
    if not game.exists:
        return log_no_game(game, 'finishGame')
    scores = game.scores
    channel_id = game.channel_id
    game.slack_operator.delete_buzzers()
    game.firestore_editor.delete_game()
    utils.slack.post_message(
        game.slack_client,
        channel_id,
        utils.blocks.build_score_sheet(scores, 'finish'))
    game.slack_operator.reply(
        get_response_url(message_action),
        utils.messages.build_game_finished_message())
    game.logger.info('game finished, team_id={}'.format(game.team_id))


def buzz(game, message_action):
    if not game.exists:
        return log_no_game(game, 'buzz')
    user_id = get_user_id(message_action)
    response_url = get_response_url(message_action)
    if not game.is_contestant(user_id):
        game.slack_operator.reply(
            response_url, utils.messages.build_not_a_contestant_message())
        return
    if not game.firestore_editor.claim_buzz(user_id):
        if not game.exists:
            return log_no_game(game, 'buzz')
        game.slack_operator.reply(
            response_url,
            utils.messages.build_user_already_buzzed_message(
                game.buzzed_user))
        game.logger.info('buzz too late, user_id={}, team_id={}'.format(
            user_id, game.team_id))
        return
    game.slack_operator.notify_host(
        utils.messages.build_buzzed_notification_for_host(user_id))
    game.slack_operator.delete_buzzers()
    game.firestore_editor.update_game({'buzzerMessagesData': []})
    game.slack_operator.reply(
        response_url,
        utils.messages.build_buzzed_notification_for_contestant())
    game.logger.info('buzz registered, user_id={}, team_id={}'.format(
        user_id, game.team_id))


def allocate(game, message_action, points):
    if not game.exists:
        return log_no_game(game, 'allocatePoints')
    if not game.buzzed_user:
        game.logger.info('points ignored, nobody buzzed, team_id={}'.format(
            game.team_id))
        return
    buzzed_user = game.buzzed_user
    fields = reset_round(game)
    fields['scores'] = game.compute_scores(buzzed_user, points)
    game.firestore_editor.update_game(fields)
    game.slack_operator.reply(
        get_response_url(message_action),
        utils.blocks.build_score_sheet(game.scores, 'continue'))
    game.logger.info('points allocated, points={}, user_id={}, team_id={}'
                     .format(points, buzzed_user, game.team_id))


def allocate_points(game, message_action):
    points = get_selected_points(message_action)
    if points is None:
        game.logger.warning('points ignored, bad value, team_id={}'.format(
            game.team_id))
        return
    allocate(game, message_action, points)


def answer_correct(game, message_action):
    allocate(game, message_action, 1)


def next_round(game, message_action):
    if not game.exists:
        return log_no_game(game, 'nextQuestion')
    game.firestore_editor.update_game(reset_round(game))
    game.slack_operator.reply(
        get_response_url(message_action),
        utils.blocks.build_score_sheet(game.scores, 'waiting'))
    game.logger.info('round reset, team_id={}'.format(game.team_id))


action_handlers = {
    'startGame': start_game,
    'cancelGame': cancel_game,
    'continueGame': continue_game,
    'finishGame': finish_game,
    'buzz': buzz,
    'answerCorrect': answer_correct,
    'allocatePoints': allocate_points,
    'answerWrong': next_round,
    'nextQuestion': next_round,
}


def handle_action(action_name, message_action, build_game_func):
    team_id = message_action['team']['id']
    game = build_game_func(team_id)
    action_handlers[action_name](game, message_action)
