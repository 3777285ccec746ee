from gameshow.utils import blocks
from gameshow.utils import users

point_values = (1, 2, 3, 5, 10)


def build_message(blocks_, replace_original=None):
    res = {'blocks': blocks_}
    if replace_original is not None:
        res['replace_original'] = replace_original
    return res


def build_welcome_message():
    return build_message([
        blocks.build_plain_text_block('Welcome to Gameshow!'),
        blocks.build_actions_block([
            blocks.build_start_game_button(),
            blocks.build_cancel_game_button()])])


def build_game_already_started_message():
    msg = ('A game has already been started for this workspace. '
           'Would you like to keep playing or cancel the game?')
    return build_message([
        blocks.build_plain_text_block(msg),
        blocks.build_actions_block([
            blocks.build_continue_game_button(),
            blocks.build_cancel_game_button()])])


def build_no_contestants_message():
    msg = ('Nobody to play with! Mention the contestants, '
           'or start the game from a channel with members.')
    return build_message([blocks.build_plain_text_block(msg)])


def build_buzzer_message():
    return build_message([
        blocks.build_plain_text_block(
            'Get ready to answer the next question!'),
        blocks.build_actions_block([blocks.build_buzz_button()])])


def build_cancel_game_message():
    return build_message(
        [blocks.build_text_block('Game cancelled.')], replace_original=True)


def build_game_continued_message():
    return build_message(
        [blocks.build_text_block('Game continued!')], replace_original=True)


def build_game_finished_message():
    return build_message(
        [blocks.build_text_block('Game finished!')], replace_original=True)


def build_buzzed_notification_for_host(user_id):
    msg = '{} buzzed first! How many points?'.format(
        users.user_display(user_id))
    select = blocks.build_static_select(
        'Allocate points', 'allocatePoints', point_values)
    return build_message([
        blocks.build_text_block(msg),
        blocks.build_actions_block([
            blocks.build_button('Correct', 'answerCorrect', 'primary'),
            select,
            blocks.build_button('Wrong', 'answerWrong', 'danger')])])


def build_buzzed_notification_for_contestant():
    return build_message(
        [blocks.build_text_block('You buzzed first! Answer the question.')],
        replace_original=False)


def build_user_already_buzzed_message(buzzed_user):
    msg = '{} already buzzed in. Wait for the next question!'.format(
        users.user_display(buzzed_user))
    return build_message(
        [blocks.build_text_block(msg)], replace_original=False)


def build_not_a_contestant_message():
    return build_message(
        [blocks.build_text_block('You are not a contestant of this game.')],
        replace_original=False)
