from copy import deepcopy
from gameshow.utils import jsons
from gameshow.utils import users


def get_block(basename):
    return jsons.get_json('blocks', basename)


divider_block = get_block('divider.json')
text_block_template = get_block('text.json')
plain_text_block_template = get_block('plain_text.json')
actions_block_template = get_block('actions.json')
button_template = get_block('button.json')
static_select_template = get_block('static_select.json')
option_template = get_block('option.json')

header_msgs = {
    'start': 'A new GameShow has been started for the following users:',
    'continue': 'Current scores:',
    'waiting': 'Waiting for someone to buzz in. Current scores:',
    'finish': 'GameShow ended. Here are the final scores:',
}

statuses = tuple(header_msgs)


def build_text_block(msg):
    res = deepcopy(text_block_template)
    res['text']['text'] = msg
    return res


def build_plain_text_block(msg):
    res = deepcopy(plain_text_block_template)
    res['text']['text'] = msg
    return res


def build_button(msg, action_name, style=None):
    res = deepcopy(button_template)
    res['text']['text'] = msg
    res['action_id'] = action_name
    res['value'] = action_name
    if style:
        res['style'] = style
    return res


def build_option(msg, value):
    res = deepcopy(option_template)
    res['text']['text'] = msg
    res['value'] = value
    return res


def build_static_select(placeholder, action_name, values):
    res = deepcopy(static_select_template)
    res['placeholder']['text'] = placeholder
    res['action_id'] = action_name
    res['options'] = [build_option(str(v), str(v)) for v in values]
    return res


def build_actions_block(elements):
    res = deepcopy(actions_block_template)
    res['elements'] = elements
    return res


def build_start_game_button():
    return build_button('Start Game', 'startGame', 'primary')


def build_cancel_game_button():
    return build_button('Cancel', 'cancelGame', 'danger')


def build_continue_game_button():
    return build_button('Continue playing', 'continueGame', 'primary')


def build_next_question_button():
    return build_button('Next Question', 'nextQuestion', 'primary')


def build_finish_game_button():
    return build_button('Finish Game', 'finishGame', 'danger')


def build_buzz_button():
    return build_button('Buzz!!', 'buzz', 'primary')


def build_score_block(user_id, score):
    msg = '*{}*: {}'.format(users.user_display(user_id), score)
    return build_text_block(msg)


def build_score_blocks(scores):
    return [build_score_block(user_id, score)
            for user_id, score in users.sort_scores(scores)]


def build_score_sheet_footer_block(game_status):
    if game_status == 'finish':
        return build_plain_text_block('Congratulations to the winner!')
    if game_status == 'start':
        return build_actions_block([build_finish_game_button()])
    return build_actions_block([
        build_next_question_button(),
        build_finish_game_button()])


def build_score_sheet(scores, game_status='continue'):
    assert game_status in statuses
    header_block = build_plain_text_block(header_msgs[game_status])
    score_blocks = build_score_blocks(scores)
    footer_block = build_score_sheet_footer_block(game_status)
    return {
        'replace_original': True,
        'blocks': [header_block] + score_blocks + [
            deepcopy(divider_block), footer_block]
    }
