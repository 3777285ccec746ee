import re

mention_pattern = re.compile(r'<@([A-Za-z0-9]+)')


def user_display(user_id):
    return '<@{}>'.format(user_id)


def parse_mentions(text):
    if not text:
        return []
    res = []
    for user_id in mention_pattern.findall(text):
        if user_id not in res:
            res.append(user_id)
    return res


def is_human(user_info):
    c1 = not user_info.get('is_bot')
    c2 = not user_info.get('deleted')
    c3 = user_info['id'] != 'USLACKBOT'
    return c1 and c2 and c3


def filter_human_members(channel_members, workspace_members):
    humans = {m['id'] for m in workspace_members if is_human(m)}
    return [m for m in channel_members if m in humans]


def sort_scores(scores):
    return sorted(scores.items(), key=lambda item: (-item[1], item[0]))
