from flask import make_response


class GameAlreadyStarted(Exception):
    def __init__(self, team_id):
        super().__init__('game already started, team_id={}'.format(team_id))
        self.team_id = team_id


class ConfError(Exception):
    pass


def check_token(token, verification_token, logger):
    if token != verification_token:
        logger.warning('request rejected, bad verification token')
        return make_response('Forbidden', 403)
