from google.api_core.exceptions import AlreadyExists
from google.cloud import firestore
from gameshow.utils.exceptions import GameAlreadyStarted

games_collection = 'games'


def get_games_ref(db):
    return db.collection(games_collection)


def get_game_ref(db, team_id):
    return get_games_ref(db).document(team_id)


def get_game_dict(db, team_id):
    return get_game_ref(db, team_id).get().to_dict() or dict()


def build_game_dict(team_id, channel_id, created_user_id, user_ids):
    return {
        'teamId': team_id,
        'channelId': channel_id,
        'createdUserId': created_user_id,
        'scores': {user_id: 0 for user_id in user_ids},
        'buzzedUser': None,
        'buzzerMessagesData': []
    }


def create_game_dict(db, team_id, game_dict):
    try:
        get_game_ref(db, team_id).create(game_dict)
    except AlreadyExists:
        raise GameAlreadyStarted(team_id)


def resolve_buzz(game_dict, user_id):
    """Return the fields a buzz by user_id writes, or None if it loses.

    A buzz loses when there is no game or someone already buzzed in.
    """
    if not game_dict or game_dict.get('buzzedUser'):
        return None
    return {'buzzedUser': user_id}


@firestore.transactional
def claim_buzz_in_transaction(transaction, game_ref, user_id):
    game_dict = game_ref.get(transaction=transaction).to_dict() or dict()
    fields = resolve_buzz(game_dict, user_id)
    if fields is None:
        return False, game_dict
    transaction.update(game_ref, fields)
    game_dict.update(fields)
    return True, game_dict


def claim_buzz(db, game_ref, user_id):
    return claim_buzz_in_transaction(db.transaction(), game_ref, user_id)


class FirestoreReader:
    def __init__(self, db, team_id):
        self.db = db
        self.team_id = team_id

    def get_game_dict(self):
        return get_game_dict(self.db, self.team_id)

    def build_game_ref(self):
        return get_game_ref(self.db, self.team_id)


class FirestoreEditor:

    def __init__(self, game):
        self.game = game

    def create_game(self, game_dict):
        create_game_dict(self.game.db, self.game.team_id, game_dict)
        self.game.load(game_dict)

    def update_game(self, fields):
        self.game.ref.update(fields)
        self.game.dict.update(fields)
        self.game.load(self.game.dict)

    def claim_buzz(self, user_id):
        claimed, game_dict = claim_buzz(self.game.db, self.game.ref, user_id)
        self.game.load(game_dict)
        return claimed

    def delete_game(self):
        self.game.ref.delete()
        self.game.load(dict())
