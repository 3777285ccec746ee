from gameshow import utils


class Game:

    def __init__(self, team_id, db, slack_client, runner, logger):
        self.team_id = team_id
        self.db = db
        self.slack_client = slack_client
        self.runner = runner
        self.logger = logger

        self.firestore_reader = utils.firestore.FirestoreReader(
            self.db, self.team_id)
        self.ref = self.firestore_reader.build_game_ref()
        self.firestore_editor = utils.firestore.FirestoreEditor(self)
        self.slack_operator = utils.slack.SlackOperator(self)

        self.load(self.firestore_reader.get_game_dict())

    def load(self, game_dict):
        self.dict = game_dict
        self.exists = bool(self.dict)
        self.channel_id = self.dict.get('channelId')
        self.created_user_id = self.dict.get('createdUserId')
        self.scores = self.dict.get('scores') or dict()
        self.buzzed_user = self.dict.get('buzzedUser')
        self.buzzer_messages_data = self.dict.get('buzzerMessagesData') or []

    @property
    def contestants(self):
        return sorted(self.scores)

    def is_contestant(self, user_id):
        return user_id in self.scores

    def compute_scores(self, user_id, points):
        res = dict(self.scores)
        res[user_id] = res.get(user_id, 0) + points
        return res
