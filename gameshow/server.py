from flask import Flask, request, make_response
from gameshow import message_actions as ma
from gameshow import slash_command as sc

welcome_msg = 'Welcome to Gameshow!'


def create_app(verification_token, build_game_func, dispatch_func, logger):
    app = Flask(__name__)

    @app.route('/', methods=['GET'])
    def root():
        resp = make_response(welcome_msg, 200)
        resp.mimetype = 'text/plain'
        return resp

    @app.route('/start', methods=['POST'])
    def start():
        return sc.handle_slash_command(
            request.form, verification_token, build_game_func, logger)

    @app.route('/action', methods=['POST'])
    def action():
        return ma.handle_message_actions(
            request.form, verification_token, dispatch_func, logger)

    return app
