"""
Hádej slovo Application Package

A Wordle-style word guessing game: the scoring algorithm and game session
state machine, served to a browser front-end through a small JSON API.
"""

from flask import Flask
from flask_cors import CORS
from .config import Config


def create_app(config_class=Config, vocabulary=None, scheduler=None):
    """
    Application factory pattern for creating Flask app instances.

    Args:
        config_class: Configuration class to use
        vocabulary: Word list to play with; loaded from WORD_LIST_PATH if omitted
        scheduler: Timer scheduler for the invalid-guess flag (tests inject one)

    Returns:
        Flask application instance with the game service initialized
    """
    app = Flask(__name__)
    app.config.from_object(config_class)
    app.json.ensure_ascii = False

    # Initialize extensions
    CORS(app)

    # Initialize the game service
    from .services.game_service import initialize_game_service
    from .services.vocabulary import Vocabulary

    if vocabulary is None:
        vocabulary = Vocabulary.from_file(
            app.config['WORD_LIST_PATH'], word_length=app.config['WORD_LENGTH']
        )

    service_options = {
        'max_guesses': app.config['MAX_GUESSES'],
        'invalid_feedback_ms': app.config['INVALID_FEEDBACK_MS'],
        'idle_timeout_seconds': app.config['GAME_IDLE_TIMEOUT_SECONDS'],
    }
    if scheduler is not None:
        service_options['scheduler'] = scheduler
    initialize_game_service(vocabulary, **service_options)

    # Register blueprints
    from .controllers.game_controller import game_bp
    app.register_blueprint(game_bp, url_prefix='/api')

    return app
