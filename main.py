"""
Hádej slovo Server - Main Entry Point

This is the main entry point for the game server.
It creates the Flask application and starts serving the game API.
"""

import os
from hadej import create_app
from hadej.config import config
from hadej.services.game_service import get_game_service
from hadej.utils.game_logger import game_logger


def main():
    """Main function to initialize services and start the server."""
    config_class = config.get(os.getenv('APP_ENV', 'default'), config['default'])
    try:
        print("Creating Flask application...")
        app = create_app(config_class)
        game_service = get_game_service()
        stats = game_service.vocabulary.word_statistics()
        print(f"✓ Game service initialized with {stats['total_words']} words"
              f"{' (fallback list)' if stats['is_fallback'] else ''}")

        game_logger.logger.info("Game Server Starting")

        print(f"\nStarting game server on {config_class.HOST}:{config_class.PORT}")
        print(f"Debug mode: {config_class.DEBUG}")
        print("=" * 50)

        app.run(host=config_class.HOST, port=config_class.PORT, debug=config_class.DEBUG)

    except KeyboardInterrupt:
        print("\nServer shutting down...")
        game_logger.logger.info("Game Server shutting down (KeyboardInterrupt)")
    except Exception as e:
        print(f"Error starting server: {e}")
        game_logger.logger.error(f"Error starting server: {e}")
        raise
    finally:
        game_service = get_game_service()
        if game_service:
            game_service.close()


if __name__ == '__main__':
    main()
