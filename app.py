"""
Flask Web Application for the Troubleshooting Bot

Small JSON API around a single conversation.
"""

import logging
import threading

from flask import Flask, jsonify, request

from chatbot import config
from chatbot.core.conversation_engine import ConversationEngine
from chatbot.errors import UnknownQuestionError

logger = logging.getLogger(__name__)


def create_app(engine=None, questions_path=None):
    """
    Build the Flask app around one conversation.

    Args:
        engine: ConversationEngine to serve (built from questions_path if None)
        questions_path: Questions file, defaults to config.QUESTIONS_PATH

    Raises:
        QuestionLoadError, QuestionValidationError: Questions cannot be loaded
    """
    if engine is None:
        engine = ConversationEngine.from_file(questions_path or config.QUESTIONS_PATH)

    app = Flask(__name__)

    # One engine, one conversation; requests take turns
    lock = threading.Lock()

    def turn_response(turn):
        return jsonify({
            'success': True,
            'question': turn.system_output,
            'question_id': turn.question_id,
            'kind': turn.kind.value,
            'finished': turn.conversation_complete,
            'answer_options': list(turn.answer_options),
        })

    @app.route('/api/health', methods=['GET'])
    def health():
        """Liveness check"""
        return jsonify({
            'success': True,
            'questions': len(engine.store)
        })

    @app.route('/api/start', methods=['POST'])
    def start_conversation():
        """Start new conversation"""
        with lock:
            engine.reset()
            turn = engine.handle_turn("")

        logger.info("New conversation started")
        return turn_response(turn)

    @app.route('/api/answer', methods=['POST'])
    def submit_answer():
        """Submit user answer and get next question"""
        data = request.get_json(silent=True)

        if not isinstance(data, dict) or not isinstance(data.get('answer'), str):
            return jsonify({
                'success': False,
                'error': "Request body must be JSON with a string 'answer'"
            }), 400

        try:
            with lock:
                turn = engine.handle_turn(data['answer'])
        except UnknownQuestionError as e:
            logger.error(f"Error processing answer: {e}")
            return jsonify({
                'success': False,
                'error': str(e)
            }), 500

        return turn_response(turn)

    return app


if __name__ == '__main__':
    config.configure_logging()
    app = create_app()

    print("\n" + "=" * 60)
    print("TROUBLESHOOTING BOT - WEB API")
    print("=" * 60)
    print(f"\nServer starting on http://{config.HOST}:{config.PORT}")
    print("\nPress Ctrl+C to stop the server")
    print("=" * 60 + "\n")

    app.run(debug=False, host=config.HOST, port=config.PORT)
