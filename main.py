"""
Console Harness for ConversationEngine

Simple console loop to talk to the troubleshooting bot.
Run with: python main.py [questions.json]
"""

import logging
import sys

from chatbot import config
from chatbot.core.conversation_engine import ConversationEngine
from chatbot.errors import QuestionLoadError, QuestionValidationError

logger = logging.getLogger(__name__)


def print_separator(char="=", length=60):
    """Print a separator line"""
    print(char * length)


def run_conversation(engine, read_input=input):
    """
    Feed console input to the engine until the user quits.

    An empty line after a finished conversation starts a new one.

    Args:
        engine: ConversationEngine instance
        read_input: Input function (replaced in tests)

    Returns:
        int: Number of replies sent to the engine
    """
    turn = engine.handle_turn("")
    print(f"\nBot: {turn.system_output}\n")
    replies = 1

    while True:
        try:
            user_input = read_input("> ")
        except (KeyboardInterrupt, EOFError):
            print("\n\nConversation interrupted by user")
            break

        if user_input.strip().lower() in config.EXIT_COMMANDS:
            break

        turn = engine.handle_turn(user_input)
        replies += 1
        print(f"\nBot: {turn.system_output}\n")

        if turn.conversation_complete:
            print_separator("-")
            print("Conversation finished. Press Enter to start again, or type 'quit'.")
            print_separator("-")

    return replies


def main(argv=None):
    """Run console session"""
    argv = sys.argv[1:] if argv is None else argv
    config.configure_logging()

    questions_path = argv[0] if argv else config.QUESTIONS_PATH

    print_separator()
    print("TROUBLESHOOTING BOT - CONSOLE")
    print_separator()

    try:
        engine = ConversationEngine.from_file(questions_path)
    except (QuestionLoadError, QuestionValidationError) as e:
        logger.error(f"Failed to initialize: {e}")
        print(f"\nFailed to initialize: {e}")
        return 1

    print(f"Type {', '.join(sorted(config.EXIT_COMMANDS))} to end the session")

    run_conversation(engine)

    print_separator()
    print("Session complete")
    print_separator()
    return 0


if __name__ == '__main__':
    sys.exit(main())
