"""Interactive terminal chat against the local knowledge store."""

import argparse
import asyncio
import logging

from second_brain.api.config import APIConfig
from second_brain.core.chat_service import ChatService
from second_brain.core.providers.factory import create_connector
from second_brain.core.retriever import TwoStageRetriever
from second_brain.lib.logger import setup_logging
from second_brain.models.chat import ChatLog, ChatMessage, ChatMode
from second_brain.storage.sqlite_store import SQLiteKnowledgeStore

logger = logging.getLogger(__name__)

EXIT_COMMANDS = {"quit", "exit", "bye"}


class CLI:
    """Terminal front end for the chat assistant."""

    def __init__(self, mode: ChatMode, user_id: str | None = None, debug: bool = False):
        self.config = APIConfig()
        setup_logging(log_level="DEBUG" if debug else "INFO", quiet=not debug)

        self.mode = mode
        self.user_id = user_id or self.config.default_user_id
        self.store = SQLiteKnowledgeStore(self.config.db_path)
        self.connector = create_connector(self.config)
        self.chat_service = ChatService(TwoStageRetriever(self.store), connector=self.connector)
        self.log = ChatLog.for_mode(mode)

    def _print_message(self, message: ChatMessage):
        speaker = "You" if message.role == "user" else "Brain"
        print(f"\n{speaker}: {message.content}")
        if message.is_summarizing:
            print("  [summary generated]")
        print()

    async def chat_loop(self):
        print("\nSecond Brain Assistant")
        print("=" * 50)
        print("Type 'quit' or 'exit' to end, '/reset' to clear the conversation")
        print("=" * 50)

        self._print_message(self.log.last)

        while True:
            user_input = input("You: ").strip()
            if not user_input:
                continue

            if user_input.lower() in EXIT_COMMANDS:
                print("\nGoodbye!")
                break

            if user_input.lower() == "/reset":
                self.log = ChatLog.cleared()
                self._print_message(self.log.last)
                continue

            self.log.append(ChatMessage(role="user", content=user_input))
            reply = await self.chat_service.ask(user_input, mode=self.mode, user_id=self.user_id)
            self.log.append(reply)
            self._print_message(reply)

    async def run(self):
        try:
            await self.chat_loop()
        except (KeyboardInterrupt, EOFError):
            print("\nGoodbye!")
        finally:
            if self.connector is not None:
                await self.connector.close()


def main():
    parser = argparse.ArgumentParser(description="Second Brain - chat with your notes")
    parser.add_argument(
        "--mode",
        choices=[mode.value for mode in ChatMode],
        default=ChatMode.DASHBOARD.value,
        help="dashboard answers from your notes, landing explains the product",
    )
    parser.add_argument("--user-id", help="Whose private notes to include")
    parser.add_argument("--debug", action="store_true", help="Verbose logging")
    args = parser.parse_args()

    cli = CLI(mode=ChatMode(args.mode), user_id=args.user_id, debug=args.debug)
    asyncio.run(cli.run())


if __name__ == "__main__":
    main()
