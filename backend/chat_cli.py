#!/usr/bin/env python3
"""Interactive CLI for the game help chat.

Usage:
    python chat_cli.py                # chat as the default "cli" client
    python chat_cli.py alice          # keep a separate set of chats

Features:
    - Browse the game carousel and pick the game the assistant is scoped to
    - Chat with the assistant; chats are stored in Redis and survive restarts
    - Switch between earlier chats or start a new one

Needs Redis (REDIS_URL) and either RELAY_URL or DASHSCOPE_API_KEY.
"""

import asyncio
import sys

from gamehelp.config import settings
from gamehelp.core.controller import ChatController
from gamehelp.core.errors import StorageError
from gamehelp.db.redis import close_redis, get_redis_client
from gamehelp.log import setup_logging
from gamehelp.schemas.chat import Role
from gamehelp.services.relay_client import close_relay_client
from gamehelp.services.widget_service import build_controller

# --- ANSI Colors ---
BOT_COLOR = "\033[96m"
RESET = "\033[0m"
DIM = "\033[90m"
BOLD = "\033[1m"
YELLOW = "\033[93m"
RED = "\033[91m"

DIVIDER = DIM + "─" * 50 + RESET

HELP = f"""{DIM}  :next / :prev      move the game carousel
  :game N            jump to game N
  :games             list games
  :new               start a new chat
  :chats             list chats
  :open N            open chat N
  :quit              exit{RESET}"""


def print_message(text: str, role: Role) -> None:
    if role is Role.BOT:
        print(f"  {BOT_COLOR}assistant{RESET}: {text}\n")
    else:
        print(f"  {BOLD}you{RESET}: {text}")


def print_history(controller: ChatController) -> None:
    """Full redraw of the active chat, like a sidebar click in the browser."""
    print()
    print(DIVIDER)
    session = controller.registry.get_active()
    if session is None:
        print_message(settings.WELCOME_MESSAGE, Role.BOT)
        return
    print(f"{BOLD}  {session.title}{RESET}")
    for message in session.messages:
        print_message(message.text, message.role)


def print_games(controller: ChatController) -> None:
    print()
    for i, card in enumerate(controller.carousel.cards, start=1):
        marker = f"{YELLOW}>{RESET}" if i - 1 == controller.carousel.index else " "
        print(f"  {marker} {i}. {card.title}")
    print(f"\n  {DIM}Context: {controller.carousel.context}{RESET}\n")


def print_chats(controller: ChatController) -> None:
    entries = controller.sidebar.render()
    print()
    if not entries:
        print(f"  {DIM}No chats yet.{RESET}\n")
        return
    for i, entry in enumerate(entries, start=1):
        marker = f"{YELLOW}*{RESET}" if entry.active else " "
        print(f"  {marker} {i}. {entry.title}")
    print()


def parse_number(arg: str, upper: int) -> int | None:
    """1-based menu number -> 0-based index, or None if out of range."""
    if not arg.isdigit() or not 1 <= int(arg) <= upper:
        print(f"  {RED}Enter a number between 1 and {upper}{RESET}")
        return None
    return int(arg) - 1


async def handle_command(controller: ChatController, line: str) -> bool:
    """Run a ':' command. Returns False when the user wants to quit."""
    name, _, arg = line[1:].partition(" ")
    arg = arg.strip()

    if name in ("quit", "exit", "q"):
        return False
    if name == "next":
        if not controller.next_game():
            print(f"  {DIM}Already at the last game.{RESET}")
        print_games(controller)
    elif name == "prev":
        if not controller.previous_game():
            print(f"  {DIM}Already at the first game.{RESET}")
        print_games(controller)
    elif name == "game":
        index = parse_number(arg, len(controller.carousel.cards))
        if index is not None:
            controller.select_game(index)
            print_games(controller)
    elif name == "games":
        print_games(controller)
    elif name == "new":
        await controller.new_session()
        print_history(controller)
    elif name == "chats":
        print_chats(controller)
    elif name == "open":
        sessions = controller.registry.list_sessions()
        index = parse_number(arg, len(sessions))
        if index is not None:
            await controller.select_session(sessions[index].id)
            print_history(controller)
    else:
        print(HELP)
    return True


async def chat_loop(client_id: str) -> None:
    controller = await build_controller(get_redis_client(), client_id)

    print()
    print(f"{BOLD}" + "=" * 50 + f"{RESET}")
    print(f"{BOLD}  Game Help Chat{RESET}")
    print(f"{BOLD}" + "=" * 50 + f"{RESET}")
    print_games(controller)
    print(HELP)
    print_history(controller)

    while True:
        try:
            line = input(f"  {BOLD}you{RESET}: ").strip()
        except (EOFError, KeyboardInterrupt):
            print(f"\n\n  {DIM}Bye.{RESET}")
            break

        if not line:
            continue

        if line.startswith(":"):
            if not await handle_command(controller, line):
                break
            continue

        print(f"  {DIM}(thinking...){RESET}", end="", flush=True)
        await controller.submit(line)
        # Clear "thinking" line
        print("\r" + " " * 30 + "\r", end="")

        session = controller.registry.get_active()
        reply = session.messages[-1]
        print_message(reply.text, reply.role)


async def main(client_id: str) -> None:
    try:
        await chat_loop(client_id)
    finally:
        await close_relay_client()
        await close_redis()


if __name__ == "__main__":
    setup_logging("WARNING")
    try:
        asyncio.run(main(sys.argv[1] if len(sys.argv) > 1 else "cli"))
    except KeyboardInterrupt:
        print(f"\n\n{DIM}Exited.{RESET}")
    except StorageError as e:
        print(f"{RED}{e}{RESET}")
