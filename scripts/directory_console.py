#!/usr/bin/env python3
# =============================================================================
# scripts/directory_console.py - Interactive User Directory
# =============================================================================
# Terminal version of the user-directory screen: list, add and (locally)
# delete users against a running API server.
#
# Usage:
#   python scripts/directory_console.py
#   API_URL=http://localhost:8000 python scripts/directory_console.py
#
# Commands:
#   /list          - Show the users
#   /add           - Add a user (prompts for name and email)
#   /delete <id>   - Remove a user from this screen only
#   /reload        - Fetch the list from the server again
#   /health        - Check the server
#   /quit          - Exit
# =============================================================================

import asyncio
import os
import sys

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from dotenv import load_dotenv
load_dotenv()

from client.api import DirectoryAPI, DirectoryAPIError
from client.config import get_client_settings
from client.state import DirectoryClient, FormField


def print_help():
    """Print help message."""
    print("\n" + "-" * 40)
    print("COMMANDS:")
    print("  /list        - Show the users")
    print("  /add         - Add a user")
    print("  /delete <id> - Remove a user from this screen")
    print("  /reload      - Fetch users from the server")
    print("  /health      - Check the server")
    print("  /quit        - Exit")
    print("-" * 40 + "\n")


def print_users(state: DirectoryClient):
    """Print the current user list."""
    if state.loading:
        print("\n  Loading users...\n")
        return
    if state.error:
        print(f"\n  ERROR: {state.error}")

    print("\n" + "-" * 50)
    print(f"  {state.user_count} Users")
    print("-" * 50)
    if not state.users:
        print("  No users yet. Add one with /add")
    for user in state.users:
        marker = " (removing...)" if user.id == state.deleting_id else ""
        print(f"  [{user.id}] {user.name or '-'} <{user.email or '-'}>{marker}")
    print("-" * 50 + "\n")


async def prompt(text: str) -> str:
    return await asyncio.to_thread(input, text)


async def prompt_field(state: DirectoryClient, field: FormField, label: str):
    """Ask for one field, showing its error on leaving it."""
    value = await prompt(f"  {label}: ")
    state.change(field, value)
    state.blur(field)
    error = getattr(state.validation_errors, field.value)
    if error:
        print(f"    ! {error}")


async def add_user(state: DirectoryClient):
    """Fill in and submit the new-user form."""
    await prompt_field(state, FormField.NAME, "Name")
    await prompt_field(state, FormField.EMAIL, "Email")

    user = await state.submit()
    if user:
        print(f"\n  ✓ User added successfully! [{user.id}] {user.name}\n")
    elif state.error:
        print(f"\n  ERROR: {state.error}\n")
    else:
        print("\n  Fix the fields above and try /add again.\n")


async def delete_user(state: DirectoryClient, arg: str):
    """Remove a user locally and wait for it to disappear."""
    try:
        user_id = int(arg)
    except ValueError:
        print("  Usage: /delete <id>")
        return
    if not any(user.id == user_id for user in state.users):
        print(f"  No user with id {user_id}")
        return

    state.delete(user_id)
    await asyncio.sleep(state.delete_delay + 0.05)
    print(f"  Removed {user_id} from this screen (the server still has it).")


async def run(api: DirectoryAPI):
    settings = get_client_settings()
    state = DirectoryClient(
        api,
        success_seconds=settings.SUCCESS_BANNER_SECONDS,
        delete_delay=settings.DELETE_ANIMATION_SECONDS,
    )

    print("=" * 60)
    print("User Directory")
    print(f"Server: {api.base_url}")
    print("=" * 60)

    await state.mount()
    print_users(state)
    print_help()

    try:
        while True:
            try:
                line = (await prompt("> ")).strip()
            except EOFError:
                break

            command, _, arg = line.partition(" ")
            if command in ("/quit", "/exit"):
                break
            elif command == "/list":
                print_users(state)
            elif command == "/add":
                await add_user(state)
            elif command == "/delete":
                await delete_user(state, arg.strip())
            elif command == "/reload":
                await state.fetch_users()
                print_users(state)
            elif command == "/health":
                try:
                    health = await api.health()
                    print(f"  {health.status}: {health.message}")
                except DirectoryAPIError as e:
                    print(f"  ERROR: {e.message}")
            elif command in ("/help", ""):
                print_help()
            else:
                print(f"  Unknown command: {command}")
    finally:
        state.cancel_timers()


async def main():
    settings = get_client_settings()
    async with DirectoryAPI(settings.api_base_url, timeout=settings.REQUEST_TIMEOUT) as api:
        await run(api)
    print("Goodbye!")


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except KeyboardInterrupt:
        print("\nGoodbye!")
