"""Interactive menu loop."""

from __future__ import annotations

from types import SimpleNamespace
from typing import TYPE_CHECKING, Callable

from .display import BANNER, MENU, print_error

if TYPE_CHECKING:
    from .cli import AppContext

EXIT_CHOICE = "7"


def run_menu(ctx: "AppContext", read: Callable[[str], str] | None = None) -> int:
    """
    Loop over the numbered menu until the user exits.

    End of input (Ctrl-D, or a closed pipe) exits like choice 7.
    """
    from .cli import cmd_all, cmd_external, cmd_find, cmd_list, cmd_random

    read = read or input

    actions = {
        "1": lambda: cmd_list(ctx, None),
        "2": lambda: cmd_find(ctx, SimpleNamespace(name=read("Enter the monkey name to search: "))),
        "3": lambda: cmd_random(ctx, None),
        "4": lambda: cmd_external(ctx, SimpleNamespace(table=True)),
        "5": lambda: cmd_external(ctx, SimpleNamespace(table=False)),
        "6": lambda: cmd_all(ctx, None),
    }

    print(BANNER)
    while True:
        print(MENU)
        try:
            choice = read("Enter your choice (1-7): ").strip()
        except EOFError:
            print()
            break

        print()
        if choice == EXIT_CHOICE:
            break

        action = actions.get(choice)
        if action is None:
            print_error("Invalid option. Please enter a number between 1 and 7.")
            continue

        try:
            action()
            read("\nPress Enter to continue...")
        except EOFError:
            print()
            break

    print("Thanks for visiting! See you later!")
    return 0
