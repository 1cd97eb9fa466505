"""Console rendering for monkeys - detail blocks, tables and banners."""

from __future__ import annotations

from typing import Sequence

from colorama import Fore, Style

from .catalog.types import Monkey

RULE = "═" * 59
HINT_COUNT = 5

BANNER = r"""
╔══════════════════════════════════════════════════════════════╗
║                                                              ║
║          WELCOME TO THE MONKEY DATABASE!                     ║
║                                                              ║
║           Your gateway to fascinating monkey facts!          ║
║                                                              ║
╚══════════════════════════════════════════════════════════════╝
"""

MENU = """
┌──────────────────────────────────────┐
│           MAIN MENU                  │
├──────────────────────────────────────┤
│  1. List all monkeys (local)         │
│  2. Find monkey by name              │
│  3. Get random monkey                │
│  4. Show external monkeys table      │
│  5. List monkeys from external       │
│  6. List all monkeys (local+ext.)    │
│  7. Exit                             │
└──────────────────────────────────────┘
"""


def colorize(text: str, color: str) -> str:
    """Wrap text in a color code."""
    return f"{color}{text}{Style.RESET_ALL}"


def print_heading(title: str) -> None:
    print(RULE)
    print(colorize(title.center(len(RULE)), Style.BRIGHT))
    print(RULE)
    print()


def print_monkey(monkey: Monkey) -> None:
    """Print one monkey as a labelled detail block."""
    fields = [
        ("Species", monkey.species),
        ("Location", monkey.location),
        ("Population", f"{monkey.population:,}"),
        ("Description", monkey.description),
        ("Image", monkey.image_url),
    ]

    print(colorize(monkey.name, Fore.YELLOW + Style.BRIGHT))
    for label, value in fields:
        shown = value if value else colorize("(not set)", Style.DIM)
        print(f"  {colorize(label + ':', Fore.CYAN)} {shown}")


def print_monkeys(monkeys: Sequence[Monkey]) -> None:
    for monkey in monkeys:
        print_monkey(monkey)
        print()


def format_table(monkeys: Sequence[Monkey]) -> list[str]:
    """
    Lay monkeys out as a fixed-width table.

    Column widths follow the longest value in each column so nothing is
    truncated.
    """
    headers = ("Name", "Species", "Location", "Population")
    rows = [(m.name, m.species, m.location, f"{m.population:,}") for m in monkeys]
    widths = [max([len(h)] + [len(r[i]) for r in rows]) for i, h in enumerate(headers)]

    def line(cells: Sequence[str]) -> str:
        # Population is right-aligned, text columns left-aligned
        parts = [c.ljust(w) for c, w in zip(cells[:-1], widths[:-1])]
        parts.append(cells[-1].rjust(widths[-1]))
        return "│ " + " │ ".join(parts) + " │"

    border = "─┼─".join("─" * w for w in widths)
    lines = [line(headers), "├─" + border + "─┤"]
    lines.extend(line(r) for r in rows)
    return lines


def print_table(monkeys: Sequence[Monkey]) -> None:
    for i, text in enumerate(format_table(monkeys)):
        print(colorize(text, Style.BRIGHT) if i == 0 else text)
    print(f"\n{len(monkeys)} monkey(s)")


def print_not_found(name: str, known_names: Sequence[str]) -> None:
    """Report a failed lookup and suggest a few names that do exist."""
    print(colorize(f"No monkey found with the name '{name}'.", Fore.RED))
    if not known_names:
        return
    print("\nTip: Try one of these names:")
    for known in known_names[:HINT_COUNT]:
        print(f"   {colorize('•', Fore.CYAN)} {known}")
    if len(known_names) > HINT_COUNT:
        print(f"   ... and {len(known_names) - HINT_COUNT} more!")


def print_error(message: str) -> None:
    print(colorize(message, Fore.RED))
