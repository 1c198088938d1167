"""Interactive yes/no confirmation."""

import asyncio
from collections.abc import Callable

_YES = frozenset({"y", "yes"})
_NO = frozenset({"n", "no"})


def parse_answer(answer: str, default: bool) -> bool | None:
    """Map a typed answer to True/False; empty means default, garbage means None."""
    answer = answer.strip().lower()
    if not answer:
        return default
    if answer in _YES:
        return True
    if answer in _NO:
        return False
    return None


async def confirm(
    question: str, default: bool = True, read: Callable[[str], str] = input
) -> bool:
    """
    Ask a yes/no question on the terminal.

    Blocks on stdin in a worker thread and asks again on unrecognized input.
    End of input counts as the default answer.
    """
    suffix = "[Y/n]" if default else "[y/N]"
    while True:
        try:
            answer = await asyncio.to_thread(read, f"{question} {suffix} ")
        except EOFError:
            return default

        parsed = parse_answer(answer, default)
        if parsed is not None:
            return parsed


async def accept_default(question: str, default: bool = True) -> bool:
    """Non-interactive confirm used with --noconfirm."""
    return default
