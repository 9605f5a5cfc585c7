# SPDX-License-Identifier: LGPL-2.1-only
# Copyright (c) 2026 Akshat Kotpalliwar (alias IntegerAlex)

"""
Interactive yes/no confirmation used before anything is deleted.
"""

import sys
from typing import Callable, TextIO

# Prompt text -> answer
ConfirmFunc = Callable[[str], bool]

YES_ANSWERS = ("y", "yes")
NO_ANSWERS = ("", "n", "no")


def ask_yes_no(
    prompt: str,
    input_func: Callable[[], str] = input,
    output: TextIO | None = None,
) -> bool:
    """
    Ask a yes/no question, defaulting to no.

    Unrecognized answers ask again; running out of input counts as no.

    Args:
        prompt: Question to ask, e.g. "delete foo?"
        input_func: Reads one line of input
        output: Stream the prompt is written to (default: stdout)

    Returns:
        True only for an explicit "y" or "yes"
    """
    out = output or sys.stdout

    while True:
        out.write(f"{prompt} - y/N ")
        out.flush()

        try:
            answer = input_func().strip().lower()
        except EOFError:
            out.write("\n")
            return False

        if answer in YES_ANSWERS:
            return True
        if answer in NO_ANSWERS:
            return False

        out.write("That is neither yes or no\n")
