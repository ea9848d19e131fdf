# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

"""
Conventions for passing an input to the worker script.

This module defines `ConventionKind`, an enumeration of the supported ways
of placing an input into the worker script's argument list, and the
`InputConvention` dataclass, which is classified once from the user-provided
string and then formats the arguments of every worker invocation.
"""

import re
import shlex
from dataclasses import dataclass
from enum import Enum
from typing import Self

from batchelor_lib.core.logger import get_logger
from batchelor_lib.core.quoter import quote

logger = get_logger(__name__)

# placeholder replaced by the input in template tokens
PLACEHOLDER = "$1"

_POSITIONAL_SLOT = re.compile(r"\$\+?([0-9]+)")


class ConventionKind(Enum):
    """
    Enumeration of supported input-passing conventions.
    """

    # Input follows a named flag, e.g. `--input <input>`.
    NAMED_FLAG = 1

    # Input is inserted at a one-based position among the script arguments, e.g. `$2`.
    POSITIONAL_SLOT = 2

    # Input replaces every `$1` in the tokens of a template, e.g. `-i $1 -o $1.out`.
    TOKEN_TEMPLATE = 3

    def __str__(self):
        return self.name.lower().replace("_", " ")


@dataclass(frozen=True)
class InputConvention:
    """
    Classified input-passing convention.

    Attributes:
        kind (ConventionKind): Which convention is used.
        flag (str | None): The named flag. Only set for NAMED_FLAG.
        slot (int | None): One-based argument position. Only set for POSITIONAL_SLOT.
        template (tuple[str, ...]): Shell words of the template. Only set for TOKEN_TEMPLATE.
    """

    kind: ConventionKind
    flag: str | None = None
    slot: int | None = None
    template: tuple[str, ...] = ()

    @classmethod
    def fromStr(cls, string: str) -> Self:
        """
        Classify an input-passing convention string.

        A string of the form `$N` with `N >= 1` is a positional slot.
        Otherwise, if any of its shell words contains `$1`, it is a token template.
        Anything else is a named flag.

        Args:
            string (str): The convention string provided by the user.

        Returns:
            InputConvention: The classified convention.
        """
        tokens = _split_template(string)
        if (slot := _parse_positional_slot(string)) is not None:
            convention = cls(kind=ConventionKind.POSITIONAL_SLOT, slot=slot)
        elif any(PLACEHOLDER in t for t in tokens):
            convention = cls(kind=ConventionKind.TOKEN_TEMPLATE, template=tokens)
        else:
            convention = cls(kind=ConventionKind.NAMED_FLAG, flag=string)

        logger.debug(f"Input convention '{string}' classified as {convention.kind}.")
        return convention

    def formatArgs(self, item: str, quoted_args: list[str]) -> list[str]:
        """
        Build the shell-quoted arguments of one worker script invocation.

        Args:
            item (str): The input to pass to the worker script (unquoted).
            quoted_args (list[str]): Additional script arguments, already shell-quoted.

        Returns:
            list[str]: Shell-quoted arguments for the worker script.
        """
        match self.kind:
            case ConventionKind.POSITIONAL_SLOT:
                args = list(quoted_args)
                args.insert(min(self.slot - 1, len(args)), quote(item))
                return args
            case ConventionKind.TOKEN_TEMPLATE:
                return [
                    quote(token.replace(PLACEHOLDER, item))
                    for token in self.template
                ] + list(quoted_args)
            case ConventionKind.NAMED_FLAG:
                return [quote(self.flag), quote(item)] + list(quoted_args)


def _parse_positional_slot(string: str) -> int | None:
    """
    Return the slot of a `$N` string or None if the string is not a valid slot.
    """
    if not (match := _POSITIONAL_SLOT.fullmatch(string)):
        return None

    slot = int(match.group(1))
    return slot if slot >= 1 else None


def _split_template(string: str) -> tuple[str, ...]:
    """
    Split a template into shell words.
    If the string cannot be split, it is used as a single word.
    """
    try:
        return tuple(shlex.split(string))
    except ValueError:
        return (string,)
