#!/usr/bin/env python3

"""Parsing and formatting of C# type names.

Type references arrive from declarations as source text ("double",
"IPathFigure[]", "IList<IGradientStop>"). Mapping them to platform types
needs their structure, so they are parsed into TypeName trees here.
"""

import re
from collections.abc import Callable
from dataclasses import dataclass, field

from ...errors import ConfigurationError

_TOKEN_PATTERN = re.compile(r"\s*(?:([A-Za-z_][\w.]*)|(\[[\s,]*\])|([<>,?]))")


@dataclass(frozen=True)
class TypeName:
    """Structured C# type reference."""

    name: str
    arguments: tuple["TypeName", ...] = field(default_factory=tuple)
    nullable: bool = False
    array_suffix: str = ""  # "[]", "[][]", "[,]"

    @property
    def is_array(self) -> bool:
        return bool(self.array_suffix)

    @property
    def element_type(self) -> "TypeName":
        """The type with its outermost array rank removed."""
        if not self.array_suffix:
            return self
        outer_end = self.array_suffix.rindex("[")
        return TypeName(self.name, self.arguments, self.nullable, self.array_suffix[:outer_end])

    def map_names(self, mapper: Callable[[str, bool], str]) -> "TypeName":
        """Rebuild the type, passing every simple name through ``mapper``.

        The mapper receives the name and whether it is the name of a generic
        type (i.e. has type arguments).
        """
        return TypeName(
            mapper(self.name, bool(self.arguments)),
            tuple(argument.map_names(mapper) for argument in self.arguments),
            self.nullable,
            self.array_suffix,
        )

    def __str__(self) -> str:
        text = self.name
        if self.arguments:
            text += "<" + ", ".join(str(argument) for argument in self.arguments) + ">"
        if self.nullable:
            text += "?"
        return text + self.array_suffix


def _tokenize(type_text: str) -> list[str]:
    tokens = []
    position = 0
    stripped = type_text.rstrip()
    while position < len(stripped):
        match = _TOKEN_PATTERN.match(stripped, position)
        if not match:
            raise ConfigurationError(f"Malformed type reference '{type_text}'", subject=type_text)
        token = match.group(1) or match.group(2) or match.group(3)
        if match.group(2):
            token = "[" + token.strip("[]").replace(" ", "") + "]"
        tokens.append(token)
        position = match.end()
    return tokens


def parse_type_name(type_text: str) -> TypeName:
    """Parse C# type text into a TypeName.

    Args:
        type_text: Type as written in source (e.g. "IList<IFoo>[]")

    Returns:
        Parsed TypeName

    Raises:
        ConfigurationError: If the text is empty or not a valid type reference
    """
    if not type_text or not type_text.strip():
        raise ConfigurationError("Empty type reference", subject=type_text)

    tokens = _tokenize(type_text)
    type_name, position = _parse_tokens(tokens, 0, type_text)
    if position != len(tokens):
        raise ConfigurationError(f"Malformed type reference '{type_text}'", subject=type_text)
    return type_name


def _parse_tokens(tokens: list[str], position: int, type_text: str) -> tuple[TypeName, int]:
    if position >= len(tokens) or not (tokens[position][0].isalpha() or tokens[position][0] == "_"):
        raise ConfigurationError(f"Malformed type reference '{type_text}'", subject=type_text)

    name = tokens[position]
    position += 1

    arguments: list[TypeName] = []
    if position < len(tokens) and tokens[position] == "<":
        position += 1
        while True:
            argument, position = _parse_tokens(tokens, position, type_text)
            arguments.append(argument)
            if position < len(tokens) and tokens[position] == ",":
                position += 1
                continue
            break
        if position >= len(tokens) or tokens[position] != ">":
            raise ConfigurationError(
                f"Unterminated type argument list in '{type_text}'", subject=type_text
            )
        position += 1

    nullable = False
    if position < len(tokens) and tokens[position] == "?":
        nullable = True
        position += 1

    array_suffix = ""
    while position < len(tokens) and tokens[position].startswith("["):
        array_suffix += tokens[position]
        position += 1

    return TypeName(name, tuple(arguments), nullable, array_suffix), position
