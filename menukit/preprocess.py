"""Macro language used in configuration files: variables, functions, $(...)."""

from __future__ import annotations

import enum
import os
import re
import subprocess
import sys
from dataclasses import dataclass
from typing import Callable, Mapping, Optional, Sequence, TextIO

FUNCTION_MAX_ARGS = 16
_SHELL_BUFFER = 256
_ARG_NUMBER = re.compile(r"\s*\+?[0-9]+")


class VariableFlavor(enum.Enum):
    """How a variable assignment is interpreted."""

    SIMPLE = "simple"
    RECURSIVE = "recursive"
    APPEND = "append"


class PreprocessError(Exception):
    """A fatal error found while expanding a string."""

    def __init__(self, filename: str, lineno: int, message: str) -> None:
        super().__init__(f"{filename}:{lineno}: {message}")
        self.filename = filename
        self.lineno = lineno
        self.message = message


@dataclass
class _Variable:
    name: str
    value: str
    flavor: VariableFlavor
    exp_count: int = 0


@dataclass(frozen=True)
class _Builtin:
    min_args: int
    max_args: int
    handler: Callable[[Sequence[str]], str]


def _is_end_of_token(ch: str) -> bool:
    return not ((ch.isascii() and ch.isalnum()) or ch in "_-")


class Preprocessor:
    """Expands variable and function references in configuration text."""

    def __init__(
        self,
        filename: str = "",
        lineno: int = 0,
        environ: Optional[Mapping[str, str]] = None,
    ) -> None:
        self.filename = filename
        self.lineno = lineno
        self.environ = os.environ if environ is None else environ
        self._env: dict[str, str] = {}
        self._variables: dict[str, _Variable] = {}
        self._functions = {
            "error-if": _Builtin(2, 2, self._do_error_if),
            "filename": _Builtin(0, 0, self._do_filename),
            "info": _Builtin(1, 1, self._do_info),
            "lineno": _Builtin(0, 0, self._do_lineno),
            "shell": _Builtin(1, 1, self._do_shell),
            "warning-if": _Builtin(2, 2, self._do_warning_if),
        }

    def _error(self, message: str) -> PreprocessError:
        return PreprocessError(self.filename, self.lineno, message)

    # Environment variables

    def _env_expand(self, name: str) -> Optional[str]:
        if not name:
            return None
        if name in self._env:
            return self._env[name]
        value = self.environ.get(name)
        if value is None:
            return None
        # Remember every referenced variable so it can be written as a dependency.
        self._env[name] = value
        return value

    def env_write_dep(self, stream: TextIO, autoconfig_name: str) -> None:
        """Write make rules forcing a rebuild when a referenced variable changes."""
        for name, value in self._env.items():
            stream.write(f'ifneq "$({name})" "{value}"\n')
            stream.write(f"{autoconfig_name}: FORCE\n")
            stream.write("endif\n")
        self._env.clear()

    # Built-in functions

    def _do_error_if(self, args: Sequence[str]) -> str:
        if args[0] == "y":
            raise self._error(args[1])
        return ""

    def _do_filename(self, args: Sequence[str]) -> str:
        return self.filename

    def _do_info(self, args: Sequence[str]) -> str:
        print(args[0])
        return ""

    def _do_lineno(self, args: Sequence[str]) -> str:
        return str(self.lineno)

    def _do_shell(self, args: Sequence[str]) -> str:
        command = args[0]
        try:
            proc = subprocess.Popen(command, shell=True, stdout=subprocess.PIPE)
        except OSError as exc:
            raise self._error(f"{command}: {exc.strerror}") from exc
        with proc:
            assert proc.stdout is not None
            data = proc.stdout.read(_SHELL_BUFFER)
        if len(data) == _SHELL_BUFFER:
            data = data[:-1]
        text = data.decode("utf-8", errors="replace").rstrip("\n")
        return text.replace("\n", " ")

    def _do_warning_if(self, args: Sequence[str]) -> str:
        if args[0] == "y":
            print(f"{self.filename}:{self.lineno}: {args[1]}", file=sys.stderr)
        return ""

    def _function_expand(self, name: str, args: Sequence[str]) -> Optional[str]:
        builtin = self._functions.get(name)
        if builtin is None:
            return None
        if len(args) < builtin.min_args:
            raise self._error(f"too few function arguments passed to '{name}'")
        if len(args) > builtin.max_args:
            raise self._error(f"too many function arguments passed to '{name}'")
        return builtin.handler(args)

    # Variables and user-defined functions

    def _variable_expand(self, name: str, args: Sequence[str]) -> Optional[str]:
        variable = self._variables.get(name)
        if variable is None:
            return None
        if not args and variable.exp_count:
            raise self._error(
                f"Recursive variable '{name}' references itself (eventually)"
            )
        if variable.exp_count > 1000:
            raise self._error("Too deep recursive expansion")
        variable.exp_count += 1
        try:
            if variable.flavor is VariableFlavor.RECURSIVE:
                return self._expand_with_args(variable.value, args)
            return variable.value
        except RecursionError:
            raise self._error("Too deep recursive expansion") from None
        finally:
            variable.exp_count -= 1

    def variable_add(self, name: str, value: str, flavor: VariableFlavor) -> None:
        """Define, redefine or append to a variable."""
        variable = self._variables.get(name)
        append = False
        if variable is not None:
            # For defined variables, += inherits the existing flavor.
            if flavor is VariableFlavor.APPEND:
                flavor = variable.flavor
                append = True
        else:
            # For undefined variables, += assumes the recursive flavor.
            if flavor is VariableFlavor.APPEND:
                flavor = VariableFlavor.RECURSIVE
            variable = _Variable(name, "", flavor)
            self._variables[name] = variable

        variable.flavor = flavor
        new_value = self.expand_string(value) if flavor is VariableFlavor.SIMPLE else value
        variable.value = f"{variable.value} {new_value}" if append else new_value

    def variable_all_del(self) -> None:
        """Forget every variable."""
        self._variables.clear()

    # Expansion

    def _split_clause(self, clause: str) -> list[str]:
        pieces: list[str] = []
        current: list[str] = []
        nest = 0
        for ch in clause:
            if nest == 0 and ch == ",":
                if len(pieces) >= FUNCTION_MAX_ARGS:
                    raise self._error("too many function arguments")
                pieces.append("".join(current))
                current = []
                continue
            if ch == "(":
                nest += 1
            elif ch == ")":
                nest -= 1
            current.append(ch)
        pieces.append("".join(current))
        return pieces

    def _eval_clause(self, clause: str, args: Sequence[str]) -> str:
        # '1', '2', ... name arguments of the enclosing user-function call.
        if _ARG_NUMBER.fullmatch(clause):
            n = int(clause)
            if 0 < n <= len(args):
                return args[n - 1]

        first, *rest = self._split_clause(clause)
        name = self._expand_with_args(first, args)
        new_args = [self._expand_with_args(piece, args) for piece in rest]

        result = self._variable_expand(name, new_args)
        if result is not None:
            return result
        result = self._function_expand(name, new_args)
        if result is not None:
            return result
        if not new_args:
            result = self._env_expand(name)
            if result is not None:
                return result
        return ""

    def _expand_dollar_at(
        self, text: str, pos: int, args: Sequence[str]
    ) -> tuple[str, int]:
        # Only "$(" starts a reference; a lone '$' stands for itself.
        if pos >= len(text) or text[pos] != "(":
            return "$", pos
        begin = pos + 1
        nest = 0
        for index, ch in enumerate(text[begin:], begin):
            if ch == "(":
                nest += 1
            elif ch == ")":
                if nest == 0:
                    return self._eval_clause(text[begin:index], args), index + 1
                nest -= 1
        raise self._error(f"unterminated reference to '{text[begin:]}': missing ')'")

    def _expand(
        self,
        text: str,
        pos: int,
        is_end: Optional[Callable[[str], bool]],
        args: Sequence[str],
    ) -> tuple[str, int]:
        """Expand from ``pos`` up to the end of text or a character ``is_end`` accepts."""
        out: list[str] = []
        start = pos
        while True:
            if pos < len(text) and text[pos] == "$":
                out.append(text[start:pos])
                expansion, pos = self._expand_dollar_at(text, pos + 1, args)
                out.append(expansion)
                start = pos
                continue
            if pos >= len(text) or (is_end is not None and is_end(text[pos])):
                break
            pos += 1
        out.append(text[start:pos])
        return "".join(out), pos

    def _expand_with_args(self, text: str, args: Sequence[str]) -> str:
        return self._expand(text, 0, None, args)[0]

    def expand_string(self, text: str) -> str:
        """Expand every reference in ``text``; undefined names become empty."""
        return self._expand_with_args(text, ())

    def expand_dollar(self, text: str) -> tuple[str, str]:
        """Expand the reference that follows a '$'; return it and the rest."""
        expansion, pos = self._expand_dollar_at(text, 0, ())
        return expansion, text[pos:]

    def expand_one_token(self, text: str) -> tuple[str, str]:
        """Expand one token, stopping at a separator; return it and the rest."""
        expansion, pos = self._expand(text, 0, _is_end_of_token, ())
        return expansion, text[pos:]