"""
# AsciiDoc-Compat: bases.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Base classes for line rewrites.
"""

import abc

from asciicompat.constants import VERBOSE_MODE_DIVIDER_SYMBOL_COUNT
from asciicompat.exceptions import CommittedMutateException, UncommittedApplyException


class Rewrite(abc.ABC):
    """
    Base class for a rewrite of the text of a single line.

    A rewrite is configured, then committed, then applied;
    configuring after `commit()` or applying before it is an error.
    """
    _is_committed: bool
    _id: str
    _verbose_mode_enabled: bool

    def __init__(self, id_: str, verbose_mode_enabled: bool):
        self._is_committed = False
        self._id = id_
        self._verbose_mode_enabled = verbose_mode_enabled

    @property
    def id_(self) -> str:
        return self._id

    @property
    def is_committed(self) -> bool:
        return self._is_committed

    def commit(self):
        self._validate_mandatory_attributes()
        self._set_apply_method_variables()
        self._is_committed = True

    def apply(self, string: str) -> str:
        if not self._is_committed:
            raise UncommittedApplyException('error: cannot call `apply(string)` before `commit()`')

        string_before = string
        string = self._apply(string)
        string_after = string

        if self._verbose_mode_enabled and string_before != string_after:
            print('<' * VERBOSE_MODE_DIVIDER_SYMBOL_COUNT + f' BEFORE #{self._id}')
            print(string_before)
            print('=' * VERBOSE_MODE_DIVIDER_SYMBOL_COUNT)
            print(string_after)
            print('>' * VERBOSE_MODE_DIVIDER_SYMBOL_COUNT + f' AFTER #{self._id}')
            print()

        return string_after

    @abc.abstractmethod
    def _validate_mandatory_attributes(self):
        """
        Ensure all mandatory attributes have been set.
        """
        raise NotImplementedError

    @abc.abstractmethod
    def _set_apply_method_variables(self):
        """
        Set variables used in `self._apply(string)`.
        """
        raise NotImplementedError

    @abc.abstractmethod
    def _apply(self, string: str) -> str:
        """
        Apply the defined rewrite to the text of a line.
        """
        raise NotImplementedError


class RewriteWithSubstitutions(Rewrite, abc.ABC):
    """
    Base class for a rewrite with an ordered dictionary of substitutions.
    """
    _substitute_from_pattern: dict[str, str]

    def __init__(self, id_: str, verbose_mode_enabled: bool):
        super().__init__(id_, verbose_mode_enabled)
        self._substitute_from_pattern = {}

    def add_substitution(self, pattern: str, substitute: str):
        if self._is_committed:
            raise CommittedMutateException('error: cannot call `add_substitution(...)` after `commit()`')
        self._substitute_from_pattern[pattern] = substitute
