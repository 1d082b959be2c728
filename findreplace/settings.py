# Copyright (c) 2023, Teriks
#
# findreplace is distributed under the following BSD 3-Clause License
#
# Redistribution and use in source and binary forms, with or without modification, are permitted provided that the following conditions are met:
#
# 1. Redistributions of source code must retain the above copyright notice, this list of conditions and the following disclaimer.
#
# 2. Redistributions in binary form must reproduce the above copyright notice, this list of conditions and the following disclaimer in
#    the documentation and/or other materials provided with the distribution.
#
# 3. Neither the name of the copyright holder nor the names of its contributors may be used to endorse or promote products derived
#    from this software without specific prior written permission.
#
# THIS SOFTWARE IS PROVIDED BY THE COPYRIGHT HOLDERS AND CONTRIBUTORS "AS IS" AND ANY EXPRESS OR IMPLIED WARRANTIES, INCLUDING, BUT NOT
# LIMITED TO, THE IMPLIED WARRANTIES OF MERCHANTABILITY AND FITNESS FOR A PARTICULAR PURPOSE ARE DISCLAIMED. IN NO EVENT SHALL THE COPYRIGHT
# HOLDER OR CONTRIBUTORS BE LIABLE FOR ANY DIRECT, INDIRECT, INCIDENTAL, SPECIAL, EXEMPLARY, OR CONSEQUENTIAL DAMAGES (INCLUDING, BUT NOT
# LIMITED TO, PROCUREMENT OF SUBSTITUTE GOODS OR SERVICES; LOSS OF USE, DATA, OR PROFITS; OR BUSINESS INTERRUPTION) HOWEVER CAUSED AND ON
# ANY THEORY OF LIABILITY, WHETHER IN CONTRACT, STRICT LIABILITY, OR TORT (INCLUDING NEGLIGENCE OR OTHERWISE) ARISING IN ANY WAY OUT OF THE USE
# OF THIS SOFTWARE, EVEN IF ADVISED OF THE POSSIBILITY OF SUCH DAMAGE.
import typing

import findreplace.constants as _constants
import findreplace.globalconfig as _globalconfig
import findreplace.options as _options
import findreplace.types as _types

__doc__ = """
Persisted find / replace option defaults and search history.

Settings serialize to a flat mapping using the keys ``wrap``, ``casesensitive``, ``wholeword``,
``incremental``, ``isRegEx``, ``findhistory`` and ``replacehistory`` in ``json``, ``yaml`` or ``toml``.
"""

_BOOLEAN_KEYS = {
    'wrap': _options.SearchOptions.WRAP,
    'casesensitive': _options.SearchOptions.CASE_SENSITIVE,
    'wholeword': _options.SearchOptions.WHOLE_WORD,
    'incremental': _options.SearchOptions.INCREMENTAL,
    'isRegEx': _options.SearchOptions.REGEX
}

_DEFAULTS = {
    _options.SearchOptions.WRAP: True,
    _options.SearchOptions.CASE_SENSITIVE: False,
    _options.SearchOptions.WHOLE_WORD: False,
    _options.SearchOptions.INCREMENTAL: False,
    _options.SearchOptions.REGEX: False
}


def _add_history(history: list[str], entry: str | None):
    if not entry:
        return

    if entry in history:
        history.remove(entry)

    history.insert(0, entry)

    del history[_constants.HISTORY_SIZE:]


class FindReplaceSettings:
    """
    Option defaults and find / replace history for a :py:class:`findreplace.controller.SearchController`

    Histories are ordered most recent first, contain no duplicates and hold
    at most :py:attr:`findreplace.constants.HISTORY_SIZE` entries.
    """

    def __init__(self,
                 wrap: bool = True,
                 case_sensitive: bool = False,
                 whole_word: bool = False,
                 incremental: bool = False,
                 regex: bool = False,
                 find_history: typing.Iterable[str] | None = None,
                 replace_history: typing.Iterable[str] | None = None):
        self.__values = {
            _options.SearchOptions.WRAP: wrap,
            _options.SearchOptions.CASE_SENSITIVE: case_sensitive,
            _options.SearchOptions.WHOLE_WORD: whole_word,
            _options.SearchOptions.INCREMENTAL: incremental,
            _options.SearchOptions.REGEX: regex
        }

        self.__find_history = []
        self.__replace_history = []

        # oldest first so the first given entry ends up most recent
        for entry in reversed(list(find_history or [])):
            _add_history(self.__find_history, entry)

        for entry in reversed(list(replace_history or [])):
            _add_history(self.__replace_history, entry)

    def get(self, option: _options.SearchOptions | str) -> bool:
        """
        Get a persisted option value.

        :param option: one of ``WRAP``, ``CASE_SENSITIVE``, ``WHOLE_WORD``, ``INCREMENTAL``, or ``REGEX``
        :raise KeyError: if the option is not persisted
        :return: ``True`` or ``False``
        """
        return self.__values[_options.get_search_option_enum(option)]

    def set(self, option: _options.SearchOptions | str, value: bool):
        """
        Set a persisted option value.

        :param option: one of ``WRAP``, ``CASE_SENSITIVE``, ``WHOLE_WORD``, ``INCREMENTAL``, or ``REGEX``
        :param value: the value
        :raise KeyError: if the option is not persisted
        """
        option = _options.get_search_option_enum(option)
        if option not in self.__values:
            raise KeyError(f'Search option "{_options.get_search_option_string(option)}" is not persisted.')
        self.__values[option] = bool(value)

    @property
    def wrap(self) -> bool:
        return self.__values[_options.SearchOptions.WRAP]

    @property
    def case_sensitive(self) -> bool:
        return self.__values[_options.SearchOptions.CASE_SENSITIVE]

    @property
    def whole_word(self) -> bool:
        return self.__values[_options.SearchOptions.WHOLE_WORD]

    @property
    def incremental(self) -> bool:
        return self.__values[_options.SearchOptions.INCREMENTAL]

    @property
    def regex(self) -> bool:
        return self.__values[_options.SearchOptions.REGEX]

    @property
    def find_history(self) -> list[str]:
        """
        Find history, most recent first.
        """
        return list(self.__find_history)

    @property
    def replace_history(self) -> list[str]:
        """
        Replace history, most recent first.
        """
        return list(self.__replace_history)

    def add_find_history(self, entry: str | None):
        """
        Record a search string, moving it to the front if already present.

        Empty strings are ignored.

        :param entry: the search string
        """
        _add_history(self.__find_history, entry)

    def add_replace_history(self, entry: str | None):
        """
        Record a replacement string, moving it to the front if already present.

        Empty strings are ignored.

        :param entry: the replacement string
        """
        _add_history(self.__replace_history, entry)

    def apply_to(self, controller):
        """
        Toggle the persisted options on a controller.

        :param controller: :py:class:`findreplace.controller.SearchController`
        """
        for option, value in self.__values.items():
            controller.set_active(option, value)

    def capture_from(self, controller, find: str | None = None, replace: str | None = None):
        """
        Store a controller's option toggles and record search / replacement strings in the history.

        :param controller: :py:class:`findreplace.controller.SearchController`
        :param find: search string to record, optional
        :param replace: replacement string to record, optional
        """
        for option in self.__values.keys():
            self.__values[option] = controller.is_active(option)

        self.add_find_history(find)
        self.add_replace_history(replace)

    def to_dict(self) -> dict[str, typing.Any]:
        """
        Return the serializable mapping representation.

        :return: dictionary
        """
        mapping = {key: self.__values[option] for key, option in _BOOLEAN_KEYS.items()}
        mapping['findhistory'] = list(self.__find_history)
        mapping['replacehistory'] = list(self.__replace_history)
        return mapping

    @classmethod
    def from_dict(cls, mapping: dict[str, typing.Any]) -> 'FindReplaceSettings':
        """
        Create settings from a mapping, missing keys take their default values.

        Boolean values may be given as strings such as ``"true"``.

        :param mapping: dictionary produced by :py:meth:`.FindReplaceSettings.to_dict`
        :raise ValueError: on unknown keys or unparsable values
        :return: :py:class:`.FindReplaceSettings`
        """
        known = set(_BOOLEAN_KEYS.keys()) | {'findhistory', 'replacehistory'}
        unknown = set(mapping.keys()) - known
        if unknown:
            raise ValueError(f'Unknown find / replace settings keys: {", ".join(sorted(unknown))}')

        values = {}
        for key, option in _BOOLEAN_KEYS.items():
            values[option] = _types.parse_bool(mapping.get(key, _DEFAULTS[option]))

        def history(key):
            entries = mapping.get(key) or []
            if isinstance(entries, str) or not isinstance(entries, list):
                raise ValueError(f'Find / replace settings key "{key}" must be a list of strings.')
            return [str(e) for e in entries]

        return cls(wrap=values[_options.SearchOptions.WRAP],
                   case_sensitive=values[_options.SearchOptions.CASE_SENSITIVE],
                   whole_word=values[_options.SearchOptions.WHOLE_WORD],
                   incremental=values[_options.SearchOptions.INCREMENTAL],
                   regex=values[_options.SearchOptions.REGEX],
                   find_history=history('findhistory'),
                   replace_history=history('replacehistory'))

    def serialize(self, stream=None, mode: str = 'json') -> str | None:
        """
        Serialize the settings.

        :param stream: File like object, if not provided this function will return a string.
        :param mode: ``json``, ``yaml``, or ``toml``
        :return: the serialized settings, or ``None`` if ``stream`` was provided
        """
        return _globalconfig.dump_mapping(self.to_dict(), stream=stream, mode=mode)

    @classmethod
    def load(cls, content_or_stream, mode: str = 'json') -> 'FindReplaceSettings':
        """
        Load settings from a string or file like object.

        :param content_or_stream: string content or file like object.
        :param mode: ``json``, ``yaml``, or ``toml``
        :return: :py:class:`.FindReplaceSettings`
        """
        return cls.from_dict(_globalconfig.load_mapping(content_or_stream, mode=mode))

    @classmethod
    def load_file(cls, path: str) -> 'FindReplaceSettings':
        """
        Load settings from a file, the format is determined by the file extension.

        :param path: file path
        :return: :py:class:`.FindReplaceSettings`
        """
        with open(path, 'r', encoding='utf-8') as file:
            return cls.load(file, mode=_globalconfig.mode_from_path(path))

    def save_file(self, path: str):
        """
        Save settings to a file, the format is determined by the file extension.

        :param path: file path
        """
        with open(path, 'w', encoding='utf-8') as file:
            self.serialize(file, mode=_globalconfig.mode_from_path(path))

    def __eq__(self, other):
        if not isinstance(other, FindReplaceSettings):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def __repr__(self):
        return f'{self.__class__.__name__}({self.to_dict()!r})'


__all__ = _types.module_all()
