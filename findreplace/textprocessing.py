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
import re

import findreplace.exceptions as _exceptions

__doc__ = """
Text processing utilities shared by the controller, the reference targets and the command line tool.
"""

_WORD_PATTERN = re.compile(r'\w+')

_EXTENDED_REFERENCE_PATTERN = re.compile(r'\\(?:(\\)|\{(\d+)\}|0)')


def is_word(string: str | None) -> bool:
    """
    Is a string a single word, meaning every character is an identifier character?

    Whole word searching is only meaningful for strings that pass this test.

    :param string: the string
    :return: ``True`` or ``False``
    """
    if not string:
        return False
    return _WORD_PATTERN.fullmatch(string) is not None


def first_line(string: str) -> str:
    """
    Return the first line of a string, or an empty string if there is none.

    :param string: the string
    :return: first line without its line terminator
    """
    lines = string.splitlines()
    return lines[0] if lines else ''


def compile_search_pattern(find: str,
                           case_sensitive: bool,
                           whole_word: bool,
                           regex: bool) -> re.Pattern:
    """
    Compile a search string into a pattern honoring the usual find options.

    Literal strings are escaped, whole word search surrounds the
    pattern with word boundary assertions, and case insensitive
    search uses :py:attr:`re.IGNORECASE`. Whole word is ignored
    when ``regex`` is ``True``.

    :param find: the search string
    :param case_sensitive: respect case?
    :param whole_word: only match whole words?
    :param regex: is ``find`` a regular expression?

    :raises findreplace.exceptions.PatternSyntaxError: if ``find`` is an invalid regular expression

    :return: compiled pattern
    """
    flags = re.MULTILINE
    if not case_sensitive:
        flags |= re.IGNORECASE

    if regex:
        source = find
    else:
        source = re.escape(find)
        if whole_word:
            source = r'(?<!\w)' + source + r'(?!\w)'

    try:
        return re.compile(source, flags)
    except re.error as e:
        raise _exceptions.PatternSyntaxError(find, str(e)) from e


def expand_replacement(match: re.Match, replacement: str) -> str:
    """
    Expand regex group references and escapes inside a replacement string.

    Supported references:

    * ``\\0`` or ``\\{0}`` - the entire match
    * ``\\N`` or ``\\{N}`` - capture group N
    * ``\\g<name>`` - named or numbered capture group

    ``\\0`` and ``\\{N}`` are rewritten to ``\\g<N>`` first, the result is then expanded
    with :py:meth:`re.Match.expand`, which also handles escape sequences such as ``\\n``.

    :param match: the match to expand against
    :param replacement: the replacement string

    :raises findreplace.exceptions.PatternSyntaxError: if the
        replacement references a group that does not exist or is otherwise invalid

    :return: the expanded replacement
    """

    def normalize_reference(m):
        if m.group(1) is not None:
            return m.group(0)
        return f'\\g<{m.group(2) or 0}>'

    template = _EXTENDED_REFERENCE_PATTERN.sub(normalize_reference, replacement)

    try:
        return match.expand(template)
    except (re.error, IndexError) as e:
        raise _exceptions.PatternSyntaxError(replacement, str(e)) from e


def plural(count: int, singular: str, many: str) -> str:
    """
    Select a singular or plural message template and format the count into it.

    :param count: the count
    :param singular: template used when ``count`` is exactly 1
    :param many: template used otherwise, formatted with ``count``
    :return: formatted message
    """
    if count == 1:
        return singular.format(count)
    return many.format(count)


def search_forward(pattern: re.Pattern,
                   text: str,
                   offset: int,
                   start: int,
                   end: int) -> re.Match | None:
    """
    Find the first match of a pattern starting at or after an offset, within a region of text.

    :param pattern: compiled pattern
    :param text: the text
    :param offset: start offset, ``-1`` means the start of the region
    :param start: region start
    :param end: region end (exclusive)
    :return: :py:class:`re.Match` or ``None``
    """
    begin = start if offset == -1 else max(offset, start)
    if begin > end:
        return None

    return pattern.search(text, begin, end)


def search_backward(pattern: re.Pattern,
                    text: str,
                    offset: int,
                    start: int,
                    end: int) -> re.Match | None:
    """
    Find the last match of a pattern starting at or before an offset, within a region of text.

    Overlapping candidates are considered, searching ``aa`` backward in ``aaa`` from
    the end finds the match at offset 1.

    :param pattern: compiled pattern
    :param text: the text
    :param offset: start offset, ``-1`` means the end of the region
    :param start: region start
    :param end: region end (exclusive)
    :return: :py:class:`re.Match` or ``None``
    """
    limit = end if offset == -1 else min(offset, end)
    if limit < start:
        return None

    best = None
    position = start
    while position <= limit:
        match = pattern.search(text, position, end)
        if match is None or match.start() > limit:
            break
        best = match
        position = match.start() + 1

    return best
