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
import argparse
import collections.abc

import findreplace.controller as _controller
import findreplace.documenttarget as _documenttarget
import findreplace.exceptions as _exceptions
import findreplace.globalconfig as _globalconfig
import findreplace.messages as _messages
import findreplace.options as _options
import findreplace.resources as _resources
import findreplace.settings as _settings
import findreplace.types as _types

__doc__ = """
The ``findreplace`` command line tool.

Finds, counts, or replaces a string in files using :py:class:`findreplace.documenttarget.DocumentTarget`
and :py:class:`findreplace.controller.SearchController`.

Exit codes: ``0`` when every file contained a match, ``1`` when any file contained no match,
``2`` on usage errors, unreadable files, or invalid patterns.
"""

EXIT_FOUND = 0
EXIT_NOT_FOUND = 1
EXIT_ERROR = 2


class _HelpExit(Exception):
    pass


class FindReplaceArguments:
    """
    Parsed command line arguments.
    """

    files: list[str]
    find: str
    replace: _types.OptionalString = None
    regex: bool = False
    case_sensitive: bool = False
    whole_word: bool = False
    dry_run: bool = False
    settings: _types.OptionalString = None
    config: _types.OptionalString = None
    verbose: bool = False

    def __init__(self):
        self.files = []


def _create_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='findreplace',
        exit_on_error=False,
        allow_abbrev=False,
        description='Find, count, or replace a string in files.')

    def _exit(status=0, message=None):
        if status == 0:
            raise _HelpExit()
        if not message:
            raise _exceptions.FindReplaceUsageError('invalid arguments')
        raise _exceptions.FindReplaceUsageError(
            message.strip().removeprefix(f'{parser.prog}: error: '))

    def _usage(file=None):
        _messages.log(parser.format_usage().rstrip())

    parser.exit = _exit
    parser.print_usage = _usage

    parser.add_argument('files', nargs='+', metavar='FILE',
                        help='Files to search.')

    parser.add_argument('-f', '--find', required=True,
                        help='The search string.')

    parser.add_argument('-r', '--replace', default=None,
                        help="""Replace every match with this string, when omitted matches are only counted.
                        When --regex is used the replacement may reference groups with \\N, \\{N}, or \\g<name>.""")

    parser.add_argument('-x', '--regex', action='store_true', default=False,
                        help='Interpret --find as a regular expression.')

    parser.add_argument('-c', '--case-sensitive', action='store_true', default=False,
                        help='Respect case when matching.')

    parser.add_argument('-w', '--whole-word', action='store_true', default=False,
                        help='Only match whole words, ignored for regular expressions and multi word strings.')

    parser.add_argument('-d', '--dry-run', action='store_true', default=False,
                        help='Report replacement counts without writing files.')

    parser.add_argument('-s', '--settings', default=None, metavar='FILE',
                        help="""Find / replace settings file (json, yaml, or toml by extension) providing
                        option defaults. Only the search and replacement are written back, as history,
                        command line flags do not change the stored defaults.""")

    parser.add_argument('--config', default=None, metavar='FILE',
                        help='Global config file (json, yaml, or toml by extension).')

    parser.add_argument('-v', '--verbose', action='store_true', default=False,
                        help='Enable debug output.')

    parser.add_argument('--version', action='version', version=f'findreplace v{_resources.__version__}')

    return parser


def parse_args(args: collections.abc.Sequence[str] | None = None) -> FindReplaceArguments:
    """
    Parse command line arguments.

    :param args: arguments, ``None`` means ``sys.argv[1:]``
    :raise findreplace.exceptions.FindReplaceUsageError: on invalid usage
    :return: :py:class:`.FindReplaceArguments`
    """
    parser = _create_parser()
    try:
        return parser.parse_args(args, namespace=FindReplaceArguments())
    except argparse.ArgumentError as e:
        raise _exceptions.FindReplaceUsageError(str(e).strip()) from e


def _load_settings(path: str) -> _settings.FindReplaceSettings:
    try:
        return _settings.FindReplaceSettings.load_file(path)
    except FileNotFoundError:
        return _settings.FindReplaceSettings()
    except (OSError, ValueError) as e:
        raise _exceptions.FindReplaceUsageError(f'Could not load settings file "{path}": {e}') from e


def _load_config(path: str):
    try:
        with open(path, 'r', encoding='utf-8') as file:
            _globalconfig.load_config(file, mode=_globalconfig.mode_from_path(path))
    except (OSError, ValueError, KeyError) as e:
        raise _exceptions.FindReplaceUsageError(f'Could not load config file "{path}": {e}') from e


def _configure(controller: _controller.SearchController,
               arguments: FindReplaceArguments,
               settings: _settings.FindReplaceSettings | None):
    if settings is not None:
        settings.apply_to(controller)

    controller.activate(_options.SearchOptions.FORWARD)

    for enabled, option in ((arguments.regex, _options.SearchOptions.REGEX),
                            (arguments.case_sensitive, _options.SearchOptions.CASE_SENSITIVE),
                            (arguments.whole_word, _options.SearchOptions.WHOLE_WORD)):
        if enabled:
            controller.activate(option)


def _process_file(controller: _controller.SearchController,
                  path: str,
                  arguments: FindReplaceArguments) -> int:
    try:
        with open(path, 'r', encoding='utf-8', newline='') as file:
            content = file.read()
    except (OSError, UnicodeDecodeError) as e:
        _messages.error(f'{path}: could not read file: {e}')
        return EXIT_ERROR

    target = _documenttarget.DocumentTarget(content)
    controller.attach_target(target, editable=True)
    controller.reset_status()

    try:
        if arguments.replace is None:
            count = controller.perform_select_all(arguments.find)
        else:
            count = controller.perform_replace_all(arguments.find, arguments.replace)
    finally:
        controller.end_session()

    status = controller.status

    if status.error:
        _messages.error(f'{path}: {status.message}')
        return EXIT_ERROR

    _messages.log_status(status, f'{path}:')

    if count and arguments.replace is not None and not arguments.dry_run:
        try:
            with open(path, 'w', encoding='utf-8', newline='') as file:
                file.write(target.text)
        except OSError as e:
            _messages.error(f'{path}: could not write file: {e}')
            return EXIT_ERROR

    return EXIT_FOUND if count else EXIT_NOT_FOUND


def run(arguments: FindReplaceArguments) -> int:
    """
    Run the tool with parsed arguments.

    :param arguments: :py:class:`.FindReplaceArguments`
    :raise findreplace.exceptions.FindReplaceUsageError: on unusable settings or config files
    :return: exit code
    """
    if not arguments.find:
        raise _exceptions.FindReplaceUsageError('--find may not be an empty string.')

    if arguments.config:
        _load_config(arguments.config)

    settings = _load_settings(arguments.settings) if arguments.settings else None

    controller = _controller.SearchController()
    _configure(controller, arguments, settings)

    result = EXIT_FOUND
    for path in arguments.files:
        code = _process_file(controller, path, arguments)
        if code == EXIT_ERROR:
            return EXIT_ERROR
        result = max(result, code)

    if settings is not None and not arguments.dry_run:
        settings.add_find_history(arguments.find)
        settings.add_replace_history(arguments.replace)
        try:
            settings.save_file(arguments.settings)
        except OSError as e:
            _messages.error(f'Could not save settings file "{arguments.settings}": {e}')
            return EXIT_ERROR

    return result


def main(args: collections.abc.Sequence[str] | None = None) -> int:
    """
    Entry point for the findreplace command line tool.

    :param args: program arguments, if ``None`` is provided they will be taken from ``sys.argv``
    :return: exit code
    """
    try:
        arguments = parse_args(args)
    except _HelpExit:
        return EXIT_FOUND
    except _exceptions.FindReplaceUsageError as e:
        _messages.error(f'findreplace: error: {e}')
        return EXIT_ERROR

    level = _messages.DEBUG if arguments.verbose else _messages.LEVEL

    with _messages.with_level(level):
        try:
            return run(arguments)
        except _exceptions.FindReplaceUsageError as e:
            _messages.error(f'findreplace: error: {e}')
            return EXIT_ERROR


__all__ = _types.module_all()
