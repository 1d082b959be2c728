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
__doc__ = """
Configure findreplace's global constants.

Module level constants such as status message templates and the history size
are registered here and can be serialized and loaded as ``json``, ``yaml`` or ``toml``.

The serialization helpers are shared with :py:mod:`findreplace.settings`.
"""

import contextlib
import importlib
import inspect
import json
import os
import types

import toml
import yaml

import findreplace.types as _types

_config_variable_map = dict()

SERIALIZATION_MODES = ('json', 'yaml', 'toml')
"""
Supported serialization modes.
"""


def register_config_variable(module: str | types.ModuleType,
                             variable_name: str,
                             config_variable_name: str | None = None):
    """
    Register a global config variable that exists inside an arbitrary module.

    :param module: The module name or object reference.
    :param variable_name: Name of the variable inside the module.
    :param config_variable_name: Name to represent the variable in the global
        config file, if left ``None`` this will be ``variable_name`` in lowercase.
    """
    if isinstance(module, types.ModuleType):
        module = module.__name__

    config_variable_name = variable_name.lower() \
        if not config_variable_name else config_variable_name

    _config_variable_map[config_variable_name] = module + '.' + variable_name


def register_all():
    """
    Register all public non-module type global objects inside the calling module as config variables.
    """
    frame = inspect.currentframe().f_back
    module = inspect.getmodule(frame)
    for name, value in frame.f_globals.items():
        if not name.startswith('_') and not isinstance(value, types.ModuleType):
            register_config_variable(module, name)


def get_config_variable_names() -> list[str]:
    """
    Return the names of every registered config variable.

    :return: list of names
    """
    return list(_config_variable_map.keys())


def _split_path(path: str):
    module_path, _, attr_name = path.rpartition(".")

    if not module_path or not attr_name:
        raise ValueError(f"Invalid path: {path}")

    return module_path, attr_name


def _get_constant_by_string(path: str):
    module_path, attr_name = _split_path(path)

    try:
        module = importlib.import_module(module_path)
        return getattr(module, attr_name)
    except (ModuleNotFoundError, AttributeError) as e:
        raise ImportError(f"Could not retrieve '{path}': {e}") from e


def _set_constant_by_string(path: str, value):
    module_path, attr_name = _split_path(path)

    try:
        module = importlib.import_module(module_path)
        setattr(module, attr_name, value)
    except ModuleNotFoundError as e:
        raise ImportError(f"Could not retrieve '{path}': {e}") from e


def _get_config_dict():
    config_dict = dict()
    for name, location in _config_variable_map.items():
        config_dict[name] = _get_constant_by_string(location)
    return config_dict


def get_config_dict():
    """
    Return a dictionary representation of the global configuration.

    :return: config dictionary
    """
    return _types.partial_deep_copy_container(_get_config_dict())


def set_from_config_dict(config_dict: dict):
    """
    Set the current global config from a dictionary object.

    This dictionary may be partial, i.e. an incomplete set of settings
    as long as the key names mentioned are correct.

    :param config_dict: The config dictionary
    :raise KeyError: If a configuration key name is not valid.
    """
    for name in config_dict.keys():
        if name not in _config_variable_map:
            raise KeyError(f'Unknown global config variable: {name}')

    for name, value in config_dict.items():
        _set_constant_by_string(_config_variable_map[name], value)


def mode_from_path(path: str) -> str:
    """
    Determine a serialization mode from a file path extension.

    ``.yml`` and ``.yaml`` are ``yaml``, ``.toml`` is ``toml``, anything else is ``json``.

    :param path: file path
    :return: ``json``, ``yaml``, or ``toml``
    """
    ext = os.path.splitext(path)[1].lower()
    if ext in {'.yml', '.yaml'}:
        return 'yaml'
    if ext == '.toml':
        return 'toml'
    return 'json'


def dump_mapping(mapping: dict, stream=None, mode: str = 'json') -> str | None:
    """
    Serialize a dictionary.

    :param mapping: the dictionary
    :param stream: File like object, if not provided this function will return a string.
    :param mode: ``json``, ``yaml``, or ``toml``
    :raise ValueError: on unknown ``mode``
    :return: the serialized dictionary, or ``None`` if ``stream`` was provided
    """
    if mode == 'json':
        if stream:
            json.dump(mapping, stream, indent=4)
        else:
            return json.dumps(mapping, indent=4)
    elif mode == 'yaml':
        if stream:
            yaml.dump(mapping, stream=stream, default_flow_style=False)
        else:
            return yaml.dump(mapping, default_flow_style=False)
    elif mode == 'toml':
        if stream:
            toml.dump(mapping, stream)
        else:
            return toml.dumps(mapping)
    else:
        raise ValueError(f'Unknown serialization mode: {mode}')

    return None


def load_mapping(content_or_stream, mode: str = 'json') -> dict:
    """
    Deserialize a dictionary.

    :param content_or_stream: string content or file like object.
    :param mode: ``json``, ``yaml``, or ``toml``
    :raise ValueError: on unknown ``mode``, or if the content is not a mapping
    :return: the dictionary
    """
    if mode == 'json':
        mapping = json.loads(content_or_stream) \
            if isinstance(content_or_stream, str) else json.load(content_or_stream)
    elif mode == 'yaml':
        mapping = yaml.safe_load(content_or_stream)
    elif mode == 'toml':
        mapping = toml.loads(content_or_stream) \
            if isinstance(content_or_stream, str) else toml.load(content_or_stream)
    else:
        raise ValueError(f'Unknown deserialization mode: {mode}')

    if mapping is None:
        return dict()

    if not isinstance(mapping, dict):
        raise ValueError(
            f'Expected a mapping at the top level of {mode} content, got {type(mapping).__name__}')

    return mapping


def serialize_current_config(stream=None, mode: str = 'json') -> str | None:
    """
    Serialize the current global config.

    :param stream: File like object, if not provided this function will return a string.
    :param mode: ``json``, ``yaml``, or ``toml``
    :return: the serialized config
    """
    return dump_mapping(_get_config_dict(), stream=stream, mode=mode)


__config_stack = []


def push_config():
    """
    Save the current configuration to the stack.
    """
    __config_stack.append(get_config_dict())


def pop_config():
    """
    Pop the last saved configuration off the stack and restore it.

    :raise IndexError: if the stack is empty.
    """
    set_from_config_dict(__config_stack.pop())


@contextlib.contextmanager
def restore_config_context():
    """
    Context manager which pushes the current global configuration to the stack
    and pops it when the ``with`` context ends.
    """
    try:
        push_config()
        yield
    finally:
        pop_config()


def load_config(content_or_stream, mode: str = 'json'):
    """
    Load global config from a string or file like object.

    :param content_or_stream: string content or file like object.
    :param mode: ``json``, ``yaml``, or ``toml``
    :raise KeyError: If a configuration key name is not valid.
    """
    set_from_config_dict(load_mapping(content_or_stream, mode=mode))


__all__ = _types.module_all()
