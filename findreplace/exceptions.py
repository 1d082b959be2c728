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
__doc__ = 'Common exceptions'

import findreplace.types as _types


class FindReplaceError(Exception):
    """
    Base class for find / replace errors raised by targets.
    """
    pass


class PatternSyntaxError(FindReplaceError):
    """
    Raised when a search or replace string is not a valid regular expression.

    The message of the regular expression engine is available via :py:attr:`.PatternSyntaxError.description`
    """

    def __init__(self, pattern: str, description: str):
        super().__init__(f'{description}: {pattern}')
        self.pattern = pattern
        """
        The offending pattern.
        """

        self.description = description
        """
        Diagnostic message produced by the regular expression engine.
        """


class TargetStateError(FindReplaceError):
    """
    Raised when a target refuses an operation in its current state, for
    example replacing the selection when the last find did not succeed.
    """
    pass


class FindReplaceUsageError(Exception):
    """
    Raised by the command line tool on invalid usage.
    """
    pass


__all__ = _types.module_all()
