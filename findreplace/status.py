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
import dataclasses

import findreplace.types as _types

__doc__ = """
Result reporting for find / replace operations.
"""


@dataclasses.dataclass(frozen=True)
class Status:
    """
    The outcome of the last find / replace operation.

    At most one of :py:attr:`.Status.error` and :py:attr:`.Status.warning` is ``True``.

    Instances are immutable, use the ``with_*`` methods to derive new ones.
    """

    message: str = ''
    """
    Human readable message, empty for a plain success.
    """

    error: bool = False
    """
    The operation failed, for example an invalid pattern or a read only target.
    """

    warning: bool = False
    """
    The operation succeeded with a caveat, or nothing was found.
    """

    def __post_init__(self):
        if self.error and self.warning:
            raise ValueError('Status can not be both an error and a warning.')

    @property
    def is_ok(self) -> bool:
        """
        Neither an error nor a warning?
        """
        return not (self.error or self.warning)

    def with_message(self, message: str) -> 'Status':
        """
        Replace the message, keeping the severity.

        :param message: the message
        :return: :py:class:`.Status`
        """
        return dataclasses.replace(self, message=message)

    def with_error(self, message: str) -> 'Status':
        """
        Derive an error status, clears the warning flag.

        :param message: the message
        :return: :py:class:`.Status`
        """
        return Status(message=message, error=True, warning=False)

    def with_warning(self, message: str) -> 'Status':
        """
        Derive a warning status, clears the error flag.

        :param message: the message
        :return: :py:class:`.Status`
        """
        return Status(message=message, error=False, warning=True)

    def cleared(self) -> 'Status':
        """
        Return the empty status.

        :return: :py:class:`.Status`
        """
        return Status()


__all__ = _types.module_all()
