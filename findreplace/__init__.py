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
Find / replace control logic over abstract, mutable text buffers.

The :py:class:`SearchController` drives searching and replacing over any
:py:class:`FindReplaceTarget`, :py:class:`DocumentTarget` and :py:class:`RowListTarget`
are ready made targets. A target for :py:class:`tkinter.Text` widgets lives in
:py:mod:`findreplace.tktarget` and is not imported here.
"""

import findreplace.constants
import findreplace.types as _types
from .contributions import (
    SearchContribution,
    CaseSensitiveSearchContribution,
    CaseInsensitiveSearchContribution,
    WholeWordSearchContribution,
    GroupedSearchContribution
)
from .controller import (
    SearchController,
    StatusLineCallback
)
from .documenttarget import (
    DocumentTarget
)
from .exceptions import (
    FindReplaceError,
    PatternSyntaxError,
    TargetStateError,
    FindReplaceUsageError
)
from .matchers import (
    Matcher,
    CaseSensitiveMatcher,
    NormalMatcher,
    WholeWordMatcher,
    GroupedSearch,
    MatchAll,
    build_matcher_chain
)
from .options import (
    SearchOptions,
    get_search_option_enum,
    get_search_option_string,
    supported_search_option_strings
)
from .resources import __version__
from .rowtarget import (
    RowListTarget
)
from .session import (
    SearchSession
)
from .settings import (
    FindReplaceSettings
)
from .status import (
    Status
)
from .target import (
    FindReplaceTarget,
    Match
)

__all__ = _types.module_all()
