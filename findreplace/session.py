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

import findreplace.status as _status
import findreplace.target as _target
import findreplace.types as _types

__doc__ = """
Per target state held by a :py:class:`findreplace.controller.SearchController`
"""


@dataclasses.dataclass
class SearchSession:
    """
    State associated with one attached :py:class:`findreplace.target.FindReplaceTarget`

    Created when a target is attached, discarded when the session ends.
    """

    target: _target.FindReplaceTarget
    """
    The attached target, owned by the caller.
    """

    editable: bool = True
    """
    Whether the caller allows editing the target.
    """

    regex_supported: bool = False
    """
    Target regex capability, captured at attach time.
    """

    scoping_supported: bool = False
    """
    Target scoping capability, captured at attach time.
    """

    multi_selection_supported: bool = False
    """
    Target multi selection capability, captured at attach time.
    """

    custom_search_contributions: bool = False
    """
    Target custom search contribution capability, captured at attach time.
    """

    offered_contributions: list = dataclasses.field(default_factory=list)
    """
    Search contributions the target offers, captured at attach time.
    """

    incremental_anchor: _target.Match = dataclasses.field(default_factory=_target.Match)
    """
    Range incremental searches are based on.
    """

    needs_initial_find_before_replace: bool = True
    """
    The anchor was invalidated (a target was attached or the scope changed),
    the next search must not skip over the current selection.
    """

    saved_scope: _target.Match | None = None
    """
    Scope saved when leaving range mode, restored when entering it again.
    """

    last_found: _target.Match | None = None
    """
    Range selected by the last successful search.
    """

    last_query: tuple | None = None
    """
    Search string and effective case, whole word and regex options of the last successful search.
    """

    last_status: _status.Status = dataclasses.field(default_factory=_status.Status)
    """
    Status produced by the last operation on this session.
    """


__all__ = _types.module_all()
