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

import findreplace.globalconfig

HISTORY_SIZE = 15
"""
Maximum number of entries kept in the find and replace histories of
:py:class:`findreplace.settings.FindReplaceSettings`.
"""

WRAPPED_SEARCH_MESSAGE = 'Wrapped search'
"""
Status message reported when a search wrapped around the start or end of the target.
"""

STRING_NOT_FOUND_MESSAGE = 'String "{}" not found'
"""
Status message reported when a search string could not be found, formatted with the search string.
"""

MATCH_REPLACED_MESSAGE = '1 match replaced'
"""
Status message reported when a replace all operation replaced exactly one match.
"""

MATCHES_REPLACED_MESSAGE = '{} matches replaced'
"""
Status message reported when a replace all operation replaced more than one match, formatted with the count.
"""

MATCH_SELECTED_MESSAGE = '1 match selected'
"""
Status message reported when a select all operation selected exactly one match.
"""

MATCHES_SELECTED_MESSAGE = '{} matches selected'
"""
Status message reported when a select all operation selected more than one match, formatted with the count.
"""

READ_ONLY_MESSAGE = 'The target is read only'
"""
Status message reported when a replace operation is attempted on a target that can not be edited.
"""

NO_TARGET_MESSAGE = 'No find / replace target is attached'
"""
Status message reported when an operation is attempted without an attached target.
"""

findreplace.globalconfig.register_all()
