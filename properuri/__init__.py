# SPDX-FileCopyrightText: the properuri contributors
#
# SPDX-License-Identifier: MIT

"""
The properuri package implements strict percent-encoding of text for use in
URIs and URI components, following RFC3986 (and the attr-char rules of
RFC5987).

Unlike :func:`urllib.parse.quote`, which needs a ``safe`` argument tuned per
call site, this offers the two fixed flavors known from JavaScript, but with
the RFC3986 reserved characters ``[`` and ``]`` (and ``!'()*`` in
components) handled the way the RFCs describe.

Module contents
---------------

This root module re-exports :func:`.encode_uri`, :func:`.encode_uri_component`
and the generic :func:`.encode`, along with the safe-sets of
:mod:`.charsets`.

>>> encode_uri_component("100% [sure]")
'100%25%20%5Bsure%5D'
"""

from .charsets import SafeSet, URI_SAFE, URI_COMPONENT_SAFE
from .encoder import encode, encode_uri, encode_uri_component

__all__ = [
    'encode', 'encode_uri', 'encode_uri_component',
    'SafeSet', 'URI_SAFE', 'URI_COMPONENT_SAFE',
]
