# SPDX-FileCopyrightText: the properuri contributors
#
# SPDX-License-Identifier: MIT

import doctest
import os
from pathlib import Path

import properuri


def _load_tests():
    """Create one test function per doctest found in the properuri modules,
    in a way that pytest and unittest both pick up."""
    i = 0
    base = Path(properuri.__file__).parent
    for root, dn, fn in os.walk(base):
        for f in sorted(fn):
            if not f.endswith(".py"):
                continue
            parts = list(Path(root).relative_to(base.parent).parts)
            if f != "__init__.py":
                parts.append(Path(f).stem)
            p = ".".join(parts)
            for t in doctest.DocTestSuite(p):
                i += 1

                def test(t=t):
                    result = t.run()
                    for f in result.failures + result.errors:
                        print(f[1])
                    if result.failures or result.errors:
                        raise RuntimeError("Doctest failed (see above)")

                globals()["test_%03d" % i] = test


_load_tests()
