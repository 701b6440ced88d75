# SPDX-FileCopyrightText: the properuri contributors
#
# SPDX-License-Identifier: MIT

"""Module that contains the various test scenarios.

Can be used most easily through `python3 -m unittest` (which just runs the
tests) or `pytest`."""
