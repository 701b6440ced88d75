# SPDX-FileCopyrightText: the properuri contributors
#
# SPDX-License-Identifier: MIT

#: Make library version internally
#:
#: This is not supposed to be used in any decision-making process (use package
#: dependencies for that), but read by setup.py and shown in debugging output.
version = "1.0.0"
