# SPDX-License-Identifier: MIT
"""Command-line tools for parsing and comparing semantic versions."""

__version__ = "0.1.0"
