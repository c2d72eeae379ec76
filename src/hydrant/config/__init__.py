# topmark:header:start
#
#   project      : Hydrant
#   file         : __init__.py
#   file_relpath : src/hydrant/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Hydrant configuration.

Submodules:
    - [`hydrant.config.logging`][hydrant.config.logging]: internal logging setup
      (TRACE level, colored formatter).
    - [`hydrant.config.settings`][hydrant.config.settings]: serialization settings
      from the environment and TOML files.

The package itself imports nothing so that `hydrant.diagnostic` can depend on
`hydrant.config.logging` while `hydrant.config.settings` depends on `hydrant.diagnostic`.
"""

from __future__ import annotations
