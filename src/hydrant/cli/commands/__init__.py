# topmark:header:start
#
#   project      : Hydrant
#   file         : __init__.py
#   file_relpath : src/hydrant/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Hydrant CLI subcommands."""
