# topmark:header:start
#
#   project      : Hydrant
#   file         : __init__.py
#   file_relpath : src/hydrant/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Click-based command-line interface for Hydrant."""
