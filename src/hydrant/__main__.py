# topmark:header:start
#
#   project      : Hydrant
#   file         : __main__.py
#   file_relpath : src/hydrant/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Module entry point for running Hydrant via ``python -m hydrant``.

It delegates directly to :func:`hydrant.cli.main.cli`, ensuring a single,
authoritative CLI entry point regardless of how Hydrant is launched.

Examples:
    Serialize a JSON document::

        python -m hydrant serialize state.json
"""

from __future__ import annotations

from hydrant.cli.main import cli

if __name__ == "__main__":
    cli()
