# topmark:header:start
#
#   project      : ProlMark
#   file         : __main__.py
#   file_relpath : src/prolmark/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Module entry point for running ProlMark via ``python -m prolmark``.

It delegates directly to :func:`prolmark.cli.main.cli`, ensuring a single,
authoritative CLI entry point regardless of how ProlMark is launched.

Examples:
    Convert legacy prologues in place::

        python -m prolmark convert --apply src/*.f
"""

from __future__ import annotations

from prolmark.cli.main import cli

if __name__ == "__main__":
    cli()
