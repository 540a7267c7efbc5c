# topmark:header:start
#
#   project      : ProlMark
#   file         : __init__.py
#   file_relpath : src/prolmark/pipeline/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Per-file processing pipeline: read → recognize → render → compare → patch → write.

The recognition engine works on a stream of lines and performs no I/O. This
package is the line-stream driver around it: each file gets a
[`ProcessingContext`][prolmark.pipeline.context.ProcessingContext], and a named
pipeline (see [`prolmark.pipeline.pipelines`][]) runs its steps in order.
"""

from __future__ import annotations
