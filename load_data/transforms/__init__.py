"""
Transforms sub-package for load-data.

Contains the steps that turn tokenized ATSV rows into an
``AnnotatedDocument``.

Design: Pipeline Pattern
- pipeline.py orchestrates the sequence of steps.
- Individual steps are in separate modules for testability:
  - meta.py: Collect ``key=value`` annotations from marker rows.
  - data_rows.py: Drop marker rows and recover the sentinel header name.
  - reencode.py: Format rows as CSV and parse them back into records.
"""
