"""Pattern-driven Markdown to HTML conversion.

Submodules:
  patterns    -- compiled regex patterns and block-prefix constants
  tables      -- pipe-table detection and <table> rendering
  escaping    -- tag-aware HTML entity escaping
  blocks      -- one substitution function per block/inline stage
  paragraphs  -- blank-line splitting and <p> wrapping
  protect     -- placeholder vault for the opt-in hardening options
  pipeline    -- to_html() entry point that sequences every stage
"""
