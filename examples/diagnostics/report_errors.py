"""Lenient parsing: format broken markup and list what was wrong with it."""

import logging

from markfmt import ParseError, format, parse

logging.basicConfig(level=logging.WARNING, format="%(name)s %(levelname)s %(message)s")

broken = """<div>
  <p>unclosed paragraph
  <img src="a.png"
  <!-- never ends
"""

result = parse(broken, source_file="broken.html")
for diagnostic in result.diagnostics:
    print(diagnostic)

print(format(broken))

try:
    format(broken, strict=True, source_file="broken.html")
except ParseError as e:
    print("strict mode:", e)
