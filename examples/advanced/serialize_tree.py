"""Cache a parsed tree to disk as JSON and restore it."""

from markfmt import parse
from markfmt.serialization import from_json, to_json

result = parse("<section id='intro'><!-- cached --><p>This tree can be serialized.</p></section>")

json_str = to_json(result.nodes, indent=2)
restored = from_json(json_str)

print("Original == restored:", result.nodes == restored)
print("JSON length:", len(json_str), "chars")
