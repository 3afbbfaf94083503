"""Thread safe: format 1000 documents in parallel with one formatter."""

from concurrent.futures import ThreadPoolExecutor

from markfmt import FormatConfig, MarkupFormatter

docs = [f"<div>\n  <p>Document {i}</p>\n  <br>\n</div>" for i in range(1000)]
minify = MarkupFormatter(FormatConfig(minify=True))

with ThreadPoolExecutor(max_workers=8) as ex:
    results = list(ex.map(minify, docs))

print(f"Formatted {len(results)} documents in parallel")
print("First:", results[0])
print("Last:", results[-1])
