"""Re-indent a snippet of markup in 3 lines, zero config."""

from markfmt import format

print(format("<ul><li>one</li><li><a href='/two'>two</a></li></ul>"))
