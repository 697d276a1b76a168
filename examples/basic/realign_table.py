"""Realign a Markdown table in 3 lines, CJK included."""

from mesita import realign

print(realign("|name|qty|\n|---|--:|\n|りんご|3|\n|kiwi|12|"))
