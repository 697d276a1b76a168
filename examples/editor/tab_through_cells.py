"""Drive the editing commands the way an editor's Tab key would."""

from mesita import Position, goto_next_cell

text = "Shopping list\n\n|item|qty|\n|-|-|\n|apple|3|"
cursor = Position(2, 1)

for _ in range(5):
    result = goto_next_cell(text, cursor)
    if result is None:
        break
    text, cursor = result.text, result.cursor
    print(f"cursor -> {cursor}")

print(text)
