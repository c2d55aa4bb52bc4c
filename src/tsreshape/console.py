"""
Shared Rich console and theme for table previews.
"""
from rich.console import Console
from rich.theme import Theme

custom_theme = Theme({
    "muted": "blue",
    "table.header": "bold blue",
    "table.cell": "blue",
})

console = Console(theme=custom_theme, highlight=False)
