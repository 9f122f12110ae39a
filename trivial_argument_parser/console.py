# Trivial Argument Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""Global console instance used to display parsed arguments."""
from rich.console import Console

console = Console()
