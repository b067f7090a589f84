"""Host adapters embedding the editor in a UI toolkit."""
