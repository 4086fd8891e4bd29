from src.blades.dialogs.console import ConsoleFormDialog

__all__ = ['ConsoleFormDialog']
