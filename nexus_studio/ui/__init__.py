"""终端界面。"""

from nexus_studio.ui.console import ConsoleUI

__all__ = ["ConsoleUI"]
