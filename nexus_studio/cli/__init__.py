"""Interactive terminal front-end: main menu, chat loop and entry point."""
