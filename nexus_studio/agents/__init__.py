"""聊天会话（ChatSession）。"""

from nexus_studio.agents.chat_session import ChatSession, SessionConfig

__all__ = ["ChatSession", "SessionConfig"]
