from typing import Dict, Iterator, List, Tuple

from .models import ConversationEntry


class Conversation:
    """单个聊天会话的消息序列。

    只能通过 append_exchange 成对追加（先 user 后 assistant），
    只能通过 clear 整体清空；会话结束时随 ChatSession 一起销毁。
    """

    def __init__(self) -> None:
        self._entries: List[ConversationEntry] = []

    def append_exchange(self, prompt: str, reply: str) -> Tuple[ConversationEntry, ConversationEntry]:
        user = ConversationEntry(role="user", content=prompt)
        assistant = ConversationEntry(role="assistant", content=reply)
        self._entries.extend((user, assistant))
        return user, assistant

    def clear(self) -> None:
        self._entries.clear()

    @property
    def entries(self) -> Tuple[ConversationEntry, ...]:
        return tuple(self._entries)

    @property
    def turns(self) -> int:
        return len(self._entries) // 2

    def as_messages(self) -> List[Dict[str, str]]:
        return [{"role": e.role, "content": e.content} for e in self._entries]

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[ConversationEntry]:
        return iter(self.entries)
