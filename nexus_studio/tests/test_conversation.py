import dataclasses

import pytest

from nexus_studio.domain.conversation import Conversation
from nexus_studio.domain.models import ConversationEntry


def test_entries_are_appended_in_pairs():
    conv = Conversation()
    user, assistant = conv.append_exchange("hi", "hello")
    assert user == ConversationEntry(role="user", content="hi")
    assert assistant == ConversationEntry(role="assistant", content="hello")
    conv.append_exchange("again", "sure")
    assert [e.role for e in conv] == ["user", "assistant", "user", "assistant"]
    assert conv.turns == 2
    assert conv.as_messages()[2] == {"role": "user", "content": "again"}


def test_entries_cannot_be_mutated():
    conv = Conversation()
    conv.append_exchange("hi", "hello")
    with pytest.raises(dataclasses.FrozenInstanceError):
        conv.entries[0].content = "changed"
    assert isinstance(conv.entries, tuple)


def test_clear_empties_regardless_of_length():
    conv = Conversation()
    for i in range(5):
        conv.append_exchange(f"q{i}", f"a{i}")
    conv.clear()
    assert len(conv) == 0
    assert conv.entries == ()
