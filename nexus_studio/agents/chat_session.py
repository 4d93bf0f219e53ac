"""聊天会话核心模块。

持有当前会话的消息序列与当前模型名，把每一轮输入组装成
GenerationRequest 交给生成后端，成功后再成对写回会话。
"""

from dataclasses import dataclass
from typing import Any, Dict
import time
import logging
from uuid import uuid4

from nexus_studio.domain.conversation import Conversation
from nexus_studio.domain.exceptions import ValidationError
from nexus_studio.domain.models import GenerationRequest, GenerationResult
from nexus_studio.infrastructure.logging.logger import logger
from nexus_studio.providers.base import GenerationBackend


@dataclass
class SessionConfig:
    model: str
    max_tokens: int = 2048
    temperature: float = 0.7


class ChatSession:
    def __init__(self, backend: GenerationBackend, config: SessionConfig):
        self._backend = backend
        self._config = config
        self._conversation = Conversation()
        self._log_ctx: Dict[str, Any] = {"session_id": f"s-{uuid4().hex}", "backend": backend.name}

    @property
    def model(self) -> str:
        return self._config.model

    @property
    def conversation(self) -> Conversation:
        return self._conversation

    def set_model(self, name: str) -> bool:
        """切换模型；空字符串不做任何修改并返回 False。"""

        name = name.strip()
        if not name:
            return False
        previous = self._config.model
        self._config.model = name
        self._log(logging.INFO, "chat.model_changed", previous=previous, model=name)
        return True

    def clear(self) -> None:
        cleared = len(self._conversation)
        self._conversation.clear()
        self._log(logging.INFO, "chat.cleared", entries=cleared)

    def ask(self, prompt: str) -> GenerationResult:
        """执行一轮对话。

        请求里携带的是追加本轮之前的会话快照；
        只有生成成功后才把 (user, assistant) 一对消息写回会话。
        """

        if not prompt.strip():
            raise ValidationError(code="EMPTY_PROMPT", message="Prompt must not be empty")
        start_time = time.time()
        req = GenerationRequest(
            prompt=prompt,
            model=self._config.model,
            conversation=self._conversation.entries,
            max_tokens=self._config.max_tokens,
            temperature=self._config.temperature,
        )
        result = self._backend.generate(req)
        self._conversation.append_exchange(prompt, result.text)
        self._log(
            logging.INFO,
            "chat.turn",
            model=result.model,
            turns=self._conversation.turns,
            has_code=result.code_block is not None,
            elapsed_seconds=round(time.time() - start_time, 3),
        )
        return result

    def _log(self, level: int, message: str, **fields: Any) -> None:
        payload = dict(self._log_ctx)
        payload.update(fields)
        logger.log(level, message, extra={"extra": payload})
