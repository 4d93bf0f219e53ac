"""领域层模型与异常。

包含：
- models: ConversationEntry / GenerationRequest / GenerationResult / CodeBlock。
- conversation: 只追加的会话消息序列。
- exceptions: 业务异常类型定义。
"""
