"""模型与回答模板配置。

本模块把“模型名”映射为一个纯函数 (prompt) -> text：

- 已知模型：使用固定模板，把 prompt 原样替换到 {prompt} 占位符处。
- 未知模型：由 fallback_template 生成通用回答，同时写入 prompt 与模型名。

映射本身可以整体替换（TemplateBackend 接收任意 Mapping），
接入真实后端时只需要提供新的函数，不需要改动路由代码。
"""

from functools import partial
from typing import Callable, Mapping, Optional


TemplateFn = Callable[[str], str]

PROMPT_PLACEHOLDER = "{prompt}"
COMMENT_PREFIX = "// "


PHI3_MINI_TEMPLATE = """Here's a React component for: {prompt}

```javascript
import React, { useState } from 'react';

// Request: {prompt}
export default function GeneratedComponent() {
  const [active, setActive] = useState(false);

  return (
    <div className="generated-component">
      <button onClick={() => setActive(!active)}>
        {active ? 'Active' : 'Click me'}
      </button>
    </div>
  );
}
```

Generated by Phi-3 Mini."""


PHI3_SMALL_TEMPLATE = """Phi-3 Small suggestion for: {prompt}

```typescript
interface GeneratedProps {
  title: string;
}

// Request: {prompt}
export function Generated({ title }: GeneratedProps) {
  return <section className="generated">{title}</section>;
}
```"""


PHI3_MEDIUM_TEMPLATE = """Phi-3 Medium analysis of: {prompt}

1. Split the feature into presentational and container components.
2. Keep state close to where it is used.
3. Add tests for the interaction paths.

```typescript
// Request: {prompt}
export type Status = 'idle' | 'loading' | 'done';

export function nextStatus(current: Status): Status {
  return current === 'idle' ? 'loading' : 'done';
}
```"""


GPT4_TEMPLATE = """GPT-4 response for: {prompt}

```html
<!-- Request: {prompt} -->
<div class="container">
  <h1>Generated Layout</h1>
  <p>Replace this markup with your content.</p>
</div>
```

```css
.container { max-width: 960px; margin: 0 auto; }
```"""


CODELLAMA_TEMPLATE = """// CodeLlama output
// Task: {prompt}

```javascript
function solve(input) {
  // Request: {prompt}
  return input;
}

module.exports = { solve };
```"""


def interpolate(template: str, prompt: str) -> str:
    """把 prompt 原样替换进模板的 {prompt} 占位符。"""

    return template.replace(PROMPT_PLACEHOLDER, prompt)


def fallback_template(prompt: str, model: str) -> str:
    """未知模型的通用回答。"""

    return (
        f"{COMMENT_PREFIX}AI Response for: {prompt}\n"
        f"{COMMENT_PREFIX}Model: {model}\n"
        f"{COMMENT_PREFIX}Generated code would appear here"
    )


MODEL_TEMPLATES: Mapping[str, TemplateFn] = {
    "phi-3-mini": partial(interpolate, PHI3_MINI_TEMPLATE),
    "phi-3-small": partial(interpolate, PHI3_SMALL_TEMPLATE),
    "phi-3-medium": partial(interpolate, PHI3_MEDIUM_TEMPLATE),
    "gpt-4": partial(interpolate, GPT4_TEMPLATE),
    "codellama": partial(interpolate, CODELLAMA_TEMPLATE),
}


def get_template(model: str, templates: Optional[Mapping[str, TemplateFn]] = None) -> Optional[TemplateFn]:
    """按模型名查找模板函数（不区分大小写），找不到返回 None。"""

    table: Mapping[str, TemplateFn] = templates if templates is not None else MODEL_TEMPLATES
    wanted = model.lower()
    for name, fn in table.items():
        if name.lower() == wanted:
            return fn
    return None
