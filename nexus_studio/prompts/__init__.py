"""提示词模板。

/code 命令、代码生成菜单、项目向导的 AI 增强步骤都会先把用户输入
改写为这里的固定指令，再交给生成后端。
"""

DEFAULT_CODE_FRAMEWORK = "react"

CODE_PROMPT_TEMPLATE = (
    "Generate {framework} code for: {description}\n"
    "Requirements:\n"
    "- Use modern {framework} best practices\n"
    "- Include all necessary imports and exports\n"
    "- Add brief comments for key logic\n"
    "- Return a single code block"
)

README_PROMPT_TEMPLATE = (
    "Generate a comprehensive README.md for a {template} project named {name} using {framework} framework"
)

STARTER_PROMPT_TEMPLATE = "Create a {framework} component for a {template} project called {name}"

COMPONENT_PROMPT_TEMPLATE = (
    "Create a {component_type} component named {name} for {framework} framework with the following features:\n"
    "- Clean, modern design\n"
    "- Responsive layout\n"
    "- Accessibility features\n"
    "- Documentation comments\n"
    "\n"
    "Return only the component code."
)


def build_code_prompt(description: str, framework: str = "") -> str:
    """把描述与框架改写为代码生成指令，框架为空时使用 react。"""

    framework = framework.strip() or DEFAULT_CODE_FRAMEWORK
    return CODE_PROMPT_TEMPLATE.format(framework=framework, description=description.strip())


def build_readme_prompt(name: str, template: str, framework: str) -> str:
    return README_PROMPT_TEMPLATE.format(name=name, template=template, framework=framework)


def build_starter_prompt(name: str, template: str, framework: str) -> str:
    return STARTER_PROMPT_TEMPLATE.format(name=name, template=template, framework=framework)


def build_component_prompt(component_type: str, name: str, framework: str) -> str:
    return COMPONENT_PROMPT_TEMPLATE.format(component_type=component_type, name=name, framework=framework)
