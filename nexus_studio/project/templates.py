"""项目模板集合。

FRAMEWORK_TEMPLATES: 框架名 -> {相对路径: 文件内容}，内容中的 {name} 会替换为项目名。
PROJECT_TEMPLATES: 项目模板名 -> 说明 与 额外目录。
"""

from typing import Dict, List


FRAMEWORK_TEMPLATES: Dict[str, Dict[str, str]] = {
    "react": {
        "package.json": (
            '{\n  "name": "{name}",\n  "private": true,\n  "scripts": {\n'
            '    "dev": "vite",\n    "build": "vite build"\n  },\n'
            '  "dependencies": {\n    "react": "^18.2.0",\n    "react-dom": "^18.2.0"\n  }\n}\n'
        ),
        "index.html": (
            '<!doctype html>\n<html>\n  <head><title>{name}</title></head>\n'
            '  <body>\n    <div id="root"></div>\n    <script type="module" src="/src/main.jsx"></script>\n'
            "  </body>\n</html>\n"
        ),
        "src/main.jsx": (
            "import React from 'react';\nimport { createRoot } from 'react-dom/client';\n"
            "import App from './App';\n\ncreateRoot(document.getElementById('root')).render(<App />);\n"
        ),
        "src/App.jsx": "export default function App() {\n  return <h1>{name}</h1>;\n}\n",
    },
    "vue": {
        "package.json": (
            '{\n  "name": "{name}",\n  "private": true,\n  "scripts": {\n'
            '    "dev": "vite",\n    "build": "vite build"\n  },\n'
            '  "dependencies": {\n    "vue": "^3.4.0"\n  }\n}\n'
        ),
        "index.html": (
            '<!doctype html>\n<html>\n  <head><title>{name}</title></head>\n'
            '  <body>\n    <div id="app"></div>\n    <script type="module" src="/src/main.js"></script>\n'
            "  </body>\n</html>\n"
        ),
        "src/main.js": "import { createApp } from 'vue';\nimport App from './App.vue';\n\ncreateApp(App).mount('#app');\n",
        "src/App.vue": "<template>\n  <h1>{name}</h1>\n</template>\n",
    },
    "svelte": {
        "package.json": (
            '{\n  "name": "{name}",\n  "private": true,\n  "scripts": {\n'
            '    "dev": "vite",\n    "build": "vite build"\n  },\n'
            '  "devDependencies": {\n    "svelte": "^4.2.0"\n  }\n}\n'
        ),
        "src/main.js": "import App from './App.svelte';\n\nexport default new App({ target: document.body });\n",
        "src/App.svelte": "<h1>{name}</h1>\n",
    },
    "angular": {
        "package.json": (
            '{\n  "name": "{name}",\n  "private": true,\n  "scripts": {\n'
            '    "start": "ng serve",\n    "build": "ng build"\n  },\n'
            '  "dependencies": {\n    "@angular/core": "^17.0.0"\n  }\n}\n'
        ),
        "src/app/app.component.ts": (
            "import { Component } from '@angular/core';\n\n"
            "@Component({\n  selector: 'app-root',\n  template: '<h1>{name}</h1>',\n})\n"
            "export class AppComponent {}\n"
        ),
    },
    "nextjs": {
        "package.json": (
            '{\n  "name": "{name}",\n  "private": true,\n  "scripts": {\n'
            '    "dev": "next dev",\n    "build": "next build"\n  },\n'
            '  "dependencies": {\n    "next": "^14.0.0",\n    "react": "^18.2.0",\n    "react-dom": "^18.2.0"\n  }\n}\n'
        ),
        "src/app/page.tsx": "export default function Page() {\n  return <h1>{name}</h1>;\n}\n",
    },
    "vanilla": {
        "index.html": (
            '<!doctype html>\n<html>\n  <head><title>{name}</title></head>\n'
            '  <body>\n    <h1>{name}</h1>\n    <script src="src/main.js"></script>\n  </body>\n</html>\n'
        ),
        "src/main.js": "console.log('{name} ready');\n",
    },
}


PROJECT_TEMPLATES: Dict[str, Dict[str, object]] = {
    "default": {"description": "Minimal single-page app", "dirs": []},
    "fullstack": {"description": "Frontend plus an api/ folder for server routes", "dirs": ["api"]},
    "dashboard": {"description": "Admin dashboard with layout and widgets", "dirs": ["src/widgets", "src/layouts"]},
}


COMPONENT_TYPES: List[str] = ["page", "layout", "ui", "api", "util"]


def component_extension(framework: str) -> str:
    if framework in ("react", "nextjs"):
        return "tsx"
    if framework == "vue":
        return "vue"
    if framework == "svelte":
        return "svelte"
    if framework == "angular":
        return "component.ts"
    return "jsx"


def render(content: str, name: str) -> str:
    return content.replace("{name}", name)
