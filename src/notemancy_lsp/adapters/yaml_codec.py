import re, io
import yaml
from typing import Any

_FM = re.compile(r"^\s*---\s*\n(.*?)\n---\s*\n?", re.DOTALL)


class YamlFrontmatter:
    def decode(self, text: str) -> tuple[dict[str, Any], str]:
        """Split `text` into (frontmatter mapping, body). Raises yaml.YAMLError."""
        m = _FM.match(text)
        if not m:
            return {}, text
        fm = yaml.safe_load(io.StringIO(m.group(1))) or {}
        if not isinstance(fm, dict):
            # scalar or list frontmatter carries no keys
            fm = {}
        body = text[m.end() :]
        return (fm, body)

    def split(self, text: str) -> tuple[str, str]:
        """Split `text` into (raw frontmatter block, body) without parsing YAML."""
        m = _FM.match(text)
        if not m:
            return "", text
        return text[: m.end()], text[m.end() :]
