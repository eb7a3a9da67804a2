import json
from typing import List

from models import CommitRecord
from .base import BaseWriter, register_writer


@register_writer("json")
class JsonWriter(BaseWriter):
    """JSON 数组，每个提交是一个对象；默认带缩进，--compact 时为单行"""

    name = "JSON"

    def render(self, commits: List[CommitRecord]) -> str:
        indent = None if self.context.compact else self.global_config.JSON_INDENT
        return json.dumps(
            [commit.to_dict() for commit in commits],
            indent=indent,
            ensure_ascii=self.global_config.JSON_ENSURE_ASCII,
        )
