import json
from typing import List

from models import CommitRecord
from .base import BaseWriter, register_writer


@register_writer("jsonl")
class JsonLinesWriter(BaseWriter):
    """JSON Lines：每行一个提交对象"""

    name = "JSON Lines"

    def render(self, commits: List[CommitRecord]) -> str:
        return "\n".join(
            json.dumps(
                commit.to_dict(), ensure_ascii=self.global_config.JSON_ENSURE_ASCII
            )
            for commit in commits
        )
