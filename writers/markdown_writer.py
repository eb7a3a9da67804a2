# writers/markdown_writer.py
"""
Markdown 变更日志输出
准备模板上下文，并调用 Jinja2 模板渲染。
"""
import logging
from typing import List

from jinja2 import Environment, FileSystemLoader, select_autoescape

from models import CommitRecord
from .base import BaseWriter, register_writer

logger = logging.getLogger(__name__)


@register_writer("markdown")
class MarkdownWriter(BaseWriter):
    """使用 Jinja2 模板生成人类可读的变更日志"""

    name = "Markdown"

    def __init__(self, context):
        super().__init__(context)
        self.env = Environment(
            loader=FileSystemLoader(self.global_config.TEMPLATES_DIR),
            autoescape=select_autoescape(["html", "xml"]),
            trim_blocks=True,
            lstrip_blocks=True,
        )

    def render(self, commits: List[CommitRecord]) -> str:
        # Hash/Title/Body 在模板中单独展示，其余属性按出现顺序列出
        template_context = {
            "total_commits": len(commits),
            "entries": [
                {
                    "hash": commit.hash,
                    "title": commit.title,
                    "body": commit.body,
                    "attributes": commit.attributes(),
                }
                for commit in commits
            ],
        }

        template_name = self.global_config.MARKDOWN_TEMPLATE
        template = self.env.get_template(template_name)
        logger.info(f"🎨 正在渲染 Jinja2 模板: {template_name}")
        return template.render(**template_context).strip()
