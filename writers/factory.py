# writers/factory.py
import logging
from typing import List

from context import RunContext
from .base import BaseWriter, WRITER_REGISTRY

# 导入即注册 (@register_writer)
from . import json_writer, jsonl_writer, markdown_writer  # noqa: F401

logger = logging.getLogger(__name__)


def available_formats() -> List[str]:
    return sorted(WRITER_REGISTRY.keys())


def get_writer(context: RunContext) -> BaseWriter:
    """
    工厂方法：根据 context.output_format 实例化对应的 Writer。
    """
    format_id = context.output_format.lower()
    writer_cls = WRITER_REGISTRY.get(format_id)
    if writer_cls is None:
        raise ValueError(
            f"未知的输出格式 '{context.output_format}'，可选: {', '.join(available_formats())}"
        )

    writer = writer_cls(context)
    logger.info(f"🔌 [Factory] 使用输出格式: {writer.name}")
    return writer
