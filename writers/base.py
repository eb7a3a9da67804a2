# writers/base.py
"""
输出格式的抽象基类 (ABC) 与注册表。
新增格式时，继承 BaseWriter 并使用 @register_writer 注册即可。
"""
from abc import ABC, abstractmethod
from typing import Dict, List, Type

from context import RunContext
from models import CommitRecord

# 全局注册表，存储 "format_id" -> Writer Class 的映射
WRITER_REGISTRY: Dict[str, Type["BaseWriter"]] = {}


def register_writer(format_id: str):
    """
    类装饰器：将具体的 Writer 实现类注册到全局注册表中。

    使用示例:
        @register_writer("json")
        class JsonWriter(BaseWriter):
            ...
    """

    def decorator(cls):
        if format_id in WRITER_REGISTRY:
            raise ValueError(
                f"Writer id '{format_id}' 已经被注册过 ({WRITER_REGISTRY[format_id].__name__})"
            )
        WRITER_REGISTRY[format_id] = cls
        return cls

    return decorator


class BaseWriter(ABC):
    """
    输出格式抽象基类
    负责把解析出的提交列表序列化为文本。
    """

    def __init__(self, context: RunContext):
        self.context = context
        self.global_config = context.global_config

    @property
    @abstractmethod
    def name(self) -> str:
        """返回输出格式的名称 (日志显示用)"""
        pass

    @abstractmethod
    def render(self, commits: List[CommitRecord]) -> str:
        """
        序列化提交列表。
        :param commits: 解析得到的提交记录 (保持输入顺序)
        :return: 完整的输出文本 (不含结尾换行)
        """
        pass
