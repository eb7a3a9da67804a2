# models.py
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Iterator, Optional

HASH_KEY = "Hash"
TITLE_KEY = "Title"
BODY_KEY = "Body"


class LineType(Enum):
    """git log 行类型"""

    COMMIT_START = 1
    ATTRIBUTE = 2
    BLANK_LINE = 3
    TEXT_LINE = 4


@dataclass
class CommitRecord:
    """
    单个提交的数据模型。
    所有字段 (包括 Hash/Title/Body) 都保存在同一个有序字典中，
    键的顺序即首次出现的顺序，保证序列化结果稳定。
    """

    fields: Dict[str, str] = field(default_factory=dict)

    @property
    def hash(self) -> Optional[str]:
        return self.fields.get(HASH_KEY)

    @hash.setter
    def hash(self, value: str):
        self.fields[HASH_KEY] = value

    @property
    def title(self) -> Optional[str]:
        return self.fields.get(TITLE_KEY)

    @title.setter
    def title(self, value: str):
        self.fields[TITLE_KEY] = value

    @property
    def body(self) -> Optional[str]:
        return self.fields.get(BODY_KEY)

    @body.setter
    def body(self, value: str):
        self.fields[BODY_KEY] = value

    @property
    def has_hash(self) -> bool:
        return HASH_KEY in self.fields

    @property
    def has_title(self) -> bool:
        return TITLE_KEY in self.fields

    @property
    def has_body(self) -> bool:
        return BODY_KEY in self.fields

    def set_attribute(self, name: str, value: str):
        """写入属性字段；已存在的键保持原有位置，仅覆盖值"""
        self.fields[name] = value

    def get(self, name: str, default: Optional[str] = None) -> Optional[str]:
        return self.fields.get(name, default)

    def attributes(self) -> Dict[str, str]:
        """除 Hash/Title/Body 以外的属性字段 (如 Author, Date)"""
        return {
            k: v
            for k, v in self.fields.items()
            if k not in (HASH_KEY, TITLE_KEY, BODY_KEY)
        }

    def to_dict(self) -> Dict[str, str]:
        return dict(self.fields)

    def __getitem__(self, name: str) -> str:
        return self.fields[name]

    def __contains__(self, name: object) -> bool:
        return name in self.fields

    def __iter__(self) -> Iterator[str]:
        return iter(self.fields)

    def __len__(self) -> int:
        return len(self.fields)
