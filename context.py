"""
运行时配置的数据模型
"""
from dataclasses import dataclass
from typing import Optional
from config import GlobalConfig


@dataclass
class RunContext:
    """
    封装一次转换所需的所有配置。
    这是从 CLI 传递到 Orchestrator 的唯一对象。
    """

    # --- 输入 / 输出 ---
    # None 或 "-" 表示标准输入 / 标准输出
    input_path: Optional[str]
    output_path: Optional[str]

    # --- 输出参数 ---
    output_format: str
    compact: bool

    # --- 全局配置 ---
    global_config: GlobalConfig

    @property
    def reads_stdin(self) -> bool:
        return self.input_path in (None, "-")

    @property
    def writes_stdout(self) -> bool:
        return self.output_path in (None, "-")
