# orchestrator.py
"""
业务逻辑编排器
读取输入 -> 解析提交 -> 选择输出格式 -> 写出结果
"""
import logging
import sys

from context import RunContext
from log_parser import GitLogParser, InvalidSourceError
from writers.factory import get_writer

logger = logging.getLogger(__name__)


class ConvertOrchestrator:
    """
    负责执行一次 git log -> 结构化输出 的转换。
    """

    def __init__(self, context: RunContext):
        self.context = context
        self.global_config = context.global_config

    def run(self) -> int:
        """
        执行核心流程，返回进程退出码 (0 表示成功)。
        """

        # --- 1. 选择输出格式 (先于读取输入，避免白白解析) ---
        try:
            writer = get_writer(self.context)
        except ValueError as e:
            logger.error(f"❌ {e}")
            return 1

        # --- 2. 读取并解析 ---
        try:
            parser = self._parse_input()
        except FileNotFoundError:
            logger.error(f"❌ 输入文件不存在: {self.context.input_path}")
            return 1
        except (OSError, InvalidSourceError) as e:
            logger.error(f"❌ 读取输入失败: {e}")
            return 1

        if not len(parser):
            logger.warning("⚠️ 未解析到任何提交记录")

        # --- 3. 序列化 ---
        output = writer.render(parser.to_list())

        # --- 4. 写出 ---
        return 0 if self._write_output(output) else 1

    def _parse_input(self) -> GitLogParser:
        encoding = self.global_config.INPUT_ENCODING
        if self.context.reads_stdin:
            logger.info("📥 从标准输入读取 git log ...")
            # 优先读取底层字节流，按配置的编码解码
            source = getattr(sys.stdin, "buffer", sys.stdin)
            return GitLogParser(source, encoding=encoding)

        logger.info(f"📥 读取输入文件: {self.context.input_path}")
        with open(
            self.context.input_path, "r", encoding=encoding, errors="replace"
        ) as f:
            return GitLogParser(f, encoding=encoding)

    def _write_output(self, output: str) -> bool:
        if self.context.writes_stdout:
            sys.stdout.write(output + "\n")
            sys.stdout.flush()
            return True

        try:
            with open(self.context.output_path, "w", encoding="utf-8") as f:
                f.write(output + "\n")
            logger.info(f"✅ 结果已保存: {self.context.output_path}")
            return True
        except OSError as e:
            logger.error(f"❌ 保存结果失败 ({self.context.output_path}): {e}")
            return False
