# utils.py
import logging
import sys


def setup_logging(level: str = "INFO"):
    """配置全局日志 (输出到 stderr，stdout 留给解析结果)"""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stderr)],
    )


def set_log_level(level: int):
    """运行中调整根日志级别 (--verbose / --quiet)"""
    logging.getLogger().setLevel(level)
