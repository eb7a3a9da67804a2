# cli.py
"""
命令行界面 (Interface) 层
负责参数定义与 RunContext 组装，具体流程交给 Orchestrator。
"""
import argparse
import logging
from typing import List, Optional

import utils
from config import GlobalConfig
from context import RunContext
from orchestrator import ConvertOrchestrator
from writers.factory import available_formats

logger = logging.getLogger(__name__)


def setup_parser() -> argparse.ArgumentParser:
    """
    负责所有 argparse 的定义。
    """
    parser = argparse.ArgumentParser(
        description="将 git log 的标准输出 (short/medium/full/fuller) 转换为 JSON 等结构化格式",
        formatter_class=argparse.RawTextHelpFormatter,
    )

    parser.add_argument(
        "-i",
        "--input",
        type=str,
        default=None,
        help="git log 输出文件路径。\n(默认: 标准输入；'-' 同样表示标准输入)",
    )
    parser.add_argument(
        "-o",
        "--output",
        type=str,
        default=None,
        help="结果写入的文件路径。\n(默认: 标准输出)",
    )
    parser.add_argument(
        "-f",
        "--format",
        type=str,
        choices=available_formats(),
        default=None,
        help="输出格式。\n(默认: GITLOG_OUTPUT_FORMAT 环境变量，或 'json')",
    )
    parser.add_argument(
        "--compact", action="store_true", help="JSON 输出不缩进 (单行)"
    )

    # --- 日志级别 (互斥) ---
    verbosity_group = parser.add_mutually_exclusive_group()
    verbosity_group.add_argument(
        "-v", "--verbose", action="store_true", help="输出调试日志"
    )
    verbosity_group.add_argument(
        "-q", "--quiet", action="store_true", help="只输出错误日志"
    )

    return parser


def run_cli(argv: Optional[List[str]] = None) -> int:
    """
    主入口点，返回进程退出码。
    """

    # 1. 解析 Args
    parser = setup_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        utils.set_log_level(logging.DEBUG)
    elif args.quiet:
        utils.set_log_level(logging.ERROR)

    # 2. 加载 GlobalConfig
    global_config = GlobalConfig()

    # 3. 组装 RunContext
    output_format = args.format or global_config.DEFAULT_OUTPUT_FORMAT
    run_context = RunContext(
        input_path=args.input,
        output_path=args.output,
        output_format=output_format,
        compact=args.compact,
        global_config=global_config,
    )

    logger.info(
        f"🚀 输入: {args.input or 'stdin'} | 输出: {args.output or 'stdout'} | 格式: {output_format}"
    )

    # 4. 运行 Orchestrator
    orchestrator = ConvertOrchestrator(run_context)
    return orchestrator.run()
