# config.py
"""
全局配置
- 从环境变量 (以及可选的 .env 文件) 读取运行参数
"""
import os
from dotenv import load_dotenv


# --- 脚本基础路径 ---
SCRIPT_BASE_PATH = os.path.abspath(os.path.dirname(__file__))
env_path = os.path.join(SCRIPT_BASE_PATH, ".env")
# stdout 用于输出解析结果，这里不打印加载信息
if os.path.exists(env_path):
    load_dotenv(env_path)
else:
    load_dotenv()


def _env_flag(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


class GlobalConfig:
    """
    git log 解析工具的全局应用配置。
    """

    # --- 路径配置 ---
    SCRIPT_BASE_PATH: str = SCRIPT_BASE_PATH
    TEMPLATES_DIR: str = os.path.join(SCRIPT_BASE_PATH, "writers", "templates")

    # --- 日志 ---
    LOG_LEVEL: str = os.getenv("GITLOG_LOG_LEVEL", "INFO").upper()

    # --- 输入 ---
    # utf-8-sig 兼容带 BOM 的输入 (如 Windows 重定向的日志)
    INPUT_ENCODING: str = os.getenv("GITLOG_INPUT_ENCODING", "utf-8-sig")

    # --- 输出 ---
    DEFAULT_OUTPUT_FORMAT: str = os.getenv("GITLOG_OUTPUT_FORMAT", "json").lower()
    JSON_INDENT: int = 4
    JSON_ENSURE_ASCII: bool = _env_flag("GITLOG_ENSURE_ASCII", False)
    MARKDOWN_TEMPLATE: str = "changelog.md.j2"
