# log_parser.py
"""
git log 文本解析器
将 git log 标准格式 (short / medium / full / fuller) 的输出解析为提交记录列表。

标准格式的大致结构:
    commit xxx
    Attr: value
    Attr: value
    (空行)
        标题
    (空行)
        多行正文
    (空行)

解析过程是单遍扫描：每一行先经过分类器打上类型标签，
再交给对应的处理函数修改“当前提交”累加器。
遇到下一个 commit 行 (或输入结束) 时，累加器被收尾并输出。
"""
import json
import logging
import re
from typing import Iterable, Iterator, List, Optional, Union

from models import CommitRecord, LineType

logger = logging.getLogger(__name__)

COMMIT_START_PATTERN = re.compile(r"^commit .*$")
ATTRIBUTE_PATTERN = re.compile(r"^\S.*:")
BLANK_LINE_PATTERN = re.compile(r"^\s*$")

COMMIT_PREFIX_PATTERN = re.compile(r"^commit ")
NON_WORD_PATTERN = re.compile(r"\W+")


class InvalidSourceError(ValueError):
    """构造解析器时传入的不是可读的流 / 文件句柄"""


def classify_line(line: str) -> LineType:
    """
    判断一行的类型。
    顺序不可调整：commit 行优先于属性行，属性行优先于空行与文本行。
    """
    if COMMIT_START_PATTERN.match(line):
        return LineType.COMMIT_START
    if ATTRIBUTE_PATTERN.match(line):
        return LineType.ATTRIBUTE
    if BLANK_LINE_PATTERN.match(line):
        return LineType.BLANK_LINE
    return LineType.TEXT_LINE


def handle_commit_start_line(line: str) -> CommitRecord:
    """新建累加器，并提取 Hash (去掉 'commit ' 前缀和行尾空白)"""
    commit = CommitRecord()
    commit.hash = COMMIT_PREFIX_PATTERN.sub("", line).rstrip()
    return commit


def handle_attribute_line(commit: CommitRecord, line: str):
    """
    处理 Author / Date 等属性行。
    属性名中的非单词字符连续段替换为单个下划线。
    NB: 属性名可能以数字开头，这里原样接受。
    """
    label, _, value = line.partition(":")
    attribute_name = NON_WORD_PATTERN.sub("_", label.rstrip())
    commit.set_attribute(attribute_name, value.strip())


def handle_text_line(commit: CommitRecord, line: str):
    """第一行文本是标题，其余都归入正文"""
    text = line.strip()

    if not commit.has_title:
        commit.title = text
    elif not commit.body:
        commit.body = text
    else:
        commit.body = commit.body + "\n" + text


def handle_blank_line(commit: CommitRecord):
    # 正文已开始时，空行是有意的段落分隔，保留下来
    if commit.has_body:
        commit.body = commit.body + "\n"


def _decode(line: Union[str, bytes], encoding: str) -> str:
    if isinstance(line, bytes):
        return line.decode(encoding, errors="replace")
    return line


def iter_commits(
    lines: Iterable[Union[str, bytes]], encoding: str = "utf-8"
) -> Iterator[CommitRecord]:
    """
    逐行解析，每遇到下一个 commit 行就产出上一个已完成的提交。
    没有 Hash 的累加器 (例如第一个 commit 行之前的内容) 会被丢弃。
    """
    commit = CommitRecord()

    for raw_line in lines:
        line = _decode(raw_line, encoding)
        line_type = classify_line(line)

        if line_type is LineType.COMMIT_START:
            if commit.has_hash:
                yield commit
            elif len(commit):
                logger.debug(f"丢弃没有 Hash 的内容: {commit.to_dict()}")
            commit = handle_commit_start_line(line)
        elif line_type is LineType.ATTRIBUTE:
            handle_attribute_line(commit, line)
        elif line_type is LineType.TEXT_LINE:
            handle_text_line(commit, line)
        elif line_type is LineType.BLANK_LINE:
            handle_blank_line(commit)

    # 保存最后一个提交
    if commit.has_hash:
        yield commit
    elif len(commit):
        logger.debug(f"丢弃没有 Hash 的内容: {commit.to_dict()}")


def _read_lines(source) -> Iterator[Union[str, bytes]]:
    while True:
        line = source.readline()
        if not line:
            break
        yield line


def _check_source(source):
    if source is None or not hasattr(source, "readline"):
        raise InvalidSourceError(
            "GitLogParser 需要一个文件句柄或可读的流作为输入"
        )
    if getattr(source, "closed", False):
        raise InvalidSourceError("GitLogParser 的输入流已关闭")
    readable = getattr(source, "readable", None)
    if callable(readable) and not readable():
        raise InvalidSourceError("GitLogParser 的输入流不可读")


class GitLogParser:
    """
    从 git log 输出中解析提交对象列表，可导出为列表或 JSON。
    必须以打开的文件句柄或流 (如 sys.stdin) 构造，构造时即完成解析。
    """

    def __init__(self, source, encoding: str = "utf-8"):
        _check_source(source)
        self.encoding = encoding
        self.commits: List[CommitRecord] = []
        self._parse_commit_log(source)

    def _parse_commit_log(self, source):
        self.commits = list(iter_commits(_read_lines(source), self.encoding))
        logger.info(f"成功解析 {len(self.commits)} 个提交")

    def to_list(self) -> List[CommitRecord]:
        return self.commits

    def to_array(self) -> List[dict]:
        """提交列表的纯字典形式，可直接序列化"""
        return [commit.to_dict() for commit in self.commits]

    def to_json(
        self, indent: Optional[int] = None, ensure_ascii: bool = True
    ) -> str:
        return json.dumps(self.to_array(), indent=indent, ensure_ascii=ensure_ascii)

    def __len__(self) -> int:
        return len(self.commits)

    def __iter__(self) -> Iterator[CommitRecord]:
        return iter(self.commits)
