#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
carchive 命令行工具

    carchive [-o=<filename>] [file ...]
    carchive -l <archive>

把参数中的普通文件按文件名写入新归档，跳过目录等非文件参数。
以 - 开头的文件名需放在 -- 之后，例如 carchive -o=out.car -- -notes.txt

退出码: 0 表示成功 (跳过非文件参数也算成功)；
有文件读取失败或归档出错时为 1。
"""

import argparse
import logging
import sys
from typing import List, Optional

from . import __version__
from .archive import ArchiveReader, ArchiveWriter
from .config import CarConfig
from .core.batch import BatchResult, ErrorPolicy, ProgressInfo, collect_items
from .exceptions import CarError

logger = logging.getLogger(__name__)


def build_parser(config: CarConfig) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="carchive",
        usage="%(prog)s [-o=filename] [files]",
        description="将文件压缩打包为 CAR 归档",
        epilog="以 - 开头的文件名请放在 -- 之后: %(prog)s -o=out.car -- -notes.txt",
    )
    parser.add_argument(
        "-o", "--output", default=config.output_path, metavar="FILENAME",
        help=f"输出归档路径 (默认: {config.output_path})",
    )
    parser.add_argument(
        "-l", "--list", metavar="ARCHIVE",
        help="列出已有归档中的文件，而不是创建新归档",
    )
    parser.add_argument(
        "--log-level", default=config.log_level,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="日志级别",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("files", nargs="*", help="要归档的文件")
    return parser


def archive_paths(writer: ArchiveWriter, paths: List[str]) -> BatchResult:
    """
    把命令行路径中的普通文件追加到归档
    
    非文件参数不交给归档核心，记入结果的 skipped_files。
    """
    items, skipped = collect_items(paths)
    for path in skipped:
        print(f"Skipping non-file '{path}'.", file=sys.stderr)
    
    def report(info: ProgressInfo) -> None:
        print(f"Archiving '{info.current_file}'.", file=sys.stderr)
    
    result = writer.add_files_batch(
        items, on_error=ErrorPolicy.SKIP, progress_callback=report
    )
    result.skipped_files.extend(skipped)
    result.skipped_count += len(skipped)
    return result


def create_archive(output_path: str, paths: List[str]) -> int:
    """
    创建新归档
    
    Returns:
        进程退出码
    """
    print(f"Writing to archive '{output_path}'.\n", file=sys.stderr)
    with open(output_path, 'wb') as f:
        result = archive_paths(ArchiveWriter(f), paths)
    
    for path, error in result.failed_files:
        print(f"Failed to archive '{path}': {error}", file=sys.stderr)
    logger.info(
        "归档完成: %d 个文件, %d 字节, 跳过 %d, 失败 %d",
        result.success_count, result.total_bytes,
        result.skipped_count, result.failed_count
    )
    return 1 if result.failed_count else 0


def list_archive(archive_path: str, indexed: bool = False) -> int:
    """按流中顺序输出 文件名/原始大小/压缩大小"""
    with open(archive_path, 'rb') as f:
        reader = ArchiveReader(f, indexed=indexed)
        for header in reader.iter_records():
            print(f"{header.name}\t{header.raw_size}\t{header.packed_size}")
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    if argv is None:
        argv = sys.argv[1:]
    
    config = CarConfig.from_env()
    parser = build_parser(config)
    if not argv:
        parser.print_usage(sys.stderr)
        return 0
    
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=args.log_level,
        format="%(levelname)s %(name)s: %(message)s",
    )
    
    try:
        if args.list:
            return list_archive(args.list, config.indexed_reads)
        return create_archive(args.output, args.files)
    except (CarError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
