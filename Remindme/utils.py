import json
import os


def read_json(path: str):
    """读取 UTF-8 编码的 JSON 文件并返回解析结果。"""
    with open(path, 'r', encoding='UTF-8') as f:
        return json.load(f)


def ensure_parent_dir(path: str) -> None:
    """确保文件所在目录存在 (文件就在当前目录下时不做任何事)。"""
    data_dir = os.path.dirname(path)
    if data_dir:
        os.makedirs(data_dir, exist_ok=True)
