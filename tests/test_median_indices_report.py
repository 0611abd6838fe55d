"""单测：tools/median_indices_report.py 的命令行输出。

覆盖目标：
- 正常输入打印 values / median / indices 三行。
- 空输入打印 `<empty>` 与空下标列表。
- 非有限值默认返回 2；`--drop-nonfinite` 或 YAML 配置可改为剔除。

说明：
- 以 importlib 动态加载工具脚本，避免把 tools 当成库强依赖。
"""

from __future__ import annotations

import importlib.util
from pathlib import Path


def _load_tool_module():
    repo_root = Path(__file__).resolve().parents[1]
    tool_path = repo_root / "tools" / "median_indices_report.py"
    if not tool_path.exists():
        raise FileNotFoundError(str(tool_path))

    spec = importlib.util.spec_from_file_location("median_indices_report", tool_path)
    if spec is None or spec.loader is None:
        raise RuntimeError(f"无法加载工具脚本: {tool_path}")

    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


def test_report_prints_median_and_indices(capsys) -> None:
    mod = _load_tool_module()

    rc = mod.main(["1.2", "1.1", "-0.1", "-0.2", "0", "1"])
    out = capsys.readouterr().out.splitlines()

    assert rc == 0
    assert out == [
        "values: [1.2 1.1 -0.1 -0.2 0.0 1.0]",
        "median: 0.5",
        "indices: [5 4]",
    ]


def test_report_empty_input(capsys) -> None:
    mod = _load_tool_module()

    rc = mod.main([])
    out = capsys.readouterr().out.splitlines()

    assert rc == 0
    assert out == ["values: []", "median: <empty>", "indices: []"]


def test_report_nonfinite_fails_by_default(capsys) -> None:
    mod = _load_tool_module()

    rc = mod.main(["3", "nan", "1"])

    assert rc == 2
    assert capsys.readouterr().out == ""


def test_report_drop_nonfinite_flag(capsys) -> None:
    mod = _load_tool_module()

    rc = mod.main(["--drop-nonfinite", "3", "nan", "1"])
    out = capsys.readouterr().out.splitlines()

    assert rc == 0
    assert out[1] == "median: 2.0"
    assert out[2] == "indices: [0 2]"


def test_report_reads_policy_from_yaml(tmp_path, capsys) -> None:
    mod = _load_tool_module()

    cfg = tmp_path / "median.yaml"
    cfg.write_text("nonfinite_policy: drop\n", encoding="utf-8")

    rc = mod.main(["--config", str(cfg), "inf", "7"])
    out = capsys.readouterr().out.splitlines()

    assert rc == 0
    assert out[1] == "median: 7.0"
    assert out[2] == "indices: [1]"
