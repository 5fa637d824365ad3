"""Command-line interface for workout_track.

Run:
    python -m workout_track replay --csv workout.csv
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from dataclasses import asdict
from pathlib import Path

from workout_track.constants import DEFAULT_TZ, GAIN_THRESHOLD_M
from workout_track.csv_io import load_samples
from workout_track.inspect import export_progress_csv, inspect_samples, local_time
from workout_track.models import ElevationParams
from workout_track.replay import iter_progress, new_replay_session, replay_samples


def _check_csv(path: str) -> bool:
    if Path(path).exists():
        return True
    print(f"找不到文件：{path!r}", file=sys.stderr)
    return False


def _params_from_args(args: argparse.Namespace) -> ElevationParams:
    return ElevationParams(gain_threshold_m=args.gain_threshold_m)


def _cmd_inspect(args: argparse.Namespace) -> int:
    if not _check_csv(args.csv):
        return 2
    samples, summary = load_samples(args.csv)
    res = inspect_samples(samples, args.pause_gap_seconds)

    print("### CSV字段")
    print(", ".join(summary.fieldnames))
    print()

    print("### 行数")
    print(f"total_rows={summary.rows_total}, parsed={summary.rows_parsed}, skipped={summary.rows_skipped}")
    print()

    if res.min_time_ms is not None and res.max_time_ms is not None:
        print("### 时间范围（本地时区）")
        start = local_time(res.min_time_ms, args.tz)
        end = local_time(res.max_time_ms, args.tz)
        print(f"start={start.isoformat(sep=' ')}, end={end.isoformat(sep=' ')}")
        print()

    print("### 采样间断（秒）")
    print(f"longest_gap={res.longest_gap_s:.1f}, gaps_over_{args.pause_gap_seconds:g}s={res.gaps_over_pause}")
    print()

    print("### 经纬度/海拔范围")
    print(f"lat=[{res.min_lat}, {res.max_lat}], lon=[{res.min_lon}, {res.max_lon}]")
    print(f"altitude=[{res.min_altitude_m}, {res.max_altitude_m}], path_length_m={res.path_length_m:.1f}")
    print()

    print("### 气压数据 / 重复时间戳 / 乱序 / 定位精度")
    print(f"with_pressure={res.with_pressure}, duplicates={res.duplicates_geo_time}, out_of_order={res.out_of_order}")
    print(f"worst_accuracy_m={res.worst_accuracy_m}")
    print()

    if args.json:
        payload = asdict(res) | {
            "rows_total": summary.rows_total,
            "rows_parsed": summary.rows_parsed,
            "rows_skipped": summary.rows_skipped,
            "fieldnames": list(summary.fieldnames),
        }
        print(json.dumps(payload, ensure_ascii=False, indent=2))
    return 0


def _cmd_replay(args: argparse.Namespace) -> int:
    if not _check_csv(args.csv):
        return 2
    samples, _ = load_samples(args.csv)
    session = replay_samples(
        samples,
        barometer_available=args.barometer,
        params=_params_from_args(args),
        pause_gap_seconds=args.pause_gap_seconds,
    )
    snap = session.snapshot()
    readouts = snap.readouts()

    if args.json:
        payload = {
            "samples": len(session.accumulator),
            "elapsed_seconds": snap.elapsed_seconds,
            "distance_km": snap.distance_km,
            "average_speed_kmh": snap.average_speed_kmh,
            "elevation_gain_m": snap.elevation_gain_m,
            "readouts": readouts,
        }
        print(json.dumps(payload, ensure_ascii=False, indent=2))
        return 0

    print(f"运动时间={readouts['elapsed']}")
    print(f"距离={readouts['distance']}, 速度={readouts['speed']}")
    print(f"当前海拔={readouts['current_altitude']}, 累计爬升={readouts['elevation_gain']}")
    return 0


def _cmd_export_progress(args: argparse.Namespace) -> int:
    if not _check_csv(args.csv):
        return 2
    samples, _ = load_samples(args.csv)
    session, clock_time = new_replay_session(args.barometer, _params_from_args(args))
    rows = iter_progress(samples, session, clock_time, args.pause_gap_seconds)
    n = export_progress_csv(rows, args.out, args.tz)
    print(f"已导出：{args.out}（rows={n}）")
    return 0


def _add_replay_options(p: argparse.ArgumentParser) -> None:
    p.add_argument("--csv", type=str, default="workout.csv", help="输入CSV路径")
    p.add_argument(
        "--barometer",
        action=argparse.BooleanOptionalAction,
        default=True,
        help="设备有气压计时融合 pressure 列（默认开启）",
    )
    p.add_argument(
        "--gain-threshold-m",
        type=float,
        default=GAIN_THRESHOLD_M,
        help="上升超过该值（米）才计入累计爬升，用于过滤GPS/气压抖动",
    )
    p.add_argument(
        "--pause-gap-seconds",
        type=float,
        default=None,
        help="两次采样间隔超过该秒数视为暂停，不计入运动时间（默认不启用）",
    )


def build_parser() -> argparse.ArgumentParser:
    """Build CLI parser."""

    p = argparse.ArgumentParser(prog="workout_track")
    p.add_argument("-v", "--verbose", action="count", default=0, help="日志详细程度（-v INFO，-vv DEBUG）")
    sub = p.add_subparsers(dest="cmd", required=True)

    p_ins = sub.add_parser("inspect", help="分析运动记录CSV的结构/时间范围/采样间隔等")
    p_ins.add_argument("--csv", type=str, default="workout.csv", help="输入CSV路径")
    p_ins.add_argument("--tz", type=str, default=DEFAULT_TZ, help="时区（IANA），默认 Asia/Seoul")
    p_ins.add_argument(
        "--pause-gap-seconds",
        type=float,
        default=60.0,
        help="统计超过该秒数的采样间断（对应 replay 的自动暂停阈值）",
    )
    p_ins.add_argument("--json", action="store_true", help="额外输出JSON（便于后处理）")
    p_ins.set_defaults(func=_cmd_inspect)

    p_rep = sub.add_parser("replay", help="回放运动记录，输出时间/距离/速度/累计爬升")
    _add_replay_options(p_rep)
    p_rep.add_argument("--json", action="store_true", help="以JSON输出")
    p_rep.set_defaults(func=_cmd_replay)

    p_exp = sub.add_parser("export-progress", help="导出每个采样点之后的累计指标CSV")
    _add_replay_options(p_exp)
    p_exp.add_argument("--out", type=str, default="progress.csv", help="输出CSV路径")
    p_exp.add_argument("--tz", type=str, default=DEFAULT_TZ, help="时区（IANA）")
    p_exp.set_defaults(func=_cmd_export_progress)

    return p


def main(argv: list[str] | None = None) -> int:
    """CLI entrypoint."""

    parser = build_parser()
    args = parser.parse_args(argv)
    level = logging.WARNING
    if args.verbose == 1:
        level = logging.INFO
    elif args.verbose >= 2:
        level = logging.DEBUG
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")
    return int(args.func(args))


if __name__ == "__main__":
    raise SystemExit(main())
