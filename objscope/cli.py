from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

import numpy as np

from objscope.obj import Model, ObjParseError
from objscope.scene.camera import Camera
from objscope.utils.config import Config
from objscope.utils.loader import load_obj
from objscope.utils.logger import logger, set_log_level


def _load(path: str) -> Model | int:
    try:
        return load_obj(path)
    except FileNotFoundError as exc:
        print(f"[ERROR] {exc}", file=sys.stderr)
        return 2
    except OSError as exc:
        print(f"[ERROR] Cannot read {path}: {exc}", file=sys.stderr)
        return 2
    except ObjParseError as exc:
        print(str(exc), file=sys.stderr)
        return 1


def _summary(model: Model) -> dict:
    lo, hi = model.bounds()
    return {
        "vertices": len(model.vertices),
        "triangles": model.triangle_count,
        "bounds_min": [float(c) for c in lo],
        "bounds_max": [float(c) for c in hi],
    }


def _cmd_inspect(args: argparse.Namespace, cfg: Config) -> int:
    model = _load(args.file)
    if isinstance(model, int):
        return model

    info = _summary(model)
    if args.json:
        print(json.dumps(info, indent=2))
        return 0
    print(f"Vertices:  {info['vertices']}")
    print(f"Triangles: {info['triangles']}")
    print("Bounds:    ({:.4f}, {:.4f}, {:.4f}) .. ({:.4f}, {:.4f}, {:.4f})".format(
        *info["bounds_min"], *info["bounds_max"]))
    return 0


def _cmd_export(args: argparse.Namespace, cfg: Config) -> int:
    model = _load(args.file)
    if isinstance(model, int):
        return model

    window = cfg.section("window")
    try:
        width, height = float(window["width"]), float(window["height"])
        if width <= 0 or height <= 0:
            raise ValueError(f"window size must be positive, got {width}x{height}")
        camera = Camera.from_config(cfg)
        scale = float(cfg.section("model")["scale"])
        model_matrix = Camera.get_model_matrix(0.0, scale)
        view = camera.get_view_matrix()
        projection = camera.get_projection_matrix(width / height)
    except ValueError as exc:
        print(f"[ERROR] Invalid config {cfg.path}: {exc}", file=sys.stderr)
        return 2

    outpath = Path(args.out).expanduser().resolve()
    outpath.parent.mkdir(parents=True, exist_ok=True)
    np.savez(
        outpath,
        vertices=model.vertex_buffer(),
        indices=model.index_buffer(),
        model=model_matrix.to_np(),
        view=view.to_np(),
        projection=projection.to_np(),
    )
    logger.info(f"[CLI] Exported buffers to {outpath}")
    print(f"Saved {len(model.vertices)} vertices / {model.triangle_count} "
          f"triangles to: {outpath}")
    return 0


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(prog="objscope")
    p.add_argument("--config", default="objscope.json", help="JSON config path (created if missing)")
    p.add_argument("--log-level", default=None, help="Override log level (DEBUG, INFO, WARNING, ...)")
    sub = p.add_subparsers(dest="cmd", required=True)

    i = sub.add_parser("inspect", help="Parse an OBJ file and print a summary.")
    i.add_argument("file", help="Path to .obj file")
    i.add_argument("--json", action="store_true", help="Print the summary as JSON")
    i.set_defaults(func=_cmd_inspect)

    e = sub.add_parser("export", help="Parse an OBJ file and save render-ready buffers (.npz).")
    e.add_argument("file", help="Path to .obj file")
    e.add_argument("out", help="Output .npz path")
    e.set_defaults(func=_cmd_export)

    args = p.parse_args(argv)

    Config.reset()
    cfg = Config(args.config)
    set_log_level(args.log_level or cfg["log_level"])
    return int(args.func(args, cfg))


if __name__ == "__main__":
    raise SystemExit(main())
